"""音声フォーマットの絞り込みと選択"""

import re
from collections.abc import Sequence

from src.domain.entities import Rendition, ResolvedSelection, SelectionMode
from src.domain.exceptions import EmptySetError, InvalidSelectionError

BEST_TOKEN = "best"
FASTEST_TOKEN = "fastest"


def filter_audio_renditions(renditions: Sequence[Rendition]) -> list[Rendition]:
    """音声を含むフォーマットだけを元の順序で返す"""
    return [r for r in renditions if r.encoding]


def pick_best(renditions: Sequence[Rendition]) -> Rendition:
    """
    音声ビットレートが最大のフォーマットを選ぶ

    同率の場合は音声を含むものを優先し、その中で先に現れたもの（プロバイダの優先順）を採用する

    Raises:
        EmptySetError: 候補が空
    """
    if not renditions:
        raise EmptySetError("No renditions to choose from")

    best = renditions[0]
    for rendition in renditions[1:]:
        if rendition.bitrate > best.bitrate or (
            rendition.bitrate == best.bitrate and rendition.has_audio and not best.has_audio
        ):
            best = rendition
    return best


def is_best(rendition: Rendition, best: Rendition) -> bool:
    """[BEST] 表示判定（コーデックとビットレートが一致）"""
    return rendition.encoding == best.encoding and rendition.bitrate == best.bitrate


def select_full_stream(renditions: Sequence[Rendition]) -> Rendition | None:
    """映像+音声の結合ストリームのうち最優先のものを返す"""
    for rendition in renditions:
        if rendition.has_video and rendition.has_audio:
            return rendition
    return None


def resolve_index(token: str, count: int) -> int:
    """
    1始まりの番号入力を0始まりのインデックスに変換

    Raises:
        InvalidSelectionError: 数値でない、または範囲外
    """
    value = token.strip()
    if not re.fullmatch(r"[+-]?[0-9]+", value):
        raise InvalidSelectionError(f"Not a number: {token!r}")

    number = int(value)
    if not 1 <= number <= count:
        raise InvalidSelectionError(f"Out of range: {number} (1-{count})")
    return number - 1


def resolve_selection(
    token: str,
    numbered: Sequence[Rendition],
    best: Rendition,
    full_stream: Rendition | None,
) -> ResolvedSelection:
    """
    ユーザー入力をダウンロード計画に変換

    Args:
        token: 入力文字列（"best" / "fastest" / 番号、大文字小文字を区別）
        numbered: 番号で選べる音声フォーマット
        best: pick_best の結果
        full_stream: "fastest" 用の結合ストリーム（なければNone）

    Returns:
        ResolvedSelection

    Raises:
        InvalidSelectionError: どの選択肢にも一致しない
    """
    value = token.strip()

    if value == BEST_TOKEN:
        return ResolvedSelection(rendition=best, mode=SelectionMode.BEST)

    if value == FASTEST_TOKEN:
        if full_stream is None:
            raise InvalidSelectionError("No combined stream available for 'fastest'")
        return ResolvedSelection(rendition=full_stream, mode=SelectionMode.FASTEST)

    index = resolve_index(value, len(numbered))
    return ResolvedSelection(rendition=numbered[index], mode=SelectionMode.NUMBERED)
