"""検索結果と統計情報の結合"""

from collections.abc import Sequence

from src.domain.entities import AggregatedVideo, SearchHit, VideoStats
from src.domain.exceptions import AlignmentError, ParseError


def parse_count(raw: str, field_name: str) -> int:
    """
    文字列の件数を整数に変換

    Args:
        raw: APIが返した件数文字列（空文字は0扱い）
        field_name: エラーメッセージ用のフィールド名

    Returns:
        件数

    Raises:
        ParseError: 数字以外の文字列
    """
    value = (raw or "").strip()
    if not value:
        return 0
    if not (value.isascii() and value.isdigit()):
        raise ParseError(f"Malformed {field_name}: {raw!r}")
    return int(value)


def compute_approval_ratio(likes: int, dislikes: int) -> float | None:
    """高評価率を計算（評価が1件もなければNone）"""
    total = likes + dislikes
    if total <= 0:
        return None
    return likes / total


def aggregate(
    hits: Sequence[SearchHit],
    stats: Sequence[VideoStats],
) -> dict[str, AggregatedVideo]:
    """
    検索結果と統計情報をインデックスで対応付けて結合

    Args:
        hits: 検索結果（表示順）
        stats: 統計情報（hitsと同じ順序）

    Returns:
        video_id -> AggregatedVideo（挿入順 = 表示順）
        同じvideo_idが複数ある場合は後の結果で上書き

    Raises:
        AlignmentError: 件数またはIDの対応が取れない
        ParseError: 件数フィールドの形式不正
    """
    if len(hits) != len(stats):
        raise AlignmentError(
            f"Result count mismatch: {len(hits)} hits, {len(stats)} stats"
        )

    for i, (hit, stat) in enumerate(zip(hits, stats)):
        if stat.video_id and stat.video_id != hit.video_id:
            raise AlignmentError(
                f"Result #{i + 1} mismatch: hit={hit.video_id!r}, stats={stat.video_id!r}"
            )

    aggregated: dict[str, AggregatedVideo] = {}
    for hit, stat in zip(hits, stats):
        likes = parse_count(stat.like_count, "likeCount")
        dislikes = parse_count(stat.dislike_count, "dislikeCount")

        aggregated[hit.video_id] = AggregatedVideo(
            video_id=hit.video_id,
            title=hit.title,
            description=hit.description,
            channel_name=hit.channel_name,
            duration=stat.duration,
            view_count=stat.view_count,
            approval_ratio=compute_approval_ratio(likes, dislikes),
        )

    return aggregated
