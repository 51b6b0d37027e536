"""コンソールでの対話（入力ループと結果表示）"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Callable, TypeVar

from rich.console import Console

from src.application.interfaces.video_info_provider import VideoInfoProvider
from src.application.usecases.download_audio import DownloadAudioUseCase
from src.application.usecases.search_videos import SearchOutcome, SearchVideosUseCase
from src.domain.entities import Rendition, ResolvedSelection, SearchHit
from src.domain.exceptions import ConsoleInputError, EmptySetError, InvalidSelectionError
from src.domain.filename import sanitize_basename
from src.domain.renditions import (
    filter_audio_renditions,
    is_best,
    pick_best,
    resolve_index,
    resolve_selection,
    select_full_stream,
)
from src.domain.time_utils import format_duration
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

RETRY_PROMPT = "Invalid selection, try again: "
RENDITION_PROMPT = (
    'Select an audio format by typing the number, or type "best" for the best audio, '
    'or "fastest" to download the full video and then convert to mp3 audio with ffmpeg '
    "(fastest method): "
)


class ConsolePrompter:
    """1行入力の読み取りと再入力ループ"""

    def __init__(self, console: Console, stream: IO[str] | None = None):
        """
        Args:
            console: 出力先
            stream: 入力元（Noneなら標準入力）
        """
        self.console = console
        self.stream = stream

    def read_line(self, prompt: str = "") -> str:
        """
        1行読み取る

        Raises:
            ConsoleInputError: EOFや読み取り失敗
        """
        try:
            line = self.console.input(prompt, markup=False, stream=self.stream)
        except (EOFError, OSError) as e:
            raise ConsoleInputError("Failed to read console input") from e
        if self.stream is not None and line == "":
            raise ConsoleInputError("Failed to read console input: end of stream")
        return line.strip()

    def prompt_until_valid(
        self,
        prompt: str,
        parse: Callable[[str], T],
        retry_prompt: str = RETRY_PROMPT,
    ) -> T:
        """
        parse が成功するまで入力を繰り返す

        InvalidSelectionError だけを回復対象とし、それ以外は呼び出し元へ伝播する
        """
        current_prompt = prompt
        while True:
            token = self.read_line(current_prompt)
            try:
                return parse(token)
            except InvalidSelectionError as e:
                logger.debug(f"[Console] 入力を拒否: {token!r} ({e})")
                current_prompt = retry_prompt

    def prompt_api_key(self) -> str:
        def parse(token: str) -> str:
            if not token:
                raise InvalidSelectionError("Empty API key")
            return token

        return self.prompt_until_valid(
            "Enter API Key: ", parse, retry_prompt="No input found, try again: "
        )


def render_search_results(console: Console, outcome: SearchOutcome) -> None:
    """検索結果を番号付きで表示"""
    console.print("\n--SEARCH RESULTS--\n")
    for index, video in enumerate(outcome.ranked(), 1):
        console.print(
            f"{index}) {video.title} ({format_duration(video.duration)})\n"
            f"Channel: {video.channel_name}\n"
            f"Views: {video.view_count}\n"
            f"Likes: {video.approval_display}\n",
            markup=False,
            highlight=False,
        )


def render_renditions(
    console: Console,
    numbered: Sequence[Rendition],
    best: Rendition,
) -> None:
    """音声フォーマットを番号付きで表示（最良には [BEST]）"""
    console.print("\n--AUDIO FORMATS--\n")
    for index, rendition in enumerate(numbered, 1):
        suffix = " [BEST]" if is_best(rendition, best) else ""
        console.print(
            f"{index}) Encoding: {rendition.encoding}, Bitrate: {rendition.bitrate}, "
            f"Extension: {rendition.extension}{suffix}",
            markup=False,
            highlight=False,
        )
    console.print()


@dataclass
class SessionResult:
    """1回の対話で得られた成果物"""

    video_id: str
    selection: ResolvedSelection
    output_path: Path


class InteractiveSession:
    """
    検索 → 動画選択 → フォーマット選択 → ダウンロードの対話フロー
    """

    def __init__(
        self,
        prompter: ConsolePrompter,
        search_usecase: SearchVideosUseCase,
        video_info_provider: VideoInfoProvider,
        download_usecase: DownloadAudioUseCase,
    ):
        self.prompter = prompter
        self.console = prompter.console
        self.search_usecase = search_usecase
        self.video_info_provider = video_info_provider
        self.download_usecase = download_usecase

    def choose_video(self, hits: Sequence[SearchHit]) -> SearchHit:
        index = self.prompter.prompt_until_valid(
            "Select a Video: ",
            lambda token: resolve_index(token, len(hits)),
        )
        hit = hits[index]
        logger.info(f"[Console] 動画を選択: {hit.url}")
        return hit

    def choose_rendition(self, renditions: Sequence[Rendition]) -> ResolvedSelection:
        """
        音声フォーマットを表示して選択させる

        Raises:
            EmptySetError: 音声を含むフォーマットがない
        """
        numbered = filter_audio_renditions(renditions)
        if not numbered:
            raise EmptySetError("No audio formats available for this video")

        best = pick_best(renditions)
        full_stream = select_full_stream(renditions)
        render_renditions(self.console, numbered, best)

        return self.prompter.prompt_until_valid(
            RENDITION_PROMPT,
            lambda token: resolve_selection(token, numbered, best, full_stream),
        )

    def run(self, query: str | None = None) -> SessionResult | None:
        """
        対話フローを実行

        Args:
            query: 検索クエリ（Noneなら入力を求める）

        Returns:
            SessionResult、検索結果0件ならNone
        """
        if query is None:
            query = self.prompter.read_line("Enter search query: ")

        outcome = self.search_usecase.execute(query)
        if outcome.is_empty:
            self.console.print("No videos found for that query.")
            return None

        render_search_results(self.console, outcome)
        hit = self.choose_video(outcome.hits)

        self.console.print("Fetching info...")
        info = self.video_info_provider.get_video_info(hit.video_id)
        selection = self.choose_rendition(info.renditions)

        output_path = self.download_usecase.execute(
            selection,
            sanitize_basename(info.title),
            info.video_id,
            progress_callback=lambda message: self.console.print(
                f"\n{message}\n", markup=False, highlight=False
            ),
        )
        self.console.print("Done")
        self.console.print(f"Saved to {output_path}", markup=False, highlight=False)
        return SessionResult(video_id=info.video_id, selection=selection, output_path=output_path)
