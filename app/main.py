"""コマンドラインアプリケーションエントリーポイント"""

import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# .envファイルを最初に読み込む
from dotenv import load_dotenv
load_dotenv(project_root / ".env")

import click
from rich.console import Console

from app.console import ConsolePrompter, InteractiveSession
from config.settings import Settings, get_settings
from src.application.usecases.download_audio import DownloadAudioConfig, DownloadAudioUseCase
from src.application.usecases.search_videos import SearchVideosConfig, SearchVideosUseCase
from src.domain.exceptions import AudioPickerError
from src.infrastructure.ffmpeg_transcoder import FfmpegTranscoder
from src.infrastructure.logging_config import get_logger, parse_log_level, setup_logging
from src.infrastructure.youtube_data_api import YouTubeDataAPIClient
from src.infrastructure.ytdlp_downloader import YtdlpDownloader
from src.infrastructure.ytdlp_info import YtdlpVideoInfoClient

logger = get_logger(__name__)


def init_session(settings: Settings, api_key: str, prompter: ConsolePrompter) -> InteractiveSession:
    """DIで対話フローを組み立て"""
    youtube_client = YouTubeDataAPIClient(
        api_key=api_key,
        max_results=settings.MAX_SEARCH_RESULTS,
    )

    return InteractiveSession(
        prompter=prompter,
        search_usecase=SearchVideosUseCase(
            youtube_searcher=youtube_client,
            stats_fetcher=youtube_client,
            config=SearchVideosConfig(max_results=settings.MAX_SEARCH_RESULTS),
        ),
        video_info_provider=YtdlpVideoInfoClient(),
        download_usecase=DownloadAudioUseCase(
            downloader=YtdlpDownloader(ytdlp_path=settings.YTDLP_PATH),
            transcoder=FfmpegTranscoder(ffmpeg_path=settings.FFMPEG_PATH),
            config=DownloadAudioConfig(
                output_dir=Path(settings.OUTPUT_DIR),
                default_bitrate=settings.DEFAULT_TRANSCODE_BITRATE,
            ),
        ),
    )


@click.command()
@click.version_option(version="0.1.0")
@click.option("--api-key", envvar="YOUTUBE_API_KEY", help="YouTube Data API key.")
@click.option("--query", "-q", help="Search query (prompted when omitted).")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for downloaded files.",
)
@click.option("--log-level", help="Log level (DEBUG, INFO, WARNING, ...).")
def main(
    api_key: str | None,
    query: str | None,
    output_dir: Path | None,
    log_level: str | None,
) -> None:
    """Search YouTube, pick a video and an audio format, and download it."""
    settings = get_settings()
    updates = {}
    if output_dir is not None:
        updates["OUTPUT_DIR"] = str(output_dir)
    if log_level:
        updates["LOG_LEVEL"] = log_level
    if updates:
        settings = settings.model_copy(update=updates)

    setup_logging(level=parse_log_level(settings.LOG_LEVEL))

    console = Console()
    prompter = ConsolePrompter(console)

    try:
        key = api_key or settings.YOUTUBE_API_KEY or prompter.prompt_api_key()
        session = init_session(settings, key, prompter)
        session.run(query=query)
    except AudioPickerError as e:
        logger.debug("[Main] 致命的エラー", exc_info=True)
        console.print(f"Error: {e}", markup=False, highlight=False, style="bold red")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\nInterrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
