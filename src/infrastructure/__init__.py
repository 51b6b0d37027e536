# Infrastructure Layer
from src.infrastructure.ffmpeg_transcoder import FfmpegTranscoder
from src.infrastructure.youtube_data_api import YouTubeDataAPIClient
from src.infrastructure.ytdlp_downloader import YtdlpDownloader
from src.infrastructure.ytdlp_info import YtdlpVideoInfoClient

__all__ = [
    "YouTubeDataAPIClient",
    "YtdlpVideoInfoClient",
    "YtdlpDownloader",
    "FfmpegTranscoder",
]
