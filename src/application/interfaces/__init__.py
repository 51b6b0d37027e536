# Application Interfaces (Protocols)
from src.application.interfaces.media_tools import AudioDownloader, AudioTranscoder
from src.application.interfaces.video_info_provider import VideoInfoProvider
from src.application.interfaces.youtube_searcher import VideoStatsFetcher, YouTubeSearcher

__all__ = [
    "YouTubeSearcher",
    "VideoStatsFetcher",
    "VideoInfoProvider",
    "AudioDownloader",
    "AudioTranscoder",
]
