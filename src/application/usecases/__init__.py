# Use Cases
from src.application.usecases.download_audio import (
    DownloadAudioConfig,
    DownloadAudioUseCase,
)
from src.application.usecases.search_videos import (
    SearchOutcome,
    SearchVideosConfig,
    SearchVideosUseCase,
)

__all__ = [
    "SearchVideosUseCase",
    "SearchVideosConfig",
    "SearchOutcome",
    "DownloadAudioUseCase",
    "DownloadAudioConfig",
]
