# Domain Layer
from src.domain.entities import (
    AggregatedVideo,
    Rendition,
    ResolvedSelection,
    SearchHit,
    SelectionMode,
    VideoInfo,
    VideoStats,
)
from src.domain.exceptions import (
    AlignmentError,
    AudioPickerError,
    CleanupError,
    ConsoleInputError,
    CredentialError,
    DownloadError,
    EmptySetError,
    FileCreateError,
    InvalidSelectionError,
    NetworkError,
    ParseError,
    TranscodeError,
    VideoInfoError,
)

__all__ = [
    "SearchHit",
    "VideoStats",
    "AggregatedVideo",
    "Rendition",
    "VideoInfo",
    "SelectionMode",
    "ResolvedSelection",
    "AudioPickerError",
    "CredentialError",
    "NetworkError",
    "ParseError",
    "AlignmentError",
    "InvalidSelectionError",
    "EmptySetError",
    "VideoInfoError",
    "FileCreateError",
    "DownloadError",
    "TranscodeError",
    "CleanupError",
    "ConsoleInputError",
]
