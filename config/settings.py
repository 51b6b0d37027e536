"""設定管理"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """アプリケーション設定"""

    # API Keys
    # 未設定の場合は起動時に入力を求める
    YOUTUBE_API_KEY: str | None = None

    # Search
    MAX_SEARCH_RESULTS: int = 10

    # Transcode
    # 元フォーマットのビットレートが不明な場合に使う値（kbps）
    DEFAULT_TRANSCODE_BITRATE: str = "192"

    # Paths
    OUTPUT_DIR: str = "."
    FFMPEG_PATH: str = "ffmpeg"
    YTDLP_PATH: str = "yt-dlp"

    # Logging
    LOG_LEVEL: str = "WARNING"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """シングルトンで設定を取得"""
    return Settings()
