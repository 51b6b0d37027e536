"""ロギング設定"""

import logging
import sys
from typing import Any

# ロガーのキャッシュ
_loggers: dict[str, logging.Logger] = {}


def get_logger(name: str) -> logging.Logger:
    """
    名前付きロガーを取得

    Args:
        name: ロガー名（通常は __name__ を使用）

    Returns:
        設定済みのロガー
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    _loggers[name] = logger
    return logger


def parse_log_level(level_name: str | None, default: int = logging.WARNING) -> int:
    """"INFO" などのレベル名をloggingの数値に変換"""
    if not level_name:
        return default
    level = getattr(logging, level_name.upper(), None)
    return level if isinstance(level, int) else default


def setup_logging(
    level: int = logging.WARNING,
    format_string: str | None = None,
) -> None:
    """
    アプリケーション全体のロギングを設定

    コンソールの対話出力と混ざらないよう stderr に出力する

    Args:
        level: ログレベル
        format_string: ログフォーマット文字列
    """
    if format_string is None:
        format_string = (
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        )

    # ルートロガーを設定
    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )

    # 外部ライブラリのログレベルを調整
    logging.getLogger("googleapiclient").setLevel(logging.WARNING)
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("yt_dlp").setLevel(logging.CRITICAL)


class LogContext:
    """
    ログのコンテキスト情報を保持するヘルパー

    Example:
        ctx = LogContext(video_id="abc123", format_id="140")
        logger.info(f"Downloading {ctx}")
    """

    def __init__(self, **kwargs: Any):
        self._data = kwargs

    def __str__(self) -> str:
        parts = [f"{k}={v!r}" for k, v in self._data.items()]
        return " | ".join(parts)

