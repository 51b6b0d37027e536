"""ロギング設定のテスト"""

import logging

from src.infrastructure.logging_config import LogContext, get_logger, parse_log_level


def test_get_logger_is_cached() -> None:
    assert get_logger("audio.picker") is get_logger("audio.picker")


def test_parse_log_level() -> None:
    assert parse_log_level("debug") == logging.DEBUG
    assert parse_log_level("INFO") == logging.INFO
    assert parse_log_level(None) == logging.WARNING
    assert parse_log_level("nonsense", default=logging.ERROR) == logging.ERROR


def test_log_context_str() -> None:
    ctx = LogContext(video_id="abc", format_id="140")
    assert str(ctx) == "video_id='abc' | format_id='140'"
