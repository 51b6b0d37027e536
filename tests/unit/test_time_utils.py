"""時間表示ユーティリティのテスト"""

import pytest

from src.domain.time_utils import format_duration, parse_duration


class TestParseDuration:
    """ISO 8601 duration の変換"""

    def test_full(self) -> None:
        assert parse_duration("PT1H2M3S") == 3723

    def test_minutes_seconds(self) -> None:
        assert parse_duration("PT4M13S") == 253

    def test_days(self) -> None:
        assert parse_duration("P1DT1S") == 86401

    @pytest.mark.parametrize("raw", ["", "P", "PT", "abc", "P0W"])
    def test_unparseable(self, raw: str) -> None:
        assert parse_duration(raw) is None


class TestFormatDuration:
    """表示用の整形"""

    def test_minutes(self) -> None:
        assert format_duration("PT4M13S") == "4:13"

    def test_hours(self) -> None:
        assert format_duration("PT1H2M3S") == "1:02:03"

    def test_seconds_only(self) -> None:
        assert format_duration("PT9S") == "0:09"

    def test_raw_fallback(self) -> None:
        """解釈できない値はそのまま"""
        assert format_duration("unknown") == "unknown"
