"""時間表示ユーティリティ"""

import re

_ISO_DURATION = re.compile(r"^P(?:(\d+)D)?T?(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?$")


def parse_duration(duration_str: str) -> int | None:
    """
    ISO 8601 duration を秒に変換（PT1H2M3S → 3723）

    Returns:
        秒数、解釈できない場合はNone
    """
    match = _ISO_DURATION.match(duration_str or "")
    if not match or duration_str in ("P", "PT"):
        return None
    days = int(match.group(1) or 0)
    hours = int(match.group(2) or 0)
    minutes = int(match.group(3) or 0)
    seconds = int(match.group(4) or 0)
    return days * 86400 + hours * 3600 + minutes * 60 + seconds


def format_duration(duration_str: str) -> str:
    """
    表示用に H:MM:SS / M:SS へ整形

    Example:
        "PT4M13S" → "4:13"
        "PT1H2M3S" → "1:02:03"
        解釈できない値はそのまま返す
    """
    total = parse_duration(duration_str)
    if total is None:
        return duration_str

    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"
