"""出力ファイル名の整形"""

import re

MAX_BASENAME_LENGTH = 120


def sanitize_basename(title: str) -> str:
    """動画タイトルからファイル名として安全なベース名を作る"""
    name = re.sub(r"\s+", " ", title)
    name = re.sub(r'[<>:"/\\|?*%\x00-\x1f]', "_", name)
    name = name.strip(" ._")
    name = name[:MAX_BASENAME_LENGTH].rstrip(" ._")
    return name or "unnamed"
