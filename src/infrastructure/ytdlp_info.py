"""yt-dlp ベースの動画情報取得クライアント"""

from typing import Any

import yt_dlp

from src.domain.entities import Rendition, VideoInfo
from src.domain.exceptions import VideoInfoError
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


def _codec(value: Any) -> str:
    """yt-dlp のコーデック表記を正規化（"none" / 未設定は空文字）"""
    if not value or value == "none":
        return ""
    return str(value)


def format_to_rendition(fmt: dict[str, Any]) -> Rendition:
    """yt-dlp の format 辞書を Rendition に変換"""
    abr = fmt.get("abr")
    try:
        bitrate = int(round(float(abr))) if abr else 0
    except (TypeError, ValueError):
        bitrate = 0

    return Rendition(
        format_id=str(fmt.get("format_id", "")),
        encoding=_codec(fmt.get("acodec")),
        bitrate=bitrate,
        extension=str(fmt.get("ext") or ""),
        has_video=bool(_codec(fmt.get("vcodec"))),
    )


class YtdlpVideoInfoClient:
    """
    yt-dlp を使用した動画情報取得クライアント

    ダウンロードは行わず、タイトルとフォーマット一覧だけを取得する
    """

    def __init__(self) -> None:
        self.ydl_opts = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
        }

    def get_video_info(self, video_id: str) -> VideoInfo:
        """
        動画情報を取得

        Args:
            video_id: YouTube動画ID

        Returns:
            VideoInfo（renditionsは良いものが先）

        Raises:
            VideoInfoError: 動画IDを解決できない
        """
        logger.debug(f"[VideoInfo] 取得開始: {video_id}")
        url = f"https://www.youtube.com/watch?v={video_id}"

        try:
            with yt_dlp.YoutubeDL(self.ydl_opts) as ydl:
                info = ydl.extract_info(url, download=False)
        except yt_dlp.utils.DownloadError as e:
            logger.error(f"[VideoInfo] 取得失敗: {video_id} - {e}")
            raise VideoInfoError(f"Failed to get video info for {video_id}: {e}") from e

        if not info:
            raise VideoInfoError(f"Failed to get video info for {video_id}")

        formats = [
            format_to_rendition(fmt)
            for fmt in info.get("formats") or []
            if fmt.get("format_id")
        ]
        # yt-dlp は低品質→高品質の順で返すので反転する
        formats.reverse()

        logger.debug(f"[VideoInfo] {len(formats)}件のフォーマット: {video_id}")
        return VideoInfo(
            video_id=str(info.get("id") or video_id),
            title=str(info.get("title") or video_id),
            renditions=formats,
        )
