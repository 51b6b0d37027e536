"""動画情報取得インターフェース"""

from typing import Protocol

from src.domain.entities import VideoInfo


class VideoInfoProvider(Protocol):
    """動画のタイトルとフォーマット一覧を取得するインターフェース"""

    def get_video_info(self, video_id: str) -> VideoInfo:
        """
        動画情報を取得

        Args:
            video_id: YouTube動画ID

        Returns:
            VideoInfo（renditionsは優先順）
        """
        ...
