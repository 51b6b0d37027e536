"""YouTube検索インターフェース"""

from typing import Protocol

from src.domain.entities import SearchHit, VideoStats


class YouTubeSearcher(Protocol):
    """YouTube動画検索のインターフェース"""

    def search(
        self,
        query: str,
        max_results: int | None = None,
    ) -> list[SearchHit]:
        """
        YouTube動画を検索

        Args:
            query: 検索クエリ
            max_results: 最大取得件数（Noneならクライアントの既定値）

        Returns:
            SearchHitのリスト（関連度順）
        """
        ...


class VideoStatsFetcher(Protocol):
    """動画統計情報の一括取得インターフェース"""

    def fetch_stats(self, video_ids: list[str]) -> list[VideoStats]:
        """
        複数動画の統計情報を取得

        Args:
            video_ids: 動画IDのリスト

        Returns:
            video_idsと同じ順序のVideoStatsリスト
        """
        ...
