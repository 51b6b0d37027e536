"""YouTube Data API v3 クライアント"""

from typing import Any

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from src.domain.entities import SearchHit, VideoStats
from src.domain.exceptions import AlignmentError, CredentialError, NetworkError, ParseError
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


class YouTubeDataAPIClient:
    """YouTube Data API v3 を使用した動画検索と統計情報取得"""

    def __init__(self, api_key: str, max_results: int = 10, youtube: Any | None = None):
        """
        Args:
            api_key: YouTube Data API キー（検索・統計の両方で使用）
            max_results: 既定の検索件数（API上限は50）
            youtube: テスト用に差し替えるAPIリソース
        """
        if not api_key:
            raise CredentialError("YouTube API key is not set")
        self.max_results = max_results
        self.youtube = youtube or build(
            "youtube", "v3", developerKey=api_key, cache_discovery=False
        )

    def _execute(self, request: Any, endpoint: str) -> dict[str, Any]:
        """APIリクエストを実行し、例外をドメイン例外に変換"""
        try:
            response = request.execute()
        except HttpError as e:
            logger.error(f"[YouTube] {endpoint} 非成功レスポンス: {e}")
            raise CredentialError(
                f"YouTube API returned status {e.resp.status}. Most likely invalid API key."
            ) from e
        except (httplib2.HttpLib2Error, OSError) as e:
            logger.error(f"[YouTube] {endpoint} 通信エラー: {e}")
            raise NetworkError(f"YouTube API request failed: {e}") from e
        except ValueError as e:
            raise ParseError(f"Malformed YouTube API response: {e}") from e

        if not isinstance(response, dict):
            raise ParseError(f"Unexpected {endpoint} response: {type(response).__name__}")
        return response

    def search(self, query: str, max_results: int | None = None) -> list[SearchHit]:
        """
        YouTube動画を検索

        Args:
            query: 検索クエリ
            max_results: 最大取得件数

        Returns:
            SearchHitのリスト（関連度順）

        Raises:
            CredentialError / NetworkError / ParseError
        """
        limit = min(max_results or self.max_results, 50)
        logger.info("[YouTube] 検索開始")
        logger.info(f"  クエリ: {query!r}")

        response = self._execute(
            self.youtube.search().list(
                q=query,
                part="snippet",
                type="video",
                maxResults=limit,
            ),
            "search.list",
        )

        hits = []
        try:
            for item in response.get("items", []):
                snippet = item["snippet"]
                hits.append(
                    SearchHit(
                        video_id=item["id"]["videoId"],
                        title=snippet.get("title", ""),
                        description=snippet.get("description", ""),
                        channel_name=snippet.get("channelTitle", ""),
                    )
                )
        except (KeyError, TypeError, AttributeError) as e:
            raise ParseError(f"Malformed search result item: {e}") from e

        logger.info(f"[YouTube] 検索完了: {len(hits)}件")
        for i, hit in enumerate(hits[:5]):
            logger.debug(f"    [{i+1}] {hit.video_id}: {hit.title[:40]}")
        return hits

    def fetch_stats(self, video_ids: list[str]) -> list[VideoStats]:
        """
        videos.list で再生時間と統計情報を取得

        Args:
            video_ids: 動画IDのリスト

        Returns:
            video_idsと同じ順序のVideoStatsリスト

        Raises:
            AlignmentError: 応答のID順序が要求と一致しない
            CredentialError / NetworkError / ParseError
        """
        if not video_ids:
            return []

        logger.debug(f"[YouTube] videos.list 呼び出し: {len(video_ids)}件")
        response = self._execute(
            self.youtube.videos().list(
                id=",".join(video_ids),
                part="contentDetails,statistics",
            ),
            "videos.list",
        )

        stats = []
        try:
            for item in response.get("items", []):
                statistics = item.get("statistics", {})
                stats.append(
                    VideoStats(
                        video_id=item["id"],
                        duration=item["contentDetails"]["duration"],
                        view_count=statistics.get("viewCount", ""),
                        like_count=statistics.get("likeCount", ""),
                        dislike_count=statistics.get("dislikeCount", ""),
                    )
                )
        except (KeyError, TypeError, AttributeError) as e:
            raise ParseError(f"Malformed video item: {e}") from e

        # 重複IDはAPI側で1件にまとまるので、ユニーク順で照合してから要求順に展開
        unique_ids = list(dict.fromkeys(video_ids))
        returned_ids = [s.video_id for s in stats]
        if returned_ids != unique_ids:
            logger.error(f"[YouTube] ID順序不一致: requested={unique_ids}, returned={returned_ids}")
            raise AlignmentError(
                f"videos.list returned {len(returned_ids)} items for {len(unique_ids)} requested ids "
                "in a different order or with missing entries"
            )

        by_id = {s.video_id: s for s in stats}
        return [by_id[video_id] for video_id in video_ids]
