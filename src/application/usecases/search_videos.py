"""ユースケース: 検索クエリから結合済みの動画一覧を作る"""

from dataclasses import dataclass, field

from src.application.interfaces.youtube_searcher import VideoStatsFetcher, YouTubeSearcher
from src.domain.aggregation import aggregate
from src.domain.entities import AggregatedVideo, SearchHit
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class SearchVideosConfig:
    """ユースケースの設定"""

    max_results: int = 10  # 1ページ分の検索件数


@dataclass
class SearchOutcome:
    """検索と結合の結果"""

    query: str
    hits: list[SearchHit]  # 表示順
    videos: dict[str, AggregatedVideo] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.hits

    def ranked(self) -> list[AggregatedVideo]:
        """表示順に並べた結合済み動画"""
        return [self.videos[hit.video_id] for hit in self.hits]


class SearchVideosUseCase:
    """
    検索 → 統計情報の一括取得 → 結合

    統計情報は検索結果のID順で要求し、応答も同じ順序であることを前提とする
    """

    def __init__(
        self,
        youtube_searcher: YouTubeSearcher,
        stats_fetcher: VideoStatsFetcher,
        config: SearchVideosConfig | None = None,
    ):
        self.youtube_searcher = youtube_searcher
        self.stats_fetcher = stats_fetcher
        self.config = config or SearchVideosConfig()

    def execute(self, query: str) -> SearchOutcome:
        """
        メイン実行フロー

        Args:
            query: 検索クエリ

        Returns:
            SearchOutcome（0件なら空）

        Raises:
            CredentialError / NetworkError / ParseError / AlignmentError
        """
        hits = self.youtube_searcher.search(query, max_results=self.config.max_results)
        if not hits:
            return SearchOutcome(query=query, hits=[])

        video_ids = [hit.video_id for hit in hits]
        if len(set(video_ids)) != len(video_ids):
            logger.warning(f"[Search] 重複した動画IDがあります（後の結果で上書き）: {video_ids}")

        stats = self.stats_fetcher.fetch_stats(video_ids)
        videos = aggregate(hits, stats)

        logger.info(f"[Search] {len(hits)}件の検索結果を結合")
        return SearchOutcome(query=query, hits=list(hits), videos=videos)
