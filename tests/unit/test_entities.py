"""ドメインエンティティのテスト"""

from src.domain.entities import (
    AggregatedVideo,
    Rendition,
    ResolvedSelection,
    SearchHit,
    SelectionMode,
)


def _video(approval_ratio: float | None) -> AggregatedVideo:
    return AggregatedVideo(
        video_id="A",
        title="t",
        description="d",
        channel_name="c",
        duration="PT1M",
        view_count="10",
        approval_ratio=approval_ratio,
    )


class TestAggregatedVideo:
    """AggregatedVideoのテスト"""

    def test_approval_display_percentage(self) -> None:
        """高評価率はパーセント表示"""
        assert _video(0.75).approval_display == "75.00%"

    def test_approval_display_full(self) -> None:
        assert _video(1.0).approval_display == "100.00%"

    def test_approval_display_unavailable(self) -> None:
        """評価なしは Unavailable"""
        video = _video(None)
        assert video.approval_display == "Unavailable"
        assert not video.has_approval_ratio


class TestRendition:
    """Renditionのテスト"""

    def test_has_audio(self) -> None:
        assert Rendition("140", "mp4a.40.2", 128, "m4a").has_audio
        assert not Rendition("137", "", 0, "mp4", has_video=True).has_audio


class TestResolvedSelection:
    """ResolvedSelectionのテスト"""

    def test_only_fastest_needs_transcode(self) -> None:
        rendition = Rendition("18", "mp4a.40.2", 0, "mp4", has_video=True)
        assert ResolvedSelection(rendition, SelectionMode.FASTEST).needs_transcode
        assert not ResolvedSelection(rendition, SelectionMode.BEST).needs_transcode
        assert not ResolvedSelection(rendition, SelectionMode.NUMBERED).needs_transcode


def test_search_hit_url() -> None:
    hit = SearchHit(video_id="abc", title="", description="", channel_name="")
    assert hit.url == "https://www.youtube.com/watch?v=abc"
