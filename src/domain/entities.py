"""ドメインエンティティ定義"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class SearchHit:
    """検索結果の1件（表示順を保持）"""

    video_id: str
    title: str
    description: str
    channel_name: str

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.video_id}"


@dataclass(frozen=True)
class VideoStats:
    """動画の詳細情報（件数はAPIの文字列表現のまま）"""

    duration: str
    view_count: str
    like_count: str = ""
    dislike_count: str = ""
    video_id: str = ""  # APIが返したID（空なら位置対応のみ）


@dataclass
class AggregatedVideo:
    """検索結果と統計情報を結合した動画"""

    video_id: str
    title: str
    description: str
    channel_name: str
    duration: str
    view_count: str
    approval_ratio: float | None  # None = 評価なし

    @property
    def has_approval_ratio(self) -> bool:
        return self.approval_ratio is not None

    @property
    def approval_display(self) -> str:
        """表示用の高評価率"""
        if not self.has_approval_ratio:
            return "Unavailable"
        return f"{self.approval_ratio * 100:.2f}%"


@dataclass(frozen=True)
class Rendition:
    """ダウンロード可能なフォーマット1件"""

    format_id: str
    encoding: str  # 音声コーデック名、音声なしは空文字
    bitrate: int  # 音声ビットレート（kbps）、0 = 不明
    extension: str
    has_video: bool = False

    @property
    def has_audio(self) -> bool:
        return bool(self.encoding)


@dataclass
class VideoInfo:
    """動画タイトルと利用可能なフォーマット一覧"""

    video_id: str
    title: str
    renditions: list[Rendition] = field(default_factory=list)  # 優先順（良いものが先）


class SelectionMode(Enum):
    """フォーマット選択の方法"""

    NUMBERED = "numbered"
    BEST = "best"
    FASTEST = "fastest"


@dataclass(frozen=True)
class ResolvedSelection:
    """確定したダウンロード計画"""

    rendition: Rendition
    mode: SelectionMode

    @property
    def needs_transcode(self) -> bool:
        return self.mode is SelectionMode.FASTEST
