"""ダウンロード・変換ユースケースのテスト"""

from pathlib import Path

import pytest

from fakes import FakeDownloader, FakeTranscoder
from src.application.usecases.download_audio import DownloadAudioConfig, DownloadAudioUseCase
from src.domain.entities import Rendition, ResolvedSelection, SelectionMode
from src.domain.exceptions import (
    CleanupError,
    DownloadError,
    FileCreateError,
    TranscodeError,
)

AUDIO = Rendition("251", "opus", 160, "webm")


def _usecase(tmp_path: Path, downloader=None, transcoder=None) -> DownloadAudioUseCase:
    return DownloadAudioUseCase(
        downloader=downloader or FakeDownloader(),
        transcoder=transcoder or FakeTranscoder(),
        config=DownloadAudioConfig(output_dir=tmp_path),
    )


class TestNumberedAndBest:
    """変換なしのダウンロード"""

    @pytest.mark.parametrize("mode", [SelectionMode.NUMBERED, SelectionMode.BEST])
    def test_download_is_final_artifact(self, tmp_path: Path, mode: SelectionMode) -> None:
        downloader = FakeDownloader()
        transcoder = FakeTranscoder()
        usecase = _usecase(tmp_path, downloader, transcoder)

        result = usecase.execute(ResolvedSelection(AUDIO, mode), "song", "vid1")

        assert result == tmp_path / "song.webm"
        assert result.read_bytes() == b"media"
        assert downloader.calls == [("251", tmp_path / "song.webm", "vid1")]
        assert transcoder.calls == []

    def test_download_failure(self, tmp_path: Path) -> None:
        usecase = _usecase(tmp_path, downloader=FakeDownloader(fail=True))

        with pytest.raises(DownloadError):
            usecase.execute(ResolvedSelection(AUDIO, SelectionMode.BEST), "song", "vid1")

    def test_file_create_failure(self, tmp_path: Path) -> None:
        """出力先ディレクトリがない場合はFileCreateError"""
        downloader = FakeDownloader()
        usecase = DownloadAudioUseCase(
            downloader=downloader,
            transcoder=FakeTranscoder(),
            config=DownloadAudioConfig(output_dir=tmp_path / "missing"),
        )

        with pytest.raises(FileCreateError):
            usecase.execute(ResolvedSelection(AUDIO, SelectionMode.BEST), "song", "vid1")
        assert downloader.calls == []


class TestFastest:
    """fastest: 結合ストリームをダウンロードしてmp3へ変換"""

    @pytest.mark.parametrize("bitrate, expected", [(0, "192"), (256, "256")])
    def test_transcode_bitrate(self, tmp_path: Path, bitrate: int, expected: str) -> None:
        transcoder = FakeTranscoder()
        usecase = _usecase(tmp_path, transcoder=transcoder)
        rendition = Rendition("18", "aac", bitrate, "mp4", has_video=True)

        result = usecase.execute(
            ResolvedSelection(rendition, SelectionMode.FASTEST), "song", "vid1"
        )

        assert result == tmp_path / "song.mp3"
        assert transcoder.calls == [(tmp_path / "song.mp4", tmp_path / "song.mp3", expected)]
        # 中間ファイルは変換成功後に削除される
        assert transcoder.input_existed == [True]
        assert not (tmp_path / "song.mp4").exists()
        assert result.read_bytes() == b"mp3"

    def test_custom_default_bitrate(self, tmp_path: Path) -> None:
        usecase = DownloadAudioUseCase(
            FakeDownloader(),
            FakeTranscoder(),
            DownloadAudioConfig(output_dir=tmp_path, default_bitrate="128"),
        )
        selection = ResolvedSelection(Rendition("18", "aac", 0, "mp4", True), SelectionMode.FASTEST)

        assert usecase.transcode_bitrate(selection) == "128"

    def test_transcode_failure_keeps_intermediate(self, tmp_path: Path) -> None:
        usecase = _usecase(tmp_path, transcoder=FakeTranscoder(fail=True))
        rendition = Rendition("18", "aac", 0, "mp4", has_video=True)

        with pytest.raises(TranscodeError):
            usecase.execute(ResolvedSelection(rendition, SelectionMode.FASTEST), "song", "vid1")
        assert (tmp_path / "song.mp4").exists()

    def test_cleanup_failure(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """削除失敗はCleanupErrorだが、mp3は残る"""
        usecase = _usecase(tmp_path)
        rendition = Rendition("18", "aac", 0, "mp4", has_video=True)

        def fail_unlink(self: Path, missing_ok: bool = False) -> None:
            raise PermissionError("locked")

        monkeypatch.setattr(Path, "unlink", fail_unlink)

        with pytest.raises(CleanupError):
            usecase.execute(ResolvedSelection(rendition, SelectionMode.FASTEST), "song", "vid1")
        assert (tmp_path / "song.mp3").exists()

    def test_already_mp3_is_final_artifact(self, tmp_path: Path) -> None:
        """結合ストリームが既にmp3なら変換も削除もしない"""
        transcoder = FakeTranscoder()
        usecase = _usecase(tmp_path, transcoder=transcoder)
        rendition = Rendition("x", "mp3", 128, "mp3", has_video=True)

        result = usecase.execute(
            ResolvedSelection(rendition, SelectionMode.FASTEST), "song", "vid1"
        )

        assert result == tmp_path / "song.mp3"
        assert result.read_bytes() == b"media"
        assert transcoder.calls == []

    def test_progress_message(self, tmp_path: Path) -> None:
        messages: list[str] = []
        usecase = _usecase(tmp_path)
        rendition = Rendition("18", "aac", 0, "mp4", has_video=True)

        usecase.execute(
            ResolvedSelection(rendition, SelectionMode.FASTEST),
            "song",
            "vid1",
            progress_callback=messages.append,
        )

        assert messages == ["Converting to mp3 with bitrate 192k..."]


def test_usecase_loggers_use_shared_factory() -> None:
    """ユースケースもget_loggerのキャッシュ済みロガーを使う"""
    from src.application.usecases import download_audio, search_videos
    from src.infrastructure.logging_config import get_logger

    assert download_audio.logger is get_logger(download_audio.__name__)
    assert search_videos.logger is get_logger(search_videos.__name__)
