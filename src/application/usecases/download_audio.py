"""ユースケース: 選択済みフォーマットのダウンロードと変換"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from src.application.interfaces.media_tools import AudioDownloader, AudioTranscoder
from src.domain.entities import ResolvedSelection
from src.domain.exceptions import CleanupError, FileCreateError
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class DownloadAudioConfig:
    """ユースケースの設定"""

    output_dir: Path = Path(".")
    default_bitrate: str = "192"  # ビットレート不明時の変換ビットレート（kbps）
    transcode_extension: str = "mp3"


class DownloadAudioUseCase:
    """
    ダウンロード → （fastestのみ）mp3変換 → 中間ファイル削除

    各ステップは前のステップの成功が前提。失敗時のリトライや巻き戻しは行わない
    """

    def __init__(
        self,
        downloader: AudioDownloader,
        transcoder: AudioTranscoder,
        config: DownloadAudioConfig | None = None,
    ):
        self.downloader = downloader
        self.transcoder = transcoder
        self.config = config or DownloadAudioConfig()

    def transcode_bitrate(self, selection: ResolvedSelection) -> str:
        """変換時のビットレート（不明なら既定値）"""
        bitrate = selection.rendition.bitrate
        return str(bitrate) if bitrate else self.config.default_bitrate

    def execute(
        self,
        selection: ResolvedSelection,
        destination_base_name: str,
        video_id: str,
        progress_callback: Callable[[str], None] | None = None,
    ) -> Path:
        """
        メイン実行フロー

        Args:
            selection: 確定したフォーマットと選択モード
            destination_base_name: 拡張子なしの出力ファイル名
            video_id: YouTube動画ID
            progress_callback: 進捗コールバック (message: str)

        Returns:
            最終成果物のパス

        Raises:
            FileCreateError / DownloadError / TranscodeError / CleanupError
        """

        def update_progress(message: str) -> None:
            if progress_callback:
                progress_callback(message)

        rendition = selection.rendition
        download_path = self.config.output_dir / f"{destination_base_name}.{rendition.extension}"

        # Step 1: 出力ファイルを作成
        try:
            download_path.open("wb").close()
        except OSError as e:
            raise FileCreateError(f"Cannot create {download_path}: {e}") from e

        # Step 2: ダウンロード
        logger.info(f"[Download] 開始: {video_id} format={rendition.format_id} → {download_path}")
        self.downloader.download(rendition.format_id, download_path, video_id)

        if not selection.needs_transcode:
            logger.info(f"[Download] 完了: {download_path}")
            return download_path

        # Step 3: mp3変換
        bitrate = self.transcode_bitrate(selection)
        output_path = self.config.output_dir / (
            f"{destination_base_name}.{self.config.transcode_extension}"
        )
        if output_path == download_path:
            # 既にmp3なら変換も削除も不要
            logger.info(f"[Transcode] 変換不要: {download_path}")
            return download_path

        update_progress(f"Converting to mp3 with bitrate {bitrate}k...")
        logger.info(f"[Transcode] 開始: {download_path} → {output_path} ({bitrate}k)")
        self.transcoder.transcode(download_path, output_path, bitrate)

        # Step 4: 中間ファイル削除（変換結果は残る）
        try:
            download_path.unlink()
        except OSError as e:
            raise CleanupError(
                f"Converted to {output_path}, but could not remove {download_path}: {e}"
            ) from e

        logger.info(f"[Transcode] 完了: {output_path}")
        return output_path
