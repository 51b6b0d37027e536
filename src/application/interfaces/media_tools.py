"""外部ダウンロード・変換ツールのインターフェース"""

from pathlib import Path
from typing import Protocol


class AudioDownloader(Protocol):
    """指定フォーマットのダウンロード"""

    def download(self, format_id: str, output_path: Path, video_id: str) -> None:
        """
        Args:
            format_id: ダウンロードするフォーマットID
            output_path: 出力ファイルパス
            video_id: YouTube動画ID
        """
        ...


class AudioTranscoder(Protocol):
    """ダウンロード済みファイルの音声変換"""

    def transcode(self, input_path: Path, output_path: Path, bitrate_kbps: str) -> None:
        """
        Args:
            input_path: 入力ファイル
            output_path: 出力mp3ファイル
            bitrate_kbps: 音声ビットレート（"192" など）
        """
        ...
