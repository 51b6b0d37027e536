"""ffmpeg による mp3 変換"""

import subprocess
from pathlib import Path

from src.domain.exceptions import TranscodeError
from src.infrastructure.logging_config import LogContext, get_logger

logger = get_logger(__name__)


class FfmpegTranscoder:
    """ffmpeg コマンドによる実装"""

    def __init__(self, ffmpeg_path: str = "ffmpeg"):
        """
        Args:
            ffmpeg_path: ffmpegの実行パス
        """
        self.ffmpeg_path = ffmpeg_path

    def build_command(self, input_path: Path, output_path: Path, bitrate_kbps: str) -> list[str]:
        return [
            self.ffmpeg_path,
            "-y",  # 上書き許可
            "-i",
            str(input_path),
            "-f",
            "mp3",
            "-b:a",
            f"{bitrate_kbps}k",
            "-vn",  # 映像ストリームを除外
            str(output_path),
        ]

    def transcode(self, input_path: Path, output_path: Path, bitrate_kbps: str) -> None:
        """
        音声のみを mp3 に変換

        Raises:
            TranscodeError: 起動失敗または非0終了
        """
        ctx = LogContext(input=str(input_path), output=str(output_path), bitrate=bitrate_kbps)
        cmd = self.build_command(input_path, output_path, bitrate_kbps)
        logger.debug(f"[Transcoder] ffmpeg コマンド: {' '.join(cmd)}")

        try:
            subprocess.run(cmd, check=True)
        except FileNotFoundError as e:
            raise TranscodeError(f"ffmpeg not found: {self.ffmpeg_path}") from e
        except subprocess.CalledProcessError as e:
            logger.error(f"[Transcoder] 失敗 {ctx} returncode={e.returncode}")
            raise TranscodeError(f"ffmpeg exited with status {e.returncode}") from e
        except OSError as e:
            raise TranscodeError(f"Failed to launch ffmpeg: {e}") from e

        logger.info(f"[Transcoder] 完了 {ctx}")
