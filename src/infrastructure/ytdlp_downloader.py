"""yt-dlp 実行ファイルによるダウンロード"""

import subprocess
from pathlib import Path

from src.domain.exceptions import DownloadError
from src.infrastructure.logging_config import LogContext, get_logger

logger = get_logger(__name__)


class YtdlpDownloader:
    """yt-dlp コマンドによる実装"""

    def __init__(self, ytdlp_path: str = "yt-dlp"):
        """
        Args:
            ytdlp_path: yt-dlpの実行パス
        """
        self.ytdlp_path = ytdlp_path

    def build_command(self, format_id: str, output_path: Path, video_id: str) -> list[str]:
        return [
            self.ytdlp_path,
            "-f",
            format_id,
            "-o",
            str(output_path),
            "--force-overwrites",  # 事前に作成した空ファイルを上書き
            "--",
            video_id,  # "-" で始まるIDもあるので "--" の後に置く
        ]

    def download(self, format_id: str, output_path: Path, video_id: str) -> None:
        """
        指定フォーマットをダウンロード

        進捗表示のため標準入出力はそのまま引き継ぐ

        Raises:
            DownloadError: 起動失敗または非0終了
        """
        ctx = LogContext(video_id=video_id, format_id=format_id, output=str(output_path))
        cmd = self.build_command(format_id, output_path, video_id)
        logger.debug(f"[Downloader] コマンド: {' '.join(cmd)}")

        try:
            subprocess.run(cmd, check=True)
        except FileNotFoundError as e:
            raise DownloadError(f"yt-dlp not found: {self.ytdlp_path}") from e
        except subprocess.CalledProcessError as e:
            logger.error(f"[Downloader] 失敗 {ctx} returncode={e.returncode}")
            raise DownloadError(f"yt-dlp exited with status {e.returncode}") from e
        except OSError as e:
            raise DownloadError(f"Failed to launch yt-dlp: {e}") from e

        logger.info(f"[Downloader] 完了 {ctx}")
