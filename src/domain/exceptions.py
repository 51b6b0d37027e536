"""ドメイン固有の例外定義"""


class AudioPickerError(Exception):
    """基底例外クラス"""

    pass


class CredentialError(AudioPickerError):
    """APIキーが無効・未設定（非成功レスポンス）"""

    pass


class NetworkError(AudioPickerError):
    """通信レベルのエラー"""

    pass


class ParseError(AudioPickerError):
    """レスポンスや数値フィールドの形式不正"""

    pass


class AlignmentError(AudioPickerError):
    """検索結果と統計情報の対応が取れない"""

    pass


class InvalidSelectionError(AudioPickerError):
    """ユーザー入力がどの選択肢にも一致しない（再入力で回復）"""

    pass


class EmptySetError(AudioPickerError):
    """候補が空"""

    pass


class VideoInfoError(AudioPickerError):
    """動画情報を取得できない"""

    pass


class FileCreateError(AudioPickerError):
    """出力ファイルの作成失敗"""

    pass


class DownloadError(AudioPickerError):
    """ダウンロードプロセスの失敗"""

    pass


class TranscodeError(AudioPickerError):
    """変換プロセスの失敗"""

    pass


class CleanupError(AudioPickerError):
    """中間ファイルの削除失敗"""

    pass


class ConsoleInputError(AudioPickerError):
    """コンソール入力の読み取り失敗"""

    pass
