"""Mini-PNGの例外定義モジュール

デコード、レンダリング、テキスト取り込み、ファイル入出力で発生する例外を定義する。
すべての例外はMiniPNGErrorを基底とし、メッセージ生成に必要な情報を属性として保持する。
"""

from __future__ import annotations

from pathlib import Path


class MiniPNGError(Exception):
    """Mini-PNG処理の基底例外"""

    pass


class StructuralError(MiniPNGError):
    """バイト列の構造が不正な場合の例外"""

    pass


class SemanticError(MiniPNGError):
    """ブロック構造は正しいが内容が不正な場合の例外"""

    pass


class TextEncodingError(MiniPNGError):
    """テキストの符号化・文字が不正な場合の例外"""

    pass


class FileTooSmallError(StructuralError):
    def __init__(self) -> None:
        super().__init__("ファイルが小さすぎるためMini-PNG画像ではありません")


class InvalidMagicNumberError(StructuralError):
    def __init__(self) -> None:
        super().__init__('マジックナンバー "Mini-PNG" が見つかりません')


class InvalidBlockLengthError(StructuralError):
    def __init__(self) -> None:
        super().__init__("ブロック長フィールドを読み取れません")


class BlockLengthMismatchError(StructuralError):
    def __init__(self) -> None:
        super().__init__("ブロック長が残りのデータサイズを超えています")


class InvalidBlockTypeError(StructuralError):
    """未知のブロック種別

    Attributes:
        tag: ブロック種別の1文字
    """

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"不正なブロック種別です: {tag!r}")


class DuplicateHeaderError(SemanticError):
    def __init__(self) -> None:
        super().__init__("ヘッダーブロックが2つ以上あります")


class HeaderTooSmallError(SemanticError):
    def __init__(self) -> None:
        super().__init__("ヘッダーブロックが小さすぎます")


class DuplicatePaletteError(SemanticError):
    def __init__(self) -> None:
        super().__init__("パレットブロックが2つ以上あります")


class MissingHeaderError(SemanticError):
    def __init__(self) -> None:
        super().__init__("ヘッダーブロックがありません")


class MissingPaletteError(SemanticError):
    def __init__(self) -> None:
        super().__init__("パレットブロックがありません")


class MissingDataError(SemanticError):
    def __init__(self) -> None:
        super().__init__("データブロックがありません")


class UnexpectedPaletteError(SemanticError):
    def __init__(self) -> None:
        super().__init__("ピクセル種別がパレットではないのにパレットブロックがあります")


class InvalidPixelTypeError(SemanticError):
    """未定義のピクセル種別コード

    Attributes:
        code: ヘッダーに記録されていたコード値
    """

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"不正なピクセル種別です: {code}")


class InvalidPaletteIndexError(SemanticError):
    """パレットの範囲外を指すインデックス

    Attributes:
        index: データ中のインデックス値
    """

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"不正なパレットインデックスです: {index}")


class DataSizeMismatchError(SemanticError):
    """データサイズがヘッダーの宣言と一致しない

    Attributes:
        expected: ヘッダーから計算したビット数
        found: 実際のデータのビット数
        width: 画像の幅
        height: 画像の高さ
    """

    def __init__(self, expected: int, found: int, width: int, height: int) -> None:
        self.expected = expected
        self.found = found
        self.width = width
        self.height = height
        super().__init__(
            f"{expected}ビット（{width}x{height}ピクセル）が必要ですが、"
            f"データは{found}ビットです"
        )


class InvalidUtf8CommentError(TextEncodingError):
    def __init__(self) -> None:
        super().__init__("コメントをUTF-8として読み取れません")


class IllegalCharacterError(TextEncodingError):
    """テキスト画像に含まれる不正な文字

    Attributes:
        character: 'X'と空白以外の文字
    """

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"不正な文字が含まれています: {character!r}")


class FileAccessError(MiniPNGError):
    """ファイル入出力の失敗

    Attributes:
        path: 対象ファイルのパス
        cause: 元になった例外（OSError等）
    """

    _ACTION = "アクセス"

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"ファイルの{self._ACTION}に失敗しました '{path}': {cause}")


class FileReadError(FileAccessError):
    _ACTION = "読み込み"


class FileWriteError(FileAccessError):
    _ACTION = "書き込み"
