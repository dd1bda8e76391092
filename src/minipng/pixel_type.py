"""ピクセル種別モジュール

Mini-PNGのヘッダーに記録されるピクセル種別と、そのビット深度を定義する。
"""

from __future__ import annotations

from enum import IntEnum

from minipng.errors import InvalidPixelTypeError


class PixelType(IntEnum):
    """ピクセル種別

    値はヘッダーブロックに書き込まれるコードと一致する。
    BLACK_AND_WHITE: 1ビット白黒
    GRAY_LEVELS: 8ビットグレースケール
    PALETTE: 8ビットパレットインデックス
    RGB: 24ビットカラー
    """

    BLACK_AND_WHITE = 0
    GRAY_LEVELS = 1
    PALETTE = 2
    RGB = 3

    @classmethod
    def from_code(cls, code: int) -> PixelType:
        """コード値からピクセル種別を取得する

        Args:
            code: ヘッダーの1バイト

        Returns:
            対応するピクセル種別

        Raises:
            InvalidPixelTypeError: 0〜3以外のコードの場合
        """
        match code:
            case 0:
                return cls.BLACK_AND_WHITE
            case 1:
                return cls.GRAY_LEVELS
            case 2:
                return cls.PALETTE
            case 3:
                return cls.RGB
            case _:
                raise InvalidPixelTypeError(code)

    @property
    def code(self) -> int:
        """ヘッダーに書き込むコード値"""
        return int(self.value)

    @property
    def bits_per_pixel(self) -> int:
        """1ピクセルあたりのビット数"""
        match self:
            case PixelType.BLACK_AND_WHITE:
                return 1
            case PixelType.GRAY_LEVELS | PixelType.PALETTE:
                return 8
            case PixelType.RGB:
                return 24

    def describe(self) -> str:
        """コードとビット深度を含む説明文を返す"""
        match self:
            case PixelType.BLACK_AND_WHITE:
                return "0 (1 bit black and white)"
            case PixelType.GRAY_LEVELS:
                return "1 (8 bits gray levels)"
            case PixelType.PALETTE:
                return "2 (8 bits palette)"
            case PixelType.RGB:
                return "3 (24 bits rgb images)"

    def __str__(self) -> str:
        return self.describe()
