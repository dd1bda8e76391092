"""Mini-PNG画像モデル

デコード済み画像を表す不変データクラス群を定義する。
"""

from __future__ import annotations

from dataclasses import dataclass, field

from minipng.pixel_type import PixelType

MAGIC = b"Mini-PNG"
"""ファイル先頭のマジックバイト"""

RGBColor = tuple[int, int, int]


@dataclass(frozen=True)
class Header:
    """ヘッダー情報

    Attributes:
        width: 画像の幅（ピクセル）
        height: 画像の高さ（ピクセル）
        pixel_type: ピクセル種別
    """

    width: int
    height: int
    pixel_type: PixelType

    @property
    def pixel_count(self) -> int:
        """総ピクセル数"""
        return self.width * self.height

    @property
    def expected_data_bits(self) -> int:
        """データに必要なビット数（最終バイトまでパディング済み）"""
        bits = self.pixel_count * self.pixel_type.bits_per_pixel
        return (bits + 7) // 8 * 8


@dataclass(frozen=True)
class Palette:
    """パレット

    Attributes:
        colors: (R, G, B) の並び。データ中のインデックスで参照される
    """

    colors: tuple[RGBColor, ...] = ()

    def __len__(self) -> int:
        return len(self.colors)

    def to_bytes(self) -> bytes:
        """RGBの3バイト組を連結したバイト列を返す"""
        return b"".join(bytes(color) for color in self.colors)


@dataclass(frozen=True)
class MiniPNGImage:
    """Mini-PNG画像

    Attributes:
        header: ヘッダー情報
        palette: パレット（ピクセル種別がPALETTEの場合のみ）
        data: パック済みのピクセルデータ
        comments: コメント（出現順）
    """

    header: Header
    palette: Palette | None = None
    data: bytes = b""
    comments: tuple[str, ...] = field(default_factory=tuple)

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    @property
    def pixel_type(self) -> PixelType:
        return self.header.pixel_type

    @property
    def expected_data_size(self) -> int:
        """ヘッダーから計算したデータのバイト数"""
        return self.header.expected_data_bits // 8
