"""Mini-PNG表示モジュール

画像のメタ情報とピクセルを端末表示用のテキストに変換する。
白黒画像は空白と'X'で、それ以外は24ビットカラーのANSIエスケープで色付けした
グリフで表示する。
"""

from __future__ import annotations

from minipng.bitpack import iter_bits
from minipng.errors import InvalidPaletteIndexError, MissingPaletteError
from minipng.image import MiniPNGImage, RGBColor
from minipng.pixel_type import PixelType

DEFAULT_GLYPH = "██"
"""カラー表示で1ピクセルに使う文字列（全角相当の幅にするため2文字）"""

BLACK_CHAR = " "
WHITE_CHAR = "X"

_ANSI_RESET = "\x1b[0m"


def color_glyph(color: RGBColor, glyph: str = DEFAULT_GLYPH) -> str:
    """RGB値で前景色を指定したグリフを返す"""
    r, g, b = color
    return f"\x1b[38;2;{r};{g};{b}m{glyph}{_ANSI_RESET}"


class Renderer:
    """画像表示クラス

    ピクセル種別ごとの変換処理を持ち、メタ情報とピクセルを
    1つの文字列にまとめる。

    使用例:
        >>> renderer = Renderer()
        >>> print(renderer.render(image))
    """

    def __init__(self, glyph: str = DEFAULT_GLYPH) -> None:
        """表示設定を初期化する

        Args:
            glyph: カラー表示で1ピクセルに使う文字列
        """
        self._glyph = glyph

    def render(self, image: MiniPNGImage) -> str:
        """メタ情報とピクセルを表示用テキストに変換する

        Args:
            image: 表示対象の画像

        Returns:
            表示用テキスト

        Raises:
            InvalidPaletteIndexError: パレットの範囲外のインデックスがある場合
            MissingPaletteError: パレット形式なのにパレットがない場合
        """
        return self.render_metadata(image) + self.render_pixels(image)

    def render_metadata(self, image: MiniPNGImage) -> str:
        lines = [
            "Mini-PNG Image",
            f"Width: {image.width}",
            f"Height: {image.height}",
            f"Pixel Type: {image.pixel_type.describe()}",
            f"Data size: {len(image.data)} bytes",
        ]
        if image.palette is not None:
            lines.append(f"Palette: {len(image.palette)} colors")
        if image.comments:
            lines.append("Comments:")
            lines.extend(f"  - {comment}" for comment in image.comments)
        return "".join(f"{line}\n" for line in lines)

    def render_pixels(self, image: MiniPNGImage) -> str:
        """ピクセルを行ごとに改行を挟んで並べる

        各行の先頭（1行目を含む）の前に改行が入る。
        """
        match image.pixel_type:
            case PixelType.BLACK_AND_WHITE:
                cells = self._black_and_white_cells(image)
            case PixelType.GRAY_LEVELS:
                cells = self._gray_level_cells(image)
            case PixelType.RGB:
                cells = self._rgb_cells(image)
            case PixelType.PALETTE:
                cells = self._palette_cells(image)

        width = image.width
        output: list[str] = []
        for i, cell in enumerate(cells):
            if i % width == 0:
                output.append("\n")
            output.append(cell)
        return "".join(output)

    def _black_and_white_cells(self, image: MiniPNGImage) -> list[str]:
        return [
            WHITE_CHAR if bit else BLACK_CHAR
            for bit in iter_bits(image.data, image.header.pixel_count)
        ]

    def _gray_level_cells(self, image: MiniPNGImage) -> list[str]:
        return [
            color_glyph((level, level, level), self._glyph)
            for level in image.data[: image.header.pixel_count]
        ]

    def _rgb_cells(self, image: MiniPNGImage) -> list[str]:
        data = image.data
        return [
            color_glyph((data[i * 3], data[i * 3 + 1], data[i * 3 + 2]), self._glyph)
            for i in range(image.header.pixel_count)
        ]

    def _palette_cells(self, image: MiniPNGImage) -> list[str]:
        if image.palette is None:
            raise MissingPaletteError()

        colors = image.palette.colors
        cells: list[str] = []
        for index in image.data[: image.header.pixel_count]:
            if index >= len(colors):
                raise InvalidPaletteIndexError(index)
            cells.append(color_glyph(colors[index], self._glyph))
        return cells


def render(image: MiniPNGImage, glyph: str = DEFAULT_GLYPH) -> str:
    """画像を表示用テキストに変換する

    Args:
        image: 表示対象の画像
        glyph: カラー表示で1ピクセルに使う文字列

    Returns:
        表示用テキスト
    """
    return Renderer(glyph=glyph).render(image)
