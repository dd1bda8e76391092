"""PNG書き出しモジュール

Mini-PNG画像をPIL.Imageに変換し、PNG形式で保存する。
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from minipng.bitpack import iter_bits
from minipng.errors import FileWriteError, InvalidPaletteIndexError, MissingPaletteError
from minipng.image import MiniPNGImage
from minipng.pixel_type import PixelType


def to_pil_image(image: MiniPNGImage) -> Image.Image:
    """Mini-PNG画像をPIL.Imageに変換する

    Args:
        image: 変換対象の画像

    Returns:
        白黒・グレースケールは"L"、RGBは"RGB"、パレットは"P"モードの画像

    Raises:
        InvalidPaletteIndexError: パレットの範囲外のインデックスがある場合
        MissingPaletteError: パレット形式なのにパレットがない場合
    """
    size = (image.width, image.height)
    pixel_count = image.header.pixel_count

    match image.pixel_type:
        case PixelType.BLACK_AND_WHITE:
            # Mini-PNGは行ごとのバイト境界揃えをしないため"1"モードのfrombytesは使えない
            levels = bytes(255 if bit else 0 for bit in iter_bits(image.data, pixel_count))
            return Image.frombytes("L", size, levels)
        case PixelType.GRAY_LEVELS:
            return Image.frombytes("L", size, bytes(image.data[:pixel_count]))
        case PixelType.RGB:
            return Image.frombytes("RGB", size, bytes(image.data[: pixel_count * 3]))
        case PixelType.PALETTE:
            return _palette_image(image)


def _palette_image(image: MiniPNGImage) -> Image.Image:
    if image.palette is None:
        raise MissingPaletteError()

    indices = bytes(image.data[: image.header.pixel_count])
    color_count = len(image.palette)
    for index in indices:
        if index >= color_count:
            raise InvalidPaletteIndexError(index)

    pil_image = Image.frombytes("P", (image.width, image.height), indices)
    pil_image.putpalette(image.palette.to_bytes(), rawmode="RGB")
    return pil_image


def export_png(image: MiniPNGImage, path: Path) -> None:
    """Mini-PNG画像をPNGファイルとして保存する

    Args:
        image: 保存対象の画像
        path: 出力先のPNGファイルパス

    Raises:
        FileWriteError: ファイルの書き込みに失敗した場合
    """
    pil_image = to_pil_image(image)
    try:
        pil_image.save(path, format="PNG")
    except OSError as e:
        raise FileWriteError(path, e) from e
