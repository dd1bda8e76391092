"""PNG書き出しモジュールのテスト"""

from pathlib import Path

import pytest
from PIL import Image

from minipng.errors import FileWriteError, InvalidPaletteIndexError
from minipng.exporter import export_png, to_pil_image
from minipng.image import Header, MiniPNGImage, Palette
from minipng.pixel_type import PixelType
from minipng.text_import import import_text


def _image(
    width: int,
    height: int,
    pixel_type: PixelType,
    data: bytes,
    palette: Palette | None = None,
) -> MiniPNGImage:
    return MiniPNGImage(
        header=Header(width=width, height=height, pixel_type=pixel_type),
        palette=palette,
        data=data,
    )


class TestToPilImage:
    """to_pil_image()のテスト"""

    def test_black_and_white_rows_not_byte_aligned(self) -> None:
        """行がバイト境界に揃っていなくても正しく展開される"""
        pil_image = to_pil_image(import_text("X  \n X \n  X"))

        assert pil_image.mode == "L"
        assert pil_image.size == (3, 3)
        assert pil_image.getpixel((0, 0)) == 255
        assert pil_image.getpixel((1, 0)) == 0
        assert pil_image.getpixel((1, 1)) == 255
        assert pil_image.getpixel((2, 2)) == 255
        assert pil_image.getpixel((0, 2)) == 0

    def test_gray_levels(self) -> None:
        pil_image = to_pil_image(_image(2, 1, PixelType.GRAY_LEVELS, b"\x10\xf0"))
        assert pil_image.mode == "L"
        assert pil_image.tobytes() == b"\x10\xf0"

    def test_rgb(self) -> None:
        pil_image = to_pil_image(_image(1, 2, PixelType.RGB, b"\x01\x02\x03\x04\x05\x06"))
        assert pil_image.mode == "RGB"
        assert pil_image.getpixel((0, 0)) == (1, 2, 3)
        assert pil_image.getpixel((0, 1)) == (4, 5, 6)

    def test_palette(self) -> None:
        palette = Palette(colors=((255, 0, 0), (0, 0, 255)))
        pil_image = to_pil_image(_image(2, 1, PixelType.PALETTE, b"\x01\x00", palette=palette))

        assert pil_image.mode == "P"
        rgb = pil_image.convert("RGB")
        assert rgb.getpixel((0, 0)) == (0, 0, 255)
        assert rgb.getpixel((1, 0)) == (255, 0, 0)

    def test_palette_index_out_of_range(self) -> None:
        palette = Palette(colors=((0, 0, 0),))
        with pytest.raises(InvalidPaletteIndexError):
            to_pil_image(_image(1, 1, PixelType.PALETTE, b"\x01", palette=palette))


class TestExportPng:
    """export_png()のテスト"""

    def test_export_png(self, tmp_path: Path) -> None:
        output = tmp_path / "out.png"
        export_png(_image(2, 1, PixelType.GRAY_LEVELS, b"\x00\xff"), output)

        with Image.open(output) as saved:
            assert saved.format == "PNG"
            assert saved.size == (2, 1)

    def test_export_to_missing_directory(self, tmp_path: Path) -> None:
        output = tmp_path / "missing" / "out.png"
        with pytest.raises(FileWriteError) as exc_info:
            export_png(_image(1, 1, PixelType.GRAY_LEVELS, b"\x00"), output)
        assert exc_info.value.path == output
