"""Mini-PNG - minimal tagged-block image format codec and CLI tool."""

from minipng.decoder import BlockReader, ImageAssembler, decode
from minipng.encoder import encode
from minipng.errors import MiniPNGError
from minipng.image import Header, MiniPNGImage, Palette
from minipng.pixel_type import PixelType
from minipng.renderer import Renderer, render
from minipng.text_import import import_text

__version__ = "0.1.0"

__all__ = [
    "BlockReader",
    "Header",
    "ImageAssembler",
    "MiniPNGError",
    "MiniPNGImage",
    "Palette",
    "PixelType",
    "Renderer",
    "decode",
    "encode",
    "import_text",
    "render",
]
