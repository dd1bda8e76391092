"""テキスト画像取り込みモジュール

空白と'X'で描かれたテキストを1ビット白黒のMini-PNG画像に変換する。
短い行は空白で埋めたものとして扱う。
"""

from __future__ import annotations

from minipng.bitpack import packed_size, set_bit
from minipng.errors import IllegalCharacterError
from minipng.image import Header, MiniPNGImage
from minipng.pixel_type import PixelType

_BITS = {" ": 0, "X": 1}


def split_lines(text: str) -> list[str]:
    """テキストを行に分割する

    末尾の改行は新しい行を作らず、各行末の'\\r'は取り除く。
    """
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return [line.removesuffix("\r") for line in text.split("\n")]


def import_text(text: str) -> MiniPNGImage:
    """テキスト画像を白黒画像に変換する

    Args:
        text: 空白（黒）と'X'（白）からなるテキスト

    Returns:
        白黒のMini-PNG画像

    Raises:
        IllegalCharacterError: 空白と'X'以外の文字が含まれる場合
    """
    lines = split_lines(text)
    height = len(lines)
    width = max((len(line) for line in lines), default=0)

    pixel_count = width * height
    data = bytearray(packed_size(pixel_count))

    for i in range(pixel_count):
        line = lines[i // width]
        column = i % width
        char = line[column] if column < len(line) else " "

        bit = _BITS.get(char)
        if bit is None:
            raise IllegalCharacterError(char)
        if bit:
            set_bit(data, i)

    return MiniPNGImage(
        header=Header(width=width, height=height, pixel_type=PixelType.BLACK_AND_WHITE),
        palette=None,
        data=bytes(data),
        comments=(),
    )
