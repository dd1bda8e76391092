"""1ビットパッキング

白黒画像のピクセルを1バイトに8個、上位ビットから順に詰める。
行境界でのパディングは行わず、最後のバイトだけが0でパディングされる。
"""

from __future__ import annotations

from collections.abc import Iterator


def packed_size(bit_count: int) -> int:
    """bit_count個のビットを格納するのに必要なバイト数"""
    return (bit_count + 7) // 8


def get_bit(data: bytes, index: int) -> int:
    """index番目のビット（0 または 1）を返す"""
    return (data[index // 8] >> (7 - index % 8)) & 1


def set_bit(buffer: bytearray, index: int) -> None:
    """index番目のビットを1にする"""
    buffer[index // 8] |= 1 << (7 - index % 8)


def iter_bits(data: bytes, count: int) -> Iterator[int]:
    """先頭からcount個のビットを順に返す（末尾のパディングは読まない）"""
    for i in range(count):
        yield get_bit(data, i)
