"""1ビットパッキングのテスト"""

import pytest

from minipng.bitpack import get_bit, iter_bits, packed_size, set_bit


class TestBitpack:
    """bitpackモジュールのテスト"""

    @pytest.mark.parametrize(
        "bit_count, expected",
        [
            pytest.param(0, 0, id="正常系: 0ビット"),
            pytest.param(1, 1, id="正常系: 1ビット"),
            pytest.param(8, 1, id="正常系: 8ビット"),
            pytest.param(9, 2, id="正常系: 9ビット"),
            pytest.param(70, 9, id="正常系: 10x7ピクセル"),
        ],
    )
    def test_packed_size(self, bit_count: int, expected: int) -> None:
        assert packed_size(bit_count) == expected

    def test_set_bit_msb_first(self) -> None:
        """0番目のビットは最上位ビットに格納される"""
        buffer = bytearray(2)
        set_bit(buffer, 0)
        set_bit(buffer, 7)
        set_bit(buffer, 8)
        assert bytes(buffer) == b"\x81\x80"

    def test_get_bit(self) -> None:
        data = b"\x40"
        assert [get_bit(data, i) for i in range(8)] == [0, 1, 0, 0, 0, 0, 0, 0]

    def test_iter_bits_stops_before_padding(self) -> None:
        assert list(iter_bits(b"\xff", 3)) == [1, 1, 1]
