"""Mini-PNGデコーダーモジュール

Mini-PNG形式のバイト列をブロック単位に分割し、検証したうえで画像に組み立てる。

Mini-PNG形式の構造:
- マジック: b"Mini-PNG" (8バイト)
- ブロック: 種別(1) + 長さ(4, ビッグエンディアン) + 内容(長さ分)
  - H: 幅(4) + 高さ(4) + ピクセル種別(1)
  - P: RGBの3バイト組の並び
  - C: UTF-8のコメント
  - D: ピクセルデータ（複数ブロックは連結される）
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from minipng.errors import (
    BlockLengthMismatchError,
    DataSizeMismatchError,
    DuplicateHeaderError,
    DuplicatePaletteError,
    FileTooSmallError,
    HeaderTooSmallError,
    InvalidBlockLengthError,
    InvalidBlockTypeError,
    InvalidMagicNumberError,
    InvalidUtf8CommentError,
    MissingDataError,
    MissingHeaderError,
    MissingPaletteError,
    UnexpectedPaletteError,
)
from minipng.image import MAGIC, Header, MiniPNGImage, Palette, RGBColor
from minipng.pixel_type import PixelType

LENGTH_SIZE = 4
"""ブロック長フィールドのバイト数"""

HEADER_PAYLOAD_SIZE = 9
"""ヘッダーブロックの最小サイズ: 幅(4) + 高さ(4) + ピクセル種別(1)"""


@dataclass(frozen=True)
class Block:
    """1つのブロック

    Attributes:
        tag: ブロック種別の1文字
        payload: ブロックの内容
    """

    tag: str
    payload: bytes


class BlockReader:
    """ブロック読み取りクラス

    マジックバイトの直後から、現在位置(offset)を進めながら
    ブロックを1つずつ読み取る。
    """

    def __init__(self, data: bytes) -> None:
        """マジックバイトを検証して読み取り位置を初期化する

        Args:
            data: Mini-PNGファイル全体のバイト列

        Raises:
            FileTooSmallError: 8バイト未満の場合
            InvalidMagicNumberError: マジックバイトが一致しない場合
        """
        if len(data) < len(MAGIC):
            raise FileTooSmallError()
        if data[: len(MAGIC)] != MAGIC:
            raise InvalidMagicNumberError()

        self._data = bytes(data)
        self._offset = len(MAGIC)

    @property
    def offset(self) -> int:
        """現在の読み取り位置"""
        return self._offset

    @property
    def remaining(self) -> int:
        """未読のバイト数"""
        return len(self._data) - self._offset

    def at_end(self) -> bool:
        return self._offset >= len(self._data)

    def read_block(self) -> Block:
        """次のブロックを読み取る

        Returns:
            読み取ったブロック

        Raises:
            InvalidBlockLengthError: 長さフィールドが途中で切れている場合
            BlockLengthMismatchError: 内容が宣言された長さに満たない場合
        """
        tag = chr(self._data[self._offset])
        self._offset += 1

        if self.remaining < LENGTH_SIZE:
            raise InvalidBlockLengthError()
        length = int.from_bytes(self._data[self._offset : self._offset + LENGTH_SIZE], "big")
        self._offset += LENGTH_SIZE

        if self.remaining < length:
            raise BlockLengthMismatchError()
        payload = self._data[self._offset : self._offset + length]
        self._offset += length

        return Block(tag=tag, payload=payload)

    def __iter__(self) -> Iterator[Block]:
        while not self.at_end():
            yield self.read_block()


class ImageAssembler:
    """画像組み立てクラス

    ブロックを種別ごとに集約し、すべてのブロックを受け取った後に
    形式上の制約を検証して画像を生成する。
    """

    def __init__(self) -> None:
        self._header: Header | None = None
        self._palette: Palette | None = None
        self._data = bytearray()
        self._comments: list[str] = []

    def add_block(self, block: Block) -> None:
        """ブロックを集約する

        Args:
            block: 読み取ったブロック

        Raises:
            DuplicateHeaderError: ヘッダーが2つ目の場合
            HeaderTooSmallError: ヘッダーが9バイト未満の場合
            InvalidPixelTypeError: ピクセル種別コードが不正な場合
            DuplicatePaletteError: パレットが2つ目の場合
            InvalidUtf8CommentError: コメントがUTF-8でない場合
            InvalidBlockTypeError: 未知のブロック種別の場合
        """
        match block.tag:
            case "H":
                self._header = self._parse_header(block.payload)
            case "P":
                self._palette = self._parse_palette(block.payload)
            case "C":
                self._comments.append(self._parse_comment(block.payload))
            case "D":
                self._data.extend(block.payload)
            case _:
                raise InvalidBlockTypeError(block.tag)

    def _parse_header(self, payload: bytes) -> Header:
        if self._header is not None:
            raise DuplicateHeaderError()
        if len(payload) < HEADER_PAYLOAD_SIZE:
            raise HeaderTooSmallError()

        # 9バイト目以降は無視する
        return Header(
            width=int.from_bytes(payload[0:4], "big"),
            height=int.from_bytes(payload[4:8], "big"),
            pixel_type=PixelType.from_code(payload[8]),
        )

    def _parse_palette(self, payload: bytes) -> Palette:
        if self._palette is not None:
            raise DuplicatePaletteError()

        # 3バイトに満たない末尾の1〜2バイトは読み捨てる
        colors: list[RGBColor] = []
        for i in range(0, len(payload) - len(payload) % 3, 3):
            colors.append((payload[i], payload[i + 1], payload[i + 2]))
        return Palette(colors=tuple(colors))

    def _parse_comment(self, payload: bytes) -> str:
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUtf8CommentError() from e

    def build(self) -> MiniPNGImage:
        """集約したブロックを検証して画像を生成する

        Returns:
            組み立てた画像

        Raises:
            MissingHeaderError: ヘッダーがない場合
            MissingDataError: データが空の場合
            MissingPaletteError: パレット形式なのにパレットがない場合
            UnexpectedPaletteError: パレット形式でないのにパレットがある場合
            DataSizeMismatchError: データサイズがヘッダーと一致しない場合
        """
        header = self._header
        if header is None:
            raise MissingHeaderError()

        if not self._data:
            raise MissingDataError()

        if header.pixel_type == PixelType.PALETTE and self._palette is None:
            raise MissingPaletteError()
        if header.pixel_type != PixelType.PALETTE and self._palette is not None:
            raise UnexpectedPaletteError()

        expected = header.expected_data_bits
        found = len(self._data) * 8
        if expected != found:
            raise DataSizeMismatchError(
                expected=expected,
                found=found,
                width=header.width,
                height=header.height,
            )

        return MiniPNGImage(
            header=header,
            palette=self._palette,
            data=bytes(self._data),
            comments=tuple(self._comments),
        )


def decode(data: bytes) -> MiniPNGImage:
    """Mini-PNG形式のバイト列をデコードする

    Args:
        data: ファイル全体のバイト列

    Returns:
        デコードした画像

    Raises:
        MiniPNGError: 構造または内容が不正な場合（最初に見つかったエラー）
    """
    reader = BlockReader(data)
    assembler = ImageAssembler()
    for block in reader:
        assembler.add_block(block)
    return assembler.build()

