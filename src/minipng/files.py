"""ファイル入出力モジュール

Mini-PNGファイルおよびテキスト画像の読み書きを行う。
OSErrorは対象パスを保持したFileReadError/FileWriteErrorに変換する。
"""

from __future__ import annotations

from pathlib import Path

from minipng.decoder import decode
from minipng.encoder import encode
from minipng.errors import FileReadError, FileWriteError
from minipng.image import MiniPNGImage


def read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileReadError(path, e) from e


def read_image(path: Path) -> MiniPNGImage:
    """Mini-PNGファイルを読み込んでデコードする

    Args:
        path: Mini-PNGファイルのパス

    Returns:
        デコードした画像

    Raises:
        FileReadError: ファイルの読み込みに失敗した場合
        MiniPNGError: ファイルの内容が不正な場合
    """
    return decode(read_bytes(path))


def read_text(path: Path) -> str:
    """テキスト画像ファイルをUTF-8で読み込む

    Raises:
        FileReadError: 読み込みまたはUTF-8の解釈に失敗した場合
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, e) from e


def write_image(image: MiniPNGImage, path: Path) -> int:
    """画像をMini-PNG形式で保存する

    Args:
        image: 保存対象の画像
        path: 出力先のパス

    Returns:
        書き込んだバイト数

    Raises:
        FileWriteError: ファイルの書き込みに失敗した場合
    """
    data = encode(image)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise FileWriteError(path, e) from e
    return len(data)
