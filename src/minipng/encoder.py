"""Mini-PNGエンコーダーモジュール

画像をMini-PNG形式の正規のブロック配置でバイト列に変換する。
ブロック順: H → P（パレットがある場合のみ）→ C（コメントごと）→ D（1つ）
"""

from __future__ import annotations

from minipng.image import MAGIC, MiniPNGImage


def _block(tag: bytes, payload: bytes) -> bytes:
    """種別(1) + 長さ(4, ビッグエンディアン) + 内容 のブロックを作る"""
    return tag + len(payload).to_bytes(4, "big") + payload


def encode_header(image: MiniPNGImage) -> bytes:
    """ヘッダーブロックの内容（9バイト）を作る"""
    header = image.header
    return (
        header.width.to_bytes(4, "big")
        + header.height.to_bytes(4, "big")
        + bytes([header.pixel_type.code])
    )


def encode(image: MiniPNGImage) -> bytes:
    """画像をMini-PNG形式のバイト列に変換する

    Args:
        image: 変換対象の画像

    Returns:
        Mini-PNG形式のバイト列
    """
    chunks = [MAGIC, _block(b"H", encode_header(image))]

    if image.palette is not None:
        chunks.append(_block(b"P", image.palette.to_bytes()))

    for comment in image.comments:
        chunks.append(_block(b"C", comment.encode("utf-8")))

    chunks.append(_block(b"D", bytes(image.data)))
    return b"".join(chunks)
