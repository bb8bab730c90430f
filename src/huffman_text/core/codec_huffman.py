from __future__ import annotations

from huffman_text.core.code_table import CodePath, build_code_table, decode_bits
from huffman_text.core.codec_base import Codec
from huffman_text.core.serializer import HuffmanEncoding
from huffman_text.core.tree import build_tree
from huffman_text.errors import EncodingError, ItemNotFound


def encode_with_table(text: str, codes: dict[str, CodePath]) -> list[int]:
    """Concatenate each symbol's code, in input order."""
    bits: list[int] = []
    for i, sym in enumerate(text):
        path = codes.get(sym)
        if path is None:
            raise ItemNotFound(f"symbol {sym!r} at {i} is not in the code table")
        bits.extend(path)
    return bits


class HuffmanTextCodec(Codec):
    def encode(self, text: str) -> HuffmanEncoding:
        if not isinstance(text, str):
            raise EncodingError(f"expected str input, got {type(text).__name__}")
        tree = build_tree(text)
        if tree.is_empty:
            return HuffmanEncoding(tree=tree, bits=[])
        codes = build_code_table(tree)
        return HuffmanEncoding(tree=tree, bits=encode_with_table(text, codes))

    def decode(self, encoding: HuffmanEncoding) -> str:
        return decode_bits(encoding.tree, encoding.bits)
