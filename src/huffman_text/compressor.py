"""compress / decompress: the two end-to-end operations.

compress:   text -> tree -> code table -> bits -> packed -> wire
decompress: wire -> (tree, packed) -> bits -> walk tree -> text

Every call builds (or parses) its own tree; nothing is cached between calls.
Core failures surface as a single ``CompressionError`` whose ``kind`` tells
them apart.
"""

from __future__ import annotations

from dataclasses import dataclass

from huffman_text.core.code_table import CodePath, build_code_table
from huffman_text.core.codec_huffman import HuffmanTextCodec
from huffman_text.core.serializer import serialize_tree
from huffman_text.core.tree import HuffmanTree
from huffman_text.errors import CompressionError, HuffmanError
from huffman_text.format_spec import DEFAULT_FORMAT, FormatSpec


def compress(text: str, fmt: FormatSpec | None = None) -> str:
    fmt = fmt or DEFAULT_FORMAT
    try:
        encoding = HuffmanTextCodec().encode(text)
        return fmt.wire_format().serialize(encoding)
    except HuffmanError as e:
        raise CompressionError(e.kind, f"cannot compress text input: {e.detail}") from e


def decompress(wire: str, fmt: FormatSpec | None = None) -> str:
    fmt = fmt or DEFAULT_FORMAT
    try:
        encoding = fmt.wire_format().deserialize(wire)
        return HuffmanTextCodec().decode(encoding)
    except HuffmanError as e:
        raise CompressionError(e.kind, f"cannot decompress text input: {e.detail}") from e


@dataclass(frozen=True)
class Inspection:
    tree: HuffmanTree
    tree_text: str
    codes: dict[str, CodePath]
    payload_bits: int


def inspect(
    text: str | None = None, *, wire: str | None = None, fmt: FormatSpec | None = None
) -> Inspection:
    """Describe the tree and code table of ``text`` (or of an already compressed ``wire``)."""
    if (text is None) == (wire is None):
        raise ValueError("inspect: pass exactly one of text / wire")
    fmt = fmt or DEFAULT_FORMAT
    try:
        if wire is not None:
            encoding = fmt.wire_format().deserialize(wire)
        else:
            encoding = HuffmanTextCodec().encode(text)
        tree = encoding.tree
        codes = build_code_table(tree) if tree.root is not None else {}
        return Inspection(
            tree=tree, tree_text=serialize_tree(tree), codes=codes, payload_bits=len(encoding.bits)
        )
    except HuffmanError as e:
        raise CompressionError(e.kind, f"cannot inspect input: {e.detail}") from e
