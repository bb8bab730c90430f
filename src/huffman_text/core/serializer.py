"""Text wire format.

Tree text (preorder):
  leaf      -> '1' <symbol>
  internal  -> '0' <left or ''> <right or ''>

Wire:
  <padding> D <len(tree text)> D <tree text><packed payload>

The tree length lets the parser slice the tree region exactly: the packed
payload (and the tree itself, via leaf symbols) may contain the delimiter.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from huffman_text.core.bitstream import BitStreamCodec
from huffman_text.core.tree import HuffmanTree, Internal, Leaf, Node
from huffman_text.errors import DeserializationError, InvalidTree

TAG_INTERNAL = "0"
TAG_LEAF = "1"
DEFAULT_DELIMITER = "-"


# -------------
# Tree grammar
# -------------


def serialize_tree(tree: HuffmanTree) -> str:
    if tree.root is None:
        return ""
    out: list[str] = []

    def emit(node: Node) -> None:
        if isinstance(node, Leaf):
            if len(node.symbol) != 1:
                raise InvalidTree(f"leaf symbol must be one character, got {node.symbol!r}")
            out.append(TAG_LEAF)
            out.append(node.symbol)
            return
        out.append(TAG_INTERNAL)
        if node.left is not None:
            emit(node.left)
        if node.right is not None:
            emit(node.right)

    emit(tree.root)
    return "".join(out)


def deserialize_tree(text: str) -> HuffmanTree:
    if not text:
        return HuffmanTree(None)

    idx = 0

    def parse() -> Node | None:
        nonlocal idx
        if idx >= len(text):
            return None
        tag = text[idx]
        idx += 1
        if tag == TAG_LEAF:
            if idx >= len(text):
                raise DeserializationError("tree text ends after a leaf tag")
            sym = text[idx]
            idx += 1
            return Leaf(sym)
        if tag == TAG_INTERNAL:
            left = parse()
            right = parse()
            if left is None and right is None:
                raise DeserializationError(f"internal node at {idx - 1} has no children")
            if right is None:
                # A lone child serializes identically on either side; the builder
                # only ever produces it on the right.
                return Internal(left=None, right=left)
            return Internal(left=left, right=right)
        raise DeserializationError(f"unexpected tag {tag!r} at {idx - 1}")

    try:
        root = parse()
    except RecursionError as e:
        raise DeserializationError("tree text is nested too deeply") from e

    if idx != len(text):
        raise DeserializationError(f"{len(text) - idx} trailing chars after the tree")
    return HuffmanTree(root)


# -----------
# Wire format
# -----------


@dataclass(frozen=True, slots=True)
class HuffmanEncoding:
    """A tree plus the unpadded bit payload encoded with it."""

    tree: HuffmanTree
    bits: list[int] = field(default_factory=list)


def _parse_count(raw: str, what: str, limit: int) -> int:
    # str.isdigit() alone accepts non-ASCII digits such as '²'
    if not raw or not raw.isascii() or not raw.isdigit():
        raise DeserializationError(f"{what} is not a number: {raw[:20]!r}")
    # int() refuses very long digit strings, leading zeros included
    digits = raw.lstrip("0") or "0"
    if len(digits) > len(str(limit)):
        raise DeserializationError(f"{what} is out of range: {raw[:20]!r}...")
    return int(digits)


@dataclass(frozen=True, slots=True)
class WireFormat:
    bit_codec: BitStreamCodec = field(default_factory=BitStreamCodec)
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1 or self.delimiter.isdigit():
            raise ValueError(f"delimiter must be one non-digit character, got {self.delimiter!r}")

    def serialize(self, encoding: HuffmanEncoding) -> str:
        tree_text = serialize_tree(encoding.tree)
        packed, padding = self.bit_codec.pack(encoding.bits)
        return self.delimiter.join([str(padding), str(len(tree_text)), tree_text + packed])

    def deserialize(self, wire: str) -> HuffmanEncoding:
        padding_raw, sep, rest = wire.partition(self.delimiter)
        if not sep:
            raise DeserializationError("missing delimiter after padding count")
        tree_len_raw, sep, rest = rest.partition(self.delimiter)
        if not sep:
            raise DeserializationError("missing delimiter after tree length")

        padding = _parse_count(padding_raw, "padding count", self.bit_codec.chunk_bits)
        tree_len = _parse_count(tree_len_raw, "tree length", len(rest))
        if tree_len > len(rest):
            raise DeserializationError(
                f"tree length {tree_len} exceeds the {len(rest)} chars left"
            )

        tree = deserialize_tree(rest[:tree_len])
        bits = self.bit_codec.unpack(rest[tree_len:], padding)
        return HuffmanEncoding(tree=tree, bits=bits)
