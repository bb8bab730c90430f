from __future__ import annotations

from collections.abc import Sequence

from huffman_text.core.tree import HuffmanTree, Internal, Leaf, Node
from huffman_text.errors import DecodingError, InvalidTree

CodePath = tuple[int, ...]


def build_code_table(tree: HuffmanTree) -> dict[str, CodePath]:
    """Map each leaf symbol to its root-to-leaf path (0 = left, 1 = right)."""
    if tree.root is None:
        raise InvalidTree("cannot build a code table from an empty tree")

    codes: dict[str, CodePath] = {}

    def dfs(node: Node, path: list[int]) -> None:
        if isinstance(node, Leaf):
            if len(node.symbol) != 1:
                raise InvalidTree(f"leaf symbol must be one character, got {node.symbol!r}")
            if node.symbol in codes:
                raise InvalidTree(f"symbol {node.symbol!r} appears on more than one leaf")
            codes[node.symbol] = tuple(path)
            return
        if node.left is None and node.right is None:
            where = "".join(map(str, path)) or "<root>"
            raise InvalidTree(f"internal node without children at path {where}")
        if node.left is not None:
            dfs(node.left, path + [0])
        if node.right is not None:
            dfs(node.right, path + [1])

    dfs(tree.root, [])
    return codes


def decode_symbol(tree: HuffmanTree, bits: Sequence[int], pos: int) -> tuple[str, int]:
    """Walk from the root consuming bits from ``pos``; return (symbol, next position)."""
    node = tree.root
    if node is None:
        raise InvalidTree("cannot decode with an empty tree")

    while isinstance(node, Internal):
        if pos >= len(bits):
            raise DecodingError(f"bit stream exhausted at bit {pos} before reaching a leaf")
        nxt = node.right if bits[pos] else node.left
        if nxt is None:
            raise DecodingError(f"bit {pos} leads to an empty branch")
        node = nxt
        pos += 1

    return node.symbol, pos


def decode_bits(tree: HuffmanTree, bits: Sequence[int]) -> str:
    if not bits:
        return ""
    if tree.root is None:
        raise InvalidTree(f"{len(bits)} payload bits but the tree is empty")
    if isinstance(tree.root, Leaf):
        raise InvalidTree("a bare-leaf root cannot consume payload bits")

    out: list[str] = []
    pos = 0
    while pos < len(bits):
        sym, pos = decode_symbol(tree, bits, pos)
        out.append(sym)
    return "".join(out)
