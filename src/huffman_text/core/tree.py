"""Huffman tree: node types, frequency table and deterministic construction.

Construction order is part of the wire contract: two builds over the same text
must produce the same tree, so every tie is broken explicitly.

  1. count symbols, keys in ascending code-point order
  2. stable sort by descending count (ties: ascending symbol)
  3. pop the two lightest entries from the tail; the last one becomes the left
     child, the one before it the right child
  4. reinsert the combined node AFTER every pending entry of equal weight
  5. repeat until one node is left

A single distinct symbol gets a synthetic root holding the leaf on its right
(code ``1``). No symbols means no root.
"""

from __future__ import annotations

from bisect import insort
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Leaf:
    symbol: str


@dataclass(frozen=True, slots=True)
class Internal:
    left: Node | None = None
    right: Node | None = None


Node = Union[Leaf, Internal]


@dataclass(frozen=True, slots=True)
class FrequencyEntry:
    symbol: str
    count: int


@dataclass(frozen=True, slots=True)
class HuffmanTree:
    root: Node | None = None

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def leaves(self) -> Iterator[Leaf]:
        """Leaves in left-to-right order."""
        stack: list[Node] = [] if self.root is None else [self.root]
        while stack:
            node = stack.pop()
            if isinstance(node, Leaf):
                yield node
                continue
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def depth(self) -> int:
        """Length of the longest root-to-leaf path (0 for empty or bare-leaf trees)."""
        if self.root is None:
            return 0
        best = 0
        stack: list[tuple[Node, int]] = [(self.root, 0)]
        while stack:
            node, d = stack.pop()
            if isinstance(node, Leaf):
                best = max(best, d)
                continue
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, d + 1))
        return best


def build_freq_table(symbols: Iterable[str]) -> dict[str, int]:
    counts = Counter(symbols)
    return {sym: counts[sym] for sym in sorted(counts)}


def sorted_entries(freq: dict[str, int]) -> list[FrequencyEntry]:
    """Descending count; equal counts keep ascending symbol order."""
    entries = [FrequencyEntry(sym, n) for sym, n in sorted(freq.items())]
    entries.sort(key=lambda e: e.count, reverse=True)
    return entries


def _neg_weight(item: tuple[int, Node]) -> int:
    return -item[0]


def build_tree(symbols: Iterable[str]) -> HuffmanTree:
    entries = sorted_entries(build_freq_table(symbols))
    if not entries:
        return HuffmanTree(None)
    if len(entries) == 1:
        return HuffmanTree(Internal(left=None, right=Leaf(entries[0].symbol)))

    # Descending weight; the tail holds the lightest nodes.
    pending: list[tuple[int, Node]] = [(e.count, Leaf(e.symbol)) for e in entries]
    while len(pending) > 1:
        w1, lightest = pending.pop()
        w2, second = pending.pop()
        combined = (w1 + w2, Internal(left=lightest, right=second))
        # insort on -weight keeps the list descending and lands after equal weights
        insort(pending, combined, key=_neg_weight)

    return HuffmanTree(pending[0][1])


def render_tree(tree: HuffmanTree) -> str:
    """ASCII diagram of ``tree``; the right branch is listed before the left one."""
    if tree.root is None:
        return "(empty)\n"

    lines: list[str] = [_label(tree.root)]

    def children(node: Node, prefix: str) -> None:
        if isinstance(node, Leaf):
            return
        kids = [(c, tag) for c, tag in ((node.right, "1"), (node.left, "0")) if c is not None]
        for i, (child, tag) in enumerate(kids):
            last = i == len(kids) - 1
            lines.append(f"{prefix}{'└── ' if last else '├── '}{tag} {_label(child)}")
            children(child, prefix + ("    " if last else "│   "))

    children(tree.root, "")
    return "\n".join(lines) + "\n"


def _label(node: Node) -> str:
    if isinstance(node, Leaf):
        return repr(node.symbol)
    return "*"
