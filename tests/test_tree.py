from __future__ import annotations

from huffman_text.core.tree import (
    FrequencyEntry,
    HuffmanTree,
    Internal,
    Leaf,
    build_freq_table,
    build_tree,
    render_tree,
    sorted_entries,
)

WELCOME = "Welcome to my world!!!"


def _count_nodes(tree: HuffmanTree) -> tuple[int, int]:
    leaves = internals = 0
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            leaves += 1
            continue
        internals += 1
        stack.extend(c for c in (node.left, node.right) if c is not None)
    return leaves, internals


def test_freq_table_counts_in_code_point_order() -> None:
    freq = build_freq_table(WELCOME)
    assert freq == {
        " ": 3, "!": 3, "W": 1, "c": 1, "d": 1, "e": 2, "l": 2,
        "m": 2, "o": 3, "r": 1, "t": 1, "w": 1, "y": 1,
    }  # fmt: skip
    assert list(freq) == sorted(freq)

    assert build_freq_table("") == {}
    assert build_freq_table("bdccbdb") == {"b": 3, "c": 2, "d": 2}


def test_sorted_entries_descending_count_then_symbol() -> None:
    entries = sorted_entries(build_freq_table(WELCOME))
    assert [e.symbol for e in entries] == list(" !oelmWcdrtwy")
    assert [e.count for e in entries] == [3, 3, 3, 2, 2, 2, 1, 1, 1, 1, 1, 1, 1]
    assert entries[0] == FrequencyEntry(" ", 3)


def test_build_tree_empty_and_single_symbol() -> None:
    assert build_tree("") == HuffmanTree(None)
    assert build_tree("").is_empty

    tree = build_tree("aaaa")
    assert tree == HuffmanTree(Internal(left=None, right=Leaf("a")))
    assert [leaf.symbol for leaf in tree.leaves()] == ["a"]
    assert tree.depth() == 1


def test_build_tree_two_symbols_lightest_goes_left() -> None:
    tree = build_tree("abb")
    assert tree == HuffmanTree(Internal(left=Leaf("a"), right=Leaf("b")))

    # equal weights: the later symbol sits at the tail, so it is popped first
    tree = build_tree("ab")
    assert tree == HuffmanTree(Internal(left=Leaf("b"), right=Leaf("a")))


def test_combined_node_goes_after_equal_weight_leaves() -> None:
    # a:2 b:1 c:1 -> (c,b) weight 2 lands after leaf 'a', at the tail, so it is
    # popped first and becomes the left child of the root
    tree = build_tree("aabc")
    expected = Internal(left=Internal(left=Leaf("c"), right=Leaf("b")), right=Leaf("a"))
    assert tree.root == expected


def test_build_tree_shape_invariants() -> None:
    for text in (WELCOME, "Huffman-ft-uyen", "abracadabra", "ñandú ünïcødé ☃☃"):
        n = len(set(text))
        leaves, internals = _count_nodes(build_tree(text))
        assert leaves == n
        assert internals == n - 1


def test_build_tree_is_deterministic() -> None:
    text = "the quick brown fox jumps over the lazy dog" * 3
    assert build_tree(text) == build_tree(text)
    # same multiset, different discovery order -> same tree
    assert build_tree("abcabcaab") == build_tree("cbacbabaa")


def test_welcome_tree_depth_and_leaves() -> None:
    tree = build_tree(WELCOME)
    assert tree.depth() == 5
    assert sorted(leaf.symbol for leaf in tree.leaves()) == sorted(set(WELCOME))


def test_render_tree() -> None:
    assert render_tree(HuffmanTree(None)) == "(empty)\n"
    assert render_tree(build_tree("aaaa")) == "*\n└── 1 'a'\n"

    out = render_tree(build_tree("abb"))
    assert out == "*\n├── 1 'b'\n└── 0 'a'\n"

    out = render_tree(build_tree(WELCOME))
    for sym in set(WELCOME):
        assert repr(sym) in out
