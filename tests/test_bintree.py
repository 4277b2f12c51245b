import pytest

from dsakit.bintree import (
    Node,
    build_level_order,
    build_preorder,
    inorder,
    is_bst,
    level_order,
    postorder,
    preorder,
)

PREORDER_INPUT = [1, 2, 4, -1, -1, 5, 7, -1, -1, -1, 3, -1, 6, -1, -1]
LEVEL_INPUT = [1, 2, 3, 4, 5, -1, 6, -1, -1, 7, -1, -1, -1, -1, -1]


def sample_tree():
    root = Node(4, Node(1, Node(5), Node(2)), Node(6))
    return root


def bst_tree():
    return Node(5, Node(3, Node(1), Node(4)), Node(6))


def test_preorder_starts_with_root():
    result = preorder(sample_tree())
    assert result[0] == 4
    assert sorted(result) == [1, 2, 4, 5, 6]


def test_postorder_ends_with_root():
    result = postorder(sample_tree())
    assert result[-1] == 4
    assert sorted(result) == [1, 2, 4, 5, 6]


def test_inorder_of_bst_is_sorted():
    assert inorder(bst_tree()) == [1, 3, 4, 5, 6]


def test_traversals_of_empty_tree():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []
    assert level_order(None) == []


def test_single_node_traversals():
    node = Node(2)
    assert preorder(node) == inorder(node) == postorder(node) == [2]


def test_is_bst_true_for_bst():
    assert is_bst(bst_tree()) is True


def test_is_bst_false_for_unordered_tree():
    assert is_bst(sample_tree()) is False


def test_is_bst_rejects_duplicates():
    assert is_bst(Node(3, Node(3))) is False


def test_is_bst_empty():
    assert is_bst(None) is True


def test_build_preorder_round_trip():
    root = build_preorder(PREORDER_INPUT)
    assert preorder(root) == [v for v in PREORDER_INPUT if v != -1]


def test_build_preorder_only_sentinel():
    assert build_preorder([-1]) is None


def test_build_preorder_short_input():
    with pytest.raises(ValueError):
        build_preorder([1, 2, -1])


def test_build_level_order_levels():
    root = build_level_order(LEVEL_INPUT)
    levels = level_order(root)
    flat = [v for level in levels for v in level]
    assert flat == [v for v in LEVEL_INPUT if v != -1]
    assert levels[0] == [1]
    assert [len(level) for level in levels] == [1, 2, 3, 1]


def test_both_builders_give_same_tree():
    assert build_preorder(PREORDER_INPUT) == build_level_order(LEVEL_INPUT)


def test_build_level_order_empty_input():
    with pytest.raises(ValueError):
        build_level_order([])


def test_build_level_order_missing_children():
    with pytest.raises(ValueError):
        build_level_order([1, 2])