import pytest

from dsakit.bintree import Node, inorder, is_bst
from dsakit.bst import (
    DuplicateKeyError,
    delete,
    find_max,
    find_min,
    inorder_predecessor,
    insert,
    insert_any,
    remove,
    search,
    search_iter,
)

KEYS = [8, 3, 10, 1, 6, 14, 4, 7, 13]


def sample():
    return Node(5, Node(3, Node(1), Node(4)), Node(6))


def built():
    root = None
    for key in KEYS:
        root = insert_any(root, key)
    return root


@pytest.mark.parametrize("finder", [search, search_iter])
def test_search_finds_every_key(finder):
    root = sample()
    for key in [1, 3, 4, 5, 6]:
        node = finder(root, key)
        assert node.data == key


@pytest.mark.parametrize("finder", [search, search_iter])
def test_search_missing(finder):
    assert finder(sample(), 7) is None
    assert finder(None, 7) is None


def test_insert_keeps_order():
    root = insert(sample(), 7)
    assert inorder(root) == [1, 3, 4, 5, 6, 7]
    assert is_bst(root)


def test_insert_into_empty():
    root = insert(None, 9)
    assert inorder(root) == [9]


def test_insert_duplicate_raises():
    with pytest.raises(DuplicateKeyError):
        insert(sample(), 4)


def test_insert_any_allows_duplicates():
    root = insert_any(built(), 6)
    assert inorder(root) == sorted(KEYS + [6])


def test_insert_any_builds_sorted_tree():
    assert inorder(built()) == sorted(KEYS)
    assert is_bst(built())


def test_find_min_and_max():
    root = built()
    assert find_min(root).data == min(KEYS)
    assert find_max(root).data == max(KEYS)


def test_find_on_empty_raises():
    with pytest.raises(ValueError):
        find_min(None)
    with pytest.raises(ValueError):
        find_max(None)


def test_inorder_predecessor():
    assert inorder_predecessor(sample()).data == 4


def test_inorder_predecessor_without_left():
    with pytest.raises(ValueError):
        inorder_predecessor(Node(2, None, Node(3)))


def test_delete_root_uses_predecessor():
    root = insert(sample(), 7)
    root = delete(root, 5)
    assert inorder(root) == [1, 3, 4, 6, 7]
    assert root.data == 4


@pytest.mark.parametrize("key", KEYS)
def test_delete_each_key(key):
    root = delete(built(), key)
    expected = sorted(KEYS)
    expected.remove(key)
    assert inorder(root) == expected
    assert is_bst(root)


def test_delete_missing_leaves_tree():
    root = delete(sample(), 2)
    assert inorder(root) == [1, 3, 4, 5, 6]


@pytest.mark.parametrize("key", KEYS)
def test_remove_each_key(key):
    root = remove(built(), key)
    expected = sorted(KEYS)
    expected.remove(key)
    assert inorder(root) == expected
    assert is_bst(root)


def test_remove_missing_and_empty():
    assert inorder(remove(built(), 99)) == sorted(KEYS)
    assert remove(None, 1) is None


def test_remove_all_empties_tree():
    root = built()
    for key in KEYS:
        root = remove(root, key)
    assert root is None