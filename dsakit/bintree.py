"""Binary tree nodes, traversals and builders."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

#: Marker for a missing child in the builder input sequences.
EMPTY = -1


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _preorder(root: Optional[Node]) -> Iterator[int]:
    if root is not None:
        yield root.data
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def _inorder(root: Optional[Node]) -> Iterator[int]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.data
        yield from _inorder(root.right)


def _postorder(root: Optional[Node]) -> Iterator[int]:
    if root is not None:
        yield from _postorder(root.left)
        yield from _postorder(root.right)
        yield root.data


def preorder(root: Optional[Node]) -> list[int]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[Node]) -> list[int]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: Optional[Node]) -> list[int]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Values grouped by depth, each level from left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def is_bst(root: Optional[Node]) -> bool:
    """True if the in-order values are strictly increasing."""
    prev: Optional[int] = None
    for value in _inorder(root):
        if prev is not None and value <= prev:
            return False
        prev = value
    return True


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("not enough values to build the tree") from None


def build_preorder(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from values listed in preorder, with -1 for no child."""
    stream = iter(values)

    def build() -> Optional[Node]:
        value = _take(stream)
        if value == EMPTY:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order(values: Iterable[int]) -> Node:
    """Build a tree from a root value followed by child pairs in level order.

    Each node taken from the queue reads two values, its left and right
    child, where -1 stands for no child.
    """
    stream = iter(values)
    root = Node(_take(stream))
    pending: deque[Node] = deque([root])
    while pending:
        current = pending.popleft()
        left_value = _take(stream)
        right_value = _take(stream)
        if left_value != EMPTY:
            current.left = Node(left_value)
            pending.append(current.left)
        if right_value != EMPTY:
            current.right = Node(right_value)
            pending.append(current.right)
    return root