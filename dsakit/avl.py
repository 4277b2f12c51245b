"""Self-balancing AVL tree insertion and rotations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class AVLNode:
    """An AVL tree node; a new leaf has height 1."""

    key: int
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    height: int = 1


def height(node: Optional[AVLNode]) -> int:
    """Stored height of a node, 0 for an empty subtree."""
    return 0 if node is None else node.height


def balance_factor(node: Optional[AVLNode]) -> int:
    """Left height minus right height, 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _refresh(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def left_rotate(node: AVLNode) -> AVLNode:
    """Rotate left around node; its right child becomes the subtree root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("left rotation needs a right child")
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def right_rotate(node: AVLNode) -> AVLNode:
    """Rotate right around node; its left child becomes the subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("right rotation needs a left child")
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def insert(node: Optional[AVLNode], key: int) -> AVLNode:
    """Insert key, ignoring duplicates, and return the rebalanced subtree root."""
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = insert(node.left, key)
    elif key > node.key:
        node.right = insert(node.right, key)
    else:
        return node

    _refresh(node)
    bf = balance_factor(node)
    if bf > 1:
        if key > node.left.key:
            node.left = left_rotate(node.left)
        return right_rotate(node)
    if bf < -1:
        if key < node.right.key:
            node.right = right_rotate(node.right)
        return left_rotate(node)
    return node


def _inorder(root: Optional[AVLNode]) -> Iterator[int]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.key
        yield from _inorder(root.right)


def inorder(root: Optional[AVLNode]) -> list[int]:
    """Keys in ascending order."""
    return list(_inorder(root))