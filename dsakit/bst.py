"""Binary search tree operations on bintree nodes."""

from __future__ import annotations

from typing import Optional

from dsakit.bintree import Node


class DuplicateKeyError(ValueError):
    """Raised when a key already present is inserted again."""


def search(root: Optional[Node], key: int) -> Optional[Node]:
    """Return the node holding key, or None (recursive walk)."""
    if root is None:
        return None
    if key == root.data:
        return root
    if key < root.data:
        return search(root.left, key)
    return search(root.right, key)


def search_iter(root: Optional[Node], key: int) -> Optional[Node]:
    """Return the node holding key, or None (iterative walk)."""
    while root is not None:
        if root.data == key:
            return root
        root = root.left if key < root.data else root.right
    return None


def insert(root: Optional[Node], key: int) -> Node:
    """Insert a key that must not already be present; return the root."""
    new = Node(key)
    if root is None:
        return new
    current = root
    while True:
        if key == current.data:
            raise DuplicateKeyError(f"Cannot insert {key}, already in BST")
        if key < current.data:
            if current.left is None:
                current.left = new
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = new
                return root
            current = current.right


def insert_any(root: Optional[Node], key: int) -> Node:
    """Insert a key, sending equal keys to the right; return the root."""
    if root is None:
        return Node(key)
    if key < root.data:
        root.left = insert_any(root.left, key)
    else:
        root.right = insert_any(root.right, key)
    return root


def find_min(root: Optional[Node]) -> Node:
    """Return the node with the smallest key."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    while root.left is not None:
        root = root.left
    return root


def find_max(root: Optional[Node]) -> Node:
    """Return the node with the largest key."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    while root.right is not None:
        root = root.right
    return root


def inorder_predecessor(root: Node) -> Node:
    """Return the largest node of root's left subtree."""
    if root.left is None:
        raise ValueError("node has no left subtree")
    return find_max(root.left)


def delete(root: Optional[Node], value: int) -> Optional[Node]:
    """Delete value by copying in its in-order predecessor; return the root."""
    if root is None:
        return None
    if value < root.data:
        root.left = delete(root.left, value)
    elif value > root.data:
        root.right = delete(root.right, value)
    elif root.left is None:
        return root.right
    else:
        predecessor = inorder_predecessor(root)
        root.data = predecessor.data
        root.left = delete(root.left, predecessor.data)
    return root


def remove(root: Optional[Node], key: int) -> Optional[Node]:
    """Remove key, splicing out single-child nodes; return the root."""
    if root is None:
        return None
    if key < root.data:
        root.left = remove(root.left, key)
    elif key > root.data:
        root.right = remove(root.right, key)
    elif root.left is None:
        return root.right
    elif root.right is None:
        return root.left
    else:
        largest = find_max(root.left)
        root.data = largest.data
        root.left = remove(root.left, largest.data)
    return root