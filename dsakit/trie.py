"""Prefix tree of words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """A set of words stored as a tree of characters."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _walk(self, text: str) -> Optional[_TrieNode]:
        node = self._root
        for ch in text:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add word to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        """True if word was inserted."""
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """True if some inserted word begins with prefix."""
        return self._walk(prefix) is not None