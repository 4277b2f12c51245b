"""Bounded array stack and unbounded linked stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


class StackOverflowError(IndexError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class ArrayStack:
    """A stack holding at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("stack size must not be negative")
        self.size = size
        self._items: list[int] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def push(self, data: int) -> None:
        if self.is_full():
            raise StackOverflowError(f"stack overflow! can not push {data} in stack")
        self._items.append(data)

    def pop(self) -> int:
        if self.is_empty():
            raise StackUnderflowError("stack is empty nothing can be deleted")
        return self._items.pop()

    def peek(self, position: int) -> int:
        """Return the item at a position counted from the top, which is 1."""
        if not 1 <= position <= len(self._items):
            raise IndexError("invalid position!")
        return self._items[-position]

    def __iter__(self) -> Iterator[int]:
        """Items from bottom to top."""
        return iter(list(self._items))


@dataclass
class _Link:
    data: int
    next: Optional["_Link"]


class LinkedStack:
    """A stack built from linked nodes with no fixed limit."""

    def __init__(self) -> None:
        self._top: Optional[_Link] = None

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, data: int) -> None:
        self._top = _Link(data, self._top)

    def pop(self) -> int:
        if self._top is None:
            raise StackUnderflowError("Stack underflow!")
        data = self._top.data
        self._top = self._top.next
        return data

    def peek(self, position: int) -> int:
        """Return the item at a position counted from the top, which is 1."""
        if position >= 1:
            for index, value in enumerate(self, start=1):
                if index == position:
                    return value
        raise IndexError("invalid position!")

    def __iter__(self) -> Iterator[int]:
        """Items from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next