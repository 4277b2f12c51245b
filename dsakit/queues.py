"""Array, circular and linked queues."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


class QueueOverflowError(IndexError):
    """Raised when enqueueing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing from an empty queue."""


class ArrayQueue:
    """A queue over a fixed array whose slots are not reused.

    At most ``size`` values can ever be enqueued; dequeued slots stay spent.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("queue size must not be negative")
        self.size = size
        self._items: list[int] = []
        self._front = 0

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueOverflowError("queue overflow")
        self._items.append(value)

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("the queue is empty")
        value = self._items[self._front]
        self._front += 1
        return value


class CircularQueue:
    """A ring buffer queue of ``size`` slots, holding at most ``size - 1`` values."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("circular queue size must be at least 1")
        self.size = size
        self._slots: list[Optional[int]] = [None] * size
        self._front = 0
        self._rear = 0

    def is_empty(self) -> bool:
        return self._rear == self._front

    def is_full(self) -> bool:
        return (self._rear + 1) % self.size == self._front

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueOverflowError("Circular queue overflow")
        self._rear = (self._rear + 1) % self.size
        self._slots[self._rear] = value

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("the Circular queue is empty")
        self._front = (self._front + 1) % self.size
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value


@dataclass
class _Link:
    data: int
    next: Optional["_Link"] = None


class LinkedQueue:
    """An unbounded queue of linked nodes with front and rear pointers."""

    def __init__(self) -> None:
        self._front: Optional[_Link] = None
        self._rear: Optional[_Link] = None

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: int) -> None:
        node = _Link(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node

    def dequeue(self) -> int:
        if self._front is None:
            raise QueueEmptyError("Queue is already empty")
        value = self._front.data
        self._front = self._front.next
        if self._front is None:
            self._rear = None
        return value

    def __iter__(self) -> Iterator[int]:
        """Values from front to rear."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.next