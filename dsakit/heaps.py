"""Array-backed max-heap and min-heap."""

from __future__ import annotations

from typing import Iterable, Optional


class MaxHeap:
    """A binary max-heap whose capacity doubles when it fills up."""

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("heap capacity must be at least 1")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def parent(self, i: int) -> Optional[int]:
        """Index of the parent of slot i, or None for the root or a bad index."""
        if i <= 0 or i >= len(self._items):
            return None
        return (i - 1) // 2

    def left_child(self, i: int) -> Optional[int]:
        """Index of the left child of slot i, or None if it has none."""
        left = 2 * i + 1
        return left if left < len(self._items) else None

    def right_child(self, i: int) -> Optional[int]:
        """Index of the right child of slot i, or None if it has none."""
        right = 2 * i + 2
        return right if right < len(self._items) else None

    def get_max(self) -> int:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("get_max from empty heap")
        return self._items[0]

    def _percolate_down(self, i: int) -> None:
        items = self._items
        while True:
            largest = i
            for child in (self.left_child(i), self.right_child(i)):
                if child is not None and items[child] > items[largest]:
                    largest = child
            if largest == i:
                return
            items[i], items[largest] = items[largest], items[i]
            i = largest

    def delete_max(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("delete_max from empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._percolate_down(0)
        return top

    def _grow_to(self, n: int) -> None:
        while n > self.capacity:
            self.capacity *= 2

    def build(self, values: Iterable[int]) -> None:
        """Replace the contents with values and restore the heap order."""
        items = list(values)
        self._grow_to(len(items))
        self._items = items
        for i in range((len(items) - 1) // 2, -1, -1):
            self._percolate_down(i)

    def insert(self, data: int) -> None:
        """Add a value, sifting it up past smaller parents."""
        if len(self._items) == self.capacity:
            self.capacity *= 2
        items = self._items
        items.append(data)
        i = len(items) - 1
        while i > 0 and data > items[(i - 1) // 2]:
            items[i] = items[(i - 1) // 2]
            i = (i - 1) // 2
        items[i] = data


class MinHeap:
    """A binary min-heap."""

    def __init__(self, default_size: int = 10) -> None:
        if default_size < 0:
            raise ValueError("default size must not be negative")
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, data: int) -> None:
        """Add a value, sifting it up past larger parents."""
        items = self._items
        items.append(data)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[index] >= items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def top(self) -> int:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("top of empty heap")
        return self._items[0]

    def _heapify(self, i: int) -> None:
        items = self._items
        n = len(items)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and items[child] < items[smallest]:
                    smallest = child
            if smallest == i:
                return
            items[i], items[smallest] = items[smallest], items[i]
            i = smallest

    def pop(self) -> int:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("pop from empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        smallest = items.pop()
        self._heapify(0)
        return smallest


def ascending(values: Iterable[int]) -> list[int]:
    """Values in ascending order, as drawn one by one from a min-heap."""
    heap = MinHeap()
    for value in values:
        heap.push(value)
    result = []
    while len(heap):
        result.append(heap.pop())
    return result