"""A fixed-capacity array and simple array algorithms."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence


class FixedArray:
    """An array of ``total_size`` slots of which the first ``used_size`` are in use."""

    def __init__(self, total_size: int, used_size: int) -> None:
        if total_size < 0:
            raise ValueError("total size must not be negative")
        if not 0 <= used_size <= total_size:
            raise ValueError("used size must lie between 0 and the total size")
        self.total_size = total_size
        self.used_size = used_size
        self._slots = [0] * total_size

    def set_values(self, values: Iterable[int]) -> None:
        """Fill the used slots with exactly ``used_size`` values."""
        items = list(values)
        if len(items) != self.used_size:
            raise ValueError(
                f"expected {self.used_size} values, got {len(items)}"
            )
        self._slots[: self.used_size] = items

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots[: self.used_size])


def insert_at_index(
    arr: Sequence[int], element: int, capacity: int, index: int
) -> list[int]:
    """Return arr with element placed at index, if the capacity allows it."""
    if len(arr) >= capacity:
        raise ValueError("array is full")
    if not 0 <= index <= len(arr):
        raise IndexError(f"index {index} out of range")
    return [*arr[:index], element, *arr[index:]]


def linear_search(arr: Sequence[int], element: int) -> int:
    """Index of the first occurrence of element, or -1."""
    for position, value in enumerate(arr):
        if value == element:
            return position
    return -1


def binary_search(arr: Sequence[int], element: int) -> int:
    """Index of element in the ascending sequence arr, or -1."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == element:
            return mid
        if arr[mid] < element:
            low = mid + 1
        else:
            high = mid - 1
    return -1