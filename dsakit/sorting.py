"""Classic comparison and counting sorts."""

from __future__ import annotations

from typing import Iterable, MutableSequence


def bubble_sort(a: Iterable[int]) -> list[int]:
    """Return a sorted copy, stopping early once a pass makes no swap."""
    items = list(a)
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(a: Iterable[int]) -> list[int]:
    """Return a sorted copy built by shifting each item back into place."""
    items = list(a)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return items


def count_sort(a: Iterable[int]) -> list[int]:
    """Return a sorted copy of non-negative integers by counting occurrences."""
    items = list(a)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("count sort needs non-negative values")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(a: Iterable[int]) -> list[int]:
    """Return a sorted copy by recursive halving and merging."""
    items = list(a)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition(a: MutableSequence[int], low: int, high: int) -> int:
    """Partition a[low..high] in place around a[low]; return the pivot's final index.

    Afterwards everything left of the pivot is no greater than it and
    everything right of it is greater.
    """
    pivot = a[low]
    i, j = low + 1, high
    while True:
        while i <= high and a[i] <= pivot:
            i += 1
        while a[j] > pivot:
            j -= 1
        if i < j:
            a[i], a[j] = a[j], a[i]
        else:
            break
    a[low], a[j] = a[j], a[low]
    return j


def quick_sort(a: Iterable[int]) -> list[int]:
    """Return a sorted copy using first-element pivot partitioning."""
    items = list(a)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items