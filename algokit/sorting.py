"""Searching and sorting: binary search, merge sort and lexicographic ordering."""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def binary_search(items: Sequence[T], target: T) -> int | None:
    """Index of ``target`` in the ascending sequence ``items``, or ``None`` if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] < target:
            low = mid + 1
        elif target < items[mid]:
            high = mid - 1
        else:
            return mid
    return None


def contains(items: Sequence[T], target: T) -> bool:
    """Whether ``target`` occurs in the ascending sequence ``items``, by recursive halving."""

    def search(low: int, high: int) -> bool:
        if low > high:
            return False
        mid = low + (high - low) // 2
        if items[mid] == target:
            return True
        if target < items[mid]:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)


def merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """Merge two ascending sequences into one ascending list."""
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return a new ascending list of ``items`` by top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) - 1) // 2 + 1
    return merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def lexicographic_sort(lines: Iterable[str]) -> list[str]:
    """Return the lines in lexicographic order."""
    return sorted(lines)