"""Classic comparison sorts and cyclic sort.

Every function takes any iterable and returns a new sorted list; the input
is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "cyclic_sort",
]


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops early once a pass makes no swap."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Repeatedly move the smallest remaining item to the sorted prefix."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Grow a sorted prefix by shifting larger items right."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
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


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    """Partition around the first element; return the pivot's final index."""
    pivot = values[low]
    start, end = low, high
    while end > start:
        while start <= high and values[start] <= pivot:
            start += 1
        while values[end] > pivot:
            end -= 1
        if end > start:
            values[start], values[end] = values[end], values[start]
    values[end], values[low] = values[low], values[end]
    return end


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quick sort using the first element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if high > low:
            mid = _partition(result, low, high)
            pending.append((low, mid - 1))
            pending.append((mid + 1, high))
    return result


def cyclic_sort(items: Iterable[int]) -> list[int]:
    """Sort values drawn from 1..n by placing each value v at index v - 1.

    Raises ValueError if a value lies outside 1..n, where n is the length.
    """
    result = list(items)
    n = len(result)
    for value in result:
        if not 1 <= value <= n:
            raise ValueError(f"value {value!r} outside the range 1..{n}")
    i = 0
    while i < n:
        correct = result[i] - 1
        if result[i] != result[correct]:
            result[i], result[correct] = result[correct], result[i]
        else:
            i += 1
    return result