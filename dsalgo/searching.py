"""Searching in sequences, and finding the missing number in 0..n."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["linear_search", "binary_search", "interpolation_search", "missing_number"]


def linear_search(items: Iterable[Any], key: Any) -> int | None:
    """Return the index of the first item equal to key, or None."""
    return next((i for i, item in enumerate(items) if item == key), None)


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of key in the ascending sequence items, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == key:
            return mid
        if items[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return None


def interpolation_search(items: Sequence[int], key: int) -> int | None:
    """Return an index of key in the ascending numeric sequence items, or None.

    The probe position is interpolated from the values at both ends of the
    current range.
    """
    low, high = 0, len(items) - 1
    while low <= high and items[low] <= key <= items[high]:
        if items[high] == items[low]:
            pos = low
        else:
            pos = low + int((key - items[low]) * (high - low) // (items[high] - items[low]))
        if items[pos] == key:
            return pos
        if items[pos] > key:
            high = pos - 1
        else:
            low = pos + 1
    return None


def missing_number(items: Iterable[int]) -> int:
    """Return the one number of 0..n absent from n distinct values.

    Raises ValueError if the values are not distinct or lie outside 0..n.
    """
    values = list(items)
    n = len(values)
    if any(not 0 <= v <= n for v in values):
        raise ValueError(f"values must lie in the range 0..{n}")
    if len(set(values)) != n:
        raise ValueError("values must be distinct")
    i = 0
    while i < n:
        correct = values[i]
        if correct < n and values[i] != values[correct]:
            values[i], values[correct] = values[correct], values[i]
        else:
            i += 1
    return next((i for i, v in enumerate(values) if v != i), n)