"""Small array problems: Roman numerals, duplicates and the majority element."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import combinations
from typing import Any

__all__ = ["roman_to_int", "find_duplicates", "majority_element"]

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def roman_to_int(text: str) -> int:
    """Convert a Roman numeral to an integer.

    A symbol smaller than the one after it is subtracted. Characters that are
    not Roman symbols count as zero.
    """
    values = [_ROMAN_VALUES.get(ch, 0) for ch in text]
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


def find_duplicates(items: Iterable[Any]) -> list[Any]:
    """Return the value of every pair of equal items, in pair order.

    A value appearing k times is reported once per pair, k*(k-1)/2 times.
    """
    return [a for a, b in combinations(list(items), 2) if a == b]


def majority_element(items: Iterable[Any]) -> Any | None:
    """Return the value occurring more than half the time, or None."""
    values = list(items)
    if not values:
        return None
    value, count = Counter(values).most_common(1)[0]
    return value if count > len(values) / 2 else None