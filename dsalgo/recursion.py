"""Factorial, Fibonacci numbers, greatest common divisor and Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

__all__ = ["factorial", "fibonacci", "fibonacci_series", "gcd", "hanoi_moves"]

Peg = TypeVar("Peg")


def factorial(n: int) -> int:
    """Return n!; raise ValueError for negative n."""
    if n < 0:
        raise ValueError(f"factorial is undefined for {n}")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci term, counting from 1: 0, 1, 1, 2, ..."""
    if n < 1:
        raise ValueError(f"term number must be at least 1, got {n}")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return previous


def fibonacci_series(count: int) -> list[int]:
    """Return the first count Fibonacci terms; empty when count is not positive."""
    terms: list[int] = []
    previous, current = 0, 1
    for _ in range(count):
        terms.append(previous)
        previous, current = current, previous + current
    return terms


def _c_remainder(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return remainder if a >= 0 else -remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm.

    The remainder takes the sign of the dividend, so the sign of the result
    follows the inputs rather than always being positive.
    """
    while True:
        if b == 0:
            return a
        if a == 0:
            return b
        a, b = b, _c_remainder(a, b)


def _moves(n: int, source: Peg, auxiliary: Peg, destination: Peg) -> Iterator[tuple[Peg, Peg]]:
    if n == 1:
        yield source, destination
        return
    yield from _moves(n - 1, source, destination, auxiliary)
    yield source, destination
    yield from _moves(n - 1, auxiliary, source, destination)


def hanoi_moves(
    n: int,
    source: Peg = "a",
    auxiliary: Peg = "b",
    destination: Peg = "c",
) -> Iterator[tuple[Peg, Peg]]:
    """Yield the (from, to) moves that carry n discs from source to destination.

    Raises ValueError at once if n is not positive.
    """
    if n <= 0:
        raise ValueError("wrong input: number of discs must be positive")
    return _moves(n, source, auxiliary, destination)