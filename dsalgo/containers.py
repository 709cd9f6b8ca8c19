"""Fixed-capacity stack and queues backed by a preallocated array."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = [
    "CapacityError",
    "EmptyError",
    "BoundedStack",
    "LinearQueue",
    "CircularQueue",
]


class CapacityError(Exception):
    """Raised when adding to a container that is full (overflow)."""


class EmptyError(IndexError):
    """Raised when taking from a container that is empty (underflow)."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")
    return capacity


class BoundedStack:
    """Stack holding at most ``capacity`` values.

    Iteration runs from the top of the stack down to the bottom.
    """

    def __init__(self, capacity: int = 6) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put value on top; raise CapacityError if the stack is full."""
        if len(self._items) >= self.capacity:
            raise CapacityError("overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyError("underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyError("underflow")
        return self._items[-1]

    def index(self, value: Any) -> int:
        """Return the slot of the topmost occurrence of value, counted from the bottom."""
        if not self._items:
            raise EmptyError("stack is empty")
        for position, item in reversed(list(enumerate(self._items))):
            if item == value:
                return position
        raise ValueError(f"{value!r} not found")

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={self._items!r})"


class LinearQueue:
    """Array queue whose freed front slots are reused only once it empties.

    The queue reports itself full as soon as its last slot has been used,
    even if values have since been taken from the front.
    """

    def __init__(self, capacity: int = 3) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def _is_empty(self) -> bool:
        return self._rear == -1

    def enqueue(self, value: Any) -> None:
        """Append value at the rear; raise CapacityError if no slot is left."""
        if self._rear == self.capacity - 1:
            raise CapacityError("full")
        if self._is_empty():
            self._front = 0
        self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._is_empty():
            raise EmptyError("empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front += 1
        return value

    def peek(self) -> Any:
        """Return the most recently enqueued value, at the rear."""
        if self._is_empty():
            raise EmptyError("empty")
        return self._slots[self._rear]

    def index(self, value: Any) -> int:
        """Return the array slot holding the first occurrence of value."""
        if self._is_empty():
            raise EmptyError("queue is empty")
        window = self._slots[self._front : self._rear + 1]
        for slot, item in enumerate(window, start=self._front):
            if item == value:
                return slot
        raise ValueError(f"{value!r} not found")

    def __iter__(self) -> Iterator[Any]:
        if self._is_empty():
            return iter(())
        return iter(self._slots[self._front : self._rear + 1])

    def __len__(self) -> int:
        return 0 if self._is_empty() else self._rear - self._front + 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self)!r})"


class CircularQueue:
    """Ring-buffer queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 3) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def _is_empty(self) -> bool:
        return self._rear == -1

    def enqueue(self, value: Any) -> None:
        """Append value at the rear; raise CapacityError if the ring is full."""
        if (self._rear + 1) % self.capacity == self._front:
            raise CapacityError("overflow")
        if self._is_empty():
            self._front = self._rear = 0
        else:
            self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._is_empty():
            raise EmptyError("underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = (self._front + 1) % self.capacity
        return value

    def __iter__(self) -> Iterator[Any]:
        for offset in range(len(self)):
            yield self._slots[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        if self._is_empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self)!r})"