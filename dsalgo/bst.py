"""Binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["DuplicateKeyError", "BinarySearchTree"]


class DuplicateKeyError(ValueError):
    """Raised when inserting a value that is already in the tree."""


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


def _delete(node: _Node | None, value: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if value < node.value:
        node.left, removed = _delete(node.left, value)
        return node, removed
    if value > node.value:
        node.right, removed = _delete(node.right, value)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.value = successor.value
    node.right, _ = _delete(node.right, successor.value)
    return node, True


class BinarySearchTree:
    """Unbalanced binary search tree; smaller values go left."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert value; raise DuplicateKeyError if it is already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size = 1
            return
        node = self._root
        while True:
            if value == node.value:
                raise DuplicateKeyError(f"{value!r} already exists")
            if value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
        self._size += 1

    def delete(self, value: Any) -> bool:
        """Remove value; return whether it was present.

        A node with two children takes the value of its in-order successor.
        """
        self._root, removed = _delete(self._root, value)
        if removed:
            self._size -= 1
        return removed

    def inorder(self) -> list[Any]:
        """Return the values in ascending order."""
        return list(self)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"