"""Self-balancing AVL tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from dsalgo.bst import DuplicateKeyError

__all__ = ["AVLTree", "DuplicateKeyError"]


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 0


def _height(node: _Node | None) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(z: _Node) -> _Node:
    y = z.left
    z.left = y.right
    y.right = z
    _update(z)
    _update(y)
    return y


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: _Node | None, value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if value > node.value:
        node.right = _insert(node.right, value)
    elif value < node.value:
        node.left = _insert(node.left, value)
    else:
        raise DuplicateKeyError(f"{value!r} already exists")

    _update(node)
    factor = _balance(node)
    if factor > 1 and value < node.left.value:
        return _rotate_right(node)
    if factor < -1 and value > node.right.value:
        return _rotate_left(node)
    if factor > 1:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance(node)
    if factor > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: _Node | None, value: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if value > node.value:
        node.right, removed = _delete(node.right, value)
    elif value < node.value:
        node.left, removed = _delete(node.left, value)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right, _ = _delete(node.right, successor.value)
        removed = True
    return _rebalance(node), removed


class AVLTree:
    """Binary search tree kept height-balanced by rotations.

    The height of an empty tree is -1 and that of a single node is 0.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert value; raise DuplicateKeyError if it is already present."""
        self._root = _insert(self._root, value)
        self._size += 1

    def delete(self, value: Any) -> bool:
        """Remove value; return whether it was present.

        A node with two children takes the value of its in-order successor.
        """
        self._root, removed = _delete(self._root, value)
        if removed:
            self._size -= 1
        return removed

    def preorder(self) -> list[Any]:
        """Return the values in root, left, right order."""
        order: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return order

    def inorder(self) -> list[Any]:
        """Return the values in ascending order."""
        return list(self._iter_inorder())

    def _iter_inorder(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def height(self) -> int:
        """Return the height of the tree, -1 when empty."""
        return _height(self._root)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"