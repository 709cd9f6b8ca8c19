"""General binary tree built node by node or from a preorder description."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["NO_NODE", "TreeNode", "BinaryTree"]

NO_NODE = -1
"""Marker meaning "no node here" in a preorder description."""


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _height(node: TreeNode | None) -> int:
    if node is None:
        return -1
    return max(_height(node.left), _height(node.right)) + 1


def _preorder(node: TreeNode | None) -> Iterator[TreeNode]:
    if node is None:
        return
    yield node
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.value


def _is_marker(value: Any) -> bool:
    return value is None or value == NO_NODE


class BinaryTree:
    """Binary tree with no ordering between values.

    The height of an empty tree is -1 and that of a single node is 0.
    """

    def __init__(self, root_value: Any = None) -> None:
        self.root: TreeNode | None = None if root_value is None else TreeNode(root_value)

    @classmethod
    def from_preorder(cls, values: Iterable[Any]) -> BinaryTree:
        """Build a tree from values listed in preorder, NO_NODE marking an absent child.

        Raises ValueError if the values end before the tree is complete.
        """
        stream = iter(values)

        def build() -> TreeNode | None:
            try:
                value = next(stream)
            except StopIteration:
                raise ValueError("preorder description ends too early") from None
            if _is_marker(value):
                return None
            node = TreeNode(value)
            node.left = build()
            node.right = build()
            return node

        tree = cls()
        tree.root = build()
        return tree

    def find(self, value: Any) -> TreeNode | None:
        """Return the first node holding value in preorder, or None."""
        return next((node for node in _preorder(self.root) if node.value == value), None)

    def _require(self, value: Any) -> TreeNode:
        node = self.find(value)
        if node is None:
            raise ValueError(f"node {value!r} not found")
        return node

    def insert_left(self, parent: Any, value: Any) -> None:
        """Make a new node holding value the left child of parent, replacing any subtree."""
        self._require(parent).left = TreeNode(value)

    def insert_right(self, parent: Any, value: Any) -> None:
        """Make a new node holding value the right child of parent, replacing any subtree."""
        self._require(parent).right = TreeNode(value)

    def inorder(self) -> list[Any]:
        """Return the values in left, root, right order."""
        return list(_inorder(self.root))

    def preorder(self) -> list[Any]:
        """Return the values in root, left, right order."""
        return [node.value for node in _preorder(self.root)]

    def postorder(self) -> list[Any]:
        """Return the values in left, right, root order."""
        return list(_postorder(self.root))

    def level(self, depth: int) -> list[Any]:
        """Return the values at the given depth, from left to right."""
        if depth < 0 or self.root is None:
            return []
        nodes = [self.root]
        for _ in range(depth):
            nodes = [child for node in nodes for child in (node.left, node.right) if child]
        return [node.value for node in nodes]

    def height(self) -> int:
        """Return the height of the tree, -1 when empty."""
        return _height(self.root)

    def node_height(self, value: Any) -> int:
        """Return the height of the subtree rooted at the node holding value."""
        return _height(self._require(value))

    def diameter(self, value: Any) -> int:
        """Return the number of edges on the longest path through the node holding value."""
        node = self._require(value)
        return _height(node.left) + _height(node.right) + 2

    def maximum(self) -> Any:
        """Return the largest value; raise ValueError when empty."""
        if self.root is None:
            raise ValueError("empty tree")
        return max(self.preorder())

    def minimum(self) -> Any:
        """Return the smallest value; raise ValueError when empty."""
        if self.root is None:
            raise ValueError("empty tree")
        return min(self.preorder())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(preorder={self.preorder()!r})"