"""Graphs stored as an adjacency matrix or as adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

__all__ = ["AdjacencyMatrix", "AdjacencyList"]


def _check_size(size: int) -> int:
    if size < 0:
        raise ValueError(f"number of vertices must not be negative, got {size}")
    return size


class AdjacencyMatrix:
    """Graph on vertices 0..size-1 kept as a square 0/1 matrix.

    Referring to a vertex outside 0..size-1 raises ValueError.
    """

    def __init__(self, size: int) -> None:
        self.size = _check_size(size)
        self._cells = [[0] * size for _ in range(size)]

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < self.size:
                raise ValueError(f"wrong vertex {vertex}")

    def add_edge(self, source: int, destination: int) -> None:
        """Add the directed edge source -> destination."""
        self._check(source, destination)
        self._cells[source][destination] = 1

    def add_undirected_edge(self, source: int, destination: int) -> None:
        """Add edges in both directions between source and destination."""
        self._check(source, destination)
        self._cells[source][destination] = 1
        self._cells[destination][source] = 1

    def remove_edge(self, source: int, destination: int) -> None:
        """Remove the directed edge source -> destination, if present."""
        self._check(source, destination)
        self._cells[source][destination] = 0

    def remove_undirected_edge(self, source: int, destination: int) -> None:
        """Remove the edges in both directions between source and destination."""
        self._check(source, destination)
        self._cells[source][destination] = 0
        self._cells[destination][source] = 0

    def has_edge(self, source: int, destination: int) -> bool:
        """Return whether the directed edge source -> destination exists."""
        self._check(source, destination)
        return self._cells[source][destination] == 1

    def rows(self) -> list[list[int]]:
        """Return a copy of the matrix as a list of rows."""
        return [list(row) for row in self._cells]

    def _successors(self, vertex: int) -> Iterator[int]:
        return (i for i, cell in enumerate(self._cells[vertex]) if cell)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from start in breadth-first order."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._successors(vertex):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from start in depth-first order.

        Vertices are marked when pushed; neighbours are pushed in ascending
        order, so the highest-numbered one is explored first.
        """
        self._check(start)
        visited = {start}
        stack = [start]
        order: list[int] = []
        while stack:
            vertex = stack.pop()
            order.append(vertex)
            for neighbour in self._successors(vertex):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return order

    def __str__(self) -> str:
        return "".join("".join(f"{cell} " for cell in row) + "\n" for row in self._cells)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"


class AdjacencyList:
    """Undirected graph on vertices 0..size-1 kept as neighbour lists.

    A new neighbour goes to the front of its list.
    """

    def __init__(self, size: int) -> None:
        self.size = _check_size(size)
        self._lists: list[deque[int]] = [deque() for _ in range(size)]

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < self.size:
                raise ValueError(f"wrong vertex {vertex}")

    def add_edge(self, source: int, destination: int) -> None:
        """Add an undirected edge between source and destination."""
        self._check(source, destination)
        self._lists[source].appendleft(destination)
        self._lists[destination].appendleft(source)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of vertex, most recently added first."""
        self._check(vertex)
        return list(self._lists[vertex])

    def __str__(self) -> str:
        return "".join(
            f"{vertex}--->" + "".join(f"{n}->" for n in neighbours) + "NULL\n"
            for vertex, neighbours in enumerate(self._lists)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"