"""Undirected, unweighted graph with breadth- and depth-first searches."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator


class Graph:
    """Undirected graph stored as adjacency lists in insertion order."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, s: Hashable, t: Hashable) -> None:
        """Connect *s* and *t* in both directions."""
        self._adjacency.setdefault(s, []).append(t)
        self._adjacency.setdefault(t, []).append(s)

    def _neighbours(self, vertex: Hashable) -> list[Hashable]:
        return self._adjacency.get(vertex, [])

    @staticmethod
    def _trace(parents: dict[Hashable, Hashable | None], target: Hashable) -> list[Hashable]:
        path: list[Hashable] = []
        vertex: Hashable | None = target
        while vertex is not None:
            path.append(vertex)
            vertex = parents[vertex]
        path.reverse()
        return path

    def bfs_order(self, start: Hashable) -> list[Hashable]:
        """Vertices reachable from *start* in breadth-first order."""
        seen = {start}
        order: list[Hashable] = []
        queue: deque[Hashable] = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._neighbours(vertex):
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
        return order

    def bfs_path(self, start: Hashable, target: Hashable) -> list[Hashable] | None:
        """Shortest path from *start* to *target*, or None if unreachable."""
        if start == target:
            return [start]
        parents: dict[Hashable, Hashable | None] = {start: None}
        queue: deque[Hashable] = deque([start])
        while queue:
            vertex = queue.popleft()
            for neighbour in self._neighbours(vertex):
                if neighbour in parents:
                    continue
                parents[neighbour] = vertex
                if neighbour == target:
                    return self._trace(parents, target)
                queue.append(neighbour)
        return None

    def dfs_path(self, start: Hashable, target: Hashable) -> list[Hashable] | None:
        """The first path depth-first search finds, or None if unreachable."""
        if start == target:
            return [start]
        parents: dict[Hashable, Hashable | None] = {start: None}
        stack: list[tuple[Hashable, Iterator[Hashable]]] = [
            (start, iter(self._neighbours(start)))
        ]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour in parents:
                    continue
                parents[neighbour] = vertex
                if neighbour == target:
                    return self._trace(parents, target)
                stack.append((neighbour, iter(self._neighbours(neighbour))))
                break
            else:
                stack.pop()
        return None