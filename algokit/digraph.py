"""Directed graphs: topological sorting and weighted edge lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from dataclasses import dataclass


class DirectedGraph:
    """Directed graph; an edge ``s -> t`` means *s* must come before *t*."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, s: Hashable, t: Hashable) -> None:
        """Add an edge from *s* to *t*."""
        self._adjacency.setdefault(s, []).append(t)
        self._adjacency.setdefault(t, [])

    def topological_sort(self) -> list[Hashable]:
        """Order the vertices with Kahn's algorithm.

        Vertices without predecessors are taken in the order they were
        first seen.
        """
        in_degree = {vertex: 0 for vertex in self._adjacency}
        for targets in self._adjacency.values():
            for target in targets:
                in_degree[target] += 1
        queue: deque[Hashable] = deque(v for v, degree in in_degree.items() if degree == 0)
        order: list[Hashable] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for target in self._adjacency[vertex]:
                in_degree[target] -= 1
                if in_degree[target] == 0:
                    queue.append(target)
        if len(order) != len(in_degree):
            raise ValueError("graph has a cycle")
        return order


@dataclass(frozen=True)
class Edge:
    """A weighted edge from *source* to *target*."""

    source: str
    target: str
    weight: int


class WeightedGraph:
    """Directed graph with positive integer edge weights."""

    def __init__(self) -> None:
        self._edges: dict[str, list[Edge]] = {}

    def add_edge(self, source: str, target: str, weight: int) -> None:
        """Add an edge; both ends must be named and the weight positive."""
        if not source or not target or weight <= 0:
            raise ValueError("source, target and weight must be given")
        self._edges.setdefault(source, []).append(Edge(source, target, weight))

    def edges(self, source: str) -> list[Edge]:
        """Edges leaving *source*, in the order they were added."""
        return list(self._edges.get(source, ()))