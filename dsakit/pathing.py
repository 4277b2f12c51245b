"""Shortest paths and topological ordering."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Sequence


def _check(v: int, vertex: int) -> None:
    if not 0 <= vertex < v:
        raise IndexError(f"vertex {vertex} out of range")


class WeightedGraph:
    """A graph on vertices 0..v-1 with weighted edges."""

    def __init__(self, v: int) -> None:
        if v < 0:
            raise ValueError("vertex count must not be negative")
        self.v = v
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(v)]

    def add_edge(self, u: int, v: int, wt: int, undir: bool = True) -> None:
        """Add an edge u -> v of weight wt, and v -> u when undirected."""
        _check(self.v, u)
        _check(self.v, v)
        self._adj[u].append((wt, v))
        if undir:
            self._adj[v].append((wt, u))

    def distances(self, src: int) -> list[float]:
        """Shortest distance from src to every vertex; math.inf if unreachable."""
        _check(self.v, src)
        dist: list[float] = [math.inf] * self.v
        dist[src] = 0
        frontier = [(0, src)]
        while frontier:
            so_far, node = heapq.heappop(frontier)
            if so_far > dist[node]:
                continue
            for weight, nbr in self._adj[node]:
                candidate = so_far + weight
                if candidate < dist[nbr]:
                    dist[nbr] = candidate
                    heapq.heappush(frontier, (candidate, nbr))
        return dist

    def dijkstra(self, src: int, dest: int) -> float:
        """Shortest distance from src to dest."""
        _check(self.v, dest)
        return self.distances(src)[dest]


class DirectedGraph:
    """A directed graph on vertices 0..v-1."""

    def __init__(self, v: int) -> None:
        if v < 0:
            raise ValueError("vertex count must not be negative")
        self.v = v
        self._adj: list[list[int]] = [[] for _ in range(v)]

    def add_edge(self, x: int, y: int) -> None:
        """Add the directed edge x -> y."""
        _check(self.v, x)
        _check(self.v, y)
        self._adj[x].append(y)

    def topological_sort(self) -> list[int]:
        """Kahn's order, seeded with sources in ascending order.

        Vertices on or behind a cycle are left out.
        """
        indegree = [0] * self.v
        for nbrs in self._adj:
            for nbr in nbrs:
                indegree[nbr] += 1
        pending = deque(i for i in range(self.v) if indegree[i] == 0)
        order = []
        while pending:
            node = pending.popleft()
            order.append(node)
            for nbr in self._adj[node]:
                indegree[nbr] -= 1
                if indegree[nbr] == 0:
                    pending.append(nbr)
        return order


def topo_sort(v: int, adj: Sequence[Sequence[int]]) -> list[int]:
    """Kahn's order for an adjacency list, seeded with sources in descending order.

    Returns an empty list when no vertex has zero in-degree; vertices on or
    behind a cycle are otherwise left out.
    """
    indegree = [0] * v
    for i in range(v):
        for nbr in adj[i]:
            indegree[nbr] += 1
    pending = deque(i for i in reversed(range(v)) if indegree[i] == 0)
    if not pending:
        return []
    visited = [False] * v
    order = []
    while pending:
        node = pending.popleft()
        visited[node] = True
        order.append(node)
        for nbr in adj[node]:
            indegree[nbr] -= 1
            if indegree[nbr] == 0 and not visited[nbr]:
                pending.append(nbr)
    return order