"""Adjacency-matrix and adjacency-list graphs with BFS and DFS."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Hashable, Iterable, Iterator, Sequence


def _check_start(n: int, start: int) -> None:
    if not 0 <= start < n:
        raise IndexError(f"vertex {start} out of range")


def matrix_bfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first visiting order over a 0/1 adjacency matrix."""
    n = len(matrix)
    _check_start(n, start)
    visited = [False] * n
    visited[start] = True
    order = [start]
    pending = deque([start])
    while pending:
        node = pending.popleft()
        for j, edge in enumerate(matrix[node]):
            if edge == 1 and not visited[j]:
                visited[j] = True
                order.append(j)
                pending.append(j)
    return order


def _depth_first(
    start: int, n: int, neighbours
) -> list[int]:
    visited = [False] * n
    visited[start] = True
    order = [start]
    stack: list[Iterator[int]] = [iter(neighbours(start))]
    while stack:
        for nbr in stack[-1]:
            if not visited[nbr]:
                visited[nbr] = True
                order.append(nbr)
                stack.append(iter(neighbours(nbr)))
                break
        else:
            stack.pop()
    return order


def matrix_dfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first visiting order over a 0/1 adjacency matrix."""
    n = len(matrix)
    _check_start(n, start)
    return _depth_first(
        start,
        n,
        lambda node: (j for j, edge in enumerate(matrix[node]) if edge == 1),
    )


class Graph:
    """A graph on vertices 0..v-1 stored as adjacency lists."""

    def __init__(self, v: int) -> None:
        if v < 0:
            raise ValueError("vertex count must not be negative")
        self.v = v
        self._adj: list[list[int]] = [[] for _ in range(v)]

    def _check(self, vertex: int) -> None:
        _check_start(self.v, vertex)

    def add_edge(self, i: int, j: int, undir: bool = True) -> None:
        """Add an edge i -> j, and j -> i as well when undirected."""
        self._check(i)
        self._check(j)
        self._adj[i].append(j)
        if undir:
            self._adj[j].append(i)

    def adjacency_lines(self) -> list[str]:
        """One line per vertex: ``i-->a,b,``."""
        return [
            f"{i}-->" + "".join(f"{nbr}," for nbr in nbrs)
            for i, nbrs in enumerate(self._adj)
        ]

    def bfs(self, source: int) -> list[int]:
        """Breadth-first visiting order from source."""
        self._check(source)
        visited = [False] * self.v
        visited[source] = True
        order = []
        pending = deque([source])
        while pending:
            node = pending.popleft()
            order.append(node)
            for nbr in self._adj[node]:
                if not visited[nbr]:
                    visited[nbr] = True
                    pending.append(nbr)
        return order

    def dfs(self, source: int) -> list[int]:
        """Depth-first visiting order from source."""
        self._check(source)
        return _depth_first(source, self.v, lambda node: self._adj[node])


class CityGraph:
    """A graph of named places fixed at construction."""

    def __init__(self, cities: Iterable[str]) -> None:
        self._adj: dict[str, list[str]] = {city: [] for city in cities}

    def _check(self, city: str) -> None:
        if city not in self._adj:
            raise KeyError(city)

    def add_edge(self, x: str, y: str, undir: bool = False) -> None:
        """Add an edge x -> y, and y -> x as well when undirected."""
        self._check(x)
        self._check(y)
        self._adj[x].append(y)
        if undir:
            self._adj[y].append(x)

    def adjacency_lines(self) -> list[str]:
        """One line per city: ``city-->a,b,``."""
        return [
            f"{city}-->" + "".join(f"{nbr}," for nbr in nbrs)
            for city, nbrs in self._adj.items()
        ]


class KeyedGraph:
    """A graph whose vertices appear as edges are added."""

    def __init__(self) -> None:
        self._adj: defaultdict[Hashable, list] = defaultdict(list)

    def add_edge(self, u: Hashable, v: Hashable, direction: bool = False) -> None:
        """Add u -> v; a false direction makes the edge undirected."""
        self._adj[u].append(v)
        if not direction:
            self._adj[v].append(u)

    def adjacency_lines(self) -> list[str]:
        """One line per vertex: ``u->a,b,``."""
        return [
            f"{u}->" + "".join(f"{nbr}," for nbr in nbrs)
            for u, nbrs in self._adj.items()
        ]