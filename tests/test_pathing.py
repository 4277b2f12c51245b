import math

import pytest

from dsakit.pathing import DirectedGraph, WeightedGraph, topo_sort

WEIGHTED = [(0, 1, 1), (1, 2, 2), (0, 2, 4), (0, 3, 7), (3, 2, 2), (3, 4, 3)]
TOPO_EDGES = [(0, 2), (2, 3), (3, 5), (4, 5), (1, 4), (1, 2)]


def _weighted():
    g = WeightedGraph(5)
    for u, v, w in WEIGHTED:
        g.add_edge(u, v, w)
    return g


def test_dijkstra_example():
    assert _weighted().dijkstra(0, 4) == 8


def test_distances_satisfy_edges():
    g = _weighted()
    dist = g.distances(0)
    assert dist[0] == 0
    for u, v, w in WEIGHTED:
        assert dist[v] <= dist[u] + w
        assert dist[u] <= dist[v] + w


def test_dijkstra_symmetric_when_undirected():
    g = _weighted()
    for a in range(5):
        for b in range(5):
            assert g.dijkstra(a, b) == g.dijkstra(b, a)


def test_directed_edges_and_unreachable():
    g = WeightedGraph(3)
    g.add_edge(0, 1, 5, undir=False)
    assert g.dijkstra(0, 1) == 5
    assert g.dijkstra(1, 0) == math.inf
    assert g.distances(0)[2] == math.inf


def test_weighted_bad_vertex():
    g = WeightedGraph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2, 1)
    with pytest.raises(IndexError):
        g.dijkstra(0, 5)


def test_topological_sort_respects_edges():
    g = DirectedGraph(6)
    for x, y in TOPO_EDGES:
        g.add_edge(x, y)
    order = g.topological_sort()
    assert sorted(order) == list(range(6))
    position = {node: k for k, node in enumerate(order)}
    for x, y in TOPO_EDGES:
        assert position[x] < position[y]


def test_topological_sort_example_order():
    g = DirectedGraph(6)
    for x, y in TOPO_EDGES:
        g.add_edge(x, y)
    assert g.topological_sort() == [0, 1, 4, 2, 3, 5]


def test_topological_sort_leaves_out_cycle():
    g = DirectedGraph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 0)
    order = g.topological_sort()
    assert 0 not in order and 1 not in order
    assert 2 in order


def test_topo_sort_example():
    assert topo_sort(4, [[], [0], [0], [0]]) == [3, 2, 1, 0]


def test_topo_sort_respects_edges():
    adj = [[] for _ in range(6)]
    for x, y in TOPO_EDGES:
        adj[x].append(y)
    order = topo_sort(6, adj)
    assert sorted(order) == list(range(6))
    position = {node: k for k, node in enumerate(order)}
    for x, y in TOPO_EDGES:
        assert position[x] < position[y]


def test_topo_sort_all_in_cycle():
    assert topo_sort(2, [[1], [0]]) == []