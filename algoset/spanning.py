"""Disjoint sets and minimum spanning trees by Kruskal's and Prim's methods."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

WeightedAdjacency = Sequence[Sequence[Sequence[int]]]


class DisjointSet:
    """Union-find over nodes 0..n with union by rank and path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of nodes must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)

    def find(self, node: int) -> int:
        """Return the representative of node's set."""
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            following = self._parent[node]
            self._parent[node] = root
            node = following
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of u and v; return False if they were already one set."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_u] > self._rank[root_v]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1
        return True


def kruskal(adj: WeightedAdjacency) -> int:
    """Return the total weight of a minimum spanning forest.

    adj[u] lists (v, weight) pairs of an undirected graph.
    """
    edges = sorted(
        (weight, u, v) for u, neighbours in enumerate(adj) for v, weight in neighbours
    )
    sets = DisjointSet(len(adj))
    total = 0
    for weight, u, v in edges:
        if sets.union(u, v):
            total += weight
    return total


def prim(adj: WeightedAdjacency) -> int:
    """Return the weight of a minimum spanning tree of node 0's component.

    adj[u] lists (v, weight) pairs of an undirected graph.
    """
    if not adj:
        return 0
    visited = [False] * len(adj)
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, edge_weight in adj[node]:
            if not visited[neighbour]:
                heapq.heappush(heap, (edge_weight, neighbour))
    return total