"""Shortest paths: Bellman-Ford, Dijkstra, Floyd-Warshall, DAG and unit-weight graphs."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

BELLMAN_FORD_UNREACHED = 10**8
"""Distance reported by bellman_ford() for nodes the source cannot reach."""

DIJKSTRA_UNREACHED = 10**9
"""Distance reported by the Dijkstra functions for nodes the source cannot reach."""

NO_PATH = -1
"""Marker for "no edge" or "no path" in matrices and distance lists."""

_FLOYD_UNREACHED = 10**9

WeightedAdjacency = Sequence[Sequence[Sequence[int]]]


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def _check_node(node: int, n: int, what: str = "source") -> None:
    if not 0 <= node < n:
        raise ValueError(f"{what} {node} is not a node of a graph with {n} nodes")


def bellman_ford(n: int, edges: Iterable[Sequence[int]], source: int) -> list[int]:
    """Return distances from source over directed (u, v, weight) edges.

    Unreached nodes get BELLMAN_FORD_UNREACHED. A negative cycle reachable
    from the source raises NegativeCycleError.
    """
    _check_node(source, n)
    edge_list = [tuple(edge) for edge in edges]
    dist = [BELLMAN_FORD_UNREACHED] * n
    dist[source] = 0
    for _ in range(n - 1):
        for u, v, weight in edge_list:
            if dist[u] != BELLMAN_FORD_UNREACHED and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    for u, v, weight in edge_list:
        if dist[u] != BELLMAN_FORD_UNREACHED and dist[u] + weight < dist[v]:
            raise NegativeCycleError("the graph has a negative-weight cycle")
    return dist


def dijkstra_heap(adj: WeightedAdjacency, source: int) -> list[int]:
    """Return distances from source using a binary heap.

    adj[u] lists (v, weight) pairs. Unreached nodes get DIJKSTRA_UNREACHED.
    """
    _check_node(source, len(adj))
    dist = [DIJKSTRA_UNREACHED] * len(adj)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        for neighbour, weight in adj[node]:
            if distance + weight < dist[neighbour]:
                dist[neighbour] = distance + weight
                heapq.heappush(heap, (dist[neighbour], neighbour))
    return dist


def dijkstra_sorted(adj: WeightedAdjacency, source: int) -> list[int]:
    """Return distances from source, keeping one pending entry per node.

    Stale entries are removed when a node's distance improves. adj[u] lists
    (v, weight) pairs; unreached nodes get DIJKSTRA_UNREACHED.
    """
    _check_node(source, len(adj))
    dist = [DIJKSTRA_UNREACHED] * len(adj)
    dist[source] = 0
    pending = {(0, source)}
    while pending:
        entry = min(pending)
        pending.remove(entry)
        distance, node = entry
        for neighbour, weight in adj[node]:
            if distance + weight < dist[neighbour]:
                if dist[neighbour] != DIJKSTRA_UNREACHED:
                    pending.discard((dist[neighbour], neighbour))
                dist[neighbour] = distance + weight
                pending.add((dist[neighbour], neighbour))
    return dist


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return all-pairs shortest distances for a square cost matrix.

    NO_PATH (-1) marks a missing edge on input and an unreachable pair on
    output. Diagonal entries are kept as given, not forced to zero.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the matrix must be square")
    dist = [[_FLOYD_UNREACHED if cost == NO_PATH else cost for cost in row] for row in matrix]
    for k, via in enumerate(dist):
        for row in dist:
            for j, cost in enumerate(via):
                row[j] = min(row[j], row[k] + cost)
    return [[NO_PATH if cost == _FLOYD_UNREACHED else cost for cost in row] for row in dist]


def shortest_path_weighted(n: int, edges: Iterable[Sequence[int]]) -> tuple[int, list[int]] | None:
    """Return the distance and route from node 1 to node n, or None if unreachable.

    Nodes are numbered 1..n and (u, v, weight) edges are undirected.
    """
    if n < 1:
        raise ValueError("the graph needs at least one node")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, weight in edges:
        _check_node(u, n + 1, "edge end")
        _check_node(v, n + 1, "edge end")
        adj[u].append((v, weight))
        adj[v].append((u, weight))
    dist = [DIJKSTRA_UNREACHED] * (n + 1)
    parent = list(range(n + 1))
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        distance, node = heapq.heappop(heap)
        for neighbour, weight in adj[node]:
            if distance + weight < dist[neighbour]:
                dist[neighbour] = distance + weight
                heapq.heappush(heap, (dist[neighbour], neighbour))
                parent[neighbour] = node
    if dist[n] == DIJKSTRA_UNREACHED:
        return None
    route: list[int] = []
    node = n
    while parent[node] != node:
        route.append(node)
        node = parent[node]
    route.append(1)
    route.reverse()
    return dist[n], route


def _finishing_order(adj: Sequence[Sequence[tuple[int, int]]]) -> list[int]:
    visited: set[int] = set()
    finished: list[int] = []
    for start in range(len(adj)):
        if start in visited:
            continue
        visited.add(start)
        stack: list[tuple[int, Iterator[tuple[int, int]]]] = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour, _ in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                finished.append(node)
                stack.pop()
    return finished


def shortest_path_dag(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return distances from node 0 in a directed acyclic graph.

    Edges are (u, v, weight); weights may be negative. Unreached nodes get
    NO_PATH.
    """
    if n < 1:
        raise ValueError("the graph needs at least one node")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        _check_node(u, n, "edge end")
        _check_node(v, n, "edge end")
        adj[u].append((v, weight))
    dist = [_FLOYD_UNREACHED] * n
    dist[0] = 0
    for node in reversed(_finishing_order(adj)):
        if dist[node] == _FLOYD_UNREACHED:
            continue
        for neighbour, weight in adj[node]:
            if dist[node] + weight < dist[neighbour]:
                dist[neighbour] = dist[node] + weight
    return [NO_PATH if distance == _FLOYD_UNREACHED else distance for distance in dist]


def shortest_path_unit(n: int, edges: Iterable[Sequence[int]], source: int) -> list[int]:
    """Return edge counts from source in an undirected graph; NO_PATH if unreached."""
    _check_node(source, n)
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_node(u, n, "edge end")
        _check_node(v, n, "edge end")
        adj[u].append(v)
        adj[v].append(u)
    dist: list[int | None] = [None] * n
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        step = dist[node] + 1  # type: ignore[operator]
        for neighbour in adj[node]:
            current = dist[neighbour]
            if current is None or step < current:
                dist[neighbour] = step
                queue.append(neighbour)
    return [NO_PATH if distance is None else distance for distance in dist]