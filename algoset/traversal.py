"""Graph traversal: adjacency lists, BFS, DFS, bipartiteness, cycles and topological order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Adjacency = Sequence[Sequence[int]]


def build_adjacency(
    n: int, edges: Iterable[Sequence[int]], directed: bool = False
) -> list[list[int]]:
    """Return adjacency lists for nodes 0..n-1 built from (u, v) edge pairs.

    An undirected edge is recorded in both directions, in input order.
    """
    if n < 0:
        raise ValueError("the number of nodes must not be negative")
    adj: list[list[int]] = [[] for _ in range(n)]
    for edge in edges:
        u, v = edge
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) names a node outside 0..{n - 1}")
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
    return adj


def _require_nodes(adj: Adjacency) -> None:
    if not adj:
        raise ValueError("the graph has no nodes to start from")


def bfs(adj: Adjacency) -> list[int]:
    """Return nodes in breadth-first order, starting from node 0."""
    _require_nodes(adj)
    visited = {0}
    queue = deque([0])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adj: Adjacency) -> list[int]:
    """Return nodes in depth-first order, starting from node 0."""
    _require_nodes(adj)
    visited = {0}
    order = [0]
    stack: list[Iterator[int]] = [iter(adj[0])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adj[neighbour]))
                break
        else:
            stack.pop()
    return order


def is_bipartite(adj: Adjacency) -> bool:
    """Return whether the nodes can be two-coloured with no edge inside a colour."""
    colour: list[int | None] = [None] * len(adj)
    for start in range(len(adj)):
        if colour[start] is not None:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adj[node]:
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[node]  # type: ignore[operator]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def has_cycle_directed(adj: Adjacency) -> bool:
    """Return whether a directed graph contains a cycle."""
    visited: set[int] = set()
    on_path: set[int] = set()
    for start in range(len(adj)):
        if start in visited:
            continue
        visited.add(start)
        on_path.add(start)
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    on_path.add(neighbour)
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
                if neighbour in on_path:
                    return True
            else:
                on_path.discard(node)
                stack.pop()
    return False


def has_cycle_undirected(adj: Adjacency) -> bool:
    """Return whether an undirected graph contains a cycle."""
    visited: set[int] = set()
    for start in range(len(adj)):
        if start in visited:
            continue
        visited.add(start)
        queue: deque[tuple[int, int | None]] = deque([(start, None)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in adj[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    return True
    return False


def topo_sort_dfs(adj: Adjacency) -> list[int]:
    """Return a topological order of a DAG from depth-first finishing times."""
    visited: set[int] = set()
    finished: list[int] = []
    for start in range(len(adj)):
        if start in visited:
            continue
        visited.add(start)
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                finished.append(node)
                stack.pop()
    return finished[::-1]


def topo_sort_kahn(adj: Adjacency) -> list[int]:
    """Return a topological order by repeatedly removing nodes with no incoming edge.

    When the graph has a cycle, the nodes on or after it are left out.
    """
    indegree = [0] * len(adj)
    for neighbours in adj:
        for neighbour in neighbours:
            indegree[neighbour] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order


def is_topological_order(adj: Adjacency, order: Sequence[int]) -> bool:
    """Return whether order lists every node once with each edge pointing forward."""
    if sorted(order) != list(range(len(adj))):
        return False
    position = {node: index for index, node in enumerate(order)}
    return all(
        position[node] <= position[neighbour]
        for node, neighbours in enumerate(adj)
        for neighbour in neighbours
    )