"""Rat in a maze: every route from the top-left to the bottom-right cell."""

from __future__ import annotations

from collections.abc import Sequence

_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def find_paths(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return all simple paths through open (1) cells, as sorted move strings.

    Moves are D, L, R and U. The grid must be square and non-empty.
    """
    size = len(grid)
    if size == 0 or any(len(row) != size for row in grid):
        raise ValueError("grid must be a non-empty square")
    if grid[0][0] == 0:
        return []

    paths: list[str] = []
    visited: set[tuple[int, int]] = set()
    target = (size - 1, size - 1)

    def is_open(x: int, y: int) -> bool:
        return 0 <= x < size and 0 <= y < size and (x, y) not in visited and grid[x][y] == 1

    def walk(x: int, y: int, path: str) -> None:
        if (x, y) == target:
            paths.append(path)
            return
        visited.add((x, y))
        for move, dx, dy in _MOVES:
            if is_open(x + dx, y + dy):
                walk(x + dx, y + dy, path + move)
        visited.discard((x, y))

    walk(0, 0, "")
    return sorted(paths)