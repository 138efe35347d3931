"""Dynamic-programming problems: 0/1 knapsack, Fibonacci and the frog jump."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of items whose weights fit in capacity."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if not weights:
        return 0
    last = len(weights) - 1

    @cache
    def best(index: int, room: int) -> int:
        if index == last:
            return values[index] if weights[index] <= room else 0
        skip = best(index + 1, room)
        if weights[index] <= room:
            return max(skip, values[index] + best(index + 1, room - weights[index]))
        return skip

    return best(0, capacity)


def fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number, reusing earlier results."""
    if n < 0:
        raise ValueError("fibonacci is undefined for negative indices")
    memo = [0, 1]
    while len(memo) <= n:
        memo.append(memo[-1] + memo[-2])
    return memo[n]


def frog_jump(heights: Sequence[int], k: int) -> int:
    """Return the least total height change to reach the last stone.

    The frog may jump from a stone up to k stones ahead; each jump costs the
    absolute difference of the two heights.
    """
    heights = list(heights)
    if not heights:
        raise ValueError("there must be at least one stone")
    if k < 1 and len(heights) > 1:
        raise ValueError("k must be at least 1")
    costs = [0]
    for index, height in enumerate(heights[1:], start=1):
        start = max(0, index - k)
        costs.append(
            min(
                cost + abs(prev - height)
                for cost, prev in zip(costs[start:index], heights[start:index])
            )
        )
    return costs[-1]