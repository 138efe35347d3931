from itertools import combinations

import pytest

from algoset.dp import fibonacci_memo, frog_jump, knapsack
from algoset.recursion import fibonacci


def _brute_knapsack(weights, values, capacity):
    best = 0
    indices = range(len(weights))
    for size in range(len(weights) + 1):
        for chosen in combinations(indices, size):
            if sum(weights[i] for i in chosen) <= capacity:
                best = max(best, sum(values[i] for i in chosen))
    return best


@pytest.mark.parametrize(
    "weights,values,capacity",
    [
        ([1, 2, 4, 5], [5, 4, 8, 6], 5),
        ([3, 4, 5], [30, 50, 60], 8),
        ([2, 3, 4, 5], [3, 4, 5, 6], 5),
        ([10], [7], 9),
        ([10], [7], 10),
        ([1, 1, 1, 1], [1, 2, 3, 4], 2),
    ],
)
def test_knapsack_matches_exhaustive_search(weights, values, capacity):
    assert knapsack(weights, values, capacity) == _brute_knapsack(weights, values, capacity)


def test_knapsack_empty_and_zero_capacity():
    assert knapsack([], [], 10) == 0
    assert knapsack([1, 2], [5, 6], 0) == 0


def test_knapsack_all_fit_takes_everything():
    values = [4, 9, 2]
    assert knapsack([1, 1, 1], values, 3) == sum(values)


def test_knapsack_errors():
    with pytest.raises(ValueError):
        knapsack([1, 2], [3], 5)
    with pytest.raises(ValueError):
        knapsack([1], [3], -1)


@pytest.mark.parametrize("n", range(0, 20))
def test_fibonacci_memo_matches_recursive(n):
    assert fibonacci_memo(n) == fibonacci(n)


def test_fibonacci_memo_large_recurrence():
    assert fibonacci_memo(200) == fibonacci_memo(199) + fibonacci_memo(198)


def test_fibonacci_memo_negative_raises():
    with pytest.raises(ValueError):
        fibonacci_memo(-1)


def test_frog_single_stone_costs_nothing():
    assert frog_jump([42], 3) == 0


@pytest.mark.parametrize("heights", [[10, 30, 40, 20], [30, 10, 60, 10, 60, 50], [1, 5, 2]])
def test_frog_k_one_walks_every_stone(heights):
    expected = sum(abs(a - b) for a, b in zip(heights, heights[1:]))
    assert frog_jump(heights, 1) == expected


@pytest.mark.parametrize("heights", [[10, 30, 40, 20], [30, 10, 60, 10, 60, 50]])
def test_frog_long_reach_jumps_directly(heights):
    assert frog_jump(heights, len(heights)) == abs(heights[-1] - heights[0])


def test_frog_larger_k_never_costs_more():
    heights = [30, 10, 60, 10, 60, 50, 20, 80]
    costs = [frog_jump(heights, k) for k in range(1, len(heights))]
    assert costs == sorted(costs, reverse=True)


def test_frog_errors():
    with pytest.raises(ValueError):
        frog_jump([], 2)
    with pytest.raises(ValueError):
        frog_jump([1, 2], 0)