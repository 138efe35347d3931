from itertools import product

import pytest

from algoset.contest import (
    find_duplicate,
    is_binary_decimal_product,
    next_round,
    team_problems,
)


def test_next_round_all_zero_scores():
    assert next_round([0, 0, 0, 0], 2) == 0


def test_next_round_equal_positive_scores_all_advance():
    scores = [7, 7, 7, 7]
    assert next_round(scores, 1) == len(scores)


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
def test_next_round_at_least_k_when_threshold_positive(k):
    scores = [10, 9, 8, 7, 7, 7, 5, 5]
    result = next_round(scores, k)
    assert result >= k
    assert result == sum(1 for s in scores if s >= scores[k - 1])


def test_next_round_invalid_k():
    with pytest.raises(ValueError):
        next_round([1, 2], 3)
    with pytest.raises(ValueError):
        next_round([1, 2], 0)


def test_team_problems_extremes():
    assert team_problems([[1, 1, 1]] * 4) == 4
    assert team_problems([[0, 0, 0], [1, 0, 0]]) == 0
    assert team_problems([]) == 0


def test_team_problems_mixed():
    assert team_problems([[1, 1, 0], [0, 0, 1], [0, 1, 1]]) == 2


@pytest.mark.parametrize("nums,expected", [([1, 3, 4, 2, 2], 2), ([3, 1, 3, 4, 2], 3)])
def test_find_duplicate(nums, expected):
    assert find_duplicate(nums) == expected


def test_find_duplicate_does_not_mutate():
    nums = [1, 3, 4, 2, 2]
    find_duplicate(nums)
    assert nums == [1, 3, 4, 2, 2]


def test_find_duplicate_none_when_distinct():
    assert find_duplicate([1, 2, 3]) is None


def test_find_duplicate_out_of_range():
    with pytest.raises(ValueError):
        find_duplicate([5, 1])


@pytest.mark.parametrize("a,b", list(product([1, 10, 11, 100, 101, 110, 111], repeat=2)))
def test_products_of_binary_decimals_are_recognised(a, b):
    assert is_binary_decimal_product(a * b) is True


@pytest.mark.parametrize("n", [2, 3, 7, 13, 29, 0])
def test_non_binary_primes_and_zero_rejected(n):
    assert is_binary_decimal_product(n) is False