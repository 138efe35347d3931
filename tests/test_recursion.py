import math

import pytest

from algoset.recursion import (
    binary_search,
    factorial,
    fibonacci,
    is_palindrome,
    linear_search,
    merge_sort,
    power,
    quick_sort,
    reverse_string,
)


def test_factorial_base_case():
    assert factorial(0) == 1


@pytest.mark.parametrize("n", [1, 2, 5, 10, 20])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_sequence_start():
    assert [fibonacci(i) for i in range(8)] == [0, 1, 1, 2, 3, 5, 8, 13]


@pytest.mark.parametrize("n", range(2, 18))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-3)


def test_binary_search_missing_key():
    assert binary_search([1, 2, 3, 5, 6, 7], 12) is False


def test_binary_search_finds_every_element():
    items = [1, 2, 3, 5, 6, 7]
    assert all(binary_search(items, value) for value in items)


def test_binary_search_gap_and_empty():
    assert binary_search([1, 2, 3, 5, 6, 7], 4) is False
    assert binary_search([], 1) is False


def test_linear_search():
    items = [3, 5, 6, 3, 2]
    assert linear_search(items, 2) is True
    assert linear_search(items, 9) is False
    assert linear_search([], 2) is False


@pytest.mark.parametrize("sorter", [merge_sort, quick_sort])
@pytest.mark.parametrize(
    "items",
    [[3, 4, 2, 1, 7], [3, 2, 1, 7, 4], [], [1], [5, 5, 5], [9, -1, 0, 9, -4, 2, 2]],
)
def test_sorts_agree_with_sorted(sorter, items):
    original = list(items)
    assert sorter(items) == sorted(original)
    assert items == original


def test_palindrome():
    assert is_palindrome("kooik") is False
    assert is_palindrome("racecar") is True
    assert is_palindrome("") is True
    assert is_palindrome("a") is True


@pytest.mark.parametrize("base,exponent", [(2, 0), (2, 1), (2, 10), (3, 7), (-5, 3), (7, 13)])
def test_power_matches_builtin(base, exponent):
    assert power(base, exponent) == base**exponent


def test_power_negative_exponent_raises():
    with pytest.raises(ValueError):
        power(2, -1)


def test_reverse_string():
    assert reverse_string("abcde") == "edcba"
    assert reverse_string("") == ""


@pytest.mark.parametrize("text", ["abcde", "ab", "hello world", "x"])
def test_reverse_string_is_involution(text):
    assert reverse_string(reverse_string(text)) == text