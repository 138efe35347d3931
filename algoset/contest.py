"""Small competitive-programming problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import isqrt


def next_round(scores: Sequence[int], k: int) -> int:
    """Count participants scoring at least the k-th place score and above zero."""
    if not 1 <= k <= len(scores):
        raise ValueError("k must name a place among the scores")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def team_problems(rows: Iterable[Sequence[int]]) -> int:
    """Count problems that at least two of the three friends are sure about."""
    return sum(1 for row in rows if sum(row) >= 2)


def find_duplicate(nums: Sequence[int]) -> int | None:
    """Return the first repeated value found by sign marking, or None.

    Values are used as indices into the list, so each must lie between 0 and
    len(nums).
    """
    marks = [*nums, 0]
    for value in list(marks):
        index = abs(value)
        if index >= len(marks):
            raise ValueError(f"value {value} is out of range")
        if marks[index] < 0:
            return index
        marks[index] = -marks[index]
    return None


def _is_binary_decimal(number: int) -> bool:
    return set(str(number)) <= {"0", "1"}


def is_binary_decimal_product(n: int) -> bool:
    """Return whether n is a product of two numbers written only with 0 and 1."""
    for divisor in range(1, isqrt(n) + 1 if n > 0 else 1):
        if n % divisor == 0 and _is_binary_decimal(divisor) and _is_binary_decimal(n // divisor):
            return True
    return False