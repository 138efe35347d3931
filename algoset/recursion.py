"""Classic recursive algorithms: searching, sorting, arithmetic and strings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def factorial(n: int) -> int:
    """Return n! computed recursively."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number (0, 1, 1, 2, ...) by plain recursion."""
    if n < 0:
        raise ValueError("fibonacci is undefined for negative indices")
    if n < 2:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def binary_search(items: Sequence[Any], key: Any) -> bool:
    """Return whether key occurs in the ascending sequence items."""

    def search(start: int, end: int) -> bool:
        if start > end:
            return False
        mid = start + (end - start) // 2
        if items[mid] == key:
            return True
        if items[mid] < key:
            return search(mid + 1, end)
        return search(start, mid - 1)

    return search(0, len(items) - 1)


def linear_search(items: Sequence[Any], key: Any) -> bool:
    """Return whether key occurs anywhere in items, scanning from the front."""
    if not items:
        return False
    if items[0] == key:
        return True
    return linear_search(items[1:], key)


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(items: Sequence[T]) -> list[T]:
    """Return a new ascending list of items using merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def quick_sort(items: Sequence[T]) -> list[T]:
    """Return a new ascending list of items, partitioning around the first element."""
    values = list(items)
    if len(values) <= 1:
        return values
    pivot, rest = values[0], values[1:]
    smaller = [value for value in rest if value < pivot]
    larger = [value for value in rest if not value < pivot]
    return quick_sort(smaller) + [pivot] + quick_sort(larger)


def is_palindrome(text: str) -> bool:
    """Return whether text reads the same backwards, comparing ends inwards."""

    def check(start: int, end: int) -> bool:
        if start >= end:
            return True
        if text[start] == text[end]:
            return check(start + 1, end - 1)
        return False

    return check(0, len(text) - 1)


def power(base: int, exponent: int) -> int:
    """Return base raised to a non-negative exponent by repeated halving."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = power(base, exponent // 2)
    if exponent % 2 == 0:
        return half * half
    return base * half * half


def reverse_string(text: str) -> str:
    """Return text reversed by swapping characters from both ends."""
    chars = list(text)

    def swap(start: int, end: int) -> None:
        if start > end:
            return
        chars[start], chars[end] = chars[end], chars[start]
        swap(start + 1, end - 1)

    swap(0, len(chars) - 1)
    return "".join(chars)