"""Small recursive problems: subsets, reversal, factorial and palindromes."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, MutableSequence
from typing import TypeVar

T = TypeVar("T")


def subsets(items: Iterable[T]) -> Iterator[list[T]]:
    """Yield every subset of ``items`` as a list, keeping the input order.

    Each element is first taken and then left out, so the full set comes
    first and the empty set last.
    """
    pool = list(items)
    chosen: list[T] = []

    def walk(index: int) -> Iterator[list[T]]:
        if index == len(pool):
            yield list(chosen)
            return
        chosen.append(pool[index])
        yield from walk(index + 1)
        chosen.pop()
        yield from walk(index + 1)

    yield from walk(0)


def reverse_in_place(items: MutableSequence[T]) -> None:
    """Reverse ``items`` in place by swapping ends towards the middle."""
    size = len(items)
    for left in range(size // 2):
        right = size - left - 1
        items[left], items[right] = items[right], items[left]


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("n must be an integer")
    if n < 0:
        raise ValueError("n must not be negative")
    return math.prod(range(1, n + 1))


def repeat_name(n: int, name: str) -> list[str]:
    """Return ``name`` repeated ``n`` times, one entry per line to print."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [name] * n


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    half = len(text) // 2
    return all(a == b for a, b in zip(text[:half], reversed(text[-half:] if half else "")))