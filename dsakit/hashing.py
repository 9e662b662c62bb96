"""Frequency counting with hash maps."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def char_counts(text: str) -> Counter[str]:
    """Return how often each character occurs in ``text``."""
    return Counter(text)


def count_queries(values: Iterable[Hashable], queries: Iterable[Hashable]) -> list[int]:
    """Return, for each query, how many times it occurs among ``values``."""
    counts = Counter(values)
    return [counts[query] for query in queries]


def frequency_extremes(
    values: Sequence[Hashable],
) -> tuple[tuple[Hashable, int], tuple[Hashable, int]]:
    """Return ``((most, count), (least, count))``; ties go to the value seen first."""
    counts = Counter(values)
    if not counts:
        raise ValueError("values must not be empty")
    most = max(counts.items(), key=lambda item: item[1])
    least = min(counts.items(), key=lambda item: item[1])
    return most, least