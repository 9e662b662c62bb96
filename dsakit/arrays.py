"""Classic array problems: Kadane, pair sum and equilibrium index."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    if not values:
        raise ValueError("values must not be empty")
    best = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    return best


def pair_sum_indices(values: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first index pair ``(i, j)``, ``i < j``, whose values sum to ``target``."""
    for (i, a), (j, b) in combinations(enumerate(values), 2):
        if a + b == target:
            return i, j
    raise ValueError(f"no pair sums to {target}")


def equilibrium_index(values: Sequence[int]) -> int | None:
    """Return the first index whose left and right sums are equal, or None."""
    right = sum(values)
    left = 0
    for index, value in enumerate(values):
        right -= value
        if left == right:
            return index
        left += value
    return None