"""Comparison sorts. Each returns a new sorted list and leaves its input alone."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by sinking each element left until its neighbour is not larger."""
    result = list(items)
    for i in range(1, len(result)):
        j = i
        while j > 0 and result[j - 1] > result[j]:
            result[j - 1], result[j] = result[j], result[j - 1]
            j -= 1
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    result = list(items)
    if len(result) < 2:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    """Partition ``values[low:high+1]`` around its first element; return the pivot's slot."""
    key = values[low]
    i, j = low + 1, high
    while True:
        while i <= high and values[i] <= key:
            i += 1
        while values[j] > key:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
        else:
            values[low], values[j] = values[j], values[low]
            return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element of each range."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(result, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result