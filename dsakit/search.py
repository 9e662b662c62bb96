"""Binary search and binary search on the answer."""

from __future__ import annotations

from collections.abc import Sequence


def first_occurrence(items: Sequence[int], target: int) -> int | None:
    """Return the index of the first ``target`` in sorted ``items``, or None."""
    low, high = 0, len(items) - 1
    found: int | None = None
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            found = mid
            high = mid - 1
        elif value < target:
            low = mid + 1
        else:
            high = mid - 1
    return found


def can_place_cows(stalls: Sequence[int], cows: int, min_distance: int) -> bool:
    """Tell whether ``cows`` fit in sorted ``stalls`` at least ``min_distance`` apart."""
    if not stalls:
        raise ValueError("there must be at least one stall")
    placed = 1
    last = stalls[0]
    for position in stalls[1:]:
        if position - last >= min_distance:
            placed += 1
            last = position
        if placed >= cows:
            return True
    return False


def aggressive_cows(stalls: Sequence[int], cows: int) -> int:
    """Return the largest minimum distance at which ``cows`` can be placed."""
    if not stalls:
        raise ValueError("there must be at least one stall")
    ordered = sorted(stalls)
    low, high = 1, ordered[-1] - ordered[0]
    best: int | None = None
    while low <= high:
        mid = low + (high - low) // 2
        if can_place_cows(ordered, cows, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    if best is None:
        raise ValueError(f"cannot place {cows} cows in {len(ordered)} stalls")
    return best


def can_allocate(pages: Sequence[int], students: int, max_pages: int) -> bool:
    """Tell whether the books can go to ``students`` with at most ``max_pages`` each."""
    needed = 1
    load = 0
    for count in pages:
        if count > max_pages:
            return False
        if load + count <= max_pages:
            load += count
        else:
            needed += 1
            load = count
    return needed <= students


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum number of pages given to one student."""
    if students > len(pages):
        raise ValueError("more students than books")
    if students < 1:
        raise ValueError("there must be at least one student")
    low, high = 0, sum(pages)
    best: int | None = None
    while low <= high:
        mid = low + (high - low) // 2
        if can_allocate(pages, students, mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    if best is None:
        raise ValueError("books cannot be allocated")
    return best


def can_paint(boards: Sequence[int], painters: int, max_time: int) -> bool:
    """Tell whether ``painters`` can paint the boards each within ``max_time``.

    Assumes ``max_time`` is at least the length of the longest board.
    """
    needed = 1
    elapsed = 0
    for length in boards:
        if elapsed + length <= max_time:
            elapsed += length
        else:
            needed += 1
            elapsed = length
    return needed <= painters


def painter_partition(boards: Sequence[int], painters: int) -> int:
    """Return the least time in which ``painters`` can paint contiguous boards."""
    if painters < 1:
        raise ValueError("there must be at least one painter")
    low, high = max(boards, default=0), sum(boards)
    best = high
    while low <= high:
        mid = low + (high - low) // 2
        if can_paint(boards, painters, mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best