import pytest
from hypothesis import given, strategies as st

from dsakit.search import (
    aggressive_cows,
    allocate_books,
    can_allocate,
    can_paint,
    can_place_cows,
    first_occurrence,
    painter_partition,
)


@given(st.lists(st.integers(-20, 20), max_size=40), st.integers(-20, 20))
def test_first_occurrence_matches_index(items, target):
    items.sort()
    result = first_occurrence(items, target)
    if target in items:
        assert result == items.index(target)
    else:
        assert result is None


def test_first_occurrence_empty():
    assert first_occurrence([], 4) is None


def test_aggressive_cows_example():
    assert aggressive_cows([1, 2, 8, 4, 9], 3) == 3


@given(
    st.lists(st.integers(0, 100), min_size=2, max_size=15, unique=True),
    st.integers(2, 4),
)
def test_aggressive_cows_is_maximal(stalls, cows):
    if cows > len(stalls):
        with pytest.raises(ValueError):
            aggressive_cows(stalls, cows)
        return
    best = aggressive_cows(stalls, cows)
    ordered = sorted(stalls)
    assert can_place_cows(ordered, cows, best)
    assert not can_place_cows(ordered, cows, best + 1)


def test_aggressive_cows_empty_raises():
    with pytest.raises(ValueError):
        aggressive_cows([], 2)


def test_allocate_books_example():
    assert allocate_books([15, 17, 20], 2) == 32


@given(st.lists(st.integers(1, 50), min_size=1, max_size=12), st.integers(1, 12))
def test_allocate_books_is_minimal(pages, students):
    if students > len(pages):
        with pytest.raises(ValueError):
            allocate_books(pages, students)
        return
    best = allocate_books(pages, students)
    assert can_allocate(pages, students, best)
    assert not can_allocate(pages, students, best - 1)
    assert max(pages) <= best <= sum(pages)


def test_allocate_books_more_students_than_books():
    with pytest.raises(ValueError):
        allocate_books([10, 20], 3)


def test_can_allocate_rejects_oversized_book():
    assert can_allocate([5, 100], 5, 99) is False


def test_painter_partition_example():
    assert painter_partition([40, 30, 10, 20], 2) == 60


@given(st.lists(st.integers(1, 50), min_size=1, max_size=12), st.integers(1, 5))
def test_painter_partition_is_minimal(boards, painters):
    best = painter_partition(boards, painters)
    assert can_paint(boards, painters, best)
    assert max(boards) <= best <= sum(boards)
    if best - 1 >= max(boards):
        assert not can_paint(boards, painters, best - 1)


def test_single_painter_paints_everything():
    boards = [40, 30, 10, 20]
    assert painter_partition(boards, 1) == sum(boards)


def test_painter_partition_needs_a_painter():
    with pytest.raises(ValueError):
        painter_partition([1, 2], 0)