import pytest
from hypothesis import given, strategies as st

from dsakit.arrays import equilibrium_index, max_subarray_sum, pair_sum_indices


def test_max_subarray_sum_example():
    assert max_subarray_sum([3, -4, 5, 4, -1, 7]) == 15


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=20))
def test_max_subarray_sum_bounds(values):
    result = max_subarray_sum(values)
    assert result >= max(values)
    assert result >= sum(values)
    sums = {sum(values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1)}
    assert result in sums


@given(st.lists(st.integers(-50, -1), min_size=1, max_size=10))
def test_max_subarray_sum_all_negative(values):
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_sum_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_pair_sum_example():
    assert pair_sum_indices([2, 7, 11, 15], 17) == (0, 3)


@given(st.lists(st.integers(-20, 20), min_size=2, max_size=15), st.integers(-40, 40))
def test_pair_sum_result_is_valid(values, target):
    try:
        i, j = pair_sum_indices(values, target)
    except ValueError:
        assert all(
            values[a] + values[b] != target
            for a in range(len(values))
            for b in range(a + 1, len(values))
        )
    else:
        assert i < j
        assert values[i] + values[j] == target


def test_pair_sum_missing():
    with pytest.raises(ValueError):
        pair_sum_indices([1, 2], 10)


def test_equilibrium_example():
    assert equilibrium_index([7, 2, 1, 5, 4]) == 2


@given(st.lists(st.integers(-20, 20), max_size=15))
def test_equilibrium_invariant(values):
    index = equilibrium_index(values)
    if index is not None:
        assert sum(values[:index]) == sum(values[index + 1:])
        for earlier in range(index):
            assert sum(values[:earlier]) != sum(values[earlier + 1:])


def test_equilibrium_absent():
    assert equilibrium_index([1, 2]) is None