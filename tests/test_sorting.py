import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.sorting import (
    bubble_sort,
    cyclic_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

CASES = [
    [9, 5, 12, 56, 78, 56, 90, 24, 225, 46, 24],
    [25, 3, 78, 1, 0, 10],
    [12, 29, 25, 8, 32, 17, 40],
    [10, 5, 28, 7, 39, 310, 55, 15, 1],
    [7, 6, 10, 5, 9, 2, 1, 15, 7],
    [3, 1, 2],
    [],
    [42],
    list(range(1500)),
]


@pytest.mark.parametrize("data", CASES)
def test_every_sort_orders_without_modifying_input(data):
    snapshot = list(data)
    assert bubble_sort(data) == selection_sort(data) == insertion_sort(data) == merge_sort(data) == quick_sort(data) == sorted(snapshot)
    assert data == snapshot


def test_every_sort_accepts_iterables():
    items = (5, 4, 3)
    assert bubble_sort(iter(items)) == selection_sort(iter(items)) == insertion_sort(iter(items)) == merge_sort(iter(items)) == quick_sort(iter(items)) == [3, 4, 5]


@given(data=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_every_sort_matches_sorted(data):
    assert bubble_sort(data) == selection_sort(data) == insertion_sort(data) == merge_sort(data) == quick_sort(data) == sorted(data)


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

        def __gt__(self, other):
            return self.pair[0] > other.pair[0]

    result = [k.pair for k in merge_sort(Key(p) for p in pairs)]
    assert result == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]


def test_cyclic_sort_source_array():
    assert cyclic_sort([3, 1, 2, 5, 4]) == [1, 2, 3, 4, 5]


@given(st.integers(min_value=0, max_value=30).flatmap(
    lambda n: st.permutations(list(range(1, n + 1)))))
def test_cyclic_sort_permutations(perm):
    assert cyclic_sort(perm) == sorted(perm)


@pytest.mark.parametrize("data", [[0, 1, 2], [1, 2, 4], [-1]])
def test_cyclic_sort_rejects_out_of_range(data):
    with pytest.raises(ValueError):
        cyclic_sort(data)