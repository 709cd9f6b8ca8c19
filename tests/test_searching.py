import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.searching import (
    binary_search,
    interpolation_search,
    linear_search,
    missing_number,
)

SORTED_SOURCE = [11, 22, 33, 44, 55, 66, 77, 88]
LINEAR_SOURCE = [24, 25, 3, 85]


@pytest.mark.parametrize("key", LINEAR_SOURCE)
def test_linear_search_source(key):
    assert linear_search(LINEAR_SOURCE, key) == LINEAR_SOURCE.index(key)


def test_linear_search_first_match_and_missing():
    data = [4, 7, 4]
    assert linear_search(data, 4) == data.index(4)
    assert linear_search(data, 99) is None
    assert linear_search([], 1) is None


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
@pytest.mark.parametrize("key", SORTED_SOURCE)
def test_sorted_search_finds_every_source_item(search, key):
    assert search(SORTED_SOURCE, key) == SORTED_SOURCE.index(key)


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
@pytest.mark.parametrize("key", [0, 10, 12, 50, 89, 1000, -5])
def test_sorted_search_not_found(search, key):
    assert search(SORTED_SOURCE, key) is None


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
def test_sorted_search_empty(search):
    assert search([], 3) is None


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
@given(
    data=st.lists(st.integers(min_value=-200, max_value=200), max_size=50).map(sorted),
    key=st.integers(min_value=-250, max_value=250),
)
def test_sorted_search_agrees_with_membership(search, data, key):
    result = search(data, key)
    if key in data:
        assert data[result] == key
    else:
        assert result is None


def test_missing_number_source():
    assert missing_number([9, 6, 4, 2, 3, 5, 7, 0, 1]) == 8


def test_missing_number_empty_and_last():
    assert missing_number([]) == 0
    assert missing_number(range(5)) == len(range(5))


@given(st.integers(min_value=0, max_value=40).flatmap(
    lambda n: st.tuples(st.just(n), st.integers(min_value=0, max_value=n),
                        st.randoms(use_true_random=False))))
def test_missing_number_property(args):
    n, gap, rng = args
    values = [v for v in range(n + 1) if v != gap]
    rng.shuffle(values)
    assert missing_number(values) == gap


@pytest.mark.parametrize("data", [[0, 0], [0, 5], [-1, 0]])
def test_missing_number_rejects_bad_input(data):
    with pytest.raises(ValueError):
        missing_number(data)