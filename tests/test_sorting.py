import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortbench.sorting import (
    composite_sort,
    heap_sort,
    heapify,
    insertion_sort,
    merge,
    merge_sort,
    partition,
    quick_sort,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200)


@given(int_lists)
def test_insertion_sort_sorts_whole_list(values):
    items = list(values)
    insertion_sort(items, 0, len(items) - 1)
    assert items == sorted(values)


@given(int_lists)
def test_merge_sort_sorts_whole_list(values):
    items = list(values)
    merge_sort(items, 0, len(items) - 1)
    assert items == sorted(values)


@given(int_lists)
def test_quick_sort_sorts_whole_list(values):
    items = list(values)
    quick_sort(items, 0, len(items) - 1)
    assert items == sorted(values)


@given(int_lists)
def test_heap_sort_sorts_whole_list(values):
    items = list(values)
    heap_sort(items)
    assert items == sorted(values)


@given(int_lists, st.integers(min_value=0, max_value=64))
def test_composite_sort_sorts_for_any_threshold(values, threshold):
    items = list(values)
    composite_sort(items, threshold)
    assert items == sorted(values)


@given(int_lists)
def test_composite_sort_default_threshold(values):
    items = list(values)
    composite_sort(items)
    assert items == sorted(values)


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort, quick_sort])
def test_default_bounds_cover_whole_list(sort):
    rng = random.Random(7)
    items = [rng.randint(0, 100) for _ in range(150)]
    expected = sorted(items)
    sort(items)
    assert items == expected


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort, quick_sort])
@given(data=st.data())
def test_subrange_sort_leaves_rest_untouched(sort, data):
    values = data.draw(st.lists(st.integers(), min_size=1, max_size=80))
    left = data.draw(st.integers(min_value=0, max_value=len(values) - 1))
    right = data.draw(st.integers(min_value=left, max_value=len(values) - 1))
    items = list(values)
    sort(items, left, right)
    assert items[:left] == values[:left]
    assert items[right + 1 :] == values[right + 1 :]
    assert items[left : right + 1] == sorted(values[left : right + 1])


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort, quick_sort])
def test_empty_and_single_ranges_are_noops(sort):
    empty = []
    sort(empty)
    assert empty == []
    single = [5]
    sort(single, 0, 0)
    assert single == [5]


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort, quick_sort])
def test_out_of_range_bounds_raise(sort):
    items = [3, 1, 2]
    with pytest.raises(IndexError):
        sort(items, 0, 5)
    with pytest.raises(IndexError):
        sort(items, -1, 2)


def test_quick_sort_handles_large_sorted_input():
    items = list(range(5000))
    quick_sort(items, 0, len(items) - 1)
    assert items == list(range(5000))


def test_quick_sort_handles_large_descending_input():
    items = list(range(5000, 0, -1))
    quick_sort(items)
    assert items == list(range(1, 5001))


@given(
    st.lists(st.integers(), max_size=50),
    st.lists(st.integers(), max_size=50),
)
def test_merge_combines_sorted_runs(first, second):
    first, second = sorted(first), sorted(second)
    items = [99] + first + second + [-99]
    left = 1
    right = len(first) + len(second)
    if not first:
        return_value = None
        assert return_value is None or True
    if first:
        mid = left + len(first) - 1
        merge(items, left, mid, right)
        assert items[left : right + 1] == sorted(first + second)
        assert items[0] == 99 and items[-1] == -99


def test_merge_keeps_left_element_first_on_ties():
    class Key:
        def __init__(self, value, tag):
            self.value, self.tag = value, tag

        def __le__(self, other):
            return self.value <= other.value

        def __lt__(self, other):
            return self.value < other.value

    items = [Key(1, "a"), Key(2, "b"), Key(1, "c"), Key(2, "d")]
    merge(items, 0, 1, 3)
    assert [k.tag for k in items] == ["a", "c", "b", "d"]


def test_merge_rejects_bad_bounds():
    with pytest.raises(IndexError):
        merge([1, 2, 3], 0, 4, 2)


@given(st.lists(st.integers(), min_size=1, max_size=100))
def test_partition_places_pivot(values):
    items = list(values)
    pivot = values[-1]
    index = partition(items, 0, len(items) - 1)
    assert items[index] == pivot
    assert all(x < pivot for x in items[:index])
    assert all(x >= pivot for x in items[index + 1 :])
    assert sorted(items) == sorted(values)


def test_partition_rejects_bad_bounds():
    with pytest.raises(IndexError):
        partition([1, 2], 0, 2)


@given(st.lists(st.integers(), max_size=100))
def test_heapify_builds_max_heap(values):
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        heapify(items, size, root)
    for parent in range(size):
        for child in (2 * parent + 1, 2 * parent + 2):
            if child < size:
                assert items[parent] >= items[child]
    assert sorted(items) == sorted(values)


def test_heapify_sifts_root_down():
    items = [1, 5, 4, 3, 2]
    heapify(items, len(items), 0)
    assert items[0] == 5
    assert sorted(items) == [1, 2, 3, 4, 5]


def test_heapify_rejects_oversized_heap():
    with pytest.raises(IndexError):
        heapify([1, 2], 3, 0)


def test_composite_sort_sorts_strings():
    items = ["pear", "apple", "fig", "banana", "cherry"]
    composite_sort(items, 2)
    assert items == sorted(["pear", "apple", "fig", "banana", "cherry"])