from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    heap_sort,
    heapify,
    insertion_sort,
    partition,
    quick_sort,
    selection_sort,
)

int_lists = st.lists(st.integers(-1000, 1000), max_size=40)
SOURCE_SAMPLE = [12, 11, 13, 5, 6, 7]
WORDS = ["pear", "apple", "fig", "banana"]


@given(values=int_lists)
def test_bubble_sort_matches_builtin(values):
    assert bubble_sort(list(values)) == sorted(values)


@given(values=int_lists)
def test_insertion_sort_matches_builtin(values):
    assert insertion_sort(list(values)) == sorted(values)


@given(values=int_lists)
def test_selection_sort_matches_builtin(values):
    assert selection_sort(list(values)) == sorted(values)


@given(values=int_lists)
def test_heap_sort_matches_builtin(values):
    assert heap_sort(list(values)) == sorted(values)


@given(values=int_lists)
def test_quick_sort_matches_builtin(values):
    data = list(values)
    assert quick_sort(data, 0, len(data) - 1) == sorted(values)


def test_bubble_sort_works_in_place():
    values = list(SOURCE_SAMPLE)
    result = bubble_sort(values)
    assert result is values
    assert values == sorted(SOURCE_SAMPLE)


def test_insertion_sort_works_in_place():
    values = list(SOURCE_SAMPLE)
    result = insertion_sort(values)
    assert result is values
    assert values == sorted(SOURCE_SAMPLE)


def test_selection_sort_works_in_place():
    values = list(SOURCE_SAMPLE)
    result = selection_sort(values)
    assert result is values
    assert values == sorted(SOURCE_SAMPLE)


def test_heap_sort_works_in_place():
    values = list(SOURCE_SAMPLE)
    result = heap_sort(values)
    assert result is values
    assert values == sorted(SOURCE_SAMPLE)


def test_quick_sort_works_in_place():
    values = list(SOURCE_SAMPLE)
    result = quick_sort(values, 0, len(values) - 1)
    assert result is values
    assert values == sorted(SOURCE_SAMPLE)


def test_heap_sort_source_example():
    assert heap_sort([12, 11, 13, 5, 6, 7]) == [5, 6, 7, 11, 12, 13]


def test_quick_sort_source_example():
    data = [10, 2, 23, -4, 235, 56, 2, 6, 5, 5, 5, 23, -4, 346, -56, 81, 43, 654, 435, -54]
    assert quick_sort(list(data), 0, len(data) - 1) == sorted(data)


def test_bubble_sort_handles_strings():
    assert bubble_sort(list(WORDS)) == sorted(WORDS)


def test_insertion_sort_handles_strings():
    assert insertion_sort(list(WORDS)) == sorted(WORDS)


def test_selection_sort_handles_strings():
    assert selection_sort(list(WORDS)) == sorted(WORDS)


def test_heap_sort_handles_strings():
    assert heap_sort(list(WORDS)) == sorted(WORDS)


def test_quick_sort_handles_strings():
    words = list(WORDS)
    assert quick_sort(words, 0, len(words) - 1) == sorted(WORDS)


@given(int_lists)
def test_heapify_builds_max_heap(values):
    n = len(values)
    for root in range(n // 2 - 1, -1, -1):
        heapify(values, n, root)
    for i in range(1, n):
        assert values[(i - 1) // 2] >= values[i]


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=30))
def test_partition_splits_around_pivot(values):
    original = sorted(values)
    pivot = values[-1]
    index = partition(values, 0, len(values) - 1)
    assert values[index] == pivot
    assert all(v <= pivot for v in values[:index])
    assert all(v > pivot for v in values[index + 1:])
    assert sorted(values) == original


@given(st.lists(st.integers(-100, 100), min_size=2, max_size=30), st.data())
def test_quick_sort_subrange_only(values, data):
    start = data.draw(st.integers(0, len(values) - 1))
    end = data.draw(st.integers(start, len(values) - 1))
    before = list(values)
    quick_sort(values, start, end)
    assert values[:start] == before[:start]
    assert values[end + 1:] == before[end + 1:]
    assert values[start:end + 1] == sorted(before[start:end + 1])