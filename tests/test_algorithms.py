import operator
import random
from dataclasses import dataclass

import pytest

from adaptiq.algorithms import (
    counting_sort,
    has_small_range,
    heap_sort,
    insertion_sort,
    introsort,
    is_nearly_sorted,
    merge_sort,
    quick_sort,
    radix_sort,
    timsort,
)

lt = operator.lt


@pytest.mark.parametrize(
    "sort", [insertion_sort, quick_sort, merge_sort, introsort, heap_sort, timsort]
)
def test_all_comparison_sorts(sort):
    data = [64, 34, 25, 12, 22, 11, 90]
    sort(data, lt)
    assert data == [11, 12, 22, 25, 34, 64, 90]


@pytest.mark.parametrize(
    "sort", [insertion_sort, quick_sort, merge_sort, introsort, heap_sort, timsort]
)
@pytest.mark.parametrize("size", [0, 1, 2, 17, 33, 100, 1000])
def test_comparison_sorts_random(sort, size):
    rng = random.Random(size)
    data = [rng.randrange(size * 10 + 1) for _ in range(size)]
    expected = sorted(data)
    sort(data, lt)
    assert data == expected


@pytest.mark.parametrize("sort", [quick_sort, merge_sort, introsort, timsort])
def test_large_data_sets(sort):
    rng = random.Random(7)
    data = [rng.randrange(10000) for _ in range(10000)]
    expected = sorted(data)
    sort(data, lt)
    assert data == expected


@pytest.mark.parametrize(
    "sort", [insertion_sort, quick_sort, merge_sort, introsort, heap_sort, timsort]
)
def test_edge_cases(sort):
    single = [42]
    sort(single, lt)
    assert single == [42]

    duplicates = [7] * 100
    sort(duplicates, lt)
    assert duplicates == [7] * 100

    reverse = [10, 9, 8, 7, 6, 5, 4, 3, 2, 1]
    sort(reverse, lt)
    assert reverse == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]

    already = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    sort(already, lt)
    assert already == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_quick_sort_many_duplicates_does_not_overflow():
    data = [3] * 5000 + [1] * 5000
    quick_sort(data, lt)
    assert data == [1] * 5000 + [3] * 5000


def test_timsort_with_descending_runs():
    data = list(range(50, 0, -1)) + list(range(100, 200)) + list(range(60, 40, -1))
    expected = sorted(data)
    timsort(data, lt)
    assert data == expected


def test_sorts_strings_with_custom_less():
    data = ["zebra", "apple", "banana", "cherry", "date"]
    introsort(data, lt)
    assert data == ["apple", "banana", "cherry", "date", "zebra"]


def test_sorts_floats():
    data = [3.14, 2.71, 1.41, 1.73, 0.57]
    timsort(data, lt)
    assert data == [0.57, 1.41, 1.73, 2.71, 3.14]


@dataclass
class Item:
    value: int
    index: int


@pytest.mark.parametrize("sort", [merge_sort, insertion_sort])
def test_stability(sort):
    data = [Item(3, 0), Item(1, 1), Item(3, 2), Item(2, 3), Item(1, 4)]
    sort(data, lambda a, b: a.value < b.value)
    assert [(item.value, item.index) for item in data] == [
        (1, 1),
        (1, 4),
        (2, 3),
        (3, 0),
        (3, 2),
    ]


@pytest.mark.parametrize(
    "data, want",
    [
        ([170, 45, 75, 90, 2, 802, 24, 66], [2, 24, 45, 66, 75, 90, 170, 802]),
        ([5, 2, 8, 1, 9, 3], [1, 2, 3, 5, 8, 9]),
        ([123, 456, 789, 234, 567], [123, 234, 456, 567, 789]),
    ],
)
def test_radix_sort(data, want):
    radix_sort(data)
    assert data == want


def test_radix_sort_rejects_negative_values():
    data = [3, -1, 2]
    with pytest.raises(ValueError):
        radix_sort(data)


def test_radix_sort_rejects_non_integers():
    with pytest.raises(TypeError):
        radix_sort([1.5, 2.0])


def test_radix_sort_leaves_non_positive_data_alone():
    data = [0, -3, -1]
    radix_sort(data)
    assert data == [0, -3, -1]


@pytest.mark.parametrize(
    "data, want",
    [
        ([4, 2, 2, 8, 3, 3, 1], [1, 2, 2, 3, 3, 4, 8]),
        ([5, 5, 5, 5], [5, 5, 5, 5]),
        ([3, 0, 2, 0, 1], [0, 0, 1, 2, 3]),
        ([-3, -1, -4, 1, 5, 0, -2], [-4, -3, -2, -1, 0, 1, 5]),
    ],
)
def test_counting_sort(data, want):
    counting_sort(data, lt)
    assert data == want


def test_counting_sort_wide_range_falls_back():
    data = [50000, 3, -20000, 7]
    counting_sort(data, lt)
    assert data == [-20000, 3, 7, 50000]


def test_counting_sort_non_integers_falls_back():
    data = ["b", "c", "a"]
    counting_sort(data, lt)
    assert data == ["a", "b", "c"]


def test_is_nearly_sorted():
    assert is_nearly_sorted([1, 2, 3, 5, 4, 6, 7, 8, 9, 10], lt) is True
    assert is_nearly_sorted([10, 9, 8, 7, 6, 5, 4, 3, 2, 1], lt) is False
    assert is_nearly_sorted([], lt) is True
    assert is_nearly_sorted([2, 1], lt) is True
    assert is_nearly_sorted([3, 2, 1], lt) is False


def test_is_nearly_sorted_threshold_is_a_tenth():
    data = list(range(30))
    data[2], data[3] = data[3], data[2]
    data[10], data[11] = data[11], data[10]
    data[20], data[21] = data[21], data[20]
    assert is_nearly_sorted(data, lt) is True
    data[25], data[26] = data[26], data[25]
    assert is_nearly_sorted(data, lt) is False


def test_has_small_range():
    assert has_small_range([0, 1000]) is True
    assert has_small_range([0, 1001]) is False
    assert has_small_range([]) is False
    assert has_small_range(["a", "b"]) is False
    assert has_small_range([1.0, 2.0]) is False