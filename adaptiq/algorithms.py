"""Sorting algorithms used by the adaptive priority queue.

Every sort works in place on a list and returns ``None``, like
``list.sort``.  Comparison-based sorts take a ``less(a, b)`` callable
that returns ``True`` when ``a`` orders strictly before ``b``.
"""

from __future__ import annotations

import math
from collections.abc import Callable, MutableSequence
from itertools import chain
from typing import Any, TypeVar

T = TypeVar("T")
Less = Callable[[Any, Any], bool]

_INTROSORT_INSERTION_LIMIT = 16
_TIMSORT_MIN_MERGE = 32
_COUNTING_MAX_RANGE = 10000
_SMALL_RANGE = 1000

__all__ = [
    "insertion_sort",
    "quick_sort",
    "merge_sort",
    "introsort",
    "heap_sort",
    "timsort",
    "radix_sort",
    "counting_sort",
    "is_nearly_sorted",
    "has_small_range",
]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _insertion_range(data: MutableSequence[T], less: Less, low: int, high: int) -> None:
    for i in range(low + 1, high + 1):
        key = data[i]
        j = i - 1
        while j >= low and less(key, data[j]):
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key


def _partition(data: MutableSequence[T], less: Less, low: int, high: int) -> int:
    """Lomuto partition around the last element; equal items go left."""
    pivot = data[high]
    i = low - 1
    for j in range(low, high):
        if not less(pivot, data[j]):
            i += 1
            data[i], data[j] = data[j], data[i]
    data[i + 1], data[high] = data[high], data[i + 1]
    return i + 1


def _merge(data: MutableSequence[T], less: Less, left: int, mid: int, right: int) -> None:
    """Merge the sorted ranges [left, mid] and [mid+1, right], stably."""
    left_part = data[left : mid + 1]
    right_part = data[mid + 1 : right + 1]
    i = j = 0
    k = left
    while i < len(left_part) and j < len(right_part):
        if less(right_part[j], left_part[i]):
            data[k] = right_part[j]
            j += 1
        else:
            data[k] = left_part[i]
            i += 1
        k += 1
    for item in chain(left_part[i:], right_part[j:]):
        data[k] = item
        k += 1


def _heapify(data: MutableSequence[T], less: Less, base: int, size: int, root: int) -> None:
    end = base + size
    while True:
        largest = root
        left = 2 * (root - base) + 1 + base
        right = left + 1
        if left < end and less(data[largest], data[left]):
            largest = left
        if right < end and less(data[largest], data[right]):
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def _heap_sort_range(data: MutableSequence[T], less: Less, low: int, high: int) -> None:
    size = high - low + 1
    for i in range(size // 2 - 1, -1, -1):
        _heapify(data, less, low, size, low + i)
    for i in range(size - 1, 0, -1):
        data[low], data[low + i] = data[low + i], data[low]
        _heapify(data, less, low, i, low)


def insertion_sort(data: MutableSequence[T], less: Less) -> None:
    """Sort ``data`` in place by straight insertion (stable)."""
    _insertion_range(data, less, 0, len(data) - 1)


def quick_sort(data: MutableSequence[T], less: Less) -> None:
    """Sort ``data`` in place with quicksort using a last-element pivot."""
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(data, less, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))


def merge_sort(data: MutableSequence[T], less: Less) -> None:
    """Sort ``data`` in place with top-down merge sort (stable)."""

    def sort_range(left: int, right: int) -> None:
        if left < right:
            mid = left + (right - left) // 2
            sort_range(left, mid)
            sort_range(mid + 1, right)
            _merge(data, less, left, mid, right)

    if len(data) > 1:
        sort_range(0, len(data) - 1)


def introsort(data: MutableSequence[T], less: Less) -> None:
    """Sort ``data`` in place: quicksort, falling back to heapsort when too deep
    and to insertion sort on short ranges."""

    def sort_range(low: int, high: int, depth: int) -> None:
        if high - low + 1 <= _INTROSORT_INSERTION_LIMIT:
            _insertion_range(data, less, low, high)
            return
        if depth == 0:
            _heap_sort_range(data, less, low, high)
            return
        pivot = _partition(data, less, low, high)
        sort_range(low, pivot - 1, depth - 1)
        sort_range(pivot + 1, high, depth - 1)

    if len(data) <= 1:
        return
    sort_range(0, len(data) - 1, int(math.log2(len(data))) * 2)


def heap_sort(data: MutableSequence[T], less: Less) -> None:
    """Sort ``data`` in place with heapsort."""
    _heap_sort_range(data, less, 0, len(data) - 1)


def _find_runs(data: MutableSequence[T], less: Less) -> list[int]:
    """Split ``data`` into ascending runs, reversing descending ones.

    Returns the run boundaries, starting with 0 and ending with ``len(data)``.
    """
    size = len(data)
    runs = [0]
    i = 0
    while i < size - 1:
        start = i
        if less(data[i], data[i + 1]):
            while i < size - 1 and less(data[i], data[i + 1]):
                i += 1
        else:
            while i < size - 1 and not less(data[i], data[i + 1]):
                i += 1
            data[start : i + 1] = data[start : i + 1][::-1]
        i += 1
        runs.append(i)
    if runs[-1] != size:
        runs.append(size)
    return runs


def _merge_runs(data: MutableSequence[T], less: Less, runs: list[int]) -> None:
    while len(runs) > 2:
        merged = [runs[0]]
        for i in range(1, len(runs) - 1, 2):
            _merge(data, less, runs[i - 1], runs[i] - 1, runs[i + 1] - 1)
            merged.append(runs[i + 1])
        if len(runs) % 2 == 0:
            merged.append(runs[-1])
        runs = merged


def timsort(data: MutableSequence[T], less: Less) -> None:
    """Sort ``data`` in place with a simplified run-merging sort.

    Short inputs use insertion sort; longer ones are split into natural runs
    that are merged pairwise.
    """
    if len(data) <= _TIMSORT_MIN_MERGE:
        insertion_sort(data, less)
        return
    _merge_runs(data, less, _find_runs(data, less))


def radix_sort(data: MutableSequence[int]) -> None:
    """Sort a list of non-negative integers in place by least-significant digit.

    If no value is positive the list is left as it is.

    Raises:
        TypeError: an element is not an integer.
        ValueError: an element is negative while some other is positive.
    """
    if not all(_is_int(value) for value in data):
        raise TypeError("radix sort needs integer data")
    max_val = max(data, default=0)
    if max_val <= 0:
        return
    if any(value < 0 for value in data):
        raise ValueError("radix sort cannot order negative integers")
    exp = 1
    while max_val // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in data:
            buckets[(value // exp) % 10].append(value)
        data[:] = list(chain.from_iterable(buckets))
        exp *= 10


def counting_sort(data: MutableSequence[T], less: Less) -> None:
    """Sort integers in place by counting occurrences.

    Non-integer data, or integers spanning more than 10000, are sorted with
    :func:`quick_sort` and ``less`` instead.
    """
    if not data:
        return
    if not all(_is_int(value) for value in data):
        quick_sort(data, less)
        return
    low, high = min(data), max(data)
    if high - low > _COUNTING_MAX_RANGE:
        quick_sort(data, less)
        return
    counts = [0] * (high - low + 1)
    for value in data:
        counts[value - low] += 1
    data[:] = [low + offset for offset, count in enumerate(counts) for _ in range(count)]


def is_nearly_sorted(data: MutableSequence[T], less: Less) -> bool:
    """Return whether at most a tenth of adjacent pairs (at least one) are out of order."""
    if len(data) <= 1:
        return True
    threshold = max(len(data) // 10, 1)
    inversions = 0
    for previous, current in zip(data, data[1:]):
        if less(current, previous):
            inversions += 1
            if inversions > threshold:
                return False
    return True


def has_small_range(data: MutableSequence[Any]) -> bool:
    """Return whether ``data`` is non-empty integers spanning at most 1000."""
    if not data or not all(_is_int(value) for value in data):
        return False
    return max(data) - min(data) <= _SMALL_RANGE