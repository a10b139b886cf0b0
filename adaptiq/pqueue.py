"""A priority queue that picks a sorting algorithm to suit its contents."""

from __future__ import annotations

import dataclasses
import operator
from collections.abc import Callable, Iterable, Sequence
from enum import Enum, IntEnum
from typing import Any, Generic, Protocol, TypeVar

from adaptiq import algorithms

T = TypeVar("T")

__all__ = [
    "DataType",
    "SortStrategy",
    "QueueEmptyError",
    "PQueue",
    "infer_data_type",
    "new_ints",
    "new_floats",
    "new_strings",
    "new_bytes",
    "new_runes",
    "new_with_comparable",
]

_SMALL_INPUT = 16
_LARGE_INPUT = 1000
_INTEGER_SPECIALISE = 100


class DataType(IntEnum):
    """Kind of element held by a queue, judged from its first element."""

    INTEGER = 0
    FLOAT = 1
    STRING = 2
    SLICE = 3
    ARRAY = 4
    STRUCT = 5
    MAP = 6
    POINTER = 7
    INTERFACE = 8
    CHANNEL = 9
    FUNC = 10
    GENERIC = 11

    @property
    def display_name(self) -> str:
        return _TYPE_NAMES[self]


_TYPE_NAMES = {
    DataType.INTEGER: "Integer",
    DataType.FLOAT: "Float",
    DataType.STRING: "String",
    DataType.SLICE: "Slice",
    DataType.ARRAY: "Array",
    DataType.STRUCT: "Struct",
    DataType.MAP: "Map",
    DataType.POINTER: "Pointer",
    DataType.INTERFACE: "Interface",
    DataType.CHANNEL: "Channel",
    DataType.FUNC: "Function",
    DataType.GENERIC: "Generic",
}


class SortStrategy(Enum):
    """Sorting algorithm to apply; ``AUTO`` lets the queue decide."""

    AUTO = 0
    RADIX = 1
    COUNTING = 2
    INSERTION = 3
    TIMSORT = 4
    INTROSORT = 5
    MERGE = 6
    QUICK = 7


class QueueEmptyError(IndexError):
    """Raised when taking an element from an empty queue."""

    def __init__(self, message: str = "queue is empty") -> None:
        super().__init__(message)


class _Comparable(Protocol):
    def compare_to(self, other: Any) -> int: ...


def infer_data_type(data: Sequence[Any]) -> DataType:
    """Classify ``data`` by the type of its first element."""
    if not data:
        return DataType.GENERIC
    first = data[0]
    if isinstance(first, bool) or first is None:
        return DataType.GENERIC
    if isinstance(first, int):
        return DataType.INTEGER
    if isinstance(first, float):
        return DataType.FLOAT
    if isinstance(first, str):
        return DataType.STRING
    if isinstance(first, (bytes, bytearray, memoryview, list)):
        return DataType.SLICE
    if isinstance(first, tuple) and not hasattr(first, "_fields"):
        return DataType.ARRAY
    if isinstance(first, dict):
        return DataType.MAP
    if callable(first):
        return DataType.FUNC
    if (
        dataclasses.is_dataclass(first)
        or hasattr(first, "_fields")
        or hasattr(first, "__dict__")
        or hasattr(first, "__slots__")
    ):
        return DataType.STRUCT
    return DataType.GENERIC


class PQueue(Generic[T]):
    """Unordered collection with min-extraction and adaptive in-place sorting.

    ``less(a, b)`` must return ``True`` when ``a`` orders strictly before ``b``.
    """

    def __init__(self, data: Iterable[T], less: Callable[[T, T], bool]) -> None:
        self._data: list[T] = list(data)
        self._less = less
        self._data_type = infer_data_type(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PQueue({self._data!r})"

    def is_empty(self) -> bool:
        """Return whether the queue holds no elements."""
        return not self._data

    def push(self, item: T) -> None:
        """Add ``item`` at the end of the queue."""
        self._data.append(item)

    def _min_index(self) -> int:
        if not self._data:
            raise QueueEmptyError()
        best = 0
        for index, item in enumerate(self._data):
            if self._less(item, self._data[best]):
                best = index
        return best

    def pop(self) -> T:
        """Remove and return the smallest element.

        The last element takes the removed element's place.
        """
        index = self._min_index()
        result = self._data[index]
        last = self._data.pop()
        if index < len(self._data):
            self._data[index] = last
        return result

    def peek(self) -> T:
        """Return the smallest element without removing it."""
        return self._data[self._min_index()]

    def sort(self, strategy: SortStrategy = SortStrategy.AUTO) -> None:
        """Sort the queue in place with ``strategy`` or the one it chooses."""
        if len(self._data) <= 1:
            return
        if strategy is SortStrategy.AUTO:
            strategy = self.choose_strategy()
        data, less = self._data, self._less
        is_integer = self._data_type is DataType.INTEGER
        if strategy is SortStrategy.INSERTION:
            algorithms.insertion_sort(data, less)
        elif strategy is SortStrategy.TIMSORT:
            algorithms.timsort(data, less)
        elif strategy is SortStrategy.INTROSORT:
            algorithms.introsort(data, less)
        elif strategy is SortStrategy.MERGE:
            algorithms.merge_sort(data, less)
        elif strategy is SortStrategy.RADIX and is_integer:
            algorithms.radix_sort(data)
        elif strategy is SortStrategy.COUNTING and is_integer:
            algorithms.counting_sort(data, less)
        else:
            algorithms.quick_sort(data, less)

    def choose_strategy(self) -> SortStrategy:
        """Return the strategy ``sort`` would use for the current contents."""
        n = len(self._data)
        kind = self._data_type
        if n <= _SMALL_INPUT:
            return SortStrategy.INSERTION
        if algorithms.is_nearly_sorted(self._data, self._less):
            return SortStrategy.INSERTION
        if kind is DataType.INTEGER and n > _INTEGER_SPECIALISE:
            if algorithms.has_small_range(self._data):
                return SortStrategy.COUNTING
            return SortStrategy.RADIX
        large = n > _LARGE_INPUT
        if kind is DataType.STRING:
            return SortStrategy.INTROSORT if large else SortStrategy.TIMSORT
        if kind in (DataType.SLICE, DataType.ARRAY):
            return SortStrategy.MERGE
        if kind in (DataType.STRUCT, DataType.INTERFACE):
            return SortStrategy.INTROSORT if large else SortStrategy.TIMSORT
        if kind in (DataType.POINTER, DataType.MAP, DataType.CHANNEL, DataType.FUNC):
            return SortStrategy.QUICK
        return SortStrategy.INTROSORT if large else SortStrategy.TIMSORT

    def to_list(self) -> list[T]:
        """Return a copy of the elements in their current order."""
        return list(self._data)

    @property
    def data_type(self) -> DataType:
        """The element kind inferred when the queue was built."""
        return self._data_type

    @property
    def data_type_name(self) -> str:
        """Human-readable name of :attr:`data_type`."""
        return self._data_type.display_name


def new_ints(data: Iterable[int]) -> PQueue[int]:
    """Build a queue of integers in natural order."""
    return PQueue(data, operator.lt)


def new_floats(data: Iterable[float]) -> PQueue[float]:
    """Build a queue of floats in natural order."""
    return PQueue(data, operator.lt)


def new_strings(data: Iterable[str]) -> PQueue[str]:
    """Build a queue of strings in lexicographic order."""
    return PQueue(data, operator.lt)


def new_bytes(data: Iterable[bytes]) -> PQueue[bytes]:
    """Build a queue of byte strings, ordered bytewise then by length."""
    return PQueue((bytes(item) for item in data), operator.lt)


def new_runes(data: Iterable[Iterable[str]]) -> PQueue[list[str]]:
    """Build a queue of character lists, ordered by code point then by length."""
    return PQueue((list(item) for item in data), operator.lt)


def new_with_comparable(data: Iterable[_Comparable]) -> PQueue[_Comparable]:
    """Build a queue of objects ordered by their ``compare_to`` method."""
    return PQueue(data, lambda a, b: a.compare_to(b) < 0)