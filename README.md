# adaptiq

A priority queue and sorting library that looks at its data before it sorts.
For each sort it picks one algorithm: insertion sort, timsort, introsort,
merge sort, quicksort, radix sort or counting sort. The choice depends on the
size of the data, how close it is to sorted order, and what kind of values it
holds.

The package has no dependencies outside the standard library.

## Installation

```
pip install adaptiq
```

To run the tests:

```
pip install "adaptiq[test]"
pytest
```

## Usage

```python
from adaptiq.pqueue import PQueue, SortStrategy, QueueEmptyError, new_ints, new_strings

pq = new_ints([6, 5, 4, 9, 2, 7, 1, 8])
len(pq)          # 8
pq.peek()        # 1
pq.pop()         # 1
pq.push(0)

pq.sort()        # the queue picks the algorithm
pq.to_list()     # [0, 2, 4, 5, 6, 7, 8, 9]

words = new_strings(["zebra", "apple", "banana"])
words.sort(SortStrategy.MERGE)   # or name the algorithm yourself
words.to_list()                  # ['apple', 'banana', 'zebra']
```

The queue keeps its elements unordered until you call `sort()`. `peek()` and
`pop()` scan for the smallest element; `pop()` moves the last element into the
place of the one it removes. Both raise `QueueEmptyError` (a subclass of
`IndexError`) on an empty queue. `is_empty()` tells whether the queue holds
anything, and `to_list()` returns a copy of the elements in their current order.

### Custom orderings

`PQueue` takes an iterable and a `less(a, b)` function that returns `True`
when `a` orders strictly before `b`:

```python
people = [("Alice", 30), ("Bob", 25), ("Charlie", 35), ("David", 25)]
pq = PQueue(people, lambda a, b: (a[1], a[0]) < (b[1], b[0]))
pq.sort()
pq.to_list()
# [('Bob', 25), ('David', 25), ('Alice', 30), ('Charlie', 35)]
```

Ready-made constructors in `adaptiq.pqueue`:

- `new_ints`, `new_floats`, `new_strings`: natural order.
- `new_bytes`: turns each item into `bytes` and orders bytewise, then by length.
- `new_runes`: turns each item into a list of characters and orders by code
  point, then by length.
- `new_with_comparable`: for objects with a `compare_to(other)` method that
  returns a negative number when `self` comes first.

### Strategy selection

`SortStrategy` names the algorithms: `AUTO`, `RADIX`, `COUNTING`, `INSERTION`,
`TIMSORT`, `INTROSORT`, `MERGE` and `QUICK`. `sort()` uses `AUTO` by default,
and `choose_strategy()` returns the algorithm that `AUTO` would pick.

The choice depends partly on the element kind. The queue works this out once,
from its first element, when it is built. `infer_data_type(data)` does the
same for any sequence. You can read the result through the `data_type`
property, which holds a `DataType` member, and the `data_type_name` property,
which holds a readable name such as `"Integer"` or `"String"`.

| Situation                                            | Algorithm  |
|------------------------------------------------------|------------|
| 16 items or fewer                                    | insertion  |
| nearly sorted (at most a tenth of neighbouring pairs out of order) | insertion |
| more than 100 integers, range of 1000 or less        | counting   |
| more than 100 integers, wider range                  | radix      |
| strings, objects with attributes, named tuples       | timsort; introsort above 1000 items |
| lists, tuples, bytes                                 | merge      |
| dicts, callables                                     | quicksort  |
| everything else                                      | timsort; introsort above 1000 items |

`RADIX` and `COUNTING` only take effect on a queue whose data type is
`INTEGER`. On any other queue they fall back to quicksort. Counting sort also
falls back to quicksort when the values span more than 10000.

Radix sort only handles non-negative integers. It raises `ValueError` when
some values are negative and others positive. This can happen with `AUTO` on
more than 100 integers whose range exceeds 1000.

Merge sort and timsort are stable. Quicksort, introsort and heapsort are not.

### Sorting functions

The algorithms are also available as standalone functions in
`adaptiq.algorithms`. Each one sorts a list in place and returns `None`:
`insertion_sort`, `quick_sort`, `merge_sort`, `introsort`, `heap_sort`,
`timsort` and `counting_sort` take `(data, less)`, and `radix_sort` takes
`(data)` alone. `radix_sort` raises `TypeError` if an element is not an
integer. Two helper functions are also provided: `is_nearly_sorted(data, less)`
and `has_small_range(data)`.

```python
from adaptiq.algorithms import radix_sort

data = [170, 45, 75, 90, 2, 802, 24, 66]
radix_sort(data)
data   # [2, 24, 45, 66, 75, 90, 170, 802]
```

## What it does not do

`PQueue` is not a heap. `push()` appends, and `peek()` and `pop()` each take
time linear in the queue's size. A queue is not safe to change from several
threads at once. The package has no command-line tool.