# dsakit

A small library of classic data structures and algorithms. It is written for
clarity, so each one is easy to read and check. It has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

### `dsakit.sorting`

Every sort rearranges the list it is given in place and returns that same list.

- `bubble_sort(values)` stops early once a pass makes no swap.
- `insertion_sort(values)`
- `selection_sort(values)`
- `heap_sort(values)` builds a max-heap with `heapify(values, size, root)`,
  which sifts `values[root]` down within the first `size` items.
- `quick_sort(values, start=0, end=None)` sorts the inclusive range
  `start..end` (the whole list by default) using the Lomuto
  `partition(values, start, end)`, which returns the pivot's final index.

```python
from dsakit.sorting import quick_sort

data = [10, 2, 23, -4, 235]
quick_sort(data)
# data == [-4, 2, 10, 23, 235]
```

### `dsakit.arrays`

- `kadane_sum(values)`: the largest subarray sum by Kadane's algorithm. The
  running sum is reset at zero, so a sequence with no positive value gives `0`.
- `max_subarray_sum_brute(values)`: the largest sum over all non-empty
  contiguous subarrays, by checking every one.
- `max_circular_subarray_sum(values)`: the largest subarray sum when the
  sequence wraps around.
- `pair_sum(values, target)`: the first index pair `(i, j)` with `i < j` whose
  values add up to `target`, or `None`.
- `subarrays(values)`: yields every non-empty contiguous subarray as a list,
  by start index and then by length.
- `array_max(values)` and `array_min(values)`
- `linear_search(values, key)`: the index of the first occurrence of `key`,
  or `None`.

`kadane_sum`, `max_subarray_sum_brute`, `max_circular_subarray_sum`,
`array_max` and `array_min` raise `ValueError` for an empty sequence.

### `dsakit.bits`

- `get_bit`, `set_bit`, `clear_bit` and `update_bit(num, pos, value)` work on
  single bits; `update_bit` raises `ValueError` unless `value` is 0 or 1.
- `count_ones(num)`: the number of set bits; negative numbers are counted as
  32-bit two's complement words.
- `is_power_of_two(num)`: true only for positive powers of two.
- `subsets(items)`: a list of every subset, ordered by the bit mask that
  selects it.
- `find_unique(values)`: the XOR of all values, which is the one value that is
  not paired.
- `find_two_unique(values)`: the two values that appear once while all others
  appear twice; raises `ValueError` when the XOR of all values is zero.
- `find_unique_in_triplets(values)`: the one value that does not appear three
  times, treating values as 32-bit signed integers.

```python
from dsakit.bits import find_two_unique

find_two_unique([1, 2, 3, 1, 2, 3, 5, 7])   # (7, 5)
```

### `dsakit.brackets`

- `are_brackets_balanced(expression)` checks that brackets are matched and
  nested by rank: `[` may hold `{`, and `{` may hold `(`, but an opening
  bracket may not appear inside one of higher rank. Other characters are
  ignored.
- `bracket_precedence(char)` gives 1 for square, 2 for curly, 3 for round
  brackets and 0 otherwise; `is_open_bracket` and `is_closing_bracket` test a
  single character.

```python
from dsakit.brackets import are_brackets_balanced

are_brackets_balanced("[{()}]")   # True
are_brackets_balanced("({})")     # False
```

### `dsakit.linkedlist`

`LinkedList(values=())` is a singly linked list made of `Node` objects.

- `append(value)` adds a value at the end.
- `make_cycle(pos)` links the last node back to the node at 1-based position
  `pos`; it raises `IndexError` if `pos` is out of range.
- `has_cycle()` uses Floyd's tortoise and hare.
- `remove_cycle()` breaks the cycle so the list ends again, and returns
  whether there was one.
- Iterating yields the values; it raises `ValueError` while the list has a
  cycle.

### `dsakit.circular`

`CircularList(values=())` is a circular singly linked list made of
`CircularNode` objects, with 1-based positions.

- `insert_at_begin(value)`, `append(value)` and `insert_at(value, loc)`;
  for `loc` other than 1, the value goes after the node `loc - 1` links from
  the head.
- `delete_begin()`, `delete_at(loc)` and `delete_last()` remove a node and
  return its value.
- Deleting from an empty list, or using a position outside `1..len(list)`,
  raises `IndexError`.
- Supports iteration, `in` and `len()`.

### `dsakit.basics`

Small warm-up routines:

- `sum_and_difference(a, b)`: the sum and the absolute difference.
- `describe_pair(a, b)`: `"Value of a and b is: {a} and {b}"`.
- `number_square(n)`: an `n` by `n` grid filled row by row with 1, 2, 3, ...
- `switch_labels(num=2)`: the labels a switch emits, where case 2 falls
  through to the default: `["Second", "character one"]`.
- `sum_of_evens(n)`: the sum of the even numbers from 2 to `n`.

## What it does not do

dsakit is a library only. It has no command-line programs, and none of its
functions read input or print results; they take arguments and return values.