# dsadrills

A small collection of classic algorithms over lists of integers:

- merging two sorted lists (`dsadrills.merging`),
- linear and binary search (`dsadrills.searching`),
- bubble, insertion and selection sort, plus descending sorts
  (`dsadrills.sorting`),
- "binary search on the answer" partition problems: aggressive cows,
  book allocation and painter's partition (`dsadrills.partition`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dsadrills.merging import merge_sorted
from dsadrills.searching import binary_search, linear_search
from dsadrills.sorting import (
    bubble_sort,
    insertion_sort,
    selection_sort,
    sort_descending,
    by_second_descending,
)
from dsadrills.partition import (
    largest_min_distance,
    allocate_books,
    paint_partition,
)

merge_sorted([1, 4, 7], [2, 3, 9])        # [1, 2, 3, 4, 7, 9]
linear_search([5, 3, 8], 8)               # 2
binary_search([1, 3, 5, 7], 6)            # None when absent
insertion_sort([64, 25, 12, 22, 11])      # [11, 12, 22, 25, 64]
sort_descending([7, 9, 8, 2])             # [9, 8, 7, 2]
by_second_descending([(1, 2), (3, 5)])    # [(3, 5), (1, 2)]

largest_min_distance([1, 2, 8, 4, 9], 3)  # 3
allocate_books([2, 1, 3, 4], 2)           # 6
paint_partition([40, 30, 10, 20], 2)      # 60
```

Notes on behaviour:

- `merge_sorted` expects both inputs in ascending order; when two
  elements compare equal, the one from the second input comes first.
- `linear_search` returns the index of the first match; `binary_search`
  expects ascending input. Both return `None` when the target is absent.
- The sorting functions take any iterable and return a new list; the
  input is left untouched.
- `largest_min_distance` sorts the stalls itself. It raises `ValueError`
  when there are no stalls or the cows cannot all be placed.
- `allocate_books` raises `ValueError` when there are more students than
  books.
- `paint_partition` raises `ValueError` when no division works.
- The feasibility checks `can_place_cows`, `can_allocate` and `can_paint`
  are public too. `can_place_cows` expects the stalls in ascending order
  and raises `ValueError` for an empty list.

## Commands

Two interactive commands read whitespace-separated numbers from
standard input.

```
dsadrills-merge
```

asks for the size and elements of two sorted arrays and prints them
merged.

```
dsadrills-search [--linear]
```

asks for an array and a target. By default it sorts the array and uses
binary search, reporting the index in the sorted array; with `--linear`
it scans the array as entered. It prints the index at which the target
was found, or `Element not found`.

Both commands print an error to standard error and exit with status 1
when the input ends early, holds something other than an integer, or
gives a negative size.