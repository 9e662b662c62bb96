# dsakit

Classic algorithm routines written as plain Python functions over lists and
strings: binary search, "binary search on the answer", comparison sorts,
frequency counting, small recursive problems and array puzzles.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `dsakit.search`

- `first_occurrence(items, target)` — index of the first `target` in a sorted
  sequence, or `None` when it is absent.
- `aggressive_cows(stalls, cows)` — largest minimum distance at which `cows`
  can be placed in the stalls (the stalls are sorted first). Raises
  `ValueError` for no stalls or when the cows cannot be placed.
- `allocate_books(pages, students)` — smallest possible maximum number of
  pages given to one student, each student getting a contiguous run of books.
  Raises `ValueError` when there are more students than books or fewer than one.
- `painter_partition(boards, painters)` — least time in which the painters can
  paint contiguous runs of boards. Raises `ValueError` for fewer than one painter.
- Feasibility checks used by the searches: `can_place_cows(stalls, cows,
  min_distance)`, `can_allocate(pages, students, max_pages)`,
  `can_paint(boards, painters, max_time)`.

### `dsakit.arrays`

- `max_subarray_sum(values)` — largest sum of a non-empty contiguous run
  (Kadane). Raises `ValueError` on empty input.
- `pair_sum_indices(values, target)` — first index pair `(i, j)` with `i < j`
  whose values add up to `target`; raises `ValueError` when there is none.
- `equilibrium_index(values)` — first index whose left and right sums are
  equal, or `None`.

### `dsakit.hashing`

- `char_counts(text)` — a `Counter` of the characters in `text`.
- `count_queries(values, queries)` — for each query, how often it occurs
  among `values`.
- `frequency_extremes(values)` — `((most, count), (least, count))`; ties go
  to the value seen first. Raises `ValueError` on empty input.

### `dsakit.recursion`

- `subsets(items)` — generator of every subset as a list, in input order;
  the full set comes first and the empty set last.
- `reverse_in_place(items)` — reverses a mutable sequence in place.
- `factorial(n)` — `n!`; `TypeError` for non-integers, `ValueError` for
  negative `n`.
- `repeat_name(n, name)` — a list holding `name` `n` times.
- `is_palindrome(text)` — whether `text` reads the same both ways.

### `dsakit.sorting`

`bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort` and
`selection_sort` each take any iterable and return a new sorted list,
leaving the input untouched.

### `dsakit.cli`

- `read_square_matrix(tokens)` — builds an `n × n` matrix from a size token
  followed by `n * n` integer tokens; extra tokens are ignored, and missing
  ones raise `ValueError`.
- `format_matrix(rows)` — one row per line, elements separated by spaces.

## Example

    >>> from dsakit.search import aggressive_cows, allocate_books
    >>> aggressive_cows([1, 2, 8, 4, 9], 3)
    3
    >>> allocate_books([15, 17, 20], 2)
    32
    >>> from dsakit.arrays import pair_sum_indices
    >>> pair_sum_indices([2, 7, 11, 15], 17)
    (0, 3)

## Command line

`dsakit-matrix` reads a size `n` followed by `n * n` integers, from a file
given as its argument or from standard input, and prints the matrix one row
per line:

    echo "2 1 2 3 4" | dsakit-matrix

prints

    1 2
    3 4

Malformed input is reported on standard error with exit status 1.

## What it does not do

The command line covers only the matrix reader. The other routines are
library functions; there are no commands for them.