# dsakit

Compact, dependency-free implementations of classic data-structure and
algorithm exercises: number theory helpers, array problems, a singly linked
list, descending sorts and matrix searches and traversals.

Every function takes ordinary Python values and returns its result; nothing
is printed. Invalid input is reported with `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.numtheory`

- `bin_to_dec(binary)` – value of a binary number given as a string of `0`/`1`
  digits or as an integer whose decimal digits are the bits (`1010` → `10`).
  Any other digit raises `ValueError`.
- `dec_to_bin(value)` – binary digits of a non-negative integer, as a string.
- `factorial(n)` – `n!` for `n >= 0`.
- `binomial(n, r)` – `C(n, r)` for `0 <= r <= n`.
- `is_prime(n)` – trial division up to the square root; numbers below 2 are not prime.
- `primes_up_to(limit)` – every prime from 2 to `limit` inclusive.

```python
from dsakit.numtheory import bin_to_dec, binomial, dec_to_bin, primes_up_to

binomial(5, 2)       # 10
dec_to_bin(10)       # "1010"
bin_to_dec("1010")   # 10
primes_up_to(10)     # [2, 3, 5, 7]
```

### `dsakit.arrays`

- `has_duplicate(nums)` – whether any value occurs more than once.
- `max_profit(prices)` – best profit from one buy and a later sell; 0 if none gains.
- `max_subarray_sum(arr)` – largest contiguous sum, using Kadane's algorithm.
- `subarray_sums(arr)` – generator of `(start, end, total)` for every contiguous
  run, `end` inclusive, ordered by start then end.
- `max_subarray_sum_brute(arr)` – the same maximum, found by checking every run.
- `max_subarray_product(nums)` – largest running product, where the running
  product restarts after it falls to zero or below.
- `pair_sum(nums, target)` – two-pointer search in an ascending sequence;
  returns a tuple `(i, j)` or `None`.

The maximum-sum and product functions raise `ValueError` on an empty sequence.

```python
from dsakit.arrays import max_subarray_sum, pair_sum

max_subarray_sum([2, -3, 6, -5, 4, 2])   # 7
pair_sum([2, 7, 11, 15], 13)             # (0, 2)
pair_sum([2, 7, 11, 15], 100)            # None
```

### `dsakit.linked_list`

`Node` is a dataclass with `data` and `next`; iterating over a node yields the
data from it to the end. `build(values)` links values into a list and returns
the head (or `None` for no values), and `traverse(head)` yields each node's data.

```python
from dsakit.linked_list import build, traverse

head = build([7, 11, 66, 50])
list(traverse(head))   # [7, 11, 66, 50]
list(head)             # [7, 11, 66, 50]
```

### `dsakit.sorting`

`bubble_sort`, `selection_sort`, `insertion_sort` and `counting_sort` each take
an iterable and return a new list in descending order. `counting_sort` works on
integers only.

```python
from dsakit.sorting import counting_sort

counting_sort([2, 5, 4, 1, 6, 2, 0, 3])  # [6, 5, 4, 3, 2, 2, 1, 0]
```

### `dsakit.matrix`

- `search_rows(matrix, key)`, `search_columns(matrix, key)` – binary search each
  ascending row or column in turn; return `(row, col)` or `None`.
- `staircase_search_top_right(matrix, key)`, `staircase_search_bottom_left(matrix, key)` –
  search a matrix sorted along rows and columns from one corner.
- `diagonal_sum(matrix)` – sum of both diagonals of a square matrix, a shared
  centre cell counted once.
- `spiral_order(matrix)` – elements read clockwise from the outside in.
- `transpose(matrix)` – new matrix whose rows are the given columns.
- `format_rows(matrix)` – each row on its own line, values separated by spaces;
  rows may differ in length.

Functions other than `search_rows` and `format_rows` raise `ValueError` when the
rows differ in length; `diagonal_sum` also when the matrix is not square.

```python
from dsakit.matrix import format_rows, spiral_order, staircase_search_top_right

grid = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
spiral_order(grid)                      # [1, 2, 3, 4, 8, 12, 16, 15, 14, 13, 9, 5, 6, 7, 11, 10]
staircase_search_top_right(grid, 11)    # (2, 2)
format_rows([[1, 2, 3], [4, 6]])        # "1 2 3\n4 6\n"
```

## What it does not do

dsakit is a library only: it has no command-line program and does not read
input or print results. Call the functions from your own code.