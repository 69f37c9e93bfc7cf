# dsakit

A small collection of classic algorithm exercises, written as plain Python functions. Each function takes ordinary Python values (integers, strings, lists, lists of lists) and returns its result. Nothing is printed, and inputs are never changed in place: functions that reorder a sequence return a new list.

It has no dependencies beyond the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.arithmetic`

- `decimal_to_binary(n)`: the binary digits of `n` as a decimal-looking integer (`60` → `111100`).
- `binary_to_decimal(n)`: the reverse (`110010` → `50`).
- `digit_sum(n)`, `reverse_digits(x)`: digit sum (`245` → `11`) and digit reversal (`563` → `365`).
- `factorial(k)`, `n_choose_r(n, r)`: `n_choose_r(8, 2)` → `28`.
- `is_power_of_two(n)`, `primes_up_to(n)`: `primes_up_to(21)` → `[2, 3, 5, 7, 11, 13, 17, 19]`.

These digit routines work on positive integers. Zero and negative inputs give `0`.

### `dsakit.text`

- `is_anagram(first, second)`, `is_palindrome(word)`, `reverse_text(word)`.
- `to_upper(word)`, `to_lower(word)`: ASCII letters only. Other characters are left as they are.

### `dsakit.patterns`

- `butterfly(n)`: the `2 * n` lines of a butterfly drawn with `*`.
- `countdown_triangle(n)`: lines `"1"`, `"21"`, `"321"`, and so on.

Both return a list of strings, one per line.

### `dsakit.sorting`

- `bubble_sort`, `selection_sort`, `insertion_sort`, `counting_sort`: each returns a new sorted list.
- `dutch_national_flag(items)`, `sort_012(items)`: sort lists of 0s, 1s and 2s. Any other value raises `ValueError`.

### `dsakit.searching`

- `binary_search(items, target)`, `binary_search_recursive(items, target)`, `linear_search(items, target)`.
- `search_rotated(items, target)`: search a rotated ascending sequence.
- `peak_index(items)`: index of an interior element larger than both of its neighbours.
- `single_element(items)`: the unpaired value in a sorted sequence. An empty sequence raises `ValueError`.

Searches return an index, or `None` when nothing is found.

### `dsakit.matrix`

- `diagonal_sum(matrix)`: sum of both diagonals, counting a shared centre cell once.
- `spiral_order(matrix)`: elements in clockwise spiral order.
- `find_linear(matrix, target)`, `find_staircase(matrix, target)`: return `(row, column)` or `None`. `find_staircase` expects rows and columns in ascending order.

`spiral_order` and `find_staircase` raise `ValueError` for rows of unequal length.

### `dsakit.partition`

- `max_min_distance(positions, count)`: the largest minimum gap at which `count` animals fit in the stalls. An empty list of positions raises `ValueError`.
- `min_max_pages(pages, students)`: book allocation.
- `min_paint_time(boards, painters)`: painter's partition.

For `min_max_pages` and `min_paint_time`, fewer than one reader or painter raises `ValueError`.

### `dsakit.arrays`

- `max_profit(prices)`, `max_profit_prefix(prices)`: best single buy-then-sell profit. `max_profit` raises `ValueError` on an empty list; `max_profit_prefix` returns `0`.
- `pair_sum(nums, target)`, `pair_sum_sorted(nums, target)`: an index pair `(i, j)` or `None`.
- `majority_element(nums)` returns the majority value or `None`. `majority_element_moore(nums)` returns the Moore's-voting candidate.
- `max_subarray_sum_brute`, `max_subarray_sum_cumulative`, `max_subarray_sum` (Kadane's algorithm).
- `max_water_area(heights)`, `trapped_water(heights)`.
- `product_except_self_brute(nums)`, `product_except_self(nums)`.
- `reverse_array(items)`.

`majority_element_moore` and the three subarray functions raise `ValueError` on an empty list.

## Examples

```python
from dsakit.arrays import max_water_area, product_except_self, trapped_water
from dsakit.matrix import spiral_order
from dsakit.partition import min_max_pages
from dsakit.searching import search_rotated

max_water_area([1, 8, 6, 2, 5, 4, 8, 3, 7])           # 49
product_except_self([1, 2, 3, 4])                      # [24, 12, 8, 6]
trapped_water([4, 2, 0, 6, 3, 2, 5])                   # 11
spiral_order([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])
# [1, 2, 3, 4, 8, 12, 11, 10, 9, 5, 6, 7]
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)               # 4
min_max_pages([2, 1, 3, 4], 2)                         # 6
```

## What it does not do

dsakit is a library only. It has no command-line program and does not read input from the keyboard or from files. Call the functions from your own code.