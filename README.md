# algorithmkit

Well-known algorithm routines as plain Python functions, using only the
standard library.

## Installation

```
pip install algorithmkit
```

## Modules

- `algorithmkit.numbers`: `fib`, `convert_to_title`, `title_to_number`,
  `is_power_of_two`, `my_pow` (integer powers by repeated squaring),
  `unique_paths` (right/down paths across an m x n grid)
- `algorithmkit.linked_list`: the `ListNode` dataclass, `build_list` and
  `list_values` to convert to and from Python sequences,
  `insertion_sort_list` (sorts in place by rearranging node values) and
  `delete_node` (raises `ValueError` for the last node of a list)
- `algorithmkit.stacks`: `remove_k_digits`, `next_greater_elements`
  (circular array, `-1` where there is none), `sum_subarray_mins`
  (modulo 10**9 + 7)
- `algorithmkit.hashing`: `common_chars`, `relative_sort_array`,
  `num_identical_pairs`, `frequency_sort`, `contains_nearby_duplicate`,
  `is_anagram`, `find_duplicates`, `group_anagrams`,
  `find_missing_and_repeated_values`
- `algorithmkit.sliding_window`: `max_vowels`, `longest_subarray`,
  `max_consecutive_answers`, `get_averages`, `max_sliding_window`,
  `length_of_longest_substring`, `character_replacement`, `find_anagrams`,
  `min_window`
- `algorithmkit.arrays`: `are_almost_equal`, `count_subarrays`,
  `find_duplicate`, `longest_monotonic_subarray`, `merge_intervals`,
  `generate_matrix` (spiral fill), `maximum_product`,
  `is_ideal_permutation`
- `algorithmkit.backtracking`: `combination_sum`, `combination_sum3`,
  `partition` (palindrome partitions), `find_target_sum_ways`,
  `solve_n_queens`, `exist` (word search on a grid), `subsets_with_dup`

Where an input cannot be handled, the functions raise `ValueError`: for
example `maximum_product` with fewer than three numbers, `max_sliding_window`
with a window smaller than 1, or `combination_sum` with a candidate that is
not positive.

## Example

```python
from algorithmkit.numbers import convert_to_title, title_to_number
from algorithmkit.sliding_window import min_window
from algorithmkit.backtracking import solve_n_queens
from algorithmkit.linked_list import build_list, insertion_sort_list, list_values

convert_to_title(28)               # "AB"
title_to_number("AB")              # 28
min_window("ADOBECODEBANC", "ABC") # "BANC"
len(solve_n_queens(4))             # 2
list_values(insertion_sort_list(build_list([4, 2, 1, 3])))  # [1, 2, 3, 4]
```

## What it does not do

algorithmkit is a library only. It has no command-line tool, and it reads
no files and keeps no data of its own: every function takes its input as
arguments and returns its result.

## Running the tests

```
pip install -e ".[test]"
pytest
```