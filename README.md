# algonotes

Plain-Python solutions to well-known algorithm problems, grouped by
technique. The package has no runtime dependencies.

## Installation

```
pip install algonotes
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "algonotes[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algonotes.arrays` | `two_sum`, `three_sum`, `four_sum`, `remove_duplicates`, `next_permutation`, `trap`, `max_subarray`, `merge_intervals`, `plus_one`, `sort_colors`, `merge_sorted`, `max_profit`, `single_number`, `max_product`, `majority_element`, `rotate_array`, `majority_elements`, `missing_number`, `move_zeroes`, `find_max_consecutive_ones`, `reverse_pairs`, `subarray_sum`, `max_events`, `find_lucky`, `max_event_value`, `is_sorted_and_rotated`, `rearrange_by_sign`, `max_free_time` |
| `algonotes.strings` | `longest_palindrome`, `my_atoi`, `roman_to_int`, `longest_common_prefix`, `reverse_words`, `is_isomorphic`, `is_anagram`, `frequency_sort`, `rotate_string`, `remove_outer_parentheses`, `max_depth`, `beauty_sum`, `largest_odd_number`, `kth_character`, `kth_character_with_operations`, `possible_string_count` |
| `algonotes.numbers` | `divide`, `my_pow`, `count_primes`, `is_power_of_two`, `count_good_numbers`, `min_bit_flips` |
| `algonotes.searching` | `binary_search`, `search_insert`, `search_range`, `search_rotated`, `search_rotated_with_duplicates`, `find_min_rotated`, `find_peak_element`, `peak_index_in_mountain`, `find_peak_grid`, `single_non_duplicate`, `median_of_sorted`, `search_matrix`, `search_sorted_matrix`, `split_array`, `min_eating_speed`, `ship_within_days`, `smallest_divisor`, `min_days`, `find_kth_positive` |
| `algonotes.backtracking` | `letter_combinations`, `generate_parentheses`, `solve_sudoku`, `combination_sum`, `combination_sum2`, `combination_sum3`, `solve_n_queens`, `subsets`, `subsets_with_dup`, `word_exists`, `partition_palindromes`, `word_break`, `add_operators` |
| `algonotes.stacks` | `is_valid_parentheses`, `largest_rectangle_area`, `maximal_rectangle`, `remove_k_digits`, `next_greater_element`, `next_greater_elements`, `asteroid_collision`, `sum_subarray_mins`, `sub_array_ranges` |
| `algonotes.matrices` | `rotate_image`, `spiral_order`, `set_zeroes`, `pascal_triangle` |
| `algonotes.linked_list` | `ListNode`, `RandomNode`, `build_list`, `to_values`, and `add_two_numbers`, `remove_nth_from_end`, `reverse_k_group`, `rotate_right`, `copy_random_list`, `has_cycle`, `detect_cycle`, `sort_list`, `get_intersection_node`, `reverse_list`, `is_palindrome_list`, `delete_node`, `odd_even_list`, `middle_node`, `delete_middle` |
| `algonotes.structures` | `MinStack`, `QueueBackedStack`, `StackBackedQueue`, `FindSumPairs` |

## Examples

```python
from algonotes.arrays import two_sum, merge_intervals
from algonotes.strings import roman_to_int
from algonotes.searching import search_range
from algonotes.backtracking import solve_n_queens
from algonotes.linked_list import build_list, reverse_list, to_values
from algonotes.structures import MinStack

two_sum([2, 7, 11, 15], 9)                   # (1, 0)  -- (later index, earlier index)
merge_intervals([[1, 3], [2, 6], [8, 10]])   # [[1, 6], [8, 10]]
roman_to_int("MCMXCIV")                      # 1994
search_range([5, 7, 7, 8, 8, 10], 8)         # (3, 4)
len(solve_n_queens(4))                       # 2

to_values(reverse_list(build_list([1, 2, 3])))  # [3, 2, 1]

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                              # 1
```

## Behaviour worth knowing

- Some functions change the list they are given and return `None`:
  `next_permutation`, `sort_colors`, `merge_sorted`, `rotate_array`,
  `move_zeroes`, `rotate_image` and `set_zeroes`. `remove_duplicates`
  compacts in place and returns the count of unique values; `solve_sudoku`
  fills the board in place and returns whether it succeeded.
- The linked-list functions relink the nodes they are given rather than
  copying them; `is_palindrome_list` restores the list before returning.
  `ListNode` and `RandomNode` compare by identity.
- Invalid input raises: `ValueError` for empty sequences where an answer is
  undefined (for example `max_subarray`, `max_profit`, `find_min_rotated`),
  for malformed arguments (a non-square matrix in `rotate_image`, an unknown
  letter in `roman_to_int`) and similar cases; `ZeroDivisionError` from
  `divide` by zero; `IndexError` when popping or peeking an empty
  `MinStack`, `QueueBackedStack` or `StackBackedQueue`.
- `divide` and `my_atoi` clamp their results to the 32-bit signed range;
  `sum_subarray_mins` and `count_good_numbers` return their results modulo
  1 000 000 007.

## What it does not do

This is a library only: it installs no command-line program and offers no
input or output beyond the functions and classes listed above.