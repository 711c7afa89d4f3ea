# algokit

Well-known algorithm exercises written as plain Python functions. It covers
arrays, sums, matrices, linked lists, graphs, arithmetic, text and binary
trees. The package uses only the standard library.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Modules

- `algokit.arrays`
  - `max_profit`, `max_profit_unlimited`, `min_chocolate_difference`
  - `find_duplicate`, `move_zeroes`, `remove_duplicates`, `sort_colors`
  - `max_area`, `find_duplicates`, `can_jump`, `majority_element`
  - `max_card_score`, `merge_sorted`, `reverse_pairs`
- `algokit.sums`
  - `two_sum`, `three_sum`, `four_sum`
  - `subarrays_divisible_by`, `subarray_sum`
  - `has_pair_with_difference`, `can_pair_at_least`
- `algokit.matrices`
  - `set_zeroes`, `game_of_life`, `spiral_order`
- `algokit.linked_list`
  - the `ListNode` class (iterating a node yields the values from it to the
    end of the list) and the `from_values` helper
  - `decimal_value`, `intersection_node`, `has_cycle`, `merge_two_lists`
  - `middle_node`, `multiply_lists` (result modulo 10**9 + 7), `is_palindrome`
  - `delete_duplicates`, `remove_elements`, `reverse_list`, `segregate`
- `algokit.graphs`
  - `bfs`, `flood_fill`, `num_islands`
- `algokit.arithmetic`
  - `add_binary`, `column_title`, `is_happy`, `maximum_product`, `min_moves`
  - `missing_number`, `is_palindrome_number`, `is_power_of_two`,
    `reverse_integer` (0 when the result leaves the signed 32-bit range)
- `algokit.text`
  - `str_str`, `longest_common_prefix`, `valid_palindrome`
  - `is_valid_parentheses`, `generate_parentheses`, `reverse_words`
- `algokit.trees`
  - the `TreeNode` class and the `from_level_order` helper (`None` marks an
    absent child)
  - `binary_tree_paths`, `diameter`, `inorder`, `invert_tree`, `max_depth`
  - `has_path_sum`, `range_sum_bst`, `is_same_tree`, `is_subtree`, `is_symmetric`

## Examples

```python
from algokit.arrays import max_profit
from algokit.sums import two_sum
from algokit.text import generate_parentheses
from algokit.linked_list import from_values, reverse_list
from algokit.trees import from_level_order, max_depth

max_profit([7, 1, 5, 3, 6, 4])                       # 5
two_sum([2, 7, 11, 15], 9)                           # (1, 0)
generate_parentheses(2)                              # ['(())', '()()']
list(reverse_list(from_values([1, 2, 3])))           # [3, 2, 1]
max_depth(from_level_order([3, 9, 20, None, None, 15, 7]))  # 3
```

## Behaviour worth knowing

- `two_sum` returns the pair of indices as `(later, earlier)`, or `None` when
  no pair adds up to the target. `majority_element` returns `None` when no
  value occurs more than half the time.
- These functions change their input in place: `move_zeroes`, `sort_colors`,
  `remove_duplicates`, `merge_sorted`, `set_zeroes`, `game_of_life`,
  `flood_fill` (which also returns the image) and `invert_tree` (which also
  returns the root). Linked-list functions may relink the nodes they are given.
- Inputs that leave a problem without an answer raise `ValueError`, for
  example an empty price list for `max_profit`, fewer than three values for
  `maximum_product`, `k == 0` for `subarrays_divisible_by`, or a string with
  no words for `reverse_words`. `flood_fill` raises `IndexError` when the start
  pixel lies outside the image.

## Scope

This is a library of functions only; it has no command-line tool.

## Running the tests

```
pytest
```