# algopuzzles

A small library of solutions to well-known algorithm puzzles, grouped by the
data they work on. Everything is plain Python with no third-party
dependencies.

## Installation

```
pip install algopuzzles
```

## Modules

| Module | Contents |
| --- | --- |
| `algopuzzles.bits` | `has_alternating_bits`, `hamming_distance`, `hamming_weight`, `reverse_bits`, `gray_code`, `is_power_of_three`, `single_number`, `missing_number` |
| `algopuzzles.strings` | `length_of_longest_substring`, `min_add_to_make_valid`, `roman_to_int`, `fizz_buzz`, `reverse_string` |
| `algopuzzles.linked_lists` | `ListNode`, `from_iterable`, `to_list`, `delete_node`, `has_cycle`, `remove_nth_from_end`, `reverse_list` |
| `algopuzzles.trees` | `TreeNode`, `build_tree`, `find_tilt`, `convert_bst`, `diameter_of_binary_tree`, `find_bottom_left_value`, `lowest_common_ancestor`, `max_depth`, `is_same_tree`, `is_symmetric` |
| `algopuzzles.arrays` | `max_profit`, `flipgame`, `contains_duplicate`, `pivot_index`, `can_complete_circuit`, `h_index`, `is_monotonic`, `move_zeroes`, `remove_duplicates`, `two_sum`, `trap`, `max_product` |
| `algopuzzles.puzzles` | `RecentCounter`, `broken_calc`, `climb_stairs`, `length_of_lis`, `max_area_of_island`, `search_matrix` |

## Examples

```python
from algopuzzles.arrays import max_profit, trap
from algopuzzles.strings import roman_to_int, fizz_buzz
from algopuzzles.bits import gray_code
from algopuzzles.linked_lists import from_iterable, reverse_list, to_list
from algopuzzles.trees import build_tree, max_depth
from algopuzzles.puzzles import RecentCounter

max_profit([7, 1, 5, 3, 6, 4])            # 5
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) # 6
roman_to_int("MCMXCIV")                   # 1994
fizz_buzz(5)                              # ['1', '2', 'Fizz', '4', 'Buzz']
gray_code(2)                              # [0, 1, 3, 2]

to_list(reverse_list(from_iterable([1, 2, 3])))  # [3, 2, 1]

root = build_tree([3, 9, 20, None, None, 15, 7])
max_depth(root)                           # 3

counter = RecentCounter()
[counter.ping(t) for t in (1, 100, 3001, 3002)]  # [1, 2, 3, 3]
```

## Behaviour worth knowing

- `move_zeroes`, `reverse_string` and `remove_duplicates` change the list they
  are given in place; `convert_bst`, `reverse_list`, `remove_nth_from_end` and
  `delete_node` change the nodes they are given.
- `hamming_distance`, `hamming_weight` and `reverse_bits` treat their inputs as
  unsigned 32-bit words; `has_alternating_bits` reads its input as a signed
  32-bit word and ignores the sign bit.
- `roman_to_int("")` returns `-1`; an unknown character raises `ValueError`.
- `is_monotonic` and `max_product` raise `ValueError` for an empty sequence.
- `flipgame` and `can_complete_circuit` raise `ValueError` when their two
  sequences differ in length.
- `remove_nth_from_end` raises `ValueError` unless `1 <= n <= len(list)`.
- `build_tree` takes values in level order, with `None` for a missing child.
- `max_area_of_island` does not modify the grid it is given.

## What it does not do

The package is a library only: it has no command-line tool, and it reads no
input files. Call the functions from your own code.

## Running the tests

```
pip install "algopuzzles[test]"
pytest
```