# algoset

A library of well-known algorithms and small data structures, written in plain
Python with no third-party dependencies. Everything is a function or a class
you import and call; the package has no command-line program.

## Modules

### `algoset.arrays`

Integer-sequence algorithms:

- `max_area(height)`: most water held between two vertical lines.
- `longest_consecutive(nums)`: length of the longest run of consecutive integers.
- `single_number(nums)`: the one value that does not appear twice (XOR of all).
- `three_sum(nums)`: distinct zero-sum triples, each in ascending order.
- `rotate(nums, k)`: rotate right by `k` places, in place.
- `two_sum(nums, target)`: indices of a pair found by sorting, index of the
  smaller value first; `two_sum_hash(nums, target)`: the same with a dict,
  later index first. Both return `[-1, -1]` when there is no pair.
- `product_except_self(nums)`: product of every other element at each position.
- `move_zeroes(nums)`: move zeros to the end in place, keeping order.
- `max_div_score(nums, divisors)`: the highest-scoring divisor, smallest on a tie.
- `first_missing_positive(nums)`: smallest positive integer not present.
- `trap(height)` and `trap_two_pointer(height)`: trapped rain water, by a
  monotonic stack and by two pointers.
- `daily_temperatures(temperatures)`: days until a warmer day, 0 if never.
- `largest_rectangle_area(heights)`: largest rectangle in a histogram.

### `algoset.search`

- `find_min(nums)`: minimum of a rotated ascending sequence of distinct values
  (`ValueError` if empty).
- `search_rotated(nums, target)`: index of `target` in a rotated sorted sequence, or -1.
- `search_range(nums, target)`: first and last index of `target`, or `[-1, -1]`.
- `search_matrix(matrix, target)`: membership test in a row-wise sorted matrix.

### `algoset.dynamic`

- `max_profit(prices)`: best single buy-then-sell profit, or 0.
- `max_product(nums)`: largest product of a contiguous run (`ValueError` if empty).
- `jump(nums)`: fewest jumps to the last index (`ValueError` if empty or unreachable).
- `can_jump(nums)`: whether the last index is reachable.
- `max_sub_array(nums)`: largest contiguous sum (`ValueError` if empty).
- `length_of_lis(nums)`: length of the longest strictly increasing subsequence.
- `can_partition(nums)`: whether the values split into two equal-sum groups
  (`ValueError` for negative values).
- `longest_valid_parentheses(s)`: length of the longest well-formed substring.
- `word_break(s, word_dict)`: whether `s` is a concatenation of dictionary words.

### `algoset.matrix`

- `rotate_matrix(matrix)`: rotate a square matrix 90 degrees clockwise, in place.
- `spiral_order(matrix)`: elements in clockwise spiral order.
- `set_zeroes(matrix)`: zero every row and column holding a zero, in place.
- `exist(board, word)`: whether `word` can be traced through adjacent cells;
  an empty word is never found.
- `queens_attack_the_king(queens, king)`: queens on an 8x8 board that attack the king.

### `algoset.text`

- `roman_to_int(s)` and `roman_to_int_grouped(s)`: Roman numeral values
  (`ValueError` for characters that are not Roman digits; the first also for "").
- `get_happy_string(n, k)`: the k-th happy string of length `n`, or "".
- `dest_city(paths)`: the first destination that is never a departure, or "".
- `max_power(s)`: longest run of one repeated character (`ValueError` if empty).
- `group_anagrams(strs)`: anagram groups in order of first appearance.
- `check_perfect_number(num)`: whether `num` equals the sum of its proper divisors.
- `detect_capital_use(word)`: all capitals, none, or only the first.
- `partition_labels(s)` and `partition_labels_greedy(s)`: sizes of the most
  parts with no letter in two parts.
- `decode_string(s)`: expands nested `k[text]` groups (`ValueError` for
  unbalanced brackets or a `[` without a count).

### `algoset.combinatorics`

- `palindrome_partitions(s)`: every cut of `s` into palindromes.
- `generate_parenthesis(n)`: every balanced string of `n` pairs.
- `combination_sum(candidates, target)`: multisets of candidates summing to
  `target`, each in non-increasing order (`ValueError` for a candidate below 1).

### `algoset.linkedlist`

`ListNode` (fields `val`, `next`; compared by identity), with `from_values`,
`to_values`, `has_cycle`, `get_intersection_node`, `reverse_list` (recursive),
`reverse_list_iterative`, `is_palindrome` and `merge_k_lists`, which builds a
new sorted list and leaves its inputs unchanged.

### `algoset.trees`

`TreeNode` (fields `val`, `left`, `right`; compared by identity), with
`preorder`, `distance_k(root, target, k)`, `generate_trees(n)` (every
distinct BST of 1..n; subtrees may be shared) and
`sum_of_distances_in_tree(n, edges)`.

### `algoset.containers`

- `LRUCache(capacity)`: `get(key)` returns the value or -1, `put(key, value)`
  evicts the least recently used key when full; a capacity below 1 raises
  `ValueError`. Supports `len()` and `in`.
- `MinStack`: `push`, `pop`, `top`, `get_min`; the last three raise
  `IndexError` on an empty stack.
- `MedianFinder`: `add_num` and `find_median`, which returns a float and raises
  `IndexError` before any number is added.

## Examples

```python
from algoset.arrays import trap, two_sum_hash
from algoset.linkedlist import from_values, reverse_list, to_values
from algoset.containers import LRUCache

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])        # 6
two_sum_hash([2, 7, 11, 15], 9)                   # [1, 0]
to_values(reverse_list(from_values([1, 2, 3])))  # [3, 2, 1]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)      # 1
cache.put(3, 3)   # evicts key 2
cache.get(2)      # -1
```

Functions that work in place (`rotate`, `move_zeroes`, `rotate_matrix`,
`set_zeroes`, `reverse_list`, `reverse_list_iterative`) change what they are
given.

## What it does not do

This is a library only: there is no command-line tool, and nothing is stored
or read from disk.