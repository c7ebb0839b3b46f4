"""Dynamic programming and greedy scans over sequences and strings."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell, or 0."""
    best = 0
    highest_later = 0
    for price in reversed(prices):
        highest_later = max(highest_later, price)
        best = max(best, highest_later - price)
    return best


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous run of ``nums``.

    Raises ValueError for an empty sequence.
    """
    values = iter(nums)
    try:
        first = next(values)
    except StopIteration:
        raise ValueError("max_product() of an empty sequence") from None
    low = high = best = first
    for value in values:
        candidates = (low * value, high * value, value)
        low, high = min(candidates), max(candidates)
        best = max(best, high)
    return best


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first index to the last.

    ``nums[i]`` is the longest jump allowed from index ``i``. Raises
    ValueError for an empty sequence or when the last index is unreachable.
    """
    if not nums:
        raise ValueError("jump() of an empty sequence")
    last = len(nums) - 1
    jumps = 0
    start, reached = 0, 0
    while reached < last:
        furthest = max(
            (index + step for index, step in enumerate(nums[start : reached + 1], start)),
            default=reached,
        )
        if furthest <= reached:
            raise ValueError("the last index cannot be reached")
        start, reached = reached + 1, furthest
        jumps += 1
    return jumps


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index can be reached from the first."""
    furthest = 0
    for index, step in enumerate(nums):
        if index > furthest:
            return False
        furthest = max(furthest, index + step)
    return True


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("max_sub_array() of an empty sequence")
    running = 0
    best = nums[0]
    for value in nums:
        running = max(running + value, value)
        best = max(best, running)
    return best


def length_of_lis(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two groups of equal sum.

    The values must be non-negative; a negative one raises ValueError.
    """
    if any(value < 0 for value in nums):
        raise ValueError("can_partition() needs non-negative values")
    total = sum(nums)
    if total % 2:
        return False
    half = total // 2
    reachable = 1  # bit i set when some subset sums to i
    for value in nums:
        reachable |= reachable << value
    return bool(reachable >> half & 1)


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parentheses substring."""
    if len(s) < 2:
        return 0
    # ending[i] is the length of the longest valid substring ending at i
    ending = [0] * len(s)
    if s[0] == "(" and s[1] == ")":
        ending[1] = 2
    for i in range(2, len(s)):
        if s[i] != ")":
            continue
        if s[i - 1] == "(":
            ending[i] = ending[i - 2] + 2
            continue
        inner_open = i - 2 - ending[i - 2]
        if inner_open < 1 or s[inner_open] != "(":
            continue
        outer_open = inner_open - 1 - ending[inner_open - 1]
        if outer_open < 0 or s[outer_open] != "(":
            continue
        before = ending[outer_open - 1] if outer_open >= 1 else 0
        ending[i] = ending[i - 2] + ending[inner_open - 1] + before + 4
    return max(ending)


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` can be written as a sequence of dictionary words."""
    words = set(word_dict)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in words for start in range(end)
        )
    return reachable[-1]