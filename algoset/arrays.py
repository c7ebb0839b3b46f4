"""Algorithms over integer sequences: sums, products, stacks and scans."""

from __future__ import annotations

import operator
from functools import reduce
from itertools import accumulate, count, takewhile
from typing import MutableSequence, Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold together."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        low, high = height[left], height[right]
        best = max(best, min(low, high) * (right - left))
        if low > high:
            right -= 1
        else:
            left += 1
    return best


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def single_number(nums: Sequence[int]) -> int:
    """Return the one value that does not appear twice."""
    return reduce(operator.xor, nums, 0)


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triple of values summing to zero, each in ascending order."""
    ordered = sorted(nums)
    size = len(ordered)
    triples: list[list[int]] = []
    for i, first in enumerate(ordered[:-2]):
        if i > 0 and first == ordered[i - 1]:
            continue
        j, k = i + 1, size - 1
        while j < k:
            total = first + ordered[j] + ordered[k]
            if total == 0:
                triples.append([first, ordered[j], ordered[k]])
                j += 1
                k -= 1
                while j < k and ordered[j] == ordered[j - 1]:
                    j += 1
                while j < k and ordered[k] == ordered[k + 1]:
                    k -= 1
            elif total < 0:
                j += 1
            else:
                k -= 1
    return triples


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two values adding up to ``target`` by sorting.

    The index of the smaller value comes first; ``[-1, -1]`` if there is no pair.
    """
    order = sorted(range(len(nums)), key=nums.__getitem__)
    i, j = 0, len(order) - 1
    while i < j:
        total = nums[order[i]] + nums[order[j]]
        if total < target:
            i += 1
        elif total > target:
            j -= 1
        else:
            return [order[i], order[j]]
    return [-1, -1]


def two_sum_hash(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two values adding up to ``target`` using a dict.

    The later index comes first; ``[-1, -1]`` if there is no pair.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [index, partner]
        seen[value] = index
    return [-1, -1]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    prefix = list(accumulate(nums[:-1], operator.mul, initial=1))
    suffix = list(accumulate(reversed(nums[1:]), operator.mul, initial=1))
    return [left * right for left, right in zip(prefix, reversed(suffix))]


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeros to the end in place, keeping the other values in order."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def max_div_score(nums: Sequence[int], divisors: Sequence[int]) -> int:
    """Return the divisor with the highest score, the smallest one on a tie.

    A divisor's score counts the divisible values in the ascending run of
    sorted ``nums`` that starts at the front and stays at or above it; so
    when the smallest number is below the divisor its score is zero.
    """
    ordered = sorted(nums)
    best_score = -1
    best_divisor = 0
    for divisor in divisors:
        score = sum(
            1 for n in takewhile(lambda n: n >= divisor, ordered) if n % divisor == 0
        )
        if score > best_score or (score == best_score and divisor < best_divisor):
            best_score = score
            best_divisor = divisor
    return best_divisor


def first_missing_positive(nums: Sequence[int]) -> int:
    """Return the smallest positive integer not present in ``nums``."""
    present = set(nums)
    return next(candidate for candidate in count(1) if candidate not in present)


def trap(height: Sequence[int]) -> int:
    """Return the rain water trapped between bars, using a monotonic stack."""
    stack: list[int] = []
    water = 0
    for i, current in enumerate(height):
        while stack and current > height[stack[-1]]:
            bottom = stack.pop()
            if not stack:
                break
            left = stack[-1]
            water += (min(height[left], current) - height[bottom]) * (i - left - 1)
        stack.append(i)
    return water


def trap_two_pointer(height: Sequence[int]) -> int:
    """Return the rain water trapped between bars, walking in from both ends."""
    water = 0
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    while left < right:
        low, high = height[left], height[right]
        left_max = max(left_max, low)
        right_max = max(right_max, high)
        level = min(left_max, right_max)
        if low < high:
            water += level - low
            left += 1
        else:
            water += level - high
            right -= 1
    return water


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Return, for each day, how many days pass until a warmer one (0 if never)."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temperature:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle inside the histogram."""
    best = 0
    stack: list[int] = []
    size = len(heights)
    for i in range(size + 1):
        current = heights[i] if i < size else 0
        while stack and heights[stack[-1]] >= current:
            top = stack.pop()
            left = stack[-1] if stack else -1
            best = max(best, heights[top] * (i - left - 1))
        stack.append(i)
    return best