"""Binary searches over sorted, rotated and two-dimensional data."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated ascending sequence of distinct values.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("find_min() of an empty sequence")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[left] <= nums[mid]:
            if nums[mid + 1] <= nums[right] and nums[mid + 1] > nums[mid]:
                right = mid
            else:
                left = mid + 1
        else:
            right = mid
    return nums[left]


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    if not nums:
        return -1
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[left] < nums[mid]:
            if nums[left] <= target <= nums[mid]:
                right = mid
            else:
                left = mid + 1
        elif nums[mid + 1] <= target <= nums[right]:
            left = mid + 1
        else:
            right = mid
    return left if nums[left] == target else -1


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in turn, are sorted."""
    if not matrix or not matrix[0]:
        return False
    columns = len(matrix[0])
    low, high = 0, len(matrix) * columns - 1
    while low < high:
        mid = (low + high) // 2
        row, column = divmod(mid, columns)
        if matrix[row][column] >= target:
            high = mid
        else:
            low = mid + 1
    row, column = divmod(low, columns)
    return matrix[row][column] == target