"""Array and matrix algorithms."""

from __future__ import annotations

from itertools import count, pairwise
from typing import Sequence

__all__ = [
    "are_almost_equal",
    "count_subarrays",
    "find_duplicate",
    "longest_monotonic_subarray",
    "merge_intervals",
    "generate_matrix",
    "maximum_product",
    "is_ideal_permutation",
]


def are_almost_equal(s1: str, s2: str) -> bool:
    """Tell whether at most one swap of two characters in s1 makes it equal to s2."""
    if len(s1) != len(s2):
        return False
    diff = [i for i, (a, b) in enumerate(zip(s1, s2)) if a != b]
    if not diff:
        return True
    if len(diff) == 2:
        i, j = diff
        return s1[i] == s2[j] and s1[j] == s2[i]
    return False


def count_subarrays(nums: Sequence[int], min_k: int, max_k: int) -> int:
    """Count subarrays whose minimum is min_k and whose maximum is max_k."""
    min_pos = max_pos = culprit = -1
    total = 0
    for i, value in enumerate(nums):
        if value < min_k or value > max_k:
            culprit = i
        if value == min_k:
            min_pos = i
        if value == max_k:
            max_pos = i
        total += max(0, min(min_pos, max_pos) - culprit)
    return total


def find_duplicate(nums: Sequence[int]) -> int:
    """Find the repeated value in n + 1 numbers drawn from 1..n by cycle detection."""
    if not nums:
        raise ValueError("nums must not be empty")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    fast = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def longest_monotonic_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing or decreasing run."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = increasing = decreasing = 1
    for previous, current in pairwise(nums):
        if current > previous:
            increasing += 1
            decreasing = 1
        elif current < previous:
            decreasing += 1
            increasing = 1
        else:
            increasing = decreasing = 1
        best = max(best, increasing, decreasing)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping [start, end] intervals and return them sorted."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def generate_matrix(n: int) -> list[list[int]]:
    """Return an n x n matrix filled with 1..n*n in clockwise spiral order."""
    if n <= 0:
        return []
    matrix = [[0] * n for _ in range(n)]
    numbers = count(1)
    top, bottom, left, right = 0, n - 1, 0, n - 1
    while left <= right and top <= bottom:
        for col in range(left, right + 1):
            matrix[top][col] = next(numbers)
        top += 1
        for row in range(top, bottom + 1):
            matrix[row][right] = next(numbers)
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                matrix[bottom][col] = next(numbers)
        bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                matrix[row][left] = next(numbers)
        left += 1
    return matrix


def maximum_product(nums: Sequence[int]) -> int:
    """Return the largest product of any three values."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    ordered = sorted(nums)
    return max(ordered[0] * ordered[1] * ordered[-1], ordered[-1] * ordered[-2] * ordered[-3])


def _sort_counting_inversions(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    middle = (len(values) + 1) // 2
    left, left_inversions = _sort_counting_inversions(values[:middle])
    right, right_inversions = _sort_counting_inversions(values[middle:])
    inversions = left_inversions + right_inversions
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def is_ideal_permutation(nums: Sequence[int]) -> bool:
    """Tell whether the number of global inversions equals the number of local ones."""
    local = sum(a > b for a, b in pairwise(nums))
    _, global_inversions = _sort_counting_inversions(list(nums))
    return global_inversions == local