"""Monotonic stack algorithms."""

from __future__ import annotations

from typing import Sequence

__all__ = ["remove_k_digits", "next_greater_elements", "sum_subarray_mins"]

_MOD = 10**9 + 7


def remove_k_digits(num: str, k: int) -> str:
    """Remove k digits from num so that the remaining number is as small as possible."""
    if len(num) == 1:
        return "0"
    stack: list[str] = []
    for digit in num:
        while stack and k > 0 and digit < stack[-1]:
            stack.pop()
            k -= 1
        stack.append(digit)
    if k > 0:
        del stack[max(len(stack) - k, 0):]
    return "".join(stack).lstrip("0") or "0"


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each element of a circular array, return the next greater value or -1."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for i in reversed(range(2 * n)):
        value = nums[i % n]
        while stack and stack[-1] <= value:
            stack.pop()
        if i < n:
            result[i] = stack[-1] if stack else -1
        stack.append(value)
    return result


def _previous_smaller_or_equal(arr: Sequence[int]) -> list[int]:
    result = []
    stack: list[int] = []
    for i, value in enumerate(arr):
        while stack and value < arr[stack[-1]]:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(i)
    return result


def _next_smaller(arr: Sequence[int]) -> list[int]:
    n = len(arr)
    result = [n] * n
    stack: list[int] = []
    for i in reversed(range(n)):
        while stack and arr[i] <= arr[stack[-1]]:
            stack.pop()
        result[i] = stack[-1] if stack else n
        stack.append(i)
    return result


def sum_subarray_mins(arr: Sequence[int]) -> int:
    """Return the sum of the minimum of every contiguous subarray, modulo 10**9 + 7."""
    previous = _previous_smaller_or_equal(arr)
    following = _next_smaller(arr)
    total = 0
    for i, (value, before, after) in enumerate(zip(arr, previous, following)):
        total = (total + value * (after - i) * (i - before)) % _MOD
    return total