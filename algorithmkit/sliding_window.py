"""Sliding window algorithms over strings and sequences."""

from __future__ import annotations

from collections import Counter, deque
from typing import Sequence

__all__ = [
    "max_vowels",
    "longest_subarray",
    "max_consecutive_answers",
    "get_averages",
    "max_sliding_window",
    "length_of_longest_substring",
    "character_replacement",
    "find_anagrams",
    "min_window",
]

_VOWELS = frozenset("aeiou")


def max_vowels(s: str, k: int) -> int:
    """Return the largest number of vowels in any substring of s of length k."""
    if k <= 0 or k > len(s):
        return 0
    count = sum(ch in _VOWELS for ch in s[:k])
    best = count
    for leaving, entering in zip(s, s[k:]):
        count += (entering in _VOWELS) - (leaving in _VOWELS)
        best = max(best, count)
    return best


def longest_subarray(nums: Sequence[int]) -> int:
    """Return the longest run of ones left after deleting exactly one element.

    An empty sequence gives -1.
    """
    if not nums:
        return -1
    best = 0
    left = 0
    zeros = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > 1:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left)
    return best


def max_consecutive_answers(answer_key: str, k: int) -> int:
    """Return the longest run of equal answers reachable by flipping at most k answers."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts = Counter()
    left = 0
    best = 0
    for right, answer in enumerate(answer_key):
        counts[answer == "T"] += 1
        while min(counts[True], counts[False]) > k:
            counts[answer_key[left] == "T"] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def _truncating_div(total: int, size: int) -> int:
    quotient = abs(total) // size
    return -quotient if total < 0 else quotient


def get_averages(nums: Sequence[int], k: int) -> list[int]:
    """Return the k-radius average around each index, or -1 where the radius does not fit."""
    n = len(nums)
    result = [-1] * n
    size = 2 * k + 1
    if k < 0 or size > n:
        return result
    total = sum(nums[:size])
    for center in range(k, n - k):
        result[center] = _truncating_div(total, size)
        entering = center + k + 1
        if entering < n:
            total += nums[entering] - nums[center - k]
    return result


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of k consecutive values."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    window: deque[int] = deque()
    result = []
    for right, value in enumerate(nums):
        while window and nums[window[-1]] < value:
            window.pop()
        window.append(right)
        if window[0] <= right - k:
            window.popleft()
        if right + 1 >= k:
            result.append(nums[window[0]])
    return result


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one letter reachable by replacing at most k characters."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts = Counter()
    left = 0
    most_frequent = 0
    best = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        most_frequent = max(most_frequent, counts[ch])
        while right - left + 1 - most_frequent > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def find_anagrams(s: str, p: str) -> list[int]:
    """Return the start indices of substrings of s that are anagrams of p."""
    size = len(p)
    if size == 0 or size > len(s):
        return []
    wanted = Counter(p)
    window = Counter(s[:size])
    result = [0] if window == wanted else []
    for start in range(1, len(s) - size + 1):
        window[s[start - 1]] -= 1
        window[s[start + size - 1]] += 1
        if window == wanted:
            result.append(start)
    return result


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of s holding every character of t, or ""."""
    if not t or len(t) > len(s):
        return ""
    needed = Counter(t)
    missing = len(t)
    left = 0
    best: tuple[int, int] | None = None
    for right, ch in enumerate(s):
        if needed[ch] > 0:
            missing -= 1
        needed[ch] -= 1
        while missing == 0:
            if best is None or right + 1 - left < best[1] - best[0]:
                best = (left, right + 1)
            needed[s[left]] += 1
            if needed[s[left]] > 0:
                missing += 1
            left += 1
    return "" if best is None else s[best[0]:best[1]]