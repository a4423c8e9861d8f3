"""Counting and lookup algorithms built on dictionaries and counters."""

from __future__ import annotations

from collections import Counter
from itertools import chain
from typing import Sequence

__all__ = [
    "common_chars",
    "relative_sort_array",
    "num_identical_pairs",
    "frequency_sort",
    "contains_nearby_duplicate",
    "is_anagram",
    "find_duplicates",
    "group_anagrams",
    "find_missing_and_repeated_values",
]


def common_chars(words: Sequence[str]) -> list[str]:
    """Return the characters shown in every word, with multiplicity, in sorted order."""
    if not words:
        raise ValueError("at least one word is required")
    common = Counter(words[0])
    for word in words[1:]:
        common &= Counter(word)
    return sorted(common.elements())


def relative_sort_array(arr1: Sequence[int], arr2: Sequence[int]) -> list[int]:
    """Order arr1 by the positions of its values in arr2, then the rest ascending."""
    counts = Counter(arr1)
    result: list[int] = []
    for value in arr2:
        if value in counts:
            result.extend([value] * counts.pop(value))
    result.extend(sorted(counts.elements()))
    return result


def num_identical_pairs(nums: Sequence[int]) -> int:
    """Count index pairs i < j with nums[i] == nums[j]."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def frequency_sort(nums: Sequence[int]) -> list[int]:
    """Sort by increasing frequency, breaking ties by decreasing value."""
    counts = Counter(nums)
    return sorted(nums, key=lambda value: (counts[value], -value))


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether two equal values sit at most k positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def is_anagram(s: str, t: str) -> bool:
    """Tell whether t is a rearrangement of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Return every value each time it reappears after its first occurrence."""
    seen: set[int] = set()
    duplicates = []
    for value in nums:
        if value in seen:
            duplicates.append(value)
        else:
            seen.add(value)
    return duplicates


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group strings that are anagrams of each other."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def find_missing_and_repeated_values(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return [repeated, missing] for an n x n grid meant to hold 1..n*n once each."""
    limit = len(grid) ** 2
    counts = Counter(chain.from_iterable(grid))
    if any(value < 0 or value > limit for value in counts):
        raise ValueError(f"grid values must lie between 0 and {limit}")
    repeated = missing = -1
    for value in range(limit + 1):
        if counts[value] == 0:
            missing = value
        if counts[value] == 2:
            repeated = value
    return [repeated, missing]