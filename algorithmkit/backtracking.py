"""Backtracking searches: combinations, partitions, queens, grid words and subsets."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Iterator, Sequence

__all__ = [
    "combination_sum",
    "combination_sum3",
    "partition",
    "find_target_sum_ways",
    "solve_n_queens",
    "exist",
    "subsets_with_dup",
]


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every way to reach target by summing candidates, each usable repeatedly.

    Combinations list candidates in input order; results come in the order of a
    search that tries reusing the current candidate before moving past it.
    """
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if start == len(candidates):
            if remaining == 0:
                yield list(chosen)
            return
        value = candidates[start]
        if remaining >= value:
            chosen.append(value)
            yield from search(start, remaining - value, chosen)
            chosen.pop()
        yield from search(start + 1, remaining, chosen)

    return list(search(0, target, []))


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Return every set of k distinct digits from 1 to 9 that sums to n, ascending."""

    def search(digit: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if len(chosen) == k:
            if remaining == 0:
                yield list(chosen)
            return
        if remaining < 0 or digit > remaining or digit > 9:
            return
        chosen.append(digit)
        yield from search(digit + 1, remaining - digit, chosen)
        chosen.pop()
        yield from search(digit + 1, remaining, chosen)

    return list(search(1, n, []))


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def partition(s: str) -> list[list[str]]:
    """Return every way to split s into palindromic pieces."""

    def search(start: int, pieces: list[str]) -> Iterator[list[str]]:
        if start == len(s):
            yield list(pieces)
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if _is_palindrome(piece):
                pieces.append(piece)
                yield from search(end, pieces)
                pieces.pop()

    return list(search(0, []))


def find_target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Count the sign assignments to nums whose signed sum equals target."""
    sums = Counter({0: 1})
    for value in nums:
        following: Counter[int] = Counter()
        for total, ways in sums.items():
            following[total + value] += ways
            following[total - value] += ways
        sums = following
    return sums[target]


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens as rows of 'Q' and '.'.

    Queens are placed column by column, trying rows from top to bottom.
    """
    rows_by_column: list[int] = []
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def render() -> list[str]:
        grid = [["."] * n for _ in range(n)]
        for col, row in enumerate(rows_by_column):
            grid[row][col] = "Q"
        return ["".join(line) for line in grid]

    def search(col: int) -> Iterator[list[str]]:
        if col == n:
            yield render()
            return
        for row in range(n):
            if row in used_rows or row - col in used_diagonals or row + col in used_antidiagonals:
                continue
            rows_by_column.append(row)
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_antidiagonals.add(row + col)
            yield from search(col + 1)
            rows_by_column.pop()
            used_rows.discard(row)
            used_diagonals.discard(row - col)
            used_antidiagonals.discard(row + col)

    return list(search(0))


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether word can be traced through orthogonally adjacent, unrepeated cells."""
    if not word:
        return True
    if not board or not board[0]:
        return False
    height, width = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def search(i: int, j: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= i < height and 0 <= j < width):
            return False
        if (i, j) in visited or board[i][j] != word[index]:
            return False
        visited.add((i, j))
        found = any(
            search(i + di, j + dj, index + 1)
            for di, dj in ((1, 0), (0, 1), (-1, 0), (0, -1))
        )
        visited.discard((i, j))
        return found

    return any(
        search(i, j, 0)
        for i in range(height)
        for j in range(width)
        if board[i][j] == word[0]
    )


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct sub-multiset of nums, each ascending, in lexicographic order."""
    ordered = sorted(nums)
    unique = {
        subset
        for size in range(len(ordered) + 1)
        for subset in combinations(ordered, size)
    }
    return [list(subset) for subset in sorted(unique)]