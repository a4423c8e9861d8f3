import math
from collections import Counter

import pytest

from algorithmkit.backtracking import (
    combination_sum,
    combination_sum3,
    exist,
    find_target_sum_ways,
    partition,
    solve_n_queens,
    subsets_with_dup,
)

BOARD = [
    ["A", "B", "C", "E"],
    ["S", "F", "C", "S"],
    ["A", "D", "E", "E"],
]


def test_combination_sum_worked_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


@pytest.mark.parametrize("candidates,target", [([2, 3, 5], 8), ([3, 4, 7], 14), ([1, 2], 5)])
def test_combination_sum_invariants(candidates, target):
    result = combination_sum(candidates, target)
    assert result
    assert len({tuple(c) for c in result}) == len(result)
    for combo in result:
        assert sum(combo) == target
        assert set(combo) <= set(candidates)
        assert combo == sorted(combo)


def test_combination_sum_unreachable():
    assert not combination_sum([4, 6], 7)


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


@pytest.mark.parametrize("k,n", [(3, 7), (3, 9), (4, 20), (2, 10)])
def test_combination_sum3_invariants(k, n):
    result = combination_sum3(k, n)
    assert result
    for combo in result:
        assert len(combo) == k
        assert sum(combo) == n
        assert combo == sorted(set(combo))
        assert all(1 <= d <= 9 for d in combo)
    assert result == sorted(result)


def test_combination_sum3_all_digits():
    assert combination_sum3(9, 45) == [list(range(1, 10))]


def test_combination_sum3_impossible():
    assert not combination_sum3(2, 100)


def test_partition_worked_example():
    assert partition("aab") == [["a", "a", "b"], ["aa", "b"]]


@pytest.mark.parametrize("text", ["racecar", "abba", "abc", "a"])
def test_partition_invariants(text):
    result = partition(text)
    assert [list(text)] == result[:1]
    assert len({tuple(p) for p in result}) == len(result)
    for pieces in result:
        assert "".join(pieces) == text
        assert all(piece == piece[::-1] for piece in pieces)


def test_partition_of_distinct_letters_is_unique():
    assert partition("xyz") == [["x", "y", "z"]]


@pytest.mark.parametrize("n,target", [(5, 3), (6, 0), (4, 2), (7, -1)])
def test_target_sum_ones(n, target):
    assert find_target_sum_ways([1] * n, target) == math.comb(n, (n + target) // 2)


@pytest.mark.parametrize("nums,target", [([1, 2, 3, 4], 2), ([5, 1, 7], 3), ([2, 2, 2], 6)])
def test_target_sum_symmetric(nums, target):
    assert find_target_sum_ways(nums, target) == find_target_sum_ways(nums, -target)


def test_target_sum_out_of_reach():
    assert find_target_sum_ways([1, 2, 3], 7) == 0


def test_n_queens_four():
    assert solve_n_queens(4) == [
        ["..Q.", "Q...", "...Q", ".Q.."],
        [".Q..", "...Q", "Q...", "..Q."],
    ]


def test_n_queens_one():
    assert solve_n_queens(1) == [["Q"]]


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_none(n):
    assert not solve_n_queens(n)


@pytest.mark.parametrize("n", [5, 6])
def test_n_queens_invariants(n):
    boards = solve_n_queens(n)
    assert boards
    assert len({tuple(b) for b in boards}) == len(boards)
    for board in boards:
        assert len(board) == n
        queens = [(r, c) for r, line in enumerate(board) for c, ch in enumerate(line) if ch == "Q"]
        assert len(queens) == n
        assert len({r for r, _ in queens}) == n
        assert len({c for _, c in queens}) == n
        assert len({r - c for r, c in queens}) == n
        assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("word,expected", [("ABCCED", True), ("SEE", True), ("ABCB", False), ("XYZ", False)])
def test_exist(word, expected):
    assert exist(BOARD, word) is expected


def test_exist_leaves_board_unchanged():
    board = [row[:] for row in BOARD]
    exist(board, "ABCCED")
    assert board == BOARD


def test_exist_no_cell_reuse():
    assert exist([["A", "A"]], "AAA") is False
    assert exist([["A", "A"]], "AA") is True


def test_subsets_with_dup_invariants():
    nums = [2, 1, 2]
    result = subsets_with_dup(nums)
    assert result == sorted(result)
    assert len({tuple(s) for s in result}) == len(result)
    assert [] in result and sorted(nums) in result
    for subset in result:
        assert subset == sorted(subset)
        assert not Counter(subset) - Counter(nums)


def test_subsets_with_dup_distinct_values_gives_power_set():
    nums = [4, 1, 3, 2]
    assert len(subsets_with_dup(nums)) == 2 ** len(nums)


def test_subsets_with_dup_all_equal():
    nums = [7, 7, 7]
    assert subsets_with_dup(nums) == [[7] * size for size in range(len(nums) + 1)]