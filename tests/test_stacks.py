import pytest

from algorithmkit.stacks import next_greater_elements, remove_k_digits, sum_subarray_mins


def _is_subsequence(small, big):
    remaining = iter(big)
    return all(ch in remaining for ch in small)


def test_remove_k_digits_worked_example():
    assert remove_k_digits("1432219", 3) == "1219"


@pytest.mark.parametrize("num", ["7", "0", "9"])
def test_single_digit_becomes_zero(num):
    assert remove_k_digits(num, 1) == "0"


def test_removing_all_digits_gives_zero():
    assert remove_k_digits("10", 2) == "0"
    assert remove_k_digits("98765", 5) == "0"


@pytest.mark.parametrize(
    "num, k", [("1432219", 3), ("10200", 1), ("112", 1), ("9876543210", 4), ("123456", 2)]
)
def test_remove_k_digits_invariants(num, k):
    result = remove_k_digits(num, k)
    assert len(result) <= len(num) - k or result == "0"
    assert result == "0" or not result.startswith("0")
    assert _is_subsequence(result.lstrip("0"), num)


def test_removing_nothing_keeps_number():
    assert remove_k_digits("12345", 0) == "12345"


def test_increasing_digits_drop_the_tail():
    assert remove_k_digits("123456", 2) == "1234"


def test_next_greater_worked_example():
    assert next_greater_elements([1, 2, 1]) == [2, -1, 2]


@pytest.mark.parametrize("nums", [[1, 2, 3, 4, 3], [5, 4, 3, 2, 1], [2, 2, 2], [3, 8, 4, 1, 2]])
def test_next_greater_invariants(nums):
    result = next_greater_elements(nums)
    assert len(result) == len(nums)
    for value, greater in zip(nums, result):
        if greater == -1:
            assert value == max(nums)
        else:
            assert greater > value


def test_next_greater_of_empty_array():
    assert next_greater_elements([]) == []


def test_sum_subarray_mins_worked_example():
    assert sum_subarray_mins([3, 1, 2, 4]) == 17


@pytest.mark.parametrize("value", [1, 5, 30000])
def test_sum_subarray_mins_single_element(value):
    assert sum_subarray_mins([value]) == value


@pytest.mark.parametrize("arr", [[3, 1, 2, 4], [11, 81, 94, 43, 3], [2, 2, 2, 2], [1, 5, 1, 5]])
def test_sum_subarray_mins_reversal_invariant(arr):
    assert sum_subarray_mins(arr) == sum_subarray_mins(list(reversed(arr)))


def test_sum_subarray_mins_is_reduced_modulo():
    result = sum_subarray_mins([10**9] * 50)
    assert 0 <= result < 10**9 + 7


def test_sum_subarray_mins_empty():
    assert sum_subarray_mins([]) == 0