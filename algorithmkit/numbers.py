"""Number utilities: Fibonacci, spreadsheet column titles, powers and grid paths."""

from __future__ import annotations

import math

__all__ = [
    "fib",
    "convert_to_title",
    "title_to_number",
    "is_power_of_two",
    "my_pow",
    "unique_paths",
]


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def convert_to_title(column_number: int) -> str:
    """Return the spreadsheet column title for a 1-based column number."""
    letters = []
    while column_number > 0:
        column_number, remainder = divmod(column_number - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def title_to_number(title: str) -> int:
    """Return the 1-based column number of a spreadsheet column title."""
    result = 0
    for letter in title:
        result = result * 26 + (ord(letter) - ord("A") + 1)
    return result


def is_power_of_two(n: int) -> bool:
    """Tell whether n is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def my_pow(x: float, n: int) -> float:
    """Raise x to the integer power n by repeated squaring."""
    if n < 0:
        x = math.copysign(math.inf, x) if x == 0 else 1 / x
        n = -n
    result = 1.0
    while n:
        if n & 1:
            result *= x
        x *= x
        n >>= 1
    return result


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an m x n grid."""
    if m <= 0 or n <= 0:
        return 0
    return math.comb(m + n - 2, m - 1)