"""Classic algorithm routines: numbers, linked lists, stacks, hashing, windows, arrays and backtracking."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "hashing",
    "linked_list",
    "numbers",
    "sliding_window",
    "stacks",
]