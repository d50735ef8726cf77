"""Classic algorithm and data-structure solutions, grouped by technique."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "linked_list",
    "matrices",
    "numbers",
    "searching",
    "stacks",
    "strings",
    "structures",
]