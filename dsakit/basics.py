"""Small numeric exercises: sums, a number grid, a switch with fall-through."""

from __future__ import annotations


def sum_and_difference(a: int, b: int) -> tuple[int, int]:
    """Return the sum of ``a`` and ``b`` and the absolute difference between them."""
    return a + b, abs(a - b)


def describe_pair(a: int, b: int) -> str:
    """Return a sentence naming both values."""
    return f"Value of a and b is: {a} and {b}"


def number_square(n: int) -> list[list[int]]:
    """Return an ``n`` by ``n`` grid filled row by row with 1, 2, 3, ..."""
    return [[row * n + col + 1 for col in range(n)] for row in range(n)]


def switch_labels(num: int = 2) -> list[str]:
    """Return the labels a switch on ``num`` emits, with case 2 falling through to the default."""
    if num == 1:
        return ["First"]
    if num == 2:
        return ["Second", "character one"]
    return ["character one"]


def sum_of_evens(n: int) -> int:
    """Sum of all even numbers from 2 up to ``n``."""
    return sum(range(2, n + 1, 2))