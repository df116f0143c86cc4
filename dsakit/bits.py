"""Bit manipulation helpers: single-bit operations, counting and XOR tricks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor
from typing import TypeVar

T = TypeVar("T")

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def get_bit(num: int, pos: int) -> bool:
    """Return whether bit ``pos`` of ``num`` is set."""
    return (num & (1 << pos)) != 0


def set_bit(num: int, pos: int) -> int:
    """Return ``num`` with bit ``pos`` set."""
    return num | (1 << pos)


def clear_bit(num: int, pos: int) -> int:
    """Return ``num`` with bit ``pos`` cleared."""
    return num & ~(1 << pos)


def update_bit(num: int, pos: int, value: int) -> int:
    """Return ``num`` with bit ``pos`` replaced by ``value`` (0 or 1)."""
    if value not in (0, 1):
        raise ValueError(f"bit value must be 0 or 1, got {value!r}")
    return clear_bit(num, pos) | (value << pos)


def count_ones(num: int) -> int:
    """Count the set bits of ``num``.

    Negative numbers are counted as 32-bit two's complement words.
    """
    if num < 0:
        num &= _WORD_MASK
    count = 0
    while num:
        num &= num - 1
        count += 1
    return count


def is_power_of_two(num: int) -> bool:
    """Return whether ``num`` is a positive power of two."""
    return num > 0 and not (num & (num - 1))


def subsets(items: Sequence[T]) -> list[list[T]]:
    """Return every subset of ``items``, ordered by the bit mask that selects it."""
    return [
        [item for bit, item in enumerate(items) if mask & (1 << bit)]
        for mask in range(1 << len(items))
    ]


def find_unique(values: Iterable[int]) -> int:
    """Return the one value that appears an odd number of times among pairs."""
    return reduce(xor, values, 0)


def find_two_unique(values: Sequence[int]) -> tuple[int, int]:
    """Return the two values that appear once while every other value appears twice.

    Raises ValueError when the XOR of all values is zero, since the two
    values cannot then be told apart.
    """
    total = find_unique(values)
    if total == 0:
        raise ValueError("no pair of distinct unique values to separate")
    lowest = total & -total
    first = find_unique(v for v in values if v & lowest)
    return first, first ^ total


def find_unique_in_triplets(values: Sequence[int]) -> int:
    """Return the value that appears once while every other value appears three times.

    Values are treated as 32-bit signed integers.
    """
    result = 0
    for pos in range(_WORD_BITS):
        if sum(1 for v in values if get_bit(v, pos)) % 3:
            result = set_bit(result, pos)
    if get_bit(result, _WORD_BITS - 1):
        result -= 1 << _WORD_BITS
    return result