"""Array algorithms: subarray sums, pair search, extremes and linear search."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _require_items(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("sequence must not be empty")


def kadane_sum(values: Sequence[int]) -> int:
    """Kadane's maximum subarray sum.

    The running sum is reset to zero whenever it drops below zero, so a
    sequence with no positive element yields 0 (the empty subarray).
    """
    _require_items(values)
    best = None
    current = 0
    for value in values:
        current = max(current + value, 0)
        best = current if best is None else max(best, current)
    return best


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Maximum sum over all non-empty contiguous subarrays, by exhaustive search."""
    _require_items(values)
    return max(sum(part) for part in subarrays(values))


def max_circular_subarray_sum(values: Sequence[int]) -> int:
    """Maximum subarray sum when the sequence wraps around."""
    normal = kadane_sum(values)
    wrapped = sum(values) + kadane_sum([-v for v in values])
    return max(wrapped, normal)


def pair_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first index pair ``(i, j)``, ``i < j``, whose values add to ``target``."""
    for i, first in enumerate(values):
        for j in range(i + 1, len(values)):
            if first + values[j] == target:
                return i, j
    return None


def subarrays(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield every non-empty contiguous subarray, by start index then by length."""
    for start in range(len(values)):
        for stop in range(start + 1, len(values) + 1):
            yield list(values[start:stop])


def array_max(values: Sequence[int]) -> int:
    """Largest value of a non-empty sequence."""
    _require_items(values)
    return max(values)


def array_min(values: Sequence[int]) -> int:
    """Smallest value of a non-empty sequence."""
    _require_items(values)
    return min(values)


def linear_search(values: Sequence[int], key: int) -> int | None:
    """Return the index of the first occurrence of ``key``, or None."""
    return next((i for i, value in enumerate(values) if value == key), None)