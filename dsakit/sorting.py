"""Classic in-place comparison sorts.

Every sort rearranges the given list in place and returns that same list.
"""

from __future__ import annotations

from typing import Any


def bubble_sort(values: list[Any]) -> list[Any]:
    """Bubble sort, stopping early once a pass makes no swap."""
    n = len(values)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return values


def insertion_sort(values: list[Any]) -> list[Any]:
    """Insertion sort."""
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and key < values[j]:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
    return values


def selection_sort(values: list[Any]) -> list[Any]:
    """Selection sort."""
    n = len(values)
    for i in range(n - 1):
        smallest = min(range(i, n), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def heapify(values: list[Any], size: int, root: int) -> None:
    """Sift ``values[root]`` down so the subtree under it is a max-heap of the first ``size`` items."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(values: list[Any]) -> list[Any]:
    """Heap sort."""
    n = len(values)
    for root in range(n // 2 - 1, -1, -1):
        heapify(values, n, root)
    for end in range(n - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        heapify(values, end, 0)
    return values


def partition(values: list[Any], start: int, end: int) -> int:
    """Lomuto partition of ``values[start:end + 1]`` around ``values[end]``.

    Returns the final index of the pivot.
    """
    pivot = values[end]
    index = start
    for i in range(start, end):
        if values[i] <= pivot:
            values[i], values[index] = values[index], values[i]
            index += 1
    values[index], values[end] = values[end], values[index]
    return index


def quick_sort(values: list[Any], start: int = 0, end: int | None = None) -> list[Any]:
    """Quick sort of the inclusive range ``start..end`` (the whole list by default)."""
    if end is None:
        end = len(values) - 1
    pending = [(start, end)]
    while pending:
        low, high = pending.pop()
        if low < high:
            middle = partition(values, low, high)
            pending.append((middle + 1, high))
            pending.append((low, middle - 1))
    return values