"""Circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class CircularNode:
    """A node of a circular list; ``next`` always refers to a node once linked."""

    data: Any
    next: CircularNode | None = None


class CircularList:
    """A circular singly linked list whose last node links back to the head.

    Positions are 1-based.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: CircularNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _last(self) -> CircularNode:
        node = self.head
        while node.next is not self.head:
            node = node.next
        return node

    def _walk(self, steps: int) -> tuple[CircularNode, CircularNode]:
        """Return (previous, node) after moving ``steps`` links from the head."""
        prev, node = self._last(), self.head
        for _ in range(steps):
            prev, node = node, node.next
        return prev, node

    def _check_position(self, loc: int) -> None:
        if not 1 <= loc <= self._size:
            raise IndexError(f"position {loc} out of range for {self._size} nodes")

    def insert_at_begin(self, value: Any) -> None:
        """Insert ``value`` as the new head."""
        node = CircularNode(value)
        if self.head is None:
            node.next = node
        else:
            node.next = self.head
            self._last().next = node
        self.head = node
        self._size += 1

    def insert_at(self, value: Any, loc: int) -> None:
        """Insert ``value`` at position ``loc``.

        Position 1 makes ``value`` the new head; for any other position the
        value goes after the node reached by moving ``loc - 1`` links from
        the head, so ``loc`` may range from 1 to the length of the list.
        """
        if loc == 1:
            self.insert_at_begin(value)
            return
        self._check_position(loc)
        _, anchor = self._walk(loc - 1)
        anchor.next = CircularNode(value, anchor.next)
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        if self.head is None:
            self.insert_at_begin(value)
            return
        self._last().next = CircularNode(value, self.head)
        self._size += 1

    def delete_begin(self) -> Any:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        removed = self.head
        if removed.next is removed:
            self.head = None
        else:
            self._last().next = removed.next
            self.head = removed.next
        self._size -= 1
        return removed.data

    def delete_at(self, loc: int) -> Any:
        """Remove the node at position ``loc`` and return its value."""
        if loc == 1:
            return self.delete_begin()
        self._check_position(loc)
        prev, node = self._walk(loc - 1)
        prev.next = node.next
        self._size -= 1
        return node.data

    def delete_last(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        return self.delete_at(self._size)

    def __iter__(self) -> Iterator[Any]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node.data
            node = node.next
            if node is self.head:
                return

    def __contains__(self, key: Any) -> bool:
        return any(value == key for value in self)

    def __len__(self) -> int:
        return self._size