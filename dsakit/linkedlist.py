"""Singly linked list with Floyd cycle detection and removal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A list node holding a value and a link to the next node."""

    data: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that may be given a cycle and have it removed."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        if self.has_cycle():
            raise ValueError("list contains a cycle")
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return
        *_, last = self._nodes()
        last.next = node

    def make_cycle(self, pos: int) -> None:
        """Link the last node back to the node at 1-based position ``pos``."""
        nodes = list(self._nodes())
        if not 1 <= pos <= len(nodes):
            raise IndexError(f"cycle position {pos} out of range for {len(nodes)} nodes")
        nodes[-1].next = nodes[pos - 1]

    def _meeting_point(self) -> Node | None:
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return slow
        return None

    def has_cycle(self) -> bool:
        """Return whether following the links ever returns to a visited node."""
        return self._meeting_point() is not None

    def remove_cycle(self) -> bool:
        """Break the cycle, if any, so the list ends again; return whether one was found."""
        meeting = self._meeting_point()
        if meeting is None:
            return False
        start, probe = self.head, meeting
        while start is not probe:
            start = start.next
            probe = probe.next
        node = start
        while node.next is not start:
            node = node.next
        node.next = None
        return True

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data