"""Doubly linked list addressable by position from either end."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a :class:`DoubleList`."""

    value: Any
    prev: Optional["ListNode"] = field(default=None, repr=False)
    next: Optional["ListNode"] = field(default=None, repr=False)


class DoubleList:
    """A doubly linked list; insertions and removals are guarded by a lock.

    Positions are counted from zero, either from the head or from the tail.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._len = 0
        self._lock = threading.Lock()
        for value in values:
            self.add_from_tail(0, value)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def _walk(self, n: int, from_tail: bool) -> Optional[ListNode]:
        node = self._tail if from_tail else self._head
        for _ in range(n):
            node = node.prev if from_tail else node.next
        return node

    def _insert(self, n: int, value: Any, from_tail: bool) -> None:
        if n < 0:
            raise IndexError("position must not be negative")
        with self._lock:
            if n != 0 and n >= self._len:
                raise IndexError("index out of range")
            node = self._walk(n, from_tail)
            if node is None:
                before = after = None
            elif from_tail:
                before, after = node, node.next
            else:
                before, after = node.prev, node
            new = ListNode(value, before, after)
            if before is None:
                self._head = new
            else:
                before.next = new
            if after is None:
                self._tail = new
            else:
                after.prev = new
            self._len += 1

    def _locate(self, n: int, from_tail: bool) -> Optional[ListNode]:
        if n < 0:
            raise IndexError("position must not be negative")
        if n >= self._len:
            return None
        return self._walk(n, from_tail)

    def _remove(self, n: int, from_tail: bool) -> Optional[ListNode]:
        with self._lock:
            node = self._locate(n, from_tail)
            if node is None:
                return None
            before, after = node.prev, node.next
            if before is None:
                self._head = after
            else:
                before.next = after
            if after is None:
                self._tail = before
            else:
                after.prev = before
            node.prev = node.next = None
            self._len -= 1
            return node

    def add_from_head(self, n: int, value: Any) -> None:
        """Insert ``value`` before the node at position ``n`` counted from the head.

        ``n == 0`` makes the new node the head; on an empty list only 0 is allowed.
        """
        self._insert(n, value, from_tail=False)

    def add_from_tail(self, n: int, value: Any) -> None:
        """Insert ``value`` after the node at position ``n`` counted from the tail.

        ``n == 0`` makes the new node the tail; on an empty list only 0 is allowed.
        """
        self._insert(n, value, from_tail=True)

    def first(self) -> Optional[ListNode]:
        """Return the head node, or None when the list is empty."""
        return self._head

    def last(self) -> Optional[ListNode]:
        """Return the tail node, or None when the list is empty."""
        return self._tail

    def index_from_head(self, n: int) -> Optional[ListNode]:
        """Return the node at position ``n`` from the head, or None if out of range."""
        return self._locate(n, from_tail=False)

    def index_from_tail(self, n: int) -> Optional[ListNode]:
        """Return the node at position ``n`` from the tail, or None if out of range."""
        return self._locate(n, from_tail=True)

    def pop_from_head(self, n: int) -> Optional[ListNode]:
        """Remove and return the node at position ``n`` from the head, or None."""
        return self._remove(n, from_tail=False)

    def pop_from_tail(self, n: int) -> Optional[ListNode]:
        """Remove and return the node at position ``n`` from the tail, or None."""
        return self._remove(n, from_tail=True)