"""Circular doubly linked list where every element is itself a ring."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class Ring:
    """An element of a circular list; a fresh ring links to itself."""

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._next: Ring = self
        self._prev: Ring = self

    def next(self) -> "Ring":
        """Return the following element."""
        return self._next

    def prev(self) -> "Ring":
        """Return the preceding element."""
        return self._prev

    def move(self, n: int) -> "Ring":
        """Return the element ``n`` steps away; negative ``n`` moves backwards."""
        node = self
        if n < 0:
            for _ in range(-n):
                node = node._prev
        else:
            for _ in range(n):
                node = node._next
        return node

    def link(self, other: Optional["Ring"]) -> "Ring":
        """Splice ``other`` in right after this element.

        If ``other`` is on a different ring the two rings are joined; if it is
        on the same ring the elements between are cut out. Returns what used to
        follow this element.
        """
        following = self._next
        if other is not None:
            last = other._prev
            self._next = other
            other._prev = self
            following._prev = last
            last._next = following
        return following

    def unlink(self, n: int) -> "Ring":
        """Remove the ``n`` elements after this one and return them as a ring."""
        if n < 0:
            raise ValueError("n must not be negative")
        return self.link(self.move(n + 1))

    def __len__(self) -> int:
        count = 1
        node = self._next
        while node is not self:
            count += 1
            node = node._next
        return count

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        node = self._next
        while node is not self:
            yield node.value
            node = node._next


def make_ring(n: int) -> Ring:
    """Create a ring of ``n`` elements with empty values."""
    if n <= 0:
        raise ValueError("a ring needs at least one element")
    first = Ring()
    last = first
    for _ in range(n - 1):
        node = Ring()
        node._prev = last
        last._next = node
        last = node
    last._next = first
    first._prev = last
    return first