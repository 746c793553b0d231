"""Last-in first-out stacks backed by a list or by linked nodes."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Optional


class ArrayStack:
    """A LIFO stack stored in a list."""

    def __init__(self) -> None:
        self._items: list = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        with self._lock:
            self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        with self._lock:
            if not self._items:
                raise IndexError("pop from empty stack")
            return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkStack:
    """A LIFO stack stored as a singly linked list."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return self._size == 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        with self._lock:
            self._top = _Node(value, self._top)
            self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        with self._lock:
            if self._top is None:
                raise IndexError("pop from empty stack")
            node = self._top
            self._top = node.next
            self._size -= 1
            return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise IndexError("peek at empty stack")
        return self._top.value