"""First-in first-out queues backed by a list or by linked nodes."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Optional


class ArrayQueue:
    """A FIFO queue stored in a list."""

    def __init__(self) -> None:
        self._items: list = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def add(self, value: Any) -> None:
        """Enqueue ``value`` at the back."""
        with self._lock:
            self._items.append(value)

    def remove(self) -> Any:
        """Dequeue and return the front value."""
        with self._lock:
            if not self._items:
                raise IndexError("remove from empty queue")
            return self._items.pop(0)


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkQueue:
    """A FIFO queue stored as a singly linked list."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self._size

    def add(self, value: Any) -> None:
        """Enqueue ``value`` at the back."""
        with self._lock:
            node = _Node(value)
            if self._tail is None:
                self._head = node
            else:
                self._tail.next = node
            self._tail = node
            self._size += 1

    def remove(self) -> Any:
        """Dequeue and return the front value."""
        with self._lock:
            if self._head is None:
                raise IndexError("remove from empty queue")
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
            self._size -= 1
            return node.value