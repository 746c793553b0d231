"""A thread-safe set of integers."""

from __future__ import annotations

import threading
from collections.abc import Iterable


class IntSet:
    """An unordered collection of distinct integers."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: set[int] = set(items)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return self.has(item)

    def add(self, item: int) -> None:
        """Add ``item``; adding an existing item changes nothing."""
        with self._lock:
            self._items.add(item)

    def remove(self, item: int) -> None:
        """Remove ``item`` if present."""
        with self._lock:
            self._items.discard(item)

    def has(self, item: object) -> bool:
        """Return True when ``item`` is in the set."""
        with self._lock:
            return item in self._items

    def clear(self) -> None:
        """Remove every item."""
        with self._lock:
            self._items = set()

    def is_empty(self) -> bool:
        """Return True when the set holds nothing."""
        return not self._items

    def to_list(self) -> list[int]:
        """Return the items as a list in no particular order."""
        with self._lock:
            return list(self._items)