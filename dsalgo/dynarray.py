"""A growable array of integers that doubles its capacity when full."""

from __future__ import annotations

import threading
from typing import Any


class DynamicArray:
    """A fixed-capacity buffer that reallocates at twice the size when full."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._array: list = [0] * capacity
        self._len = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._array)

    def __len__(self) -> int:
        return self._len

    def append(self, element: Any) -> None:
        """Add ``element`` at the end, growing the buffer if it is full."""
        with self._lock:
            if self._len == len(self._array):
                new_cap = 2 * self._len if self._array else 1
                grown = [0] * new_cap
                grown[: self._len] = self._array
                self._array = grown
            self._array[self._len] = element
            self._len += 1

    def append_many(self, *args: Any) -> None:
        """Append each argument in turn."""
        for element in args:
            self.append(element)

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < self._len:
            raise IndexError("index over len")
        return self._array[index]

    def __str__(self) -> str:
        return "[" + " ".join(str(self._array[i]) for i in range(self._len)) + "]"