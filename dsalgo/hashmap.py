"""Separate-chaining hash map keyed by strings, hashed with XXH64."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

from .hashing import xxh64

_DEFAULT_CAPACITY = 1 << 4
_EXPAND_FACTOR = 0.75


@dataclass(eq=False)
class _Entry:
    key: str
    value: Any


class HashMap:
    """A hash map with power-of-two capacity that doubles at 3/4 load."""

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        if capacity <= _DEFAULT_CAPACITY:
            capacity = _DEFAULT_CAPACITY
        else:
            capacity = 1 << (capacity - 1).bit_length()
        self._buckets: list[list[_Entry]] = [[] for _ in range(capacity)]
        self._len = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """Number of buckets currently allocated."""
        return len(self._buckets)

    def __len__(self) -> int:
        return self._len

    def _bucket(self, key: str) -> list[_Entry]:
        mask = len(self._buckets) - 1
        return self._buckets[xxh64(key.encode("utf-8")) & mask]

    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        with self._lock:
            bucket = self._bucket(key)
            for entry in bucket:
                if entry.key == key:
                    entry.value = value
                    return
            bucket.append(_Entry(key, value))

            new_len = self._len + 1
            if new_len / len(self._buckets) >= _EXPAND_FACTOR:
                self._grow()
            self._len = new_len

    def _grow(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old))]
        for bucket in old:
            for entry in bucket:
                self._bucket(entry.key).append(entry)

    def get(self, key: str) -> Any:
        """Return the value stored under ``key``; raise KeyError if absent."""
        with self._lock:
            for entry in self._bucket(key):
                if entry.key == key:
                    return entry.value
        raise KeyError(key)

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            bucket = self._bucket(key)
            for i, entry in enumerate(bucket):
                if entry.key == key:
                    del bucket[i]
                    self._len -= 1
                    return

    def items(self) -> list[tuple[str, Any]]:
        """Return every ``(key, value)`` pair in bucket order."""
        with self._lock:
            return [(e.key, e.value) for bucket in self._buckets for e in bucket]