"""Leftist min-heap built from mergeable nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


def _dist(node: Optional["LeftistNode"]) -> int:
    return -1 if node is None else node.distance


def _merge(a: Optional["LeftistNode"], b: Optional["LeftistNode"]) -> Optional["LeftistNode"]:
    if a is None:
        return b
    if b is None:
        return a

    top, other = (b, a) if a.data > b.data else (a, b)
    top.right = _merge(top.right, other)

    if _dist(top.right) > _dist(top.left):
        top.left, top.right = top.right, top.left

    top.distance = 0 if top.right is None else _dist(top.right) + 1
    return top


@dataclass(eq=False)
class LeftistNode:
    """A node of a leftist tree; ``distance`` is its null-path length."""

    data: Any
    distance: int = 0
    left: Optional["LeftistNode"] = None
    right: Optional["LeftistNode"] = None

    def merge(self, other: Optional["LeftistNode"]) -> "LeftistNode":
        """Merge the tree rooted here with ``other`` and return the new root."""
        return _merge(self, other)


class LeftistHeap:
    """A min-heap whose push and pop are both merges of leftist trees."""

    def __init__(self) -> None:
        self.root: Optional[LeftistNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def push(self, data: Any) -> None:
        """Add ``data`` to the heap."""
        self.root = _merge(self.root, LeftistNode(data))
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the smallest element."""
        if self.root is None:
            raise IndexError("pop from empty heap")
        data = self.root.data
        self.root = _merge(self.root.left, self.root.right)
        self._size -= 1
        return data