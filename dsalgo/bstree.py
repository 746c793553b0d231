"""Unbalanced binary search tree of values with duplicate counts."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class BSTNode:
    """A search tree node; ``times`` counts extra insertions of ``value``."""

    value: Any
    times: int = 0
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None


def _in_order(node: Optional[BSTNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _in_order(node.left)
    for _ in range(node.times + 1):
        yield node.value
    yield from _in_order(node.right)


class BinarySearchTree:
    """A binary search tree with no balancing; duplicates raise a node's count."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def add(self, value: Any) -> None:
        """Insert ``value``, or count it once more if already present."""
        if self.root is None:
            self.root = BSTNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BSTNode(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BSTNode(value)
                    return
                node = node.right
            else:
                node.times += 1
                return

    def find(self, value: Any) -> Optional[BSTNode]:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def find_parent(self, value: Any) -> Optional[BSTNode]:
        """Return the parent of the node holding ``value``.

        Returns None when the value is absent or sits at the root.
        """
        node = self.root
        if node is None or node.value == value:
            return None
        while node is not None:
            child = node.left if value < node.value else node.right
            if child is None:
                return None
            if child.value == value:
                return node
            node = child
        return None

    def find_min(self) -> Optional[BSTNode]:
        """Return the node with the smallest value, or None if empty."""
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def find_max(self) -> Optional[BSTNode]:
        """Return the node with the largest value, or None if empty."""
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def _replace_child(self, parent: Optional[BSTNode], node: BSTNode,
                       child: Optional[BSTNode]) -> None:
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def delete(self, value: Any) -> None:
        """Remove the node holding ``value`` with all its duplicates, if present."""
        node = self.find(value)
        if node is None:
            return
        parent = self.find_parent(value)

        if node.left is None and node.right is None:
            self._replace_child(parent, node, None)
        elif node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            value_, times = successor.value, successor.times
            self.delete(value_)
            node.value = value_
            node.times = times
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending order, each repeated by its count."""
        return _in_order(self.root)