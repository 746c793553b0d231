"""AVL tree of values with duplicate counts."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class AVLNode:
    """A tree node; ``height`` is the height of the subtree rooted here."""

    value: Any
    times: int = 0
    height: int = 1
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None

    @property
    def balance_factor(self) -> int:
        """Left subtree height minus right subtree height."""
        return _height(self.left) - _height(self.right)


def _height(node: Optional[AVLNode]) -> int:
    return 0 if node is None else node.height


def _update(node: Optional[AVLNode]) -> None:
    if node is not None:
        node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(root: AVLNode) -> AVLNode:
    pivot = root.left
    root.left = pivot.right
    pivot.right = root
    _update(root)
    _update(pivot)
    return pivot


def _rotate_left(root: AVLNode) -> AVLNode:
    pivot = root.right
    root.right = pivot.left
    pivot.left = root
    _update(root)
    _update(pivot)
    return pivot


def _rotate_left_right(node: AVLNode) -> AVLNode:
    node.left = _rotate_left(node.left)
    return _rotate_right(node)


def _rotate_right_left(node: AVLNode) -> AVLNode:
    node.right = _rotate_right(node.right)
    return _rotate_left(node)


def _add(node: Optional[AVLNode], value: Any) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if node.value == value:
        node.times += 1
        return node

    new_root = None
    if value > node.value:
        node.right = _add(node.right, value)
        if node.balance_factor == -2:
            if value > node.right.value:
                new_root = _rotate_left(node)
            else:
                new_root = _rotate_right_left(node)
    else:
        node.left = _add(node.left, value)
        if node.balance_factor == 2:
            if value < node.left.value:
                new_root = _rotate_right(node)
            else:
                new_root = _rotate_left_right(node)

    result = node if new_root is None else new_root
    _update(result)
    return result


def _delete(node: Optional[AVLNode], value: Any) -> Optional[AVLNode]:
    if node is None:
        return None

    if value < node.value:
        node.left = _delete(node.left, value)
        _update(node.left)
    elif value > node.value:
        node.right = _delete(node.right, value)
        _update(node.right)
    else:
        if node.left is None and node.right is None:
            return None
        if node.left is not None and node.right is not None:
            if node.left.height > node.right.height:
                replacement = node.left
                while replacement.right is not None:
                    replacement = replacement.right
                node.value, node.times = replacement.value, replacement.times
                node.left = _delete(node.left, replacement.value)
                _update(node.left)
            else:
                replacement = node.right
                while replacement.left is not None:
                    replacement = replacement.left
                node.value, node.times = replacement.value, replacement.times
                node.right = _delete(node.right, replacement.value)
                _update(node.right)
        else:
            # A lone child in an AVL tree is always a leaf.
            child = node.left if node.left is not None else node.right
            node.value, node.times = child.value, child.times
            node.left = node.right = None
        _update(node)
        return node

    new_root = None
    factor = node.balance_factor
    if factor == 2:
        if node.left.balance_factor >= 0:
            new_root = _rotate_right(node)
        else:
            new_root = _rotate_left_right(node)
    elif factor == -2:
        if node.right.balance_factor <= 0:
            new_root = _rotate_left(node)
        else:
            new_root = _rotate_right_left(node)

    result = node if new_root is None else new_root
    _update(result)
    return result


def _is_leaf(node: AVLNode) -> bool:
    return node.left is None and node.right is None


def _is_valid(node: Optional[AVLNode]) -> bool:
    if node is None:
        return True
    if _is_leaf(node):
        return node.height == 1
    if node.left is not None and node.right is not None:
        if not (node.left.value < node.value < node.right.value):
            return False
        if abs(node.left.height - node.right.height) > 1:
            return False
        if node.height != max(node.left.height, node.right.height) + 1:
            return False
        return _is_valid(node.left) and _is_valid(node.right)
    child = node.left if node.left is not None else node.right
    if child.height != 1 or not _is_leaf(child):
        return False
    if child is node.right:
        return child.value > node.value
    return child.value < node.value


def _in_order(node: Optional[AVLNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _in_order(node.left)
    for _ in range(node.times + 1):
        yield node.value
    yield from _in_order(node.right)


class AVLTree:
    """A height-balanced search tree; duplicates raise a node's count."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None

    def add(self, value: Any) -> None:
        """Insert ``value``, or count it once more if already present."""
        self.root = _add(self.root, value)

    def delete(self, value: Any) -> None:
        """Remove the node holding ``value`` with all its duplicates, if present."""
        self.root = _delete(self.root, value)

    def find(self, value: Any) -> Optional[AVLNode]:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def find_min(self) -> Optional[AVLNode]:
        """Return the node with the smallest value, or None if empty."""
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def find_max(self) -> Optional[AVLNode]:
        """Return the node with the largest value, or None if empty."""
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def is_valid(self) -> bool:
        """Check ordering, recorded heights and the AVL balance condition."""
        return _is_valid(self.root)

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending order, each repeated by its count."""
        return _in_order(self.root)