"""Left-leaning red-black tree of values with duplicate counts."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class LLRBNode:
    """A tree node; ``red`` is the colour of the link from its parent.

    ``times`` counts extra insertions of the same value.
    """

    value: Any
    times: int = 0
    left: Optional["LLRBNode"] = None
    right: Optional["LLRBNode"] = None
    red: bool = True


_OPPOSITE = {"left": "right", "right": "left"}


def _is_red(node: Optional[LLRBNode]) -> bool:
    return node is not None and node.red


def _rotate(h: LLRBNode, side: str) -> LLRBNode:
    """Rotate towards ``side``: the child on the other side becomes the root."""
    other = _OPPOSITE[side]
    x = getattr(h, other)
    setattr(h, other, getattr(x, side))
    setattr(x, side, h)
    x.red = h.red
    h.red = True
    return x


def _flip_colors(h: LLRBNode) -> None:
    for node in (h, h.left, h.right):
        node.red = not node.red


def _move_red_left(h: LLRBNode) -> LLRBNode:
    _flip_colors(h)
    if _is_red(h.right.left):
        h.right = _rotate(h.right, "right")
        h = _rotate(h, "left")
        _flip_colors(h)
    return h


def _move_red_right(h: LLRBNode) -> LLRBNode:
    _flip_colors(h)
    if _is_red(h.left.left):
        h = _rotate(h, "right")
        _flip_colors(h)
    return h


def _add(node: Optional[LLRBNode], value: Any) -> LLRBNode:
    if node is None:
        return LLRBNode(value)

    if value == node.value:
        node.times += 1
    elif value > node.value:
        node.right = _add(node.right, value)
    else:
        node.left = _add(node.left, value)

    if _is_red(node.right) and not _is_red(node.left):
        return _rotate(node, "left")
    if _is_red(node.left) and _is_red(node.left.left):
        node = _rotate(node, "right")
    if _is_red(node.left) and _is_red(node.right):
        _flip_colors(node)
    return node


def _outermost(node: LLRBNode, side: str) -> LLRBNode:
    while getattr(node, side) is not None:
        node = getattr(node, side)
    return node


def _fix_up(node: LLRBNode) -> LLRBNode:
    if _is_red(node.right):
        node = _rotate(node, "left")
    if _is_red(node.left) and _is_red(node.left.left):
        node = _rotate(node, "right")
    if _is_red(node.left) and _is_red(node.right):
        _flip_colors(node)
    return node


def _delete_min(node: LLRBNode) -> Optional[LLRBNode]:
    if node.left is None:
        return None
    if not _is_red(node.left) and not _is_red(node.left.left):
        node = _move_red_left(node)
    node.left = _delete_min(node.left)
    return _fix_up(node)


def _delete(node: LLRBNode, value: Any) -> Optional[LLRBNode]:
    if value < node.value:
        if not _is_red(node.left) and not _is_red(node.left.left):
            node = _move_red_left(node)
        node.left = _delete(node.left, value)
        return _fix_up(node)

    if _is_red(node.left):
        node = _rotate(node, "right")

    if value == node.value and node.right is None:
        return None

    if not _is_red(node.right) and not _is_red(node.right.left):
        node = _move_red_right(node)

    if value == node.value:
        successor = _outermost(node.right, "left")
        node.value = successor.value
        node.times = successor.times
        node.right = _delete_min(node.right)
    else:
        node.right = _delete(node.right, value)
    return _fix_up(node)


def _ordered(node: Optional[LLRBNode]) -> bool:
    if node is None:
        return True
    if node.left is not None and not node.value > node.left.value:
        return False
    if node.right is not None and not node.value < node.right.value:
        return False
    return _ordered(node.left) and _ordered(node.right)


def _left_leaning_23(node: Optional[LLRBNode]) -> bool:
    if node is None:
        return True
    if _is_red(node.right) or (_is_red(node) and _is_red(node.left)):
        return False
    return _left_leaning_23(node.left) and _left_leaning_23(node.right)


def _black_height_is(node: Optional[LLRBNode], black: int) -> bool:
    if node is None:
        return black == 0
    remaining = black if node.red else black - 1
    return _black_height_is(node.left, remaining) and _black_height_is(node.right, remaining)


class LLRBTree:
    """A left-leaning red-black search tree; duplicates raise a node's count."""

    def __init__(self) -> None:
        self.root: Optional[LLRBNode] = None

    def add(self, value: Any) -> None:
        """Insert ``value``, or count it once more if already present."""
        self.root = _add(self.root, value)
        self.root.red = False

    def delete(self, value: Any) -> None:
        """Remove the node holding ``value`` with all its duplicates, if present."""
        if self.find(value) is None:
            return
        if not _is_red(self.root.left) and not _is_red(self.root.right):
            self.root.red = True
        self.root = _delete(self.root, value)
        if self.root is not None:
            self.root.red = False

    def find(self, value: Any) -> Optional[LLRBNode]:
        """Return the node whose value equals ``value``, or None."""
        node = self.root
        while node is not None and value != node.value:
            node = node.left if value < node.value else node.right
        return node

    def find_min(self) -> Optional[LLRBNode]:
        """Return the leftmost node, or None for an empty tree."""
        return None if self.root is None else _outermost(self.root, "left")

    def find_max(self) -> Optional[LLRBNode]:
        """Return the rightmost node, or None for an empty tree."""
        return None if self.root is None else _outermost(self.root, "right")

    def is_valid(self) -> bool:
        """Check ordering, left-leaning 2-3 shape and black balance."""
        if self.root is None:
            return True
        if not _ordered(self.root) or not _left_leaning_23(self.root):
            return False
        black = 0
        node = self.root
        while node is not None:
            black += not node.red
            node = node.left
        return _black_height_is(self.root, black)

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending order, each repeated by its count."""
        pending: list[LLRBNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield from [node.value] * (node.times + 1)
            node = node.right