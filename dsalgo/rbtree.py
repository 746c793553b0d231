"""Classic red-black tree with parent links and duplicate counts."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class RBNode:
    """A tree node; ``times`` counts extra insertions of ``value``."""

    value: Any
    times: int = 0
    left: Optional["RBNode"] = field(default=None, repr=False)
    right: Optional["RBNode"] = field(default=None, repr=False)
    parent: Optional["RBNode"] = field(default=None, repr=False)
    red: bool = False


def _is_red(node: Optional[RBNode]) -> bool:
    return node is not None and node.red


def _parent_of(node: Optional[RBNode]) -> Optional[RBNode]:
    return None if node is None else node.parent


def _left_of(node: Optional[RBNode]) -> Optional[RBNode]:
    return None if node is None else node.left


def _right_of(node: Optional[RBNode]) -> Optional[RBNode]:
    return None if node is None else node.right


def _set_red(node: Optional[RBNode], red: bool) -> None:
    if node is not None:
        node.red = red


def _min_node(node: RBNode) -> RBNode:
    while node.left is not None:
        node = node.left
    return node


def _max_node(node: RBNode) -> RBNode:
    while node.right is not None:
        node = node.right
    return node


def _is_bst(node: Optional[RBNode]) -> bool:
    if node is None:
        return True
    if node.left is not None and not node.value > node.left.value:
        return False
    if node.right is not None and not node.value < node.right.value:
        return False
    return _is_bst(node.left) and _is_bst(node.right)


def _is_234(node: Optional[RBNode]) -> bool:
    if node is None:
        return True
    if _is_red(node) and (_is_red(node.left) or _is_red(node.right)):
        return False
    return _is_234(node.left) and _is_234(node.right)


def _is_balanced(node: Optional[RBNode], black: int) -> bool:
    if node is None:
        return black == 0
    if not _is_red(node):
        black -= 1
    return _is_balanced(node.left, black) and _is_balanced(node.right, black)


def _in_order(node: Optional[RBNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _in_order(node.left)
    for _ in range(node.times + 1):
        yield node.value
    yield from _in_order(node.right)


class RBTree:
    """A red-black search tree; duplicates raise a node's count."""

    def __init__(self) -> None:
        self.root: Optional[RBNode] = None

    def _rotate_left(self, h: Optional[RBNode]) -> None:
        if h is None:
            return
        x = h.right
        h.right = x.left
        if x.left is not None:
            x.left.parent = h
        x.parent = h.parent
        if h.parent is None:
            self.root = x
        elif h.parent.left is h:
            h.parent.left = x
        else:
            h.parent.right = x
        x.left = h
        h.parent = x

    def _rotate_right(self, h: Optional[RBNode]) -> None:
        if h is None:
            return
        x = h.left
        h.left = x.right
        if x.right is not None:
            x.right.parent = h
        x.parent = h.parent
        if h.parent is None:
            self.root = x
        elif h.parent.right is h:
            h.parent.right = x
        else:
            h.parent.left = x
        x.right = h
        h.parent = x

    def add(self, value: Any) -> None:
        """Insert ``value``, or count it once more if already present."""
        if self.root is None:
            self.root = RBNode(value)
            return

        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    new = RBNode(value, parent=node)
                    node.left = new
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    new = RBNode(value, parent=node)
                    node.right = new
                    break
                node = node.right
            else:
                node.times += 1
                return

        self._fix_after_insertion(new)

    def _fix_after_insertion(self, node: Optional[RBNode]) -> None:
        node.red = True
        while node is not None and node is not self.root and node.parent.red:
            grand = _parent_of(_parent_of(node))
            if _parent_of(node) is _left_of(grand):
                uncle = _right_of(grand)
                if _is_red(uncle):
                    _set_red(_parent_of(node), False)
                    _set_red(uncle, False)
                    _set_red(grand, True)
                    node = grand
                else:
                    if node is _right_of(_parent_of(node)):
                        node = _parent_of(node)
                        self._rotate_left(node)
                    _set_red(_parent_of(node), False)
                    _set_red(_parent_of(_parent_of(node)), True)
                    self._rotate_right(_parent_of(_parent_of(node)))
            else:
                uncle = _left_of(grand)
                if _is_red(uncle):
                    _set_red(_parent_of(node), False)
                    _set_red(uncle, False)
                    _set_red(grand, True)
                    node = grand
                else:
                    if node is _left_of(_parent_of(node)):
                        node = _parent_of(node)
                        self._rotate_right(node)
                    _set_red(_parent_of(node), False)
                    _set_red(_parent_of(_parent_of(node)), True)
                    self._rotate_left(_parent_of(_parent_of(node)))
        self.root.red = False

    def delete(self, value: Any) -> None:
        """Remove the node holding ``value`` with all its duplicates, if present."""
        node = self.find(value)
        if node is not None:
            self._delete_node(node)

    def _delete_node(self, node: RBNode) -> None:
        if node.left is not None and node.right is not None:
            successor = _min_node(node.right)
            node.value = successor.value
            node.times = successor.times
            node = successor

        if node.left is not None or node.right is not None:
            replacement = node.left if node.left is not None else node.right
            replacement.parent = node.parent
            if node.parent is None:
                self.root = replacement
            elif node is node.parent.left:
                node.parent.left = replacement
            else:
                node.parent.right = replacement
            node.parent = node.left = node.right = None
            # The removed node was black with a single red child.
            replacement.red = False
            return

        if node.parent is None:
            self.root = None
            return

        if not _is_red(node):
            self._fix_after_deletion(node)

        if node.parent is not None:
            if node is node.parent.left:
                node.parent.left = None
            elif node is node.parent.right:
                node.parent.right = None
            node.parent = None

    def _fix_after_deletion(self, node: RBNode) -> None:
        while node is not self.root and not _is_red(node):
            if node is _left_of(_parent_of(node)):
                brother = _right_of(_parent_of(node))
                if _is_red(brother):
                    _set_red(brother, False)
                    _set_red(_parent_of(node), True)
                    self._rotate_left(_parent_of(node))
                    brother = _right_of(_parent_of(node))
                if not _is_red(_left_of(brother)) and not _is_red(_right_of(brother)):
                    _set_red(brother, True)
                    node = _parent_of(node)
                else:
                    if not _is_red(_right_of(brother)):
                        _set_red(_left_of(brother), False)
                        _set_red(brother, True)
                        self._rotate_right(brother)
                        brother = _right_of(_parent_of(node))
                    _set_red(brother, _parent_of(node).red)
                    _set_red(_parent_of(node), False)
                    _set_red(_right_of(brother), False)
                    self._rotate_left(_parent_of(node))
                    node = self.root
            else:
                brother = _left_of(_parent_of(node))
                if _is_red(brother):
                    _set_red(brother, False)
                    _set_red(_parent_of(node), True)
                    self._rotate_right(_parent_of(node))
                    brother = _left_of(_parent_of(node))
                if not _is_red(_left_of(brother)) and not _is_red(_right_of(brother)):
                    _set_red(brother, True)
                    node = _parent_of(node)
                else:
                    if not _is_red(_left_of(brother)):
                        _set_red(_right_of(brother), False)
                        _set_red(brother, True)
                        self._rotate_left(brother)
                        brother = _left_of(_parent_of(node))
                    _set_red(brother, _parent_of(node).red)
                    _set_red(_parent_of(node), False)
                    _set_red(_left_of(brother), False)
                    self._rotate_right(_parent_of(node))
                    node = self.root
        _set_red(node, False)

    def find(self, value: Any) -> Optional[RBNode]:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def find_min(self) -> Optional[RBNode]:
        """Return the node with the smallest value, or None if empty."""
        return None if self.root is None else _min_node(self.root)

    def find_max(self) -> Optional[RBNode]:
        """Return the node with the largest value, or None if empty."""
        return None if self.root is None else _max_node(self.root)

    def is_valid(self) -> bool:
        """Check ordering, no red node with a red child, and black balance."""
        if self.root is None:
            return True
        if not _is_bst(self.root) or not _is_234(self.root):
            return False
        black = 0
        node = self.root
        while node is not None:
            if not _is_red(node):
                black += 1
            node = node.left
        return _is_balanced(self.root, black)

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending order, each repeated by its count."""
        return _in_order(self.root)