"""A plain binary tree and its four classic traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding ``data``."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def pre_order(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield data root first, then the left and right subtrees."""
    if node is None:
        return
    yield node.data
    yield from pre_order(node.left)
    yield from pre_order(node.right)


def mid_order(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield data in order: left subtree, root, right subtree."""
    if node is None:
        return
    yield from mid_order(node.left)
    yield node.data
    yield from mid_order(node.right)


def post_order(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield data with both subtrees before their root."""
    if node is None:
        return
    yield from post_order(node.left)
    yield from post_order(node.right)
    yield node.data


def layer_order(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield data level by level, left to right."""
    if node is None:
        return
    queue = deque([node])
    while queue:
        current = queue.popleft()
        yield current.data
        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)