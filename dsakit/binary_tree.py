"""Binary trees of linked nodes and the usual traversals and counts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from .fifo import Queue

__all__ = [
    "TreeNode",
    "build_preorder",
    "size",
    "leaf_count",
    "level_count",
    "find",
    "preorder",
    "inorder",
    "postorder",
    "level_order",
    "is_complete",
]


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_preorder(text: Iterable[Any], null: Any = "#") -> Optional[TreeNode]:
    """Build a tree from a preorder listing where ``null`` marks a missing child.

    Running out of input counts as a missing child.
    """
    symbols = iter(text)

    def build() -> Optional[TreeNode]:
        symbol = next(symbols, null)
        if symbol == null:
            return None
        node = TreeNode(symbol)
        node.left = build()
        node.right = build()
        return node

    return build()


def size(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return size(root.left) + size(root.right) + 1


def leaf_count(root: Optional[TreeNode]) -> int:
    """Return the number of nodes with no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def level_count(root: Optional[TreeNode], k: int) -> int:
    """Return the number of nodes on level ``k``, counting the root as level 0."""
    if root is None or k < 0:
        return 0
    if k == 0:
        return 1
    return level_count(root.left, k - 1) + level_count(root.right, k - 1)


def find(root: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
    """Return the first node in preorder holding ``value``, or None."""
    if root is None:
        return None
    if root.value == value:
        return root
    return find(root.left, value) or find(root.right, value)


def preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values node, left subtree, right subtree."""
    if root is not None:
        yield root.value
        yield from preorder(root.left)
        yield from preorder(root.right)


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values left subtree, node, right subtree."""
    if root is not None:
        yield from inorder(root.left)
        yield root.value
        yield from inorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values left subtree, right subtree, node."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.value


def level_order(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values level by level, left to right."""
    queue = Queue()
    if root is not None:
        queue.push(root)
    while not queue.is_empty():
        node = queue.pop()
        yield node.value
        for child in (node.left, node.right):
            if child is not None:
                queue.push(child)


def is_complete(root: Optional[TreeNode]) -> bool:
    """Return True when every level is full except the last, filled from the left."""
    queue = Queue([root] if root is not None else [])
    while not queue.is_empty():
        node = queue.pop()
        if node is None:
            break
        queue.push(node.left)
        queue.push(node.right)
    return all(node is None for node in queue)