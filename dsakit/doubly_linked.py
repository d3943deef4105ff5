"""A circular doubly linked list with a sentinel head node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["DNode", "DoublyLinkedList"]


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list."""

    value: Any
    prev: Optional["DNode"] = field(default=None, repr=False)
    next: Optional["DNode"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list; nodes returned by it can be used as positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._sentinel = DNode(None)
        self._sentinel.prev = self._sentinel
        self._sentinel.next = self._sentinel
        self._size = 0
        for value in values:
            self.push_back(value)

    def _check_node(self, node: DNode) -> None:
        if node is None or node is self._sentinel or node.prev is None:
            raise ValueError("node is not part of a list")

    def _link_before(self, node: DNode, value: Any) -> DNode:
        prev = node.prev
        new_node = DNode(value, prev, node)
        prev.next = new_node
        node.prev = new_node
        self._size += 1
        return new_node

    def _unlink(self, node: DNode) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def _nodes(self) -> Iterator[DNode]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node
            node = node.next

    def push_back(self, value: Any) -> DNode:
        """Append ``value`` at the end and return its node."""
        return self._link_before(self._sentinel, value)

    def push_front(self, value: Any) -> DNode:
        """Insert ``value`` at the start and return its node."""
        return self._link_before(self._sentinel.next, value)

    def pop_back(self) -> Any:
        """Remove and return the last value; raise IndexError when empty."""
        if not self._size:
            raise IndexError("pop from an empty list")
        return self._unlink(self._sentinel.prev)

    def pop_front(self) -> Any:
        """Remove and return the first value; raise IndexError when empty."""
        if not self._size:
            raise IndexError("pop from an empty list")
        return self._unlink(self._sentinel.next)

    def find(self, value: Any) -> Optional[DNode]:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def insert_before(self, node: DNode, value: Any) -> DNode:
        """Insert ``value`` right before ``node`` and return the new node."""
        self._check_node(node)
        return self._link_before(node, value)

    def erase(self, node: DNode) -> Any:
        """Remove ``node`` from the list and return its value."""
        self._check_node(node)
        return self._unlink(node)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"