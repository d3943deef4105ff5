"""A singly linked list of nodes reachable from a head reference."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["SNode", "SinglyLinkedList"]


@dataclass(eq=False)
class SNode:
    """A node of a singly linked list."""

    value: Any
    next: Optional["SNode"] = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list; positions are addressed through its nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[SNode] = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[SNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_back(self, value: Any) -> SNode:
        """Append ``value`` at the end and return its node."""
        new_node = SNode(value)
        if self.head is None:
            self.head = new_node
        else:
            tail = self.head
            while tail.next is not None:
                tail = tail.next
            tail.next = new_node
        return new_node

    def push_front(self, value: Any) -> SNode:
        """Insert ``value`` at the start and return its node."""
        self.head = SNode(value, self.head)
        return self.head

    def pop_back(self) -> Any:
        """Remove and return the last value; raise IndexError when empty."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            value = self.head.value
            self.head = None
            return value
        prev = self.head
        while prev.next.next is not None:
            prev = prev.next
        value = prev.next.value
        prev.next = None
        return value

    def pop_front(self) -> Any:
        """Remove and return the first value; raise IndexError when empty."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        return node.value

    def find(self, value: Any) -> Optional[SNode]:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def insert_after(self, node: SNode, value: Any) -> SNode:
        """Insert ``value`` right after ``node`` and return the new node."""
        if node is None:
            raise ValueError("cannot insert after a missing node")
        node.next = SNode(value, node.next)
        return node.next

    def erase_after(self, node: SNode) -> Any:
        """Remove the node after ``node`` and return its value."""
        if node is None:
            raise ValueError("cannot erase after a missing node")
        victim = node.next
        if victim is None:
            raise ValueError("no node follows the given node")
        node.next = victim.next
        victim.next = None
        return victim.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"