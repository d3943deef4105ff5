"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["Queue"]


class Queue:
    """A FIFO queue: values leave from the front in the order they arrived."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def push(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def back(self) -> Any:
        """Return the back value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("back of an empty queue")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"