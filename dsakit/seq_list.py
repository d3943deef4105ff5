"""A sequence list: a contiguous array with positional insert and erase."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

__all__ = ["SeqList"]


class SeqList:
    """An array-backed list addressed by position."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(values)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for length {len(self._items)}"
            )

    def insert(self, pos: int, value: Any) -> None:
        """Insert ``value`` before position ``pos``; ``pos`` may equal the length."""
        if not 0 <= pos <= len(self._items):
            raise IndexError(
                f"insert position {pos} out of range for length {len(self._items)}"
            )
        self._items.insert(pos, value)

    def erase(self, pos: int) -> Any:
        """Remove and return the value at ``pos``."""
        self._check_index(pos)
        return self._items.pop(pos)

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the end."""
        self.insert(len(self._items), value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the start."""
        self.insert(0, value)

    def pop_back(self) -> Any:
        """Remove and return the last value; raise IndexError when empty."""
        return self.erase(len(self._items) - 1)

    def pop_front(self) -> Any:
        """Remove and return the first value; raise IndexError when empty."""
        return self.erase(0)

    def find(self, value: Any) -> Optional[int]:
        """Return the position of the first ``value``, or None if absent."""
        for index, item in enumerate(self._items):
            if item == value:
                return index
        return None

    def alter(self, index: int, value: Any) -> None:
        """Replace the value at ``index`` with ``value``."""
        self._check_index(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"