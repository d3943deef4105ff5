"""A binary max-heap and helpers built on the array heap layout."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import Any

from .sorting import sift_down

__all__ = ["MaxHeap", "heapify", "top_k_smallest", "tree_depth"]


def heapify(items: MutableSequence) -> None:
    """Rearrange ``items`` in place into max-heap order."""
    n = len(items)
    for parent in range((n - 2) // 2, -1, -1):
        sift_down(items, n, parent)


def _sift_up(items: MutableSequence, child: int) -> None:
    while child > 0:
        parent = (child - 1) // 2
        if items[child] > items[parent]:
            items[child], items[parent] = items[parent], items[child]
            child = parent
        else:
            break


def tree_depth(n: int) -> int:
    """Return the number of rows used to draw a heap of ``n`` elements."""
    if n <= 0:
        return 0
    depth, width = 1, 2
    while width < n:
        width *= 2
        depth += 1
    return depth


def top_k_smallest(items: Sequence, k: int) -> list:
    """Return the ``k`` smallest values of ``items`` in ascending order.

    A max-heap of the first ``k`` values is kept, and any later value smaller
    than its top replaces the top.
    """
    if k < 0 or k > len(items):
        raise ValueError(f"k must be between 0 and {len(items)}, got {k}")
    if k == 0:
        return []
    heap = list(items[:k])
    heapify(heap)
    for value in items[k:]:
        if heap[0] > value:
            heap[0] = value
            sift_down(heap, k, 0)
    return sorted(heap)


class MaxHeap:
    """A max-heap: the largest value is always on top."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._data: list[Any] = list(values)
        heapify(self._data)

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._data.append(value)
        _sift_up(self._data, len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the largest value; raise IndexError when empty."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        data = self._data
        data[0], data[-1] = data[-1], data[0]
        value = data.pop()
        sift_down(data, len(data), 0)
        return value

    def top(self) -> Any:
        """Return the largest value; raise IndexError when empty."""
        if not self._data:
            raise IndexError("top of an empty heap")
        return self._data[0]

    def is_empty(self) -> bool:
        """Return True when the heap holds no values."""
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in their array layout order."""
        return iter(self._data)

    def render(self) -> str:
        """Return the array followed by the heap drawn row by row."""
        data = self._data
        parts = ["".join(f"{value} " for value in data), "\n\n"]
        indent = 2 * (tree_depth(len(data)) - 1)
        row_length = 1
        pos = 0
        while True:
            parts.append(" " * indent)
            indent -= 1
            row = data[pos : pos + row_length]
            pos += len(row)
            parts.append("".join(f"{value} " for value in row))
            parts.append("\n\n")
            if pos >= len(data):
                break
            row_length *= 2
        return "".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"