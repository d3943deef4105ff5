"""In-place sorting algorithms for mutable sequences.

Every sort here reorders the sequence it is given in ascending order and
returns ``None``, the same way ``list.sort`` does.
"""

from __future__ import annotations

import heapq
from collections.abc import Callable, MutableSequence
from itertools import repeat
from typing import Any

__all__ = [
    "insertion_sort",
    "shell_sort",
    "bubble_sort",
    "bubble_sort_with",
    "selection_sort",
    "sift_down",
    "heap_sort",
    "merge_sort",
    "merge_sort_iterative",
    "counting_sort",
]


def _swap(items: MutableSequence, i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def _gapped_insertion(items: MutableSequence, gap: int) -> None:
    """Insertion sort over the interleaved runs that are ``gap`` apart."""
    for i in range(gap, len(items)):
        value = items[i]
        j = i - gap
        while j >= 0 and items[j] > value:
            items[j + gap] = items[j]
            j -= gap
        items[j + gap] = value


def insertion_sort(items: MutableSequence) -> None:
    """Sort by inserting each element into the sorted prefix before it."""
    _gapped_insertion(items, 1)


def shell_sort(items: MutableSequence) -> None:
    """Shell sort with the gap sequence ``gap // 3 + 1``, ending at gap 1."""
    gap = len(items)
    while gap > 1:
        gap = gap // 3 + 1
        _gapped_insertion(items, gap)


def bubble_sort(items: MutableSequence) -> None:
    """Bubble adjacent pairs; stop early once a pass makes no swap."""
    for unsorted_end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(unsorted_end):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)
                swapped = True
        if not swapped:
            break


def bubble_sort_with(
    items: MutableSequence, compare: Callable[[Any, Any], int]
) -> None:
    """Bubble sort ordered by ``compare(a, b)``, which is positive when a > b.

    The sort is stable: elements the comparison calls equal keep their order.
    """
    for unsorted_end in range(len(items) - 1, 0, -1):
        for j in range(unsorted_end):
            if compare(items[j], items[j + 1]) > 0:
                _swap(items, j, j + 1)


def selection_sort(items: MutableSequence) -> None:
    """Select the minimum and the maximum of the unsorted middle in one pass."""
    left, right = 0, len(items) - 1
    while left < right:
        window = range(left, right + 1)
        low = min(window, key=items.__getitem__)
        high = max(window, key=items.__getitem__)
        _swap(items, left, low)
        if high == left:
            # The maximum was just moved to where the minimum used to be.
            high = low
        _swap(items, high, right)
        left += 1
        right -= 1


def sift_down(items: MutableSequence, size: int, parent: int) -> None:
    """Move ``items[parent]`` down a max-heap held in ``items[:size]``."""
    child = parent * 2 + 1
    while child < size:
        if child + 1 < size and items[child + 1] > items[child]:
            child += 1
        if items[child] > items[parent]:
            _swap(items, child, parent)
            parent = child
            child = parent * 2 + 1
        else:
            break


def heap_sort(items: MutableSequence) -> None:
    """Build a max-heap, then repeatedly move its top to the end."""
    n = len(items)
    for parent in range((n - 2) // 2, -1, -1):
        sift_down(items, n, parent)
    for end in range(n - 1, 0, -1):
        _swap(items, 0, end)
        sift_down(items, end, 0)


def _merge(items: MutableSequence, lo: int, mid: int, hi: int) -> None:
    """Merge the sorted runs ``items[lo:mid]`` and ``items[mid:hi]`` stably."""
    items[lo:hi] = list(heapq.merge(items[lo:mid], items[mid:hi]))


def _merge_sort(items: MutableSequence, lo: int, hi: int) -> None:
    if hi - lo < 2:
        return
    mid = (lo + hi) // 2
    _merge_sort(items, lo, mid)
    _merge_sort(items, mid, hi)
    _merge(items, lo, mid, hi)


def merge_sort(items: MutableSequence) -> None:
    """Top-down recursive merge sort; stable."""
    _merge_sort(items, 0, len(items))


def merge_sort_iterative(items: MutableSequence) -> None:
    """Bottom-up merge sort doubling the run width each pass; stable."""
    n = len(items)
    width = 1
    while width < n:
        for lo in range(0, n, 2 * width):
            mid = lo + width
            if mid >= n:
                break
            _merge(items, lo, mid, min(lo + 2 * width, n))
        width *= 2


def counting_sort(items: MutableSequence[int]) -> None:
    """Counting sort over the integer range ``min(items)..max(items)``."""
    if not items:
        return
    low, high = min(items), max(items)
    counts = [0] * (high - low + 1)
    for value in items:
        counts[value - low] += 1
    items[:] = [
        value
        for offset, count in enumerate(counts)
        for value in repeat(low + offset, count)
    ]