# dsakit

A small collection of classic data structures and algorithms in plain Python.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is inside

- `dsakit.sorting`: `insertion_sort`, `shell_sort`, `bubble_sort`,
  `bubble_sort_with` (ordered by a three-way `compare(a, b)` function),
  `selection_sort`, `sift_down`, `heap_sort`, `merge_sort`,
  `merge_sort_iterative`, `counting_sort`. Each sorts a mutable sequence in
  place and returns `None`.
- `dsakit.stack.Stack`: a LIFO stack with `push`, `pop`, `top`, `is_empty`;
  iteration runs from top to bottom.
- `dsakit.fifo.Queue`: a FIFO queue with `push`, `pop`, `front`, `back`,
  `is_empty`; iteration runs from front to back.
- `dsakit.heap`: `MaxHeap` (`push`, `pop`, `top`, `is_empty`, `render`),
  `heapify`, `top_k_smallest`, `tree_depth`.
- `dsakit.binary_tree`: `TreeNode`, `build_preorder` and the helpers `size`,
  `leaf_count`, `level_count`, `find`, and the generators `preorder`,
  `inorder`, `postorder`, `level_order`, plus `is_complete`.
- `dsakit.seq_list.SeqList`: an array-backed list with positional `insert`,
  `erase`, `alter`, `find` and push/pop at either end.
- `dsakit.singly_linked.SinglyLinkedList` (nodes are `SNode`) and
  `dsakit.doubly_linked.DoublyLinkedList` (nodes are `DNode`). Node-returning
  methods let you insert after (singly linked) or before (doubly linked) a
  given node, and erase at a node.
- `dsakit.dynstring.DynString`: a mutable string with an explicit capacity
  that only grows, with `read_word` and `read_line` for reading from text
  streams.
- `dsakit.char_buffer.CharBuffer`: a simpler character buffer whose capacity
  starts at four and doubles as it fills.
- `dsakit.strutil`: `atoi` (wraps to a 32-bit signed int), `strncat`,
  `strncpy`, `reverse_words`, `find_single_pair`.
- `dsakit.numerics`: `bmi_category`, `solve_quadratic`, `primes_below`,
  `divisor_count`, `add_two_numbers`, `nearly_equal`.

## Examples

```python
from dsakit.sorting import heap_sort
from dsakit.heap import MaxHeap
from dsakit.fifo import Queue

data = [6, 1, 2, 7, 9, 3, 4, 5, 10, 8]
heap_sort(data)
print(data)            # [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]

heap = MaxHeap([22, 33, 123, 53])
heap.push(1432)
print(heap.top())      # 1432

queue = Queue()
for n in range(3):
    queue.push(n)
print(queue.front(), len(queue))   # 0 3
```

```python
from dsakit.binary_tree import build_preorder, preorder

root = build_preorder("ABD##E#H##CF##G##", "#")
print(list(preorder(root)))   # ['A', 'B', 'D', 'E', 'H', 'C', 'F', 'G']
```

Operations that would be undefined on an empty container, such as popping an
empty stack or reading the top of an empty heap, raise `IndexError` rather
than failing silently.

## What it does not include

There is no quicksort in this package: no median-of-three pivot selection,
no partition schemes and no recursive or stack-driven quick sort. For
comparison sorting, use `heap_sort`, `merge_sort` or `merge_sort_iterative`
from `dsakit.sorting`. There is also no command-line program; everything is
used by importing the modules.