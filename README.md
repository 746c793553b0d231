# dsalgo

Classic data structures and algorithms in plain Python. The package has no
third-party dependencies.

## Modules

### Sorting

- `dsalgo.sorting` has in-place sorts of any mutable sequence: `bubble_sort`,
  `insert_sort`, `select_sort`, `select_good_sort` (each pass places both
  the minimum and the maximum), `shell_sort` (the gap halves each round),
  `heap_sort`, `merge_sort` (top-down), `merge_sort_bottom_up` and
  `merge_sort_blocks`. The last one insertion-sorts blocks of three and then
  merges them in place by block rotation.
  `MaxHeap` is a binary max-heap with `push`, `pop` and `len()`. If you pass
  it a `buffer` list, it stores its elements in that list. Pushing every
  element of a list into a heap over the same list and then popping them all
  leaves the list sorted in ascending order. `pop` on an empty heap raises
  `IndexError`.
- `dsalgo.quicksort` has `partition(items, begin, end)`, which partitions
  an inclusive range around its first element and returns the pivot's final
  index. It raises `ValueError` for an invalid range. The in-place sorts built
  on it are:
  - `quick_sort`
  - `quick_sort_small_insert`: ranges of five or fewer elements go to
    insertion sort.
  - `quick_sort_three_way`
  - `quick_sort_tail`: it recurses into the smaller side.
  - `quick_sort_iterative` and `quick_sort_iterative_small_first`: these use
    an explicit stack of ranges.

### Small algorithms

`dsalgo.basics` has the following:

- `binary_search` (recursive) and `binary_search_iter` return the index of
  the target, or -1 when it is absent.
- `sum_loop` and `sum_formula` both compute 1 + ... + n.
- `fib(n, a1=1, a2=1)`
- `factorial` and `factorial_tail(n, acc=1)`
- `hanoi(n, source="a", spare="b", target="c")` yields `(from, to)` moves.
- `follow_links(entries, start=0)` walks `(data, next_index)` pairs until it
  reaches a next index of -1.

### Heaps, trees and lists

- `dsalgo.leftist`: `LeftistHeap` is a min-heap with `push`, `pop` and
  `len()`. Its nodes are `LeftistNode`, and `LeftistNode.merge` merges two
  trees.
- `dsalgo.binarytree`: `TreeNode`, with the generators `pre_order`,
  `mid_order`, `post_order` and `layer_order`.
- `dsalgo.ring`: `Ring` is a circular doubly linked list. It has `next`,
  `prev`, `move`, `link`, `unlink`, `len()` and iteration. `make_ring(n)`
  builds a ring of `n` empty elements.
- `dsalgo.doublelist`: `DoubleList` is addressed by position from the head or
  from the tail:
  - `add_from_head` and `add_from_tail` raise `IndexError` when the position
    is out of range.
  - `index_from_head`, `index_from_tail`, `pop_from_head` and `pop_from_tail`
    return a `ListNode`, or `None` when the position is out of range.
  - `first` and `last` return the end nodes.
  - The list also supports `len()` and iteration over its values.
- `dsalgo.queues`: `ArrayQueue` and `LinkQueue`, each with `add`, `remove`
  and `len()`.
- `dsalgo.stacks`: `ArrayStack` and `LinkStack`, each with `push`, `pop`,
  `peek`, `is_empty` and `len()`.

Removing from an empty queue, or popping or peeking an empty stack, raises
`IndexError`.

### Sets, arrays and hashing

- `dsalgo.intset`: `IntSet` has `add`, `remove`, `has`, `in`, `clear`,
  `is_empty`, `to_list` and `len()`.
- `dsalgo.dynarray`: `DynamicArray` doubles its `capacity` when it is full.
  It has `append`, `append_many`, indexing and `len()`. `str()` gives a form
  like `[10 9 8 7]`. An index outside the array raises `IndexError`.
- `dsalgo.hashing`: `xxh64(data, seed=0)` is the 64-bit xxHash of bytes, or
  of a string's UTF-8 encoding.
- `dsalgo.hashmap`: `HashMap` is a separate-chaining table keyed by strings
  and hashed with `xxh64`:
  - Its capacity is a power of two, at least 16.
  - It doubles once the load reaches 0.75.
  - It has `put`, `get`, `delete`, `items`, `len()` and a `capacity`
    property.
  - `get` raises `KeyError` for a missing key.

### Search trees

`dsalgo.bstree.BinarySearchTree`, `dsalgo.avltree.AVLTree`,
`dsalgo.llrbtree.LLRBTree` and `dsalgo.rbtree.RBTree` share these methods:

- `add` and `delete`
- `find`, `find_min` and `find_max`, which return a node or `None`
- iteration in ascending order

A repeated value raises its node's count instead of adding a node, and
iteration repeats the value accordingly. `delete` removes a value together
with all its repeats. `BinarySearchTree` also has `find_parent`. The balanced
trees have `is_valid()`, which checks their invariants.

## Examples

```python
from dsalgo.sorting import heap_sort
from dsalgo.avltree import AVLTree
from dsalgo.hashmap import HashMap

items = [5, 9, 1, 6, 8, 14, 6, 49, 25, 4, 6, 3]
heap_sort(items)            # sorts in place
print(items)

tree = AVLTree()
for value in (2, 3, 7, 10, 10, 23, 9):
    tree.add(value)
tree.delete(9)
print(list(tree), tree.is_valid())

table = HashMap()
table.put("4", "v4")
print(table.get("4"), len(table))
```

## Scope

This is a library only. It has no command-line program. None of its
structures are persisted to storage.

## Install

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```