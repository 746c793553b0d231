import random

import pytest

from dsalgo.sorting import (
    MaxHeap,
    bubble_sort,
    heap_sort,
    insert_sort,
    merge_sort,
    merge_sort_blocks,
    merge_sort_bottom_up,
    select_good_sort,
    select_sort,
    shell_sort,
)

SOURCE_LISTS = [
    [5],
    [5, 9],
    [5, 9, 1],
    [5, 9, 1, 6, 8, 14, 6, 49, 25, 4, 6, 3],
    [5, 9, 1, 6, 8, 14, 6, 49, 25, 4, 6],
    [5, 9, 1, 6, 8, 14, 6, 49, 25, 4, 6, 3, 2, 4, 23, 467, 85, 23, 567,
     335, 677, 33, 56, 2, 5, 33, 6, 8, 3],
    [5, 9, 1, 6, 8, 14, 6, 49, 25, 4, 6, 3, 45, 67, 2, 5, 24, 56, 34, 24,
     56, 2, 2, 21, 4, 1, 4, 7, 9],
]

_rng = random.Random(1234)
RANDOM_LISTS = [[_rng.randint(-50, 50) for _ in range(size)] for size in range(40)]

EDGE_LISTS = [[], [7] * 10, list(range(20, 0, -1))]

ALL_LISTS = SOURCE_LISTS + RANDOM_LISTS + EDGE_LISTS


@pytest.mark.parametrize("data", ALL_LISTS)
def test_every_sort_orders_the_list(data):
    runs = [list(data) for _ in range(9)]
    bubble_sort(runs[0])
    insert_sort(runs[1])
    select_sort(runs[2])
    select_good_sort(runs[3])
    shell_sort(runs[4])
    heap_sort(runs[5])
    merge_sort(runs[6])
    merge_sort_bottom_up(runs[7])
    merge_sort_blocks(runs[8])
    assert runs == [sorted(data)] * 9


def test_heap_pops_in_descending_order():
    data = [5, 9, 1, 6, 8, 14, 6, 49, 25, 4, 6, 3]
    heap = MaxHeap()
    for v in data:
        heap.push(v)
    assert len(heap) == len(data)
    popped = [heap.pop() for _ in data]
    assert popped == sorted(data, reverse=True)
    assert len(heap) == 0


def test_heap_over_buffer_sorts_buffer():
    data = [5, 9, 1, 6, 8, 14, 6, 49, 25, 4, 6, 3]
    buffer = list(data)
    heap = MaxHeap(buffer)
    for v in buffer:
        heap.push(v)
    for _ in data:
        heap.pop()
    assert buffer == sorted(data)


def test_heap_pop_empty_raises():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.pop()
    heap.push(3)
    assert heap.pop() == 3
    with pytest.raises(IndexError):
        heap.pop()


def test_heap_interleaved_push_pop():
    rng = random.Random(99)
    heap = MaxHeap()
    reference = []
    for step in range(200):
        v = rng.randint(0, 100)
        heap.push(v)
        reference.append(v)
        if step % 3 == 2:
            reference.sort()
            assert heap.pop() == reference.pop()
        assert len(heap) == len(reference)