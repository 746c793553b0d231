"""In-place comparison sorts and a max-heap that can sort its own buffer."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Optional


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place, stopping early once a pass makes no swap."""
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            return


def _insertion_pass(items: MutableSequence[Any], lo: int, hi: int, step: int = 1) -> None:
    """Insertion sort over the positions ``lo, lo+step, ...`` below ``hi``."""
    for i in range(lo + step, hi, step):
        deal = items[i]
        j = i - step
        while j >= lo and deal < items[j]:
            items[j + step] = items[j]
            j -= step
        items[j + step] = deal


def insert_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by straight insertion."""
    _insertion_pass(items, 0, len(items))


def select_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly selecting the smallest remainder."""
    n = len(items)
    for i in range(n - 1):
        min_index = min(range(i, n), key=items.__getitem__)
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]


def select_good_sort(items: MutableSequence[Any]) -> None:
    """Selection sort that places both the minimum and maximum on each pass."""
    n = len(items)
    for i in range(n // 2):
        last = n - i - 1
        min_index = max_index = i
        for j in range(i + 1, n - i):
            if items[j] > items[max_index]:
                max_index = j
                continue
            if items[j] < items[min_index]:
                min_index = j

        if max_index == i and min_index != last:
            items[last], items[max_index] = items[max_index], items[last]
            items[i], items[min_index] = items[min_index], items[i]
        elif max_index == i and min_index == last:
            items[min_index], items[max_index] = items[max_index], items[min_index]
        else:
            items[i], items[min_index] = items[min_index], items[i]
            items[last], items[max_index] = items[max_index], items[last]


def shell_sort(items: MutableSequence[Any]) -> None:
    """Shell sort with a gap sequence halved each round down to 1."""
    n = len(items)
    step = n // 2
    while step >= 1:
        _insertion_pass(items, 0, n, step)
        step //= 2


class MaxHeap:
    """A binary max-heap stored in a list.

    When given a ``buffer``, the heap reuses it as storage: ``push`` writes into
    it from the front, and ``pop`` leaves each removed maximum just past the end
    of the heap. Pushing every element of a list into a heap over that same list
    and then popping them all therefore leaves the list sorted ascending.
    """

    def __init__(self, buffer: Optional[list] = None) -> None:
        self._array: list = buffer if buffer is not None else []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def push(self, x: Any) -> None:
        """Add ``x`` to the heap."""
        array = self._array
        i = self._size
        if i < len(array):
            array[i] = x
        else:
            array.append(x)

        while i > 0:
            parent = (i - 1) // 2
            if x <= array[parent]:
                break
            array[i] = array[parent]
            i = parent
        array[i] = x
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the largest element."""
        if self._size == 0:
            raise IndexError("pop from empty heap")

        array = self._array
        top = array[0]
        self._size -= 1
        size = self._size
        x = array[size]
        array[size] = top

        i = 0
        while True:
            child = 2 * i + 1
            if child >= size:
                break
            right = child + 1
            if right < size and array[right] > array[child]:
                child = right
            if x >= array[child]:
                break
            array[i] = array[child]
            i = child
        array[i] = x
        return top


def _sift(items: MutableSequence[Any], start: int, count: int) -> None:
    root = start
    child = 2 * root + 1
    while child < count:
        if count - child > 1 and items[child] < items[child + 1]:
            child += 1
        if items[root] < items[child]:
            items[root], items[child] = items[child], items[root]
            root = child
            child = 2 * root + 1
        else:
            return


def heap_sort(items: MutableSequence[Any]) -> None:
    """Build a max-heap bottom-up, then move the top to the end repeatedly."""
    count = len(items)
    for start in range(count // 2 + 1, -1, -1):
        _sift(items, start, count)
    for end in range(count - 1, 0, -1):
        items[end], items[0] = items[0], items[end]
        _sift(items, 0, end)


def _merge(items: MutableSequence[Any], begin: int, mid: int, end: int) -> None:
    """Merge the sorted runs ``items[begin:mid]`` and ``items[mid:end]``."""
    left = items[begin:mid]
    right = items[mid:end]
    merged = []
    l = r = 0
    while l < len(left) and r < len(right):
        if left[l] < right[r]:
            merged.append(left[l])
            l += 1
        else:
            merged.append(right[r])
            r += 1
    merged.extend(left[l:])
    merged.extend(right[r:])
    items[begin:end] = merged


def _merge_sort_range(items: MutableSequence[Any], begin: int, end: int) -> None:
    if end - begin > 1:
        mid = begin + (end - begin + 1) // 2
        _merge_sort_range(items, begin, mid)
        _merge_sort_range(items, mid, end)
        _merge(items, begin, mid, end)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Top-down recursive merge sort, in place."""
    _merge_sort_range(items, 0, len(items))


def merge_sort_bottom_up(items: MutableSequence[Any]) -> None:
    """Bottom-up merge sort, doubling the run length each round."""
    n = len(items)
    step = 1
    while n > step:
        for lo in range(0, n, 2 * step):
            mid = lo + step
            if mid > n:
                break
            _merge(items, lo, mid, min(lo + 2 * step, n))
        step *= 2


def _reverse(items: MutableSequence[Any], l: int, r: int) -> None:
    """Reverse ``items[l..r]`` inclusive."""
    if l < r:
        items[l:r + 1] = items[l:r + 1][::-1]


def _rotate(items: MutableSequence[Any], l: int, mid: int, r: int) -> None:
    """Swap the blocks ``items[l..mid-1]`` and ``items[mid..r]``."""
    _reverse(items, l, mid - 1)
    _reverse(items, mid, r)
    _reverse(items, l, r)


def _merge_in_place(items: MutableSequence[Any], begin: int, mid: int, end: int) -> None:
    """Merge two sorted runs without extra storage, using block rotation."""
    i, j, k = begin, mid, end - 1
    while j - i > 0 and k - j >= 0:
        step = 0
        while j - i > 0 and items[i] <= items[j]:
            i += 1
        while k - j >= 0 and items[j] <= items[i]:
            j += 1
            step += 1
        _rotate(items, i, j - step, j - 1)
        i += step


def merge_sort_blocks(items: MutableSequence[Any]) -> None:
    """Insertion-sort blocks of three, then merge them in place bottom-up."""
    n = len(items)
    block = 3
    a, b = 0, block
    while b <= n:
        _insertion_pass(items, a, b)
        a = b
        b += block
    _insertion_pass(items, a, n)

    while block < n:
        a, b = 0, 2 * block
        while b <= n:
            _merge_in_place(items, a, a + block, b)
            a = b
            b += 2 * block
        m = a + block
        if m < n:
            _merge_in_place(items, a, m, n)
        block *= 2