"""Quicksort variants sharing one first-element partition scheme."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from .sorting import insert_sort

_SMALL_RANGE = 4


def partition(items: MutableSequence[Any], begin: int, end: int) -> int:
    """Partition ``items[begin..end]`` (inclusive) around ``items[begin]``.

    Returns the final index of the pivot. Everything before it is no greater
    than the pivot and everything after it is no smaller.
    """
    if not 0 <= begin < end < len(items):
        raise ValueError(f"invalid partition range [{begin}, {end}]")

    i, j = begin + 1, end
    while i < j:
        if items[i] > items[begin]:
            items[i], items[j] = items[j], items[i]
            j -= 1
        else:
            i += 1

    # Taking ">=" keeps runs of equal values from landing on the wrong side.
    if items[i] >= items[begin]:
        i -= 1

    items[begin], items[i] = items[i], items[begin]
    return i


def _quick_sort_range(items: MutableSequence[Any], begin: int, end: int) -> None:
    if begin < end:
        loc = partition(items, begin, end)
        _quick_sort_range(items, begin, loc - 1)
        _quick_sort_range(items, loc + 1, end)


def quick_sort(items: MutableSequence[Any]) -> None:
    """Plain recursive quicksort, in place."""
    _quick_sort_range(items, 0, len(items) - 1)


def _quick_sort_small_range(items: MutableSequence[Any], begin: int, end: int) -> None:
    if begin < end:
        if end - begin <= _SMALL_RANGE:
            chunk = list(items[begin:end + 1])
            insert_sort(chunk)
            items[begin:end + 1] = chunk
            return
        loc = partition(items, begin, end)
        _quick_sort_small_range(items, begin, loc - 1)
        _quick_sort_small_range(items, loc + 1, end)


def quick_sort_small_insert(items: MutableSequence[Any]) -> None:
    """Quicksort that hands ranges of five or fewer elements to insertion sort."""
    _quick_sort_small_range(items, 0, len(items) - 1)


def _partition_three_way(items: MutableSequence[Any], begin: int, end: int) -> tuple[int, int]:
    """Split around ``items[begin]`` into <, == and > bands; return the == band."""
    lt, gt, i = begin, end, begin + 1
    pivot = items[begin]
    while i <= gt:
        if items[i] > pivot:
            items[i], items[gt] = items[gt], items[i]
            gt -= 1
        elif items[i] < pivot:
            items[i], items[lt] = items[lt], items[i]
            lt += 1
            i += 1
        else:
            i += 1
    return lt, gt


def _quick_sort_three_way_range(items: MutableSequence[Any], begin: int, end: int) -> None:
    if begin < end:
        lt, gt = _partition_three_way(items, begin, end)
        _quick_sort_three_way_range(items, begin, lt - 1)
        _quick_sort_three_way_range(items, gt + 1, end)


def quick_sort_three_way(items: MutableSequence[Any]) -> None:
    """Quicksort with three-way partitioning, suited to many duplicates."""
    _quick_sort_three_way_range(items, 0, len(items) - 1)


def _quick_sort_tail_range(items: MutableSequence[Any], begin: int, end: int) -> None:
    while begin < end:
        loc = partition(items, begin, end)
        if loc - begin < end - loc:
            _quick_sort_tail_range(items, begin, loc - 1)
            begin = loc + 1
        else:
            _quick_sort_tail_range(items, loc + 1, end)
            end = loc - 1


def quick_sort_tail(items: MutableSequence[Any]) -> None:
    """Quicksort that recurses into the smaller side and loops on the larger."""
    _quick_sort_tail_range(items, 0, len(items) - 1)


def quick_sort_iterative(items: MutableSequence[Any]) -> None:
    """Quicksort driven by an explicit stack of ranges instead of recursion."""
    if len(items) <= 1:
        return
    stack = [(0, len(items) - 1)]
    while stack:
        begin, end = stack.pop()
        loc = partition(items, begin, end)
        if loc + 1 < end:
            stack.append((loc + 1, end))
        if begin < loc - 1:
            stack.append((begin, loc - 1))


def quick_sort_iterative_small_first(items: MutableSequence[Any]) -> None:
    """Explicit-stack quicksort that processes the smaller range first."""
    if len(items) <= 1:
        return
    stack = [(0, len(items) - 1)]
    while stack:
        begin, end = stack.pop()
        loc = partition(items, begin, end)

        right = (loc + 1, end) if loc + 1 < end else None
        left = (begin, loc - 1) if begin < loc - 1 else None

        if right and left:
            left_size = left[1] - left[0]
            right_size = right[1] - right[0]
            if left_size > right_size:
                stack.extend((right, left))
            else:
                stack.extend((left, right))
        else:
            if right:
                stack.append(right)
            if left:
                stack.append(left)