"""Small introductory algorithms: index-linked lists, binary search,
summation, Fibonacci, factorial and the towers of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

END = -1


def follow_links(entries: Sequence[tuple[Any, int]], start: int = 0) -> Iterator[Any]:
    """Yield data from ``(data, next_index)`` entries, following the indices.

    The walk begins at ``start`` and stops after an entry whose next index is -1.
    """
    data, next_index = entries[start]
    while True:
        yield data
        if next_index == END:
            return
        data, next_index = entries[next_index]


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Recursive binary search over sorted ``items``; -1 when absent."""

    def search(lo: int, hi: int) -> int:
        if lo > hi:
            return -1
        mid = (lo + hi) // 2
        middle = items[mid]
        if middle == target:
            return mid
        if middle > target:
            return search(lo, mid - 1)
        return search(mid + 1, hi)

    return search(0, len(items) - 1)


def binary_search_iter(items: Sequence[Any], target: Any) -> int:
    """Iterative binary search over sorted ``items``; -1 when absent."""
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        middle = items[mid]
        if middle == target:
            return mid
        if middle > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def sum_loop(n: int) -> int:
    """Sum 1 + 2 + ... + n by adding each term."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_formula(n: int) -> int:
    """Sum 1 + 2 + ... + n in closed form."""
    return ((1 + n) * n) // 2


def fib(n: int, a1: int = 1, a2: int = 1) -> int:
    """Return the ``n``-th term of the sequence starting ``a1, a2``."""
    if n < 0:
        raise ValueError("n must not be negative")
    for _ in range(n):
        a1, a2 = a2, a1 + a2
    return a1


def factorial(n: int) -> int:
    """Return n!, with 0! = 1."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def factorial_tail(n: int, acc: int = 1) -> int:
    """Accumulator form of factorial: returns ``acc * n!`` for ``n >= 1``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    while n > 1:
        acc *= n
        n -= 1
    return acc


def hanoi(n: int, source: str = "a", spare: str = "b",
          target: str = "c") -> Iterator[tuple[str, str]]:
    """Yield ``(from, to)`` moves that carry ``n`` discs from source to target."""
    if n < 1:
        raise ValueError("n must be at least 1")

    def tower(k: int, a: str, b: str, c: str) -> Iterator[tuple[str, str]]:
        if k == 1:
            yield a, c
            return
        yield from tower(k - 1, a, c, b)
        yield a, c
        yield from tower(k - 1, b, a, c)

    return tower(n, source, spare, target)