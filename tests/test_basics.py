import math

import pytest

from dsalgo.basics import (
    binary_search,
    binary_search_iter,
    factorial,
    factorial_tail,
    fib,
    follow_links,
    hanoi,
    sum_formula,
    sum_loop,
)

SEARCH_ITEMS = [1, 5, 9, 15, 81, 89, 123, 189, 333]


def test_follow_links_source_example():
    entries = [("I", 3), ("Army", 4), ("You", 1), ("Love", 2), ("!", -1)]
    assert list(follow_links(entries)) == ["I", "Love", "You", "Army", "!"]


def test_follow_links_other_start():
    entries = [("I", 3), ("Army", 4), ("You", 1), ("Love", 2), ("!", -1)]
    assert list(follow_links(entries, 2)) == ["You", "Army", "!"]


@pytest.mark.parametrize("target", SEARCH_ITEMS)
def test_binary_search_finds_every_item(target):
    expected = SEARCH_ITEMS.index(target)
    assert binary_search(SEARCH_ITEMS, target) == expected
    assert binary_search_iter(SEARCH_ITEMS, target) == expected


@pytest.mark.parametrize("target", [500, 0, 2, 334])
def test_binary_search_missing(target):
    found = (binary_search(SEARCH_ITEMS, target), binary_search_iter(SEARCH_ITEMS, target))
    assert found == (-1, -1)


def test_binary_search_empty():
    assert (binary_search([], 5), binary_search_iter([], 5)) == (-1, -1)


@pytest.mark.parametrize("n", [0, 1, 2, 10, 100, 1001])
def test_sums_agree(n):
    assert sum_loop(n) == sum_formula(n)
    assert sum_loop(n) == sum(range(n + 1))


def test_sum_of_hundred():
    assert sum_formula(100) == 5050


def test_fib_starts_with_given_terms():
    assert fib(0, 1, 1) == 1
    assert fib(1, 1, 1) == 1
    assert fib(0, 4, 7) == 4
    assert fib(1, 4, 7) == 7


@pytest.mark.parametrize("n", range(2, 30))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)
    assert fib(n, 3, 4) == fib(n - 1, 3, 4) + fib(n - 2, 3, 4)


def test_fib_negative_raises():
    with pytest.raises(ValueError):
        fib(-1)


@pytest.mark.parametrize("n", range(0, 20))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", range(1, 20))
def test_factorial_tail_agrees(n):
    assert factorial_tail(n, 1) == factorial(n)
    assert factorial_tail(n, 3) == 3 * factorial(n)


def test_factorial_errors():
    with pytest.raises(ValueError):
        factorial(-1)
    with pytest.raises(ValueError):
        factorial_tail(0)


def test_hanoi_single_disc():
    assert list(hanoi(1, "a", "b", "c")) == [("a", "c")]


@pytest.mark.parametrize("n", range(1, 9))
def test_hanoi_move_count(n):
    assert len(list(hanoi(n))) == 2 ** n - 1


@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_hanoi_moves_are_legal(n):
    pegs = {"x": list(range(n, 0, -1)), "y": [], "z": []}
    for src, dst in hanoi(n, "x", "y", "z"):
        disc = pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disc
        pegs[dst].append(disc)
    assert pegs == {"x": [], "y": [], "z": list(range(n, 0, -1))}


def test_hanoi_zero_raises():
    with pytest.raises(ValueError):
        hanoi(0)