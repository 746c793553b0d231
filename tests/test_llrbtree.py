import random
from collections import Counter

import pytest

from dsalgo.llrbtree import LLRBNode, LLRBTree

VALUES = [2, 3, 7, 10, 10, 10, 10, 23, 9, 102, 109, 111, 112, 113]


def _tree_of(values):
    tree = LLRBTree()
    for v in values:
        tree.add(v)
    return tree


def test_empty_tree():
    tree = LLRBTree()
    assert (tree.find_min(), tree.find_max(), tree.find(1)) == (None, None, None)
    assert list(tree) == []
    assert tree.is_valid() is True


def test_in_order_is_sorted_with_duplicates():
    tree = _tree_of(VALUES)
    assert list(tree) == sorted(VALUES)
    assert tree.is_valid()


def test_min_max_and_find():
    tree = _tree_of(VALUES)
    assert (tree.find_min().value, tree.find_max().value) == (2, 113)
    assert tree.find(99) is None
    assert tree.find(9).value == 9
    assert tree.find(10).times == 3


def test_example_sequence_and_random_operations():
    scripted = [("d", 9), ("d", 10), ("d", 2), ("d", 3), ("a", 4),
                ("a", 3), ("a", 10), ("d", 111)]
    rng = random.Random(42)
    randomised = [("a" if rng.random() < 0.6 else "d", rng.randrange(200))
                  for _ in range(1500)]
    for start, ops in [(VALUES, scripted), ([], randomised)]:
        tree = _tree_of(start)
        model = Counter(start)
        for op, v in ops:
            if op == "d":
                tree.delete(v)
                model.pop(v, None)
            else:
                tree.add(v)
                model[v] += 1
            assert tree.is_valid()
        assert list(tree) == sorted(model.elements())
    assert _tree_of(VALUES).find(9) is not None


def test_delete_missing_is_noop():
    tree = _tree_of(VALUES)
    tree.delete(999)
    assert list(tree) == sorted(VALUES)


def test_delete_everything_empties_tree():
    tree = _tree_of(VALUES)
    for v in set(VALUES):
        tree.delete(v)
        assert tree.is_valid()
    assert tree.root is None


def test_root_is_black_after_add():
    assert _tree_of([5, 1, 9]).root.red is False


@pytest.mark.parametrize(
    "root",
    [
        LLRBNode(1, right=LLRBNode(2, red=True), red=False),
        LLRBNode(5, left=LLRBNode(8, red=True), red=False),
        LLRBNode(5, left=LLRBNode(3, red=False), red=False),
    ],
    ids=["right-red-link", "unordered", "unbalanced"],
)
def test_broken_trees_are_invalid(root):
    tree = LLRBTree()
    tree.root = root
    assert tree.is_valid() is False