import random
from collections import Counter

import pytest

from dsalgo.rbtree import RBTree

VALUES = [2, 3, 7, 10, 10, 10, 10, 23, 9, 102, 109, 111, 112, 113]


def _build(values):
    tree = RBTree()
    for v in values:
        tree.add(v)
    return tree


def _check_parents(node, parent=None):
    if node is None:
        return True
    if node.parent is not parent:
        return False
    return _check_parents(node.left, node) and _check_parents(node.right, node)


def test_min_max_and_find():
    tree = _build(VALUES)
    assert tree.find_min().value == 2
    assert tree.find_max().value == 113
    assert tree.find(99) is None
    assert tree.find(9).value == 9


def test_iteration_repeats_duplicates():
    tree = _build(VALUES)
    assert list(tree) == sorted(VALUES)
    assert tree.find(10).times == 3


def test_source_delete_sequence():
    tree = _build(VALUES)
    for v in (9, 10, 2, 3):
        tree.delete(v)
    for v in (4, 3, 10):
        tree.add(v)
    tree.delete(111)
    assert tree.find(9) is None
    assert tree.is_valid()
    assert list(tree) == [3, 4, 7, 10, 23, 102, 109, 112, 113]

    for v in (3, 4, 7, 10, 23, 102, 109, 112, 112):
        tree.delete(v)
    assert list(tree) == [113]
    assert tree.is_valid()


def test_empty_tree():
    tree = RBTree()
    assert tree.find_min() is None
    assert tree.find_max() is None
    assert tree.find(1) is None
    assert tree.is_valid()
    assert list(tree) == []


def test_delete_absent_is_noop():
    tree = _build([5, 1, 8])
    tree.delete(42)
    assert list(tree) == [1, 5, 8]


def test_delete_last_element_empties_tree():
    tree = _build([5])
    tree.delete(5)
    assert tree.root is None
    assert list(tree) == []


def test_root_is_black():
    tree = _build(range(20))
    assert tree.root.red is False
    assert tree.is_valid()


def test_is_valid_detects_red_violation():
    tree = _build([1, 2, 3])
    assert tree.is_valid()
    tree.root.red = True
    assert not tree.is_valid()


def test_is_valid_detects_order_violation():
    tree = _build([1, 2, 3])
    tree.root.left.value = 5
    assert not tree.is_valid()


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_operations_keep_invariants(seed):
    rng = random.Random(seed)
    tree = RBTree()
    model = Counter()
    for _ in range(400):
        v = rng.randrange(60)
        if rng.random() < 0.6:
            tree.add(v)
            model[v] += 1
        else:
            tree.delete(v)
            model.pop(v, None)
        assert tree.is_valid()
        assert _check_parents(tree.root)
    assert list(tree) == sorted(model.elements())
    if model:
        assert tree.find_min().value == min(model)
        assert tree.find_max().value == max(model)