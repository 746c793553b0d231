import random

from dsalgo.avltree import AVLTree

VALUES = [2, 3, 7, 10, 10, 10, 10, 23, 9, 102, 109, 111, 112, 113, 6, 8, 1, 4,
          333, 45, 24, 67, 26]


def build(values=VALUES):
    tree = AVLTree()
    for v in values:
        tree.add(v)
    return tree


def test_build_is_valid_and_sorted():
    tree = build()
    assert tree.is_valid()
    assert list(tree) == sorted(VALUES)


def test_min_max_and_find():
    tree = build()
    assert tree.find_min().value == 1
    assert tree.find_max().value == 333
    assert tree.find(99) is None
    assert tree.find(9).value == 9
    assert tree.find(10).times == 3


def test_empty_tree():
    tree = AVLTree()
    assert tree.is_valid()
    assert tree.find_min() is None
    assert tree.find_max() is None
    assert tree.find(3) is None
    tree.delete(3)
    assert list(tree) == []


def test_sequence_from_source():
    tree = build()
    for v in (9, 10, 2, 3):
        tree.delete(v)
    for v in (4, 3, 10):
        tree.add(v)
    for v in (111, 67):
        tree.delete(v)
    assert tree.find(9) is None
    assert tree.is_valid()
    expected = sorted(
        [v for v in VALUES if v not in (9, 10, 2, 3, 111, 67)] + [4, 3, 10]
    )
    assert list(tree) == expected


def test_ascending_inserts_stay_balanced():
    tree = build(range(1, 128))
    assert tree.is_valid()
    assert tree.root.height == 7


def test_corrupted_height_is_detected():
    tree = build()
    tree.root.height += 5
    assert not tree.is_valid()


def test_random_operations_keep_invariants():
    rng = random.Random(11)
    tree = AVLTree()
    present = []
    for _ in range(400):
        v = rng.randrange(60)
        if rng.random() < 0.6:
            tree.add(v)
            present.append(v)
        else:
            tree.delete(v)
            present = [x for x in present if x != v]
        assert tree.is_valid()
        assert list(tree) == sorted(present)


def test_delete_everything():
    tree = build()
    for v in set(VALUES):
        tree.delete(v)
        assert tree.is_valid()
    assert tree.root is None
    assert list(tree) == []