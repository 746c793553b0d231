from dsalgo.intset import IntSet


def test_duplicates_are_stored_once():
    s = IntSet()
    s.add(1)
    s.add(1)
    s.add(2)
    assert sorted(s.to_list()) == [1, 2]
    assert len(s) == 2


def test_clear_empties():
    s = IntSet([1, 2])
    s.clear()
    assert s.is_empty()
    assert s.to_list() == []


def test_source_example_sequence():
    s = IntSet()
    s.add(1)
    s.add(2)
    s.add(3)
    assert s.has(2)
    s.remove(2)
    s.remove(3)
    assert s.to_list() == [1]


def test_remove_missing_is_noop():
    s = IntSet([5])
    s.remove(7)
    assert s.to_list() == [5]


def test_remove_on_empty_keeps_empty():
    s = IntSet()
    s.remove(1)
    assert len(s) == 0


def test_contains_operator():
    s = IntSet([4])
    assert 4 in s
    assert 5 not in s


def test_has_false_for_absent():
    s = IntSet([1, 2])
    assert s.has(3) is False