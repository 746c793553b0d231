import random

import pytest

from dsalgo.hashmap import HashMap


def _filled(count):
    m = HashMap(16)
    for i in range(count):
        m.put(str(i), f"v{i}")
    return m


def test_small_capacity_uses_default():
    assert HashMap(5).capacity == 16
    assert HashMap(16).capacity == 16


def test_large_capacity_rounds_up_to_power_of_two():
    assert HashMap(100).capacity == 128
    assert HashMap(128).capacity == 128


def test_put_and_get_roundtrip():
    m = _filled(35)
    assert len(m) == 35
    for i in range(35):
        assert m.get(str(i)) == f"v{i}"


def test_capacity_grows_and_keeps_load_below_factor():
    m = HashMap()
    start = m.capacity
    for i in range(200):
        m.put(str(i), i)
        cap = m.capacity
        assert cap & (cap - 1) == 0
        assert len(m) / cap < 0.75
    assert m.capacity > start


def test_get_missing_raises_key_error():
    m = _filled(5)
    with pytest.raises(KeyError):
        m.get("missing")


def test_delete_removes_key():
    m = _filled(35)
    m.delete("4")
    assert len(m) == 34
    with pytest.raises(KeyError):
        m.get("4")
    assert m.get("5") == "v5"


def test_delete_missing_is_noop():
    m = _filled(3)
    m.delete("nope")
    assert len(m) == 3
    assert sorted(k for k, _ in m.items()) == ["0", "1", "2"]


def test_put_existing_replaces_value_without_growing():
    m = _filled(3)
    m.put("1", "other")
    assert len(m) == 3
    assert m.get("1") == "other"


def test_items_matches_model_after_random_operations():
    rng = random.Random(1234)
    m = HashMap()
    model = {}
    for _ in range(2000):
        key = str(rng.randrange(300))
        if rng.random() < 0.6:
            value = rng.randrange(10 ** 6)
            m.put(key, value)
            model[key] = value
        else:
            m.delete(key)
            model.pop(key, None)
    assert len(m) == len(model)
    pairs = m.items()
    assert len(pairs) == len(model)
    assert dict(pairs) == model