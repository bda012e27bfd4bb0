import random

import pytest

from hnswlab.radix import CompressedRadixTree


def test_empty_tree_finds_nothing():
    tree = CompressedRadixTree()
    assert tree.find(0) is False


def test_insert_then_find():
    tree = CompressedRadixTree()
    tree.insert(42)
    assert tree.find(42) is True
    assert tree.find(43) is False


def test_values_sharing_prefix_both_found():
    tree = CompressedRadixTree()
    tree.insert(0)
    tree.insert(1)
    assert tree.find(0) and tree.find(1)
    assert not tree.find(2)


def test_int32_bounds_and_negatives():
    tree = CompressedRadixTree()
    values = [-(2**31), 2**31 - 1, -1, 0]
    for v in values:
        tree.insert(v)
    assert all(tree.find(v) for v in values)
    assert not tree.find(-2)


def test_out_of_range_rejected():
    tree = CompressedRadixTree()
    with pytest.raises(ValueError):
        tree.insert(2**31)
    with pytest.raises(ValueError):
        tree.find(-(2**31) - 1)


def test_duplicate_insert_keeps_single_copy():
    tree = CompressedRadixTree()
    tree.insert(7)
    tree.insert(7)
    assert tree.remove(7) is True
    assert tree.find(7) is False


def test_remove_missing_returns_false():
    tree = CompressedRadixTree()
    tree.insert(5)
    assert tree.remove(6) is False
    assert tree.find(5) is True


def test_remove_keeps_siblings():
    tree = CompressedRadixTree()
    for v in (0, 1, 2, 3, 16):
        tree.insert(v)
    assert tree.remove(1) is True
    assert not tree.find(1)
    assert all(tree.find(v) for v in (0, 2, 3, 16))
    tree.insert(1)
    assert tree.find(1)


def test_random_operations_match_set():
    rng = random.Random(1234)
    tree = CompressedRadixTree()
    model = set()
    pool = [rng.randint(-(2**31), 2**31 - 1) for _ in range(150)]
    pool += [rng.randint(-64, 64) for _ in range(150)]
    for _ in range(3000):
        v = rng.choice(pool)
        if rng.random() < 0.6:
            tree.insert(v)
            model.add(v)
        else:
            assert tree.remove(v) == (v in model)
            model.discard(v)
    assert all(tree.find(v) == (v in model) for v in pool)