import pytest

from hnswlab.ground_truth import change_gnd_type, count_recall


def test_change_gnd_type_makes_sets():
    assert change_gnd_type([[1, 2, 2], [3]]) == [{1, 2}, {3}]


def test_perfect_recall():
    gnd = [[1, 2, 3], [4, 5, 6]]
    assert count_recall(gnd, gnd, 3) == 1.0


def test_zero_recall():
    gnd = [[1, 2], [3, 4]]
    assert count_recall([[7, 8], [9, 10]], gnd, 2) == 0.0


def test_half_recall():
    assert count_recall([[1, 9]], [[1, 2]], 2) == 0.5


def test_recall_ignores_result_order():
    gnd = [[1, 2, 3, 4]]
    assert count_recall([[4, 3, 2, 1]], gnd, 4) == count_recall([[1, 2, 3, 4]], gnd, 4)


def test_recall_bounded_for_partial_results():
    gnd = [[1, 2, 3], [4, 5, 6]]
    value = count_recall([[1], [4, 5]], gnd, 3)
    assert 0.0 < value < 1.0


def test_empty_ground_truth_raises():
    with pytest.raises(ValueError):
        count_recall([], [], 10)


def test_too_few_results_raises():
    with pytest.raises(ValueError):
        count_recall([[1]], [[1], [2]], 1)


def test_non_positive_topk_raises():
    with pytest.raises(ValueError):
        count_recall([[1]], [[1]], 0)