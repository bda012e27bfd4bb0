"""Recall measurement against ground-truth nearest neighbours."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def change_gnd_type(gnd: Iterable[Iterable[int]]) -> list[set[int]]:
    """Turn each ground-truth row into a set of labels."""
    return [set(row) for row in gnd]


def count_recall(
    results: Sequence[Sequence[int]],
    gnd: Sequence[Sequence[int]],
    topk: int,
) -> float:
    """Average fraction of the ``topk`` true neighbours found per query.

    Every entry of a result that appears in the query's ground truth counts
    as one match.
    """
    if topk <= 0:
        raise ValueError("topk must be positive")
    if not gnd:
        raise ValueError("ground truth is empty")
    if len(results) < len(gnd):
        raise ValueError(
            f"{len(results)} results given for {len(gnd)} ground-truth queries"
        )
    truth = change_gnd_type(row[:topk] for row in gnd)
    total = sum(
        sum(1 for label in found if label in expected) / topk
        for found, expected in zip(results, truth)
    )
    return total / len(truth)