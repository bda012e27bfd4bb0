"""Index parameters, random level generation, distances and timing."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Sequence

M = 30
M_MAX = 30
EF_CONSTRUCTION = 100
EF_SEARCH = 100
MULT = 1 / math.log(1.0 * M)


class LevelGenerator:
    """Draws layer levels from an exponentially decaying distribution."""

    def __init__(self, seed: int = 0, mult: float = MULT) -> None:
        self._rng = random.Random(seed)
        self.mult = mult

    def level(self) -> int:
        """Return the next random level (always >= 0)."""
        # 1 - random() lies in (0, 1], so the logarithm is always defined.
        u = 1.0 - self._rng.random()
        return int(-math.log(u) * self.mult)


_default_generator = LevelGenerator(0)


def get_random_level() -> int:
    """Return a random level from the shared, deterministically seeded generator."""
    return _default_generator.level()


def l2distance(a: Sequence[int], b: Sequence[int]) -> int:
    """Squared Euclidean distance between two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError(f"vector lengths differ: {len(a)} != {len(b)}")
    return sum((x - y) * (x - y) for x, y in zip(a, b))


class TimeRecord:
    """Stopwatch on a monotonic clock, started when created."""

    def __init__(self) -> None:
        self._begin = time.perf_counter_ns()

    def elapsed_micro(self) -> float:
        """Whole microseconds elapsed since creation or the last reset."""
        return float((time.perf_counter_ns() - self._begin) // 1000)

    def reset(self) -> None:
        """Restart the stopwatch."""
        self._begin = time.perf_counter_ns()