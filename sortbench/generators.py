"""Input generators for the sorting benchmarks."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Optional

MAX_SIZE = 0xFFFF


def _check_size(n: int) -> None:
    if not 0 <= n <= MAX_SIZE:
        raise ValueError(f"size must be between 0 and {MAX_SIZE}, got {n}")


def insertion_sort_worst_case(n: int) -> list[int]:
    """Return ``n - 1, ..., 1, 0``: strictly descending input."""
    _check_size(n)
    return list(range(n - 1, -1, -1))


def _merge_worst_case(segment: Sequence[int]) -> list[int]:
    if len(segment) <= 1:
        return list(segment)
    return _merge_worst_case(segment[::2]) + _merge_worst_case(segment[1::2])


def merge_sort_worst_case(n: int) -> list[int]:
    """Return a permutation of ``1..n`` that forces the most comparisons in merge sort."""
    _check_size(n)
    return _merge_worst_case(list(range(1, n + 1)))


def random_permutation(n: int, rng: Optional[random.Random] = None) -> list[int]:
    """Return ``0..n-1`` shuffled with ``rng`` (a freshly seeded generator by default)."""
    _check_size(n)
    values = list(range(n))
    (rng if rng is not None else random.Random()).shuffle(values)
    return values