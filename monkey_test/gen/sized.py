"""Generators suitable for sizing collections of data."""

from __future__ import annotations

import random
from collections.abc import Iterator

from ..core import Gen, gen_from_fn
from ..shrink.integers import IntType, int_to_zero


def max_iterator(start_size: int, percent_increase: int, max_size: int) -> Iterator[int]:
    """Endless series of maximum sizes, growing by a percentage each step.

    Every step grows by at least one, and the size never exceeds ``max_size``.
    """
    current = min(start_size, max_size)
    while True:
        yield current
        increment = max(current * percent_increase // 100, 1)
        current = min(max_size, current + increment)


def progressively_increasing(
    start_size: int, percent_increase: int, max_size: int
) -> Gen[int]:
    """Sizes drawn uniformly from zero up to a progressively growing maximum.

    Small sizes come first and larger ones later on, balancing coverage and
    speed. Raises ValueError on negative arguments.
    """
    if min(start_size, percent_increase, max_size) < 0:
        raise ValueError("Sizes and percent increase can not be negative.")

    def examples(seed: int) -> Iterator[int]:
        rng = random.Random(seed)
        for size_max in max_iterator(start_size, percent_increase, max_size):
            yield rng.randint(0, size_max)

    return gen_from_fn(examples).with_shrinker(int_to_zero(IntType.USIZE))


def default() -> Gen[int]:
    """Sizes starting small, the maximum growing 30% per example up to 100 000."""
    return progressively_increasing(0, 30, 100_000)