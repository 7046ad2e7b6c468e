"""Generators of integer values of fixed-width integer types."""

from __future__ import annotations

import random
from collections.abc import Iterator

from ..core import Gen, gen_from_fn
from ..shrink.integers import IntType, int_in_range
from .pick import mix_with_ratio, pick_evenly


def _bounds(int_type: IntType, low: int | None, high: int | None) -> tuple[int, int]:
    min_value = int_type.min_value if low is None else low
    max_value = int_type.max_value if high is None else high
    for bound in (min_value, max_value):
        if not int_type.min_value <= bound <= int_type.max_value:
            raise ValueError(
                f"Bound {bound} is not a value of type {int_type.label}."
            )
    if min_value > max_value:
        raise ValueError(f"Empty range {min_value}..={max_value}.")
    return min_value, max_value


def _uniform(min_value: int, max_value: int, seed: int) -> Iterator[int]:
    rng = random.Random(seed)
    while True:
        yield rng.randint(min_value, max_value)


def completely_random(
    int_type: IntType, low: int | None = None, high: int | None = None
) -> Gen[int]:
    """Uniformly distributed integers in ``low..=high``.

    A missing bound is the corresponding limit of the type. Prefer
    :func:`ranged`. Raises ValueError on bounds outside the type or an empty
    range.
    """
    min_value, max_value = _bounds(int_type, low, high)
    return gen_from_fn(
        lambda seed: _uniform(min_value, max_value, seed)
    ).with_shrinker(int_in_range(min_value, max_value))


def ranged(
    int_type: IntType, low: int | None = None, high: int | None = None
) -> Gen[int]:
    """Roughly uniform integers in ``low..=high``, favouring the extremes.

    The bounds, and zero when strictly inside them, come up more often than
    other values. A missing bound is the corresponding limit of the type.
    """
    min_value, max_value = _bounds(int_type, low, high)
    extreme_values = [min_value, max_value]
    if min_value < 0 < max_value:
        extreme_values.append(0)

    extremes = pick_evenly(extreme_values)
    randoms = completely_random(int_type, min_value, max_value)
    return mix_with_ratio([(96, randoms), (6, extremes)])


def any(int_type: IntType) -> Gen[int]:  # noqa: A001
    """Any value of the type, with some overweight to its extremes."""
    return ranged(int_type)


def seeds() -> Gen[int]:
    """Standard generator of seeds for random sources."""
    return completely_random(IntType.U64)