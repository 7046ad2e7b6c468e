"""Floating point shrinker, shrinking towards ``+0.0``."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator

from ..core import Shrink, shrink_from_fn
from ..float_parts import FloatType


def _special_values(original: float) -> list[float]:
    if math.isnan(original):
        return [-math.inf, math.inf]
    if math.isinf(original) and original < 0:
        return [math.inf]
    return []


def _finite_values(float_type: FloatType, original: float) -> Iterator[float]:
    narrow = float_type.narrow
    subtraction = original
    old_result = original
    while True:
        result = narrow(original - subtraction)
        if result == old_result:
            return
        subtraction = narrow(subtraction / 2)
        old_result = result
        yield -result
        yield result


def to_zero(float_type: FloatType = FloatType.F64) -> Shrink[float]:
    """Shrinker of floats of the given type, shrinking towards ``+0.0``.

    Values are regarded as ordered from largest to smallest as: ``NaN``,
    ``-Inf``, ``Inf``, min, max, ..., ``-1``, ``1``, ..., ``-0``, ``0``.
    """

    def candidates(original: float) -> Iterator[float]:
        finite_original = (
            original if math.isfinite(original) else -float_type.max_value
        )
        return itertools.chain(
            _special_values(original), _finite_values(float_type, finite_original)
        )

    return shrink_from_fn(candidates)