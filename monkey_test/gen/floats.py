"""Generators of floating point values of single or double precision.

Generator             | -inf | negative finites | positive finites | inf | NaN
----------------------|------|------------------|------------------|-----|----
any                   |  x   |        x         |        x         |  x  |  x
number                |  x   |        x         |        x         |  x  |
positive              |      |                  |        x         |  x  |
negative              |  x   |        x         |                  |     |
finite                |      |        x         |        x         |     |
ranged                |      |        x         |        x         |     |
completely_random     |      |        x         |        x         |     |
zero_to_one           |      |                  |        x         |     |

All generators but ``completely_random`` favour special values, such as the
extremes of the range, ``±0``, ``±1``, ``±Inf`` and ``NaN``.
"""

from __future__ import annotations

import math
import random
from collections.abc import Iterator

from ..core import Gen, gen_from_fn
from ..float_parts import FloatType
from ..shrink.floats import to_zero
from .fixed import constant
from .pick import mix_with_ratio, pick_evenly


def to_twos_complement_bits(float_type: FloatType, value: float) -> int:
    """Signed integer whose order matches the order of the float values.

    ``-0.0`` maps to ``-1`` so that it stays distinct from ``+0.0``.
    """
    unsigned = (
        float_type.exponent(value) << float_type.exponent_bit_position
    ) | float_type.fraction(value)
    if float_type.is_sign_negative(value):
        return -unsigned - 1
    return unsigned


def from_twos_complement_bits(float_type: FloatType, bits: int) -> float:
    """Float value of a signed bit representation; see :func:`to_twos_complement_bits`."""
    negative = bits < 0
    unsigned = -bits - 1 if negative else bits
    position = float_type.exponent_bit_position
    fraction = unsigned & ((1 << position) - 1)
    exponent = (unsigned >> position) & 0xFFFF
    return float_type.from_bits(float_type.compose(negative, exponent, fraction))


def _bit_bounds(
    float_type: FloatType,
    low: float | None,
    high: float | None,
    exclude_high: bool,
) -> tuple[int, int]:
    start = to_twos_complement_bits(
        float_type, -float_type.max_value if low is None else low
    )
    if high is None:
        end = to_twos_complement_bits(float_type, float_type.max_value)
    else:
        end = to_twos_complement_bits(float_type, high)
        if exclude_high:
            end -= 1
    return start, end


def _check_bounds_are_finite(start: float, end: float) -> None:
    if not math.isfinite(start):
        raise ValueError(
            f"Given range can not have non-finite value {start!r} as range start"
        )
    if not math.isfinite(end):
        raise ValueError(
            f"Given range can not have non-finite value {end!r} as range end"
        )


def _random_from_bits(float_type: FloatType, start: int, end: int) -> Gen[float]:
    _check_bounds_are_finite(
        from_twos_complement_bits(float_type, start),
        from_twos_complement_bits(float_type, end),
    )
    low, high = (end, start) if start > end else (start, end)

    def examples(seed: int) -> Iterator[float]:
        rng = random.Random(seed)
        while True:
            yield from_twos_complement_bits(float_type, rng.randint(low, high))

    return gen_from_fn(examples).with_shrinker(to_zero(float_type))


def completely_random(
    float_type: FloatType = FloatType.F64,
    low: float | None = None,
    high: float | None = None,
    *,
    exclude_high: bool = False,
) -> Gen[float]:
    """Finite floats with completely random distribution in the given range.

    A missing bound is the corresponding finite extreme of the type. Prefer
    :func:`ranged`. Raises ValueError if a bound is ``±Inf`` or ``NaN``.
    """
    start, end = _bit_bounds(float_type, low, high, exclude_high)
    return _random_from_bits(float_type, start, end)


def ranged(
    float_type: FloatType = FloatType.F64,
    low: float | None = None,
    high: float | None = None,
    *,
    exclude_high: bool = False,
) -> Gen[float]:
    """Finite floats in the given range, favouring special values.

    A missing bound is the corresponding finite extreme of the type. Raises
    ValueError if a bound is ``±Inf`` or ``NaN``.
    """
    start_bits, end_bits = _bit_bounds(float_type, low, high, exclude_high)
    start = from_twos_complement_bits(float_type, start_bits)
    end = from_twos_complement_bits(float_type, end_bits)
    _check_bounds_are_finite(start, end)
    if start > end:
        start, end = end, start

    negative = float_type.is_sign_negative
    min_positive = float_type.min_positive_value
    all_special_values = [
        0.0,
        -0.0,
        1.0,
        -1.0,
        -float_type.max_value,
        float_type.max_value,
        min_positive,
        -min_positive,
        start,
        end,
    ]
    # Zero bounds keep their sign, so -0.0 and +0.0 are told apart.
    relevant_special_values = [
        value
        for value in all_special_values
        if start <= value <= end
        and (
            (negative(value) and negative(start))
            or (not negative(value) and not negative(end))
        )
    ]

    return mix_with_ratio(
        [
            (90, _random_from_bits(float_type, start_bits, end_bits)),
            (10, pick_evenly(relevant_special_values)),
        ]
    )


def finite(float_type: FloatType = FloatType.F64) -> Gen[float]:
    """Any finite float of the type, favouring special values."""
    return ranged(float_type, -float_type.max_value, float_type.max_value)


def number(float_type: FloatType = FloatType.F64) -> Gen[float]:
    """Any float but ``NaN``: finite values and ``±Inf``."""
    infinities = pick_evenly([-math.inf, math.inf])
    return mix_with_ratio([(98, finite(float_type)), (2, infinities)])


def any(float_type: FloatType = FloatType.F64) -> Gen[float]:  # noqa: A001
    """Any float value, including ``NaN`` and ``±Inf``."""
    nans = constant(math.nan)
    return mix_with_ratio([(98, number(float_type)), (2, nans)])


def positive(float_type: FloatType = FloatType.F64) -> Gen[float]:
    """Floats from ``+0.0`` up to and including ``+Inf``."""
    finites = ranged(float_type, 0.0, float_type.max_value)
    return mix_with_ratio([(98, finites), (2, constant(math.inf))])


def negative(float_type: FloatType = FloatType.F64) -> Gen[float]:
    """Floats from ``-Inf`` up to and including ``-0.0``."""
    finites = ranged(float_type, -float_type.max_value, -0.0)
    return mix_with_ratio([(98, finites), (2, constant(-math.inf))])


def zero_to_one(float_type: FloatType = FloatType.F64) -> Gen[float]:
    """Finite floats from ``0.0`` inclusive to ``1.0`` exclusive."""
    return ranged(float_type, 0.0, 1.0, exclude_high=True)