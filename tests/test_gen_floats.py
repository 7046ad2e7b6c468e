import itertools
import math

import pytest

from monkey_test.float_parts import FloatType
from monkey_test.gen import floats
from monkey_test.gen.integers import ranged as int_ranged
from monkey_test.shrink.integers import IntType

F32 = FloatType.F32
F32_MAX = F32.max_value
SEED = 1234


def _float_equals(a, b):
    both_nan = math.isnan(a) and math.isnan(b)
    same_sign = math.copysign(1.0, a) == math.copysign(1.0, b)
    return both_nan or (same_sign and a == b)


def _take(gen, count, seed=SEED):
    return list(itertools.islice(gen.examples(seed), count))


def _missing_values(gen, values, count=2000):
    examples = _take(gen, count)
    return [v for v in values if not any(_float_equals(e, v) for e in examples)]


def _found_value(gen, value, count=500):
    return [e for e in _take(gen, count) if _float_equals(e, value)]


def _out_of_range(gen, low, high, exclude_high=False):
    return [
        e
        for e in _take(gen, 1000)
        if not (low <= e and (e < high if exclude_high else e <= high))
    ]


@pytest.mark.parametrize(
    "float_type, exponent_max, fraction_bits",
    [(FloatType.F64, 0x7FE, 52), (FloatType.F32, 0xFE, 23)],
)
def test_convert_to_and_from_finite_bits(float_type, exponent_max, fraction_bits):
    max_bits = (exponent_max << fraction_bits) | ((1 << fraction_bits) - 1)
    gen = int_ranged(IntType.I64, -max_bits, max_bits)
    for i in _take(gen, 1000, seed=77):
        value = floats.from_twos_complement_bits(float_type, i)
        assert floats.to_twos_complement_bits(float_type, value) == i


def test_sign_is_kept_on_zero_in_conversion():
    bits = floats.to_twos_complement_bits(FloatType.F64, -0.0)
    copy = floats.from_twos_complement_bits(FloatType.F64, bits)
    assert bits < 0
    assert math.copysign(1.0, copy) == -1.0
    assert copy == 0.0


def test_pinned_bit_values():
    assert floats.to_twos_complement_bits(FloatType.F64, 0.0) == 0
    assert floats.to_twos_complement_bits(FloatType.F64, -0.0) == -1
    assert floats.to_twos_complement_bits(FloatType.F64, 1.0) == 0x3FF << 52
    assert floats.to_twos_complement_bits(FloatType.F64, -1.0) == -(0x3FF << 52) - 1


def test_generator_any():
    missing = _missing_values(
        floats.any(F32),
        [math.nan, F32_MAX, -F32_MAX, math.inf, -math.inf, 0.0, -0.0, 1.0, -1.0],
    )
    assert missing == []


def test_generator_number():
    gen = floats.number(F32)
    nans = [e for e in _take(gen, 1000) if math.isnan(e)]
    assert nans == []
    assert _missing_values(gen, [0.0]) == []


def test_generator_positive():
    gen = floats.positive(F32)
    assert _out_of_range(gen, 0.0, math.inf) == []
    assert _found_value(gen, -0.0) == []
    assert _missing_values(gen, [0.0, 1.0, F32_MAX, math.inf]) == []


def test_generator_negative():
    gen = floats.negative(F32)
    assert _out_of_range(gen, -math.inf, -0.0) == []
    assert _found_value(gen, 0.0) == []
    assert _missing_values(gen, [-0.0, -1.0, -F32_MAX, -math.inf]) == []


def test_generator_finite():
    gen = floats.finite(F32)
    assert _out_of_range(gen, -F32_MAX, F32_MAX) == []
    assert _missing_values(gen, [-0.0, -1.0, 0.0, 1.0, -F32_MAX, F32_MAX]) == []


def test_generator_ranged_negative_range():
    gen = floats.ranged(F32, -555.0, -72.0)
    assert _out_of_range(gen, -555.0, -72.0) == []
    assert _missing_values(gen, [-555.0, -72.0]) == []


def test_generator_ranged_positive_range():
    gen = floats.ranged(F32, 72.0, 555.0)
    assert _out_of_range(gen, 72.0, 555.0) == []
    assert _missing_values(gen, [72.0, 555.0]) == []


def test_generator_ranged_inverted_range():
    gen = floats.ranged(F32, 555.0, 72.0)
    assert _out_of_range(gen, 72.0, 555.0) == []
    assert _missing_values(gen, [72.0, 555.0]) == []


def test_generator_ranged_sign_straddling_range():
    gen = floats.ranged(F32, -555.0, 72.0)
    assert _out_of_range(gen, -555.0, 72.0) == []
    assert _missing_values(gen, [-555.0, 72.0, -0.0, 0.0, -1.0, 1.0]) == []


def test_generator_zero_to_one():
    gen = floats.zero_to_one(F32)
    assert _out_of_range(gen, 0.0, 1.0, exclude_high=True) == []
    assert _missing_values(gen, [0.0]) == []
    assert _found_value(gen, -0.0) == []


@pytest.mark.parametrize(
    "low, high, exclude_high",
    [
        (math.nan, 10.0, True),
        (-math.inf, 10.0, True),
        (10.0, math.inf, False),
    ],
)
def test_ranged_rejects_non_finite_bounds(low, high, exclude_high):
    with pytest.raises(ValueError, match="non-finite"):
        floats.ranged(F32, low, high, exclude_high=exclude_high)


@pytest.mark.parametrize(
    "low, high, exclude_high",
    [
        (math.nan, 10.0, True),
        (-math.inf, 10.0, True),
        (10.0, math.inf, False),
    ],
)
def test_completely_random_rejects_non_finite_bounds(low, high, exclude_high):
    with pytest.raises(ValueError, match="non-finite"):
        floats.completely_random(F32, low, high, exclude_high=exclude_high)


def test_completely_random_stays_in_range():
    gen = floats.completely_random(FloatType.F64, -3.5, 2.25)
    examples = _take(gen, 1000)
    assert all(-3.5 <= e <= 2.25 for e in examples)


def test_should_have_shrinker():
    candidates = list(
        itertools.islice(floats.any(FloatType.F64).shrinker().candidates(math.pi), 2)
    )
    assert candidates == [0.0, 0.0]
    assert [math.copysign(1.0, c) for c in candidates] == [-1.0, 1.0]