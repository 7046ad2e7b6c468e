"""Integer shrinkers, shrinking towards zero or the value nearest zero in range."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from enum import Enum

from ..core import Shrink, shrink_from_fn


class IntType(Enum):
    """Fixed-width integer types, giving the bounds of their values."""

    I8 = ("i8", 8, True)
    I16 = ("i16", 16, True)
    I32 = ("i32", 32, True)
    I64 = ("i64", 64, True)
    I128 = ("i128", 128, True)
    ISIZE = ("isize", 64, True)
    U8 = ("u8", 8, False)
    U16 = ("u16", 16, False)
    U32 = ("u32", 32, False)
    U64 = ("u64", 64, False)
    U128 = ("u128", 128, False)
    USIZE = ("usize", 64, False)

    def __init__(self, label: str, bits: int, signed: bool) -> None:
        self.label = label
        self.bits = bits
        self.signed = signed

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1


def _halve(n: int) -> int:
    """Divide by two, truncating towards zero."""
    return -((-n) // 2) if n < 0 else n // 2


def _check_example_is_in_range(example: int, min_value: int, max_value: int) -> None:
    if example < min_value or example > max_value:
        raise ValueError(
            f"Given example {example} is not in range {min_value}..={max_value}."
        )


def shrink_target(range_min: int, range_max: int) -> int:
    """Choose the shrink target: zero, unless the range excludes it."""
    if range_min > 0:
        return range_min
    if range_max < 0:
        return range_max
    return 0


def _mirror_around(mirror: int, x: int) -> int:
    return 2 * mirror - x


def _in_range(values: Iterator[int], min_value: int, max_value: int) -> Iterator[int]:
    return (v for v in values if min_value <= v <= max_value)


def eager(original: int, min_value: int, max_value: int) -> Iterator[int]:
    """Bisecting candidates, with ever smaller decrements down to two.

    Each candidate is followed by its mirror around the target. Only
    candidates within ``min_value..=max_value`` are returned. Raises
    ValueError if ``original`` is out of range.
    """
    _check_example_is_in_range(original, min_value, max_value)
    target = shrink_target(min_value, max_value)

    def candidates() -> Iterator[int]:
        step = _halve(original - target)
        while step not in (0, 1, -1):
            result = original - step
            step = _halve(step)
            yield result
            yield _mirror_around(target, result)

    return _in_range(candidates(), min_value, max_value)


def decrement(original: int, min_value: int, max_value: int) -> Iterator[int]:
    """Candidates stepping one at a time from ``original`` to the target.

    Each step also tries the value mirrored around the target. Only
    candidates within ``min_value..=max_value`` are returned. Raises
    ValueError if ``original`` is out of range.
    """
    _check_example_is_in_range(original, min_value, max_value)
    target = shrink_target(min_value, max_value)

    def candidates() -> Iterator[int]:
        last = original
        while last != target:
            if last < target:
                mirrored = _mirror_around(target, last)
                if last != original:
                    yield last
                yield mirrored
                last += 1
                if last == target:
                    yield target
            else:
                last -= 1
                if last == target:
                    yield last
                else:
                    yield _mirror_around(target, last)
                    yield last

    return _in_range(candidates(), min_value, max_value)


def int_in_range(min_value: int, max_value: int) -> Shrink[int]:
    """Shrink towards zero, or the value nearest zero within the given range."""
    return shrink_from_fn(
        lambda original: itertools.chain(
            eager(original, min_value, max_value),
            decrement(original, min_value, max_value),
        )
    )


def int_to_zero(int_type: IntType = IntType.I64) -> Shrink[int]:
    """Shrink values of the given integer type towards zero."""
    return int_in_range(int_type.min_value, int_type.max_value)