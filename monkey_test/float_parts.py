"""Bit-level access to single and double precision floating point values."""

from __future__ import annotations

import math
import struct
from enum import Enum


class FloatType(Enum):
    """IEEE 754 binary floating point formats."""

    F32 = ("f32", 32, 23, ">f", ">I")
    F64 = ("f64", 64, 52, ">d", ">Q")

    def __init__(
        self,
        label: str,
        width: int,
        exponent_bit_position: int,
        float_format: str,
        bits_format: str,
    ) -> None:
        self.label = label
        self.width = width
        self.exponent_bit_position = exponent_bit_position
        self.sign_bit_position = width - 1
        self._float_format = float_format
        self._bits_format = bits_format

    @property
    def exponent_normal_max(self) -> int:
        """Largest exponent field value of a finite number."""
        return (1 << (self.sign_bit_position - self.exponent_bit_position)) - 2

    @property
    def fraction_normal_max(self) -> int:
        """Largest fraction field value."""
        return (1 << self.exponent_bit_position) - 1

    @property
    def max_value(self) -> float:
        """Largest finite value of the format."""
        return self.from_bits(
            self.compose(False, self.exponent_normal_max, self.fraction_normal_max)
        )

    @property
    def min_positive_value(self) -> float:
        """Smallest positive normal value of the format."""
        return self.from_bits(self.compose(False, 1, 0))

    def narrow(self, value: float) -> float:
        """Round a value to the precision of this format, overflowing to infinity."""
        try:
            return struct.unpack(
                self._float_format, struct.pack(self._float_format, value)
            )[0]
        except OverflowError:
            return math.copysign(math.inf, value)

    def to_bits(self, value: float) -> int:
        """Raw bit representation of a value."""
        return struct.unpack(
            self._bits_format, struct.pack(self._float_format, self.narrow(value))
        )[0]

    def from_bits(self, bits: int) -> float:
        """Value of a raw bit representation, truncated to the format width."""
        bits &= (1 << self.width) - 1
        return struct.unpack(
            self._float_format, struct.pack(self._bits_format, bits)
        )[0]

    def exponent(self, value: float) -> int:
        """Exponent field of a value."""
        bits = self.to_bits(value) & ((1 << self.sign_bit_position) - 1)
        return bits >> self.exponent_bit_position

    def fraction(self, value: float) -> int:
        """Fraction field of a value."""
        return self.to_bits(value) & ((1 << self.exponent_bit_position) - 1)

    def is_sign_negative(self, value: float) -> bool:
        """Whether the sign bit of a value is set, including for -0.0 and NaN."""
        return (self.to_bits(value) >> self.sign_bit_position) != 0

    def compose(self, sign_is_negative: bool, exponent: int, fraction: int) -> int:
        """Bits made of a sign, an exponent field and a fraction field."""
        sign = 1 if sign_is_negative else 0
        return (
            (sign << self.sign_bit_position)
            | (exponent << self.exponent_bit_position)
            | fraction
        )