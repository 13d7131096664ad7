"""
IEEE 754 binary32 / binary64 codec.

Splits a float into ``mantissa * 2 ** exponent`` by reading its bit layout
and builds a float back from such a pair without any rounding:

    >>> decompose_double(1.0)
    MantissaExponent(mantissa=4503599627370496, exponent=-52)
    >>> reconstruct_double(4503599627370496, -52)
    1.0

Layouts (sign / exponent / significand bits):
    binary32: 1 / 8 / 23
    binary64: 1 / 11 / 52
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..core.errors import DomainError, RangeError
from .mantissa import MantissaExponent


@dataclass(frozen=True)
class FloatFormat:
    """Bit layout of an IEEE 754 binary interchange format."""

    name: str
    exponent_bits: int
    significand_bits: int  # stored bits, without the implicit leading one
    float_dtype: type
    uint_dtype: type

    @property
    def total_bits(self) -> int:
        return 1 + self.exponent_bits + self.significand_bits

    @property
    def bias(self) -> int:
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def exponent_mask(self) -> int:
        return (1 << self.exponent_bits) - 1

    @property
    def significand_mask(self) -> int:
        return (1 << self.significand_bits) - 1

    @property
    def precision(self) -> int:
        """Significand width including the implicit bit (53 / 24)."""
        return self.significand_bits + 1

    @property
    def min_exponent(self) -> int:
        """Exponent of the least significant subnormal bit (-1074 / -149)."""
        return 1 - self.bias - self.significand_bits

    @property
    def max_exponent(self) -> int:
        """Largest exponent of a normalized ``mantissa * 2**exponent`` pair (971 / 104)."""
        return (self.exponent_mask - 1) - self.bias - self.significand_bits


BINARY32 = FloatFormat("binary32", 8, 23, np.float32, np.uint32)
BINARY64 = FloatFormat("binary64", 11, 52, np.float64, np.uint64)


def _to_bits(value: float, fmt: FloatFormat) -> int:
    with np.errstate(over="ignore"):
        narrowed = np.array([value], dtype=fmt.float_dtype)
    return int(narrowed.view(fmt.uint_dtype)[0])


def _from_bits(bits: int, fmt: FloatFormat):
    return np.array([bits], dtype=fmt.uint_dtype).view(fmt.float_dtype)[0]


def decompose(value: float, fmt: FloatFormat) -> MantissaExponent:
    """
    Split ``value`` into a sign-folded integer mantissa and a binary exponent.

    Args:
        value: Finite float (narrowed to ``fmt`` first)
        fmt: BINARY32 or BINARY64

    Returns:
        ``(mantissa, exponent)`` with ``value == mantissa * 2 ** exponent``;
        ``(0, 0)`` for either zero

    Raises:
        DomainError: If value is NaN or infinite in the target format
    """
    if value == 0:
        return MantissaExponent(0, 0)

    bits = _to_bits(value, fmt)

    negative = bits >> (fmt.total_bits - 1)
    biased = (bits >> fmt.significand_bits) & fmt.exponent_mask
    fraction = bits & fmt.significand_mask

    if biased == 0 and fraction == 0:
        # Underflowed to zero while narrowing
        return MantissaExponent(0, 0)

    if biased == fmt.exponent_mask:
        raise DomainError(f"Cannot decompose non-finite {fmt.name} value {value!r}", "value", value)

    if biased == 0:
        # Subnormal: no implicit bit, fixed minimum exponent
        mantissa = fraction
        exponent = fmt.min_exponent
    else:
        mantissa = fraction | (1 << fmt.significand_bits)
        exponent = biased - fmt.bias - fmt.significand_bits

    return MantissaExponent(-mantissa if negative else mantissa, exponent)


def reconstruct(mantissa: int, exponent: int, fmt: FloatFormat):
    """
    Build a ``fmt`` float equal to ``mantissa * 2 ** exponent`` exactly.

    The mantissa is shifted into ``[2**(p-1), 2**p)`` (p = 24 / 53) with the
    exponent compensated; nothing is ever rounded.

    Returns:
        numpy scalar of ``fmt.float_dtype``

    Raises:
        RangeError: If the pair needs more significant bits than the format
            holds, or its exponent is outside the format (overflow, or
            below the subnormal range)
    """
    if mantissa == 0:
        return fmt.float_dtype(0.0)

    negative = mantissa < 0
    magnitude = -mantissa if negative else mantissa

    shift = magnitude.bit_length() - fmt.precision
    if shift > 0:
        if magnitude & ((1 << shift) - 1):
            raise RangeError(
                f"Mantissa {mantissa} has more than {fmt.precision} significant bits",
                mantissa, exponent,
            )
        magnitude >>= shift
    elif shift < 0:
        magnitude <<= -shift
    exponent += shift

    if exponent > fmt.max_exponent:
        raise RangeError(f"Exponent {exponent} is too large for {fmt.name}", mantissa, exponent)

    biased = exponent + fmt.bias + fmt.significand_bits
    if biased >= 1:
        fraction = magnitude & fmt.significand_mask
    else:
        drop = fmt.min_exponent - exponent
        if drop > fmt.precision or magnitude & ((1 << drop) - 1):
            raise RangeError(f"Exponent {exponent} is too small for {fmt.name}", mantissa, exponent)
        fraction = magnitude >> drop
        biased = 0

    bits = (int(negative) << (fmt.total_bits - 1)) | (biased << fmt.significand_bits) | fraction
    return _from_bits(bits, fmt)


def decompose_double(value: float) -> MantissaExponent:
    """Decompose a binary64 value into ``mantissa * 2 ** exponent``."""
    return decompose(value, BINARY64)


def reconstruct_double(mantissa: int, exponent: int | None = None) -> float:
    """
    Construct a binary64 value from ``mantissa * 2 ** exponent``.

    Accepts either two integers or a single ``MantissaExponent`` pair.
    """
    if exponent is None:
        mantissa, exponent = mantissa
    return float(reconstruct(mantissa, exponent, BINARY64))


def decompose_single(value: float) -> MantissaExponent:
    """Decompose a binary32 value (Python floats are narrowed first)."""
    return decompose(value, BINARY32)


def reconstruct_single(mantissa: int, exponent: int | None = None) -> np.float32:
    """Construct a binary32 value from ``mantissa * 2 ** exponent``."""
    if exponent is None:
        mantissa, exponent = mantissa
    return reconstruct(mantissa, exponent, BINARY32)


def narrow_single(value: float) -> np.float32:
    """Round a Python float to the nearest binary32 (overflowing to infinity)."""
    with np.errstate(over="ignore"):
        return np.float32(value)
