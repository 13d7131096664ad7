"""
Lossy conversion of exact ratios to native floating point and decimal values.

The ratio's binary (or decimal) expansion is cut to the width of the target
significand, rounded half-to-even and handed to the lossless codecs in
:mod:`arith.math.floating` / :mod:`arith.math.decimals`, which then only have
to place the bits.
"""

from __future__ import annotations

from ..core.errors import NumericOverflowError, RangeError
from ..core.logging import get_context_logger
from .decimals import MAX_SCALE, SIGNIFICAND_LIMIT, PackedDecimal, reconstruct_decimal
from .floating import FloatFormat, reconstruct
from .mantissa import MantissaExponent

logger = get_context_logger(__name__, component="bridge")


def _scaled_divmod(numerator: int, denominator: int, exponent: int) -> tuple[int, int, int]:
    """divmod of ``numerator / denominator / 2**exponent``; also returns the divisor used."""
    if exponent < 0:
        numerator <<= -exponent
    else:
        denominator <<= exponent
    quotient, remainder = divmod(numerator, denominator)
    return quotient, remainder, denominator


def _round_half_even(quotient: int, remainder: int, divisor: int) -> int:
    twice = 2 * remainder
    if twice > divisor or (twice == divisor and quotient & 1):
        return quotient + 1
    return quotient


def binary_window(numerator: int, denominator: int, fmt: FloatFormat) -> MantissaExponent:
    """
    Nearest ``mantissa * 2**exponent`` to a positive ratio that ``fmt`` can hold.

    The exponent is first estimated from the bit-length difference of the
    numerator and denominator, then the window of ``fmt.precision`` leading
    bits is taken and rounded half-to-even. Values below the normal range
    keep fewer bits (gradual underflow) and may round to zero.
    """
    precision = fmt.precision

    exponent = numerator.bit_length() - denominator.bit_length() - precision
    exponent = max(exponent, fmt.min_exponent)

    quotient, remainder, divisor = _scaled_divmod(numerator, denominator, exponent)
    if quotient.bit_length() > precision:
        # Estimate was one bit short
        exponent += 1
        quotient, remainder, divisor = _scaled_divmod(numerator, denominator, exponent)

    return MantissaExponent(_round_half_even(quotient, remainder, divisor), exponent)


def to_binary(numerator: int, denominator: int, fmt: FloatFormat):
    """
    Nearest ``fmt`` float to ``numerator / denominator`` (a canonical pair).

    Raises:
        NumericOverflowError: If the rounded magnitude is beyond the format
    """
    if denominator == 0:
        if numerator == 0:
            return fmt.float_dtype("nan")
        return fmt.float_dtype("inf" if numerator > 0 else "-inf")

    if numerator == 0:
        return fmt.float_dtype(0.0)

    negative = numerator < 0
    mantissa, exponent = binary_window(-numerator if negative else numerator, denominator, fmt)

    if mantissa == 0:
        return fmt.float_dtype(-0.0 if negative else 0.0)

    try:
        return reconstruct(-mantissa if negative else mantissa, exponent, fmt)
    except RangeError as error:
        logger.debug(
            "Ratio overflows %s", fmt.name,
            extra_data={"numerator_bits": numerator.bit_length(), "denominator_bits": denominator.bit_length()},
        )
        raise NumericOverflowError(fmt.name, error.message) from error


def decimal_window(numerator: int, denominator: int) -> MantissaExponent:
    """
    Nearest ``mantissa * 10**-scale`` to the ratio with the largest scale
    (at most 28) whose significand still fits 96 bits; trailing zeros dropped.
    """
    if denominator == 0:
        raise NumericOverflowError("decimal", "not a finite value")

    negative = numerator < 0
    magnitude = -numerator if negative else numerator

    for scale in range(MAX_SCALE, -1, -1):
        quotient, remainder = divmod(magnitude * 10 ** scale, denominator)
        quotient = _round_half_even(quotient, remainder, denominator)
        if quotient < SIGNIFICAND_LIMIT:
            break
    else:
        logger.debug(
            "Ratio overflows decimal",
            extra_data={"numerator_bits": numerator.bit_length(), "denominator_bits": denominator.bit_length()},
        )
        raise NumericOverflowError("decimal", "magnitude does not fit 96 bits")

    while scale > 0 and quotient % 10 == 0:
        quotient //= 10
        scale -= 1

    return MantissaExponent(-quotient if negative else quotient, -scale)


def to_packed_decimal(numerator: int, denominator: int) -> PackedDecimal:
    """Nearest 96-bit decimal to ``numerator / denominator``."""
    window = decimal_window(numerator, denominator)
    try:
        return reconstruct_decimal(window)
    except RangeError as error:
        raise NumericOverflowError("decimal", error.message) from error
