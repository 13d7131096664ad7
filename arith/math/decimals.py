"""
96-bit platform decimal codec.

A platform decimal is four unsigned 32-bit words::

    low, mid, high   96-bit unsigned significand (high word most significant)
    flags            bit 31: sign, bits 16-23: scale 0..28, all other bits 0

and stands for ``(-1)**sign * significand * 10 ** -scale``.
:class:`PackedDecimal` holds the words; :func:`decompose_decimal` and
:func:`reconstruct_decimal` convert between the words and
``mantissa * 10 ** exponent``.
"""

from __future__ import annotations

import struct
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.config import get_settings
from ..core.digits import digits_to_int
from ..core.errors import DomainError, RangeError
from .mantissa import MantissaExponent

MAX_SCALE = 28
SIGNIFICAND_LIMIT = 1 << 96

_WORD = 0xFFFFFFFF
_SIGN_BIT = 1 << 31
_SCALE_SHIFT = 16
_SCALE_MASK = 0xFF << _SCALE_SHIFT
_LAYOUT = struct.Struct("<4I")


class PackedDecimal(BaseModel):
    """
    The four machine words of a 96-bit decimal.

    Examples:
        >>> PackedDecimal(low=15, flags=1 << 16).to_decimal()
        Decimal('1.5')
    """

    model_config = ConfigDict(frozen=True)

    low: int = Field(default=0, ge=0, le=_WORD, description="Significand bits 0-31")
    mid: int = Field(default=0, ge=0, le=_WORD, description="Significand bits 32-63")
    high: int = Field(default=0, ge=0, le=_WORD, description="Significand bits 64-95")
    flags: int = Field(default=0, ge=0, le=_WORD, description="Sign (bit 31) and scale (bits 16-23)")

    @field_validator("flags")
    @classmethod
    def _check_flags(cls, value: int) -> int:
        if value & ~(_SIGN_BIT | _SCALE_MASK):
            raise ValueError(f"Reserved flag bits set: {value:#010x}")
        scale = (value & _SCALE_MASK) >> _SCALE_SHIFT
        if scale > MAX_SCALE:
            raise ValueError(f"Scale {scale} exceeds {MAX_SCALE}")
        return value

    @property
    def negative(self) -> bool:
        return bool(self.flags & _SIGN_BIT)

    @property
    def scale(self) -> int:
        return (self.flags & _SCALE_MASK) >> _SCALE_SHIFT

    @property
    def significand(self) -> int:
        """Unsigned 96-bit significand."""
        return (self.high << 64) | (self.mid << 32) | self.low

    def to_bytes(self) -> bytes:
        """16 bytes, little-endian words in ``low, mid, high, flags`` order."""
        return _LAYOUT.pack(self.low, self.mid, self.high, self.flags)

    @classmethod
    def from_bytes(cls, data: bytes) -> PackedDecimal:
        if len(data) != _LAYOUT.size:
            raise DomainError(f"Packed decimal needs {_LAYOUT.size} bytes, got {len(data)}", "data", len(data))
        low, mid, high, flags = _LAYOUT.unpack(data)
        return cls(low=low, mid=mid, high=high, flags=flags)

    def to_decimal(self) -> Decimal:
        """Exact ``decimal.Decimal`` with the same significand and scale."""
        digits = tuple(int(d) for d in str(self.significand))
        return Decimal((int(self.negative), digits, -self.scale))

    @classmethod
    def from_decimal(cls, value: Decimal) -> PackedDecimal:
        """Pack a ``decimal.Decimal``, rounding half-to-even beyond 28 places."""
        return reconstruct_decimal(decompose_python_decimal(value))

    def __str__(self) -> str:
        return str(self.to_decimal())


def decompose_decimal(value: PackedDecimal) -> MantissaExponent:
    """
    Split packed words into a signed mantissa and ``exponent = -scale``.

    Examples:
        >>> decompose_decimal(PackedDecimal(low=15, flags=1 << 16))
        MantissaExponent(mantissa=15, exponent=-1)
    """
    mantissa = value.significand
    if value.negative:
        mantissa = -mantissa
    return MantissaExponent(mantissa, -value.scale)


def decompose_python_decimal(value: Decimal) -> MantissaExponent:
    """Split a finite ``decimal.Decimal`` into ``mantissa * 10 ** exponent`` (any size)."""
    if not value.is_finite():
        raise DomainError(f"Cannot decompose non-finite decimal {value}", "value", str(value))

    sign, digits, exponent = value.as_tuple()
    mantissa = digits_to_int("".join(map(str, digits)) or "0")
    return MantissaExponent(-mantissa if sign else mantissa, exponent)


def reconstruct_decimal(mantissa: int, exponent: int | None = None) -> PackedDecimal:
    """
    Pack ``mantissa * 10 ** exponent`` into decimal words.

    Positive exponents are folded into the mantissa; exponents below -28 are
    rounded away half-to-even. Accepts two integers or one ``MantissaExponent``.

    Raises:
        RangeError: If ``|exponent|`` exceeds the configured band or the
            significand needs more than 96 bits
    """
    if exponent is None:
        mantissa, exponent = mantissa

    band = get_settings().DECIMAL_EXPONENT_BAND
    if exponent < -band or exponent > band:
        raise RangeError(f"Exponent {exponent} is outside [-{band}, {band}]", mantissa, exponent)

    negative = mantissa < 0
    magnitude = -mantissa if negative else mantissa

    if exponent > 0:
        magnitude *= 10 ** exponent
        exponent = 0
    elif exponent < -MAX_SCALE:
        factor = 10 ** (-MAX_SCALE - exponent)
        quotient, remainder = divmod(magnitude, factor)
        twice = 2 * remainder
        if twice > factor or (twice == factor and quotient % 2 == 1):
            quotient += 1
        magnitude = quotient
        exponent = -MAX_SCALE

    if magnitude >= SIGNIFICAND_LIMIT:
        raise RangeError(f"Significand of {mantissa}e{exponent} does not fit 96 bits", mantissa, exponent)

    flags = (-exponent) << _SCALE_SHIFT
    if negative and magnitude:
        flags |= _SIGN_BIT

    return PackedDecimal(
        low=magnitude & _WORD,
        mid=(magnitude >> 32) & _WORD,
        high=(magnitude >> 64) & _WORD,
        flags=flags,
    )
