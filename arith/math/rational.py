"""
Exact rational numbers.

RationalNumber stores a numerator/denominator pair of Python integers in
canonical form:

- the denominator is never negative;
- ``x/0`` encodes the special values NaN (0/0), +Infinity (1/0) and
  -Infinity (-1/0);
- zero is always ``0/1``;
- otherwise numerator and denominator are coprime.

Every construction path (the constructor, ``model_validate``,
``model_validate_json``, each operator and cast) runs through
:func:`canonicalize`, so two equal values always have the same fields.

Examples:
    >>> RationalNumber(2, -4)
    RationalNumber(-1, 2)
    >>> RationalNumber(1, 3) + RationalNumber(1, 6)
    RationalNumber(1, 2)
    >>> RationalNumber(1, 0) - RationalNumber(1, 0)
    RationalNumber(0, 0)
"""

from __future__ import annotations

import math
import operator
import unicodedata
from decimal import Decimal
from fractions import Fraction
from typing import Any, Iterable, Iterator

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from ..core.digits import int_to_digits
from ..core.errors import DomainError, NumericOverflowError
from . import bridge
from .decimals import PackedDecimal, decompose_decimal, decompose_python_decimal
from .floating import BINARY32, BINARY64, decompose_double, decompose_single, narrow_single
from .mantissa import MantissaExponent
from .value import MidpointRounding, NumericValue, Parity


def canonicalize(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Bring a raw numerator/denominator pair into canonical form.

    Examples:
        >>> canonicalize(6, -4)
        (-3, 2)
        >>> canonicalize(-5, 0)
        (-1, 0)
        >>> canonicalize(0, 7)
        (0, 1)
    """
    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    if denominator == 0:
        return ((numerator > 0) - (numerator < 0), 0)

    if numerator == 0:
        return (0, 1)

    divisor = math.gcd(numerator, denominator)
    return (numerator // divisor, denominator // divisor)


def _as_int(value: Any, name: str) -> int:
    try:
        return int(operator.index(value))
    except TypeError:
        raise DomainError(
            f"{name} must be an integer, got {type(value).__name__}", name, repr(value)
        ) from None


# Signed/unsigned integer widths for the overflow-checked casts
_INTEGER_RANGES: dict[str, tuple[int, int]] = {
    "int8": (-(1 << 7), (1 << 7) - 1),
    "uint8": (0, (1 << 8) - 1),
    "int16": (-(1 << 15), (1 << 15) - 1),
    "uint16": (0, (1 << 16) - 1),
    "int32": (-(1 << 31), (1 << 31) - 1),
    "uint32": (0, (1 << 32) - 1),
    "int64": (-(1 << 63), (1 << 63) - 1),
    "uint64": (0, (1 << 64) - 1),
}

# Scale used when turning a Unicode numeric value (e.g. '⅝') into a ratio;
# divisible by every denominator the Unicode vulgar fractions use.
_CHAR_SCALE = 1_260_000


class RationalNumber(BaseModel, NumericValue):
    """
    Immutable exact rational number (or NaN / ±Infinity).

    Supports the full set of Python arithmetic and comparison operators with
    ``int``, ``float``, ``fractions.Fraction`` and ``decimal.Decimal``
    operands; all conversions from native numbers are exact.

    Equality is structural (``NaN == NaN`` holds, because both are ``0/0``);
    the ordering operators treat NaN as unordered, like ``float``.
    """

    model_config = ConfigDict(frozen=True)

    numerator: StrictInt = Field(default=0, description="Signed numerator")
    denominator: StrictInt = Field(default=1, description="Non-negative denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1):
        """
        Create a rational number ``numerator / denominator``.

        Args:
            numerator: Any integer (``operator.index`` compatible)
            denominator: Any integer; 0 yields NaN or a signed infinity

        Raises:
            DomainError: If either argument is not an integer
        """
        super().__init__(
            numerator=_as_int(numerator, "numerator"),
            denominator=_as_int(denominator, "denominator"),
        )

    @model_validator(mode="before")
    @classmethod
    def _canonical_form(cls, data: Any) -> Any:
        if isinstance(data, dict):
            numerator = data.get("numerator", 0)
            denominator = data.get("denominator", 1)
            # Non-int payloads are left for StrictInt to reject
            if type(numerator) is int and type(denominator) is int:
                numerator, denominator = canonicalize(numerator, denominator)
                data = {**data, "numerator": numerator, "denominator": denominator}
        return data

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def _from_pair(cls, pair: MantissaExponent, base: int) -> RationalNumber:
        mantissa, exponent = pair
        if exponent >= 0:
            return cls(mantissa * base ** exponent, 1)
        return cls(mantissa, base ** -exponent)

    @classmethod
    def from_double(cls, value: float) -> RationalNumber:
        """
        Exact value of a binary64 float.

        Examples:
            >>> RationalNumber.from_double(0.1)
            RationalNumber(3602879701896397, 36028797018963968)
        """
        value = float(value)
        if math.isnan(value):
            return NAN
        if math.isinf(value):
            return POSITIVE_INFINITY if value > 0 else NEGATIVE_INFINITY
        if value == 0:
            return ZERO
        return cls._from_pair(decompose_double(value), 2)

    @classmethod
    def from_single(cls, value: float) -> RationalNumber:
        """Exact value of a binary32 float (Python floats are narrowed first)."""
        narrowed = narrow_single(value)
        if np.isnan(narrowed):
            return NAN
        if np.isinf(narrowed):
            return POSITIVE_INFINITY if narrowed > 0 else NEGATIVE_INFINITY
        if narrowed == 0:
            return ZERO
        return cls._from_pair(decompose_single(narrowed), 2)

    @classmethod
    def from_decimal(cls, value: PackedDecimal | Decimal) -> RationalNumber:
        """Exact value of a packed 96-bit decimal or a ``decimal.Decimal``."""
        if isinstance(value, PackedDecimal):
            return cls._from_pair(decompose_decimal(value), 10)

        if isinstance(value, Decimal):
            if value.is_nan():
                return NAN
            if value.is_infinite():
                return NEGATIVE_INFINITY if value.is_signed() else POSITIVE_INFINITY
            return cls._from_pair(decompose_python_decimal(value), 10)

        raise DomainError(f"Expected a decimal value, got {type(value).__name__}", "value", repr(value))

    @classmethod
    def from_char(cls, value: str) -> RationalNumber:
        """
        Numeric value of a single Unicode character.

        Examples:
            >>> RationalNumber.from_char("⅝")
            RationalNumber(5, 8)
            >>> RationalNumber.from_char("x").is_nan
            True
        """
        if len(value) != 1:
            raise DomainError(f"Expected a single character, got {value!r}", "value", value)

        if value == "∞":
            return POSITIVE_INFINITY

        numeric = unicodedata.numeric(value, None)
        if numeric is None or numeric < 0:
            return NAN

        return cls(int(numeric * _CHAR_SCALE + 0.5), _CHAR_SCALE)

    @classmethod
    def from_python(cls, value: Any) -> RationalNumber:
        """
        Convert a Python value to a RationalNumber.

        Accepts RationalNumber, bool, int, Fraction, float (binary64),
        numpy.float32 (binary32), Decimal, PackedDecimal and text in any
        notation :meth:`parse` understands.

        Raises:
            DomainError: For unsupported types
            FormatError: For unparsable text
        """
        if isinstance(value, RationalNumber):
            return value
        if isinstance(value, np.float32):
            return cls.from_single(value)
        if isinstance(value, str):
            return cls.parse(value)

        coerced = _coerce(value)
        if coerced is None:
            raise DomainError(f"Cannot convert {type(value).__name__} to RationalNumber", "value", repr(value))
        return coerced

    @classmethod
    def parse(cls, text: str) -> RationalNumber:
        """
        Parse natural (``"-3/4"``, ``"NaN"``) or decimal (``"1.2(41)e-3"``) notation.

        Raises:
            FormatError: If the text matches neither notation
        """
        # Import here to avoid circular imports
        from ..parser import parse

        return parse(text)

    @classmethod
    def try_parse(cls, text: str | None) -> RationalNumber | None:
        """Like :meth:`parse` but returns None instead of raising."""
        from ..parser import try_parse

        return try_parse(text)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    @property
    def is_nan(self) -> bool:
        return self.denominator == 0 and self.numerator == 0

    @property
    def is_infinity(self) -> bool:
        """Either positive or negative infinity."""
        return self.denominator == 0 and self.numerator != 0

    @property
    def is_positive_infinity(self) -> bool:
        return self.denominator == 0 and self.numerator > 0

    @property
    def is_negative_infinity(self) -> bool:
        return self.denominator == 0 and self.numerator < 0

    @property
    def is_finite(self) -> bool:
        return self.denominator != 0

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0 and self.denominator == 1

    @property
    def is_one(self) -> bool:
        return self.numerator == 1 and self.denominator == 1

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1

    @property
    def is_proper_fraction(self) -> bool:
        return abs(self.numerator) < self.denominator

    @property
    def is_power_of_two(self) -> bool:
        """True for ``2**k`` and ``1 / 2**k`` (k >= 0)."""

        def power_of_two(value: int) -> bool:
            return value > 0 and value & (value - 1) == 0

        return (self.numerator == 1 and power_of_two(self.denominator)) or (
            power_of_two(self.numerator) and self.denominator == 1
        )

    @property
    def parity(self) -> Parity:
        """EVEN/ODD by the numerator when the denominator is odd, else NONE."""
        if self.denominator % 2 == 0:
            return Parity.NONE
        return Parity.EVEN if self.numerator % 2 == 0 else Parity.ODD

    def sign(self) -> int:
        return (self.numerator > 0) - (self.numerator < 0)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, other: Any) -> int:
        """
        Three-way comparison ``sign(l.num * r.den - l.den * r.num)``.

        Only valid because denominators are never negative. NaN compares
        equal to everything here; use the rich comparison operators for
        IEEE-like unordered NaN.
        """
        return compare(self, other)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, RationalNumber):
            return self.numerator == other.numerator and self.denominator == other.denominator
        if isinstance(other, float) and math.isnan(other):
            return False
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.numerator == coerced.numerator and self.denominator == coerced.denominator

    def __hash__(self) -> int:
        if self.denominator == 0:
            if self.numerator == 0:
                return hash((0, 0))
            return hash(math.inf if self.numerator > 0 else -math.inf)
        # Agrees with int, float and Fraction hashes for equal values
        return hash(Fraction(self.numerator, self.denominator))

    def _ordered(self, other: Any) -> int | None:
        right = _coerce(other)
        if right is None:
            return None
        if self.is_nan or right.is_nan:
            return 2
        return compare(self, right)

    def __lt__(self, other: Any) -> bool:
        result = self._ordered(other)
        if result is None:
            return NotImplemented
        return result == -1

    def __le__(self, other: Any) -> bool:
        result = self._ordered(other)
        if result is None:
            return NotImplemented
        return result in (-1, 0)

    def __gt__(self, other: Any) -> bool:
        result = self._ordered(other)
        if result is None:
            return NotImplemented
        return result == 1

    def __ge__(self, other: Any) -> bool:
        result = self._ordered(other)
        if result is None:
            return NotImplemented
        return result in (0, 1)

    def clamp(self, lower: Any, upper: Any) -> RationalNumber:
        """
        Restrict to ``[lower, upper]``; NaN passes through unchanged.

        Raises:
            DomainError: If lower > upper
        """
        lower, upper = _require(lower, "lower"), _require(upper, "upper")
        if compare(lower, upper) > 0:
            raise DomainError(f"Min value {lower} can't be greater than max {upper}", "lower", str(lower))
        if self.is_nan:
            return self
        if compare(self, lower) < 0:
            return lower
        if compare(self, upper) > 0:
            return upper
        return self

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> RationalNumber:
        right = _coerce(other)
        return NotImplemented if right is None else add(self, right)

    def __radd__(self, other: Any) -> RationalNumber:
        left = _coerce(other)
        return NotImplemented if left is None else add(left, self)

    def __sub__(self, other: Any) -> RationalNumber:
        right = _coerce(other)
        return NotImplemented if right is None else sub(self, right)

    def __rsub__(self, other: Any) -> RationalNumber:
        left = _coerce(other)
        return NotImplemented if left is None else sub(left, self)

    def __mul__(self, other: Any) -> RationalNumber:
        right = _coerce(other)
        return NotImplemented if right is None else mul(self, right)

    def __rmul__(self, other: Any) -> RationalNumber:
        left = _coerce(other)
        return NotImplemented if left is None else mul(left, self)

    def __truediv__(self, other: Any) -> RationalNumber:
        right = _coerce(other)
        return NotImplemented if right is None else div(self, right)

    def __rtruediv__(self, other: Any) -> RationalNumber:
        left = _coerce(other)
        return NotImplemented if left is None else div(left, self)

    def __mod__(self, other: Any) -> RationalNumber:
        right = _coerce(other)
        return NotImplemented if right is None else mod(self, right)

    def __rmod__(self, other: Any) -> RationalNumber:
        left = _coerce(other)
        return NotImplemented if left is None else mod(left, self)

    def __floordiv__(self, other: Any) -> int:
        right = _coerce(other)
        return NotImplemented if right is None else floordiv(self, right)

    def __rfloordiv__(self, other: Any) -> int:
        left = _coerce(other)
        return NotImplemented if left is None else floordiv(left, self)

    def __divmod__(self, other: Any) -> tuple[int, RationalNumber]:
        right = _coerce(other)
        if right is None:
            return NotImplemented
        return floordiv(self, right), mod(self, right)

    def __pow__(self, exponent: Any) -> RationalNumber:
        if isinstance(exponent, RationalNumber):
            if not exponent.is_integer:
                return NotImplemented
            exponent = exponent.numerator
        elif not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> RationalNumber:
        return RationalNumber(-self.numerator, self.denominator)

    def __pos__(self) -> RationalNumber:
        return self

    def __abs__(self) -> RationalNumber:
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero

    def abs(self) -> RationalNumber:
        return RationalNumber(-self.numerator, self.denominator) if self.numerator < 0 else self

    def negate(self) -> RationalNumber:
        return -self

    def reciprocal(self) -> RationalNumber:
        """``1 / self`` (zero yields +Infinity)."""
        return RationalNumber(self.denominator, self.numerator)

    def pow(self, exponent: int) -> RationalNumber:
        """
        Integer power; negative exponents invert.

        Examples:
            >>> RationalNumber(2, 3).pow(-2)
            RationalNumber(9, 4)
        """
        exponent = _as_int(exponent, "exponent")
        if exponent == 0:
            return ONE
        if exponent > 0:
            return RationalNumber(self.numerator ** exponent, self.denominator ** exponent)
        return RationalNumber(self.denominator ** -exponent, self.numerator ** -exponent)

    def rem(self, other: Any) -> RationalNumber:
        """Remainder of truncating division (sign follows the dividend)."""
        return rem(self, other)

    def log(self, base: float | None = None) -> float:
        """
        Logarithm as float (natural unless ``base`` is given).

        NaN for negative values and NaN, -inf for zero, +inf for +Infinity.
        """
        if self.numerator < 0 or self.is_nan:
            return math.nan
        if self.denominator == 0:
            return math.inf
        if self.numerator == 0:
            return -math.inf

        value = math.log(self.numerator) - math.log(self.denominator)
        if base is not None:
            value /= math.log(base)
        return value

    def log10(self) -> float:
        if self.numerator < 0 or self.is_nan:
            return math.nan
        if self.denominator == 0:
            return math.inf
        if self.numerator == 0:
            return -math.inf
        return math.log10(self.numerator) - math.log10(self.denominator)

    # ------------------------------------------------------------------
    # Rounding
    # ------------------------------------------------------------------

    def _truncated(self) -> int:
        quotient = abs(self.numerator) // self.denominator
        return quotient if self.numerator >= 0 else -quotient

    def trunc(self) -> RationalNumber:
        """Integer part (rounded toward zero)."""
        return self if self.denominator == 0 else RationalNumber(self._truncated())

    def frac(self) -> RationalNumber:
        """Fractional part; same sign as the value, ``trunc() + frac() == self``."""
        if self.denominator == 0:
            return self
        return RationalNumber(self.numerator - self._truncated() * self.denominator, self.denominator)

    def floor(self) -> RationalNumber:
        return self if self.denominator == 0 else RationalNumber(self.numerator // self.denominator)

    def ceiling(self) -> RationalNumber:
        return self if self.denominator == 0 else RationalNumber(-(-self.numerator // self.denominator))

    def round(self, mode: MidpointRounding = MidpointRounding.TO_EVEN) -> RationalNumber:
        """
        Round to an integer; ``mode`` only matters for exact halves.

        Examples:
            >>> RationalNumber(5, 2).round()
            RationalNumber(2, 1)
            >>> RationalNumber(5, 2).round(MidpointRounding.AWAY_FROM_ZERO)
            RationalNumber(3, 1)
        """
        if self.denominator == 0:
            return self

        lower, remainder = divmod(self.numerator, self.denominator)
        twice = 2 * remainder

        if twice < self.denominator:
            return RationalNumber(lower)
        if twice > self.denominator:
            return RationalNumber(lower + 1)

        if mode is MidpointRounding.TO_EVEN:
            result = lower if lower % 2 == 0 else lower + 1
        elif mode is MidpointRounding.AWAY_FROM_ZERO:
            result = lower + 1 if self.numerator > 0 else lower
        elif mode is MidpointRounding.TO_ZERO:
            result = lower if self.numerator > 0 else lower + 1
        elif mode is MidpointRounding.TO_NEGATIVE_INFINITY:
            result = lower
        elif mode is MidpointRounding.TO_POSITIVE_INFINITY:
            result = lower + 1
        else:
            raise DomainError(f"Unknown rounding mode {mode!r}", "mode", repr(mode))

        return RationalNumber(result)

    def _require_finite(self, target: str) -> None:
        if self.denominator == 0:
            raise NumericOverflowError(target, f"{self.to_string()} is not a finite value")

    def __trunc__(self) -> int:
        self._require_finite("int")
        return self._truncated()

    def __floor__(self) -> int:
        self._require_finite("int")
        return self.numerator // self.denominator

    def __ceil__(self) -> int:
        self._require_finite("int")
        return -(-self.numerator // self.denominator)

    def __round__(self, ndigits: int | None = None) -> int | RationalNumber:
        if ndigits is None:
            self._require_finite("int")
            return self.round().numerator

        if self.denominator == 0:
            return self

        shift = RationalNumber(10) ** ndigits
        return (self * shift).round() / shift

    # ------------------------------------------------------------------
    # Casts to native numbers
    # ------------------------------------------------------------------

    def _to_bounded_int(self, target: str) -> int:
        self._require_finite(target)
        value = self._truncated()
        low, high = _INTEGER_RANGES[target]
        if value < low or value > high:
            raise NumericOverflowError(target, f"{value} is outside [{low}, {high}]")
        return value

    def to_int8(self) -> int:
        return self._to_bounded_int("int8")

    def to_uint8(self) -> int:
        return self._to_bounded_int("uint8")

    def to_int16(self) -> int:
        return self._to_bounded_int("int16")

    def to_uint16(self) -> int:
        return self._to_bounded_int("uint16")

    def to_int32(self) -> int:
        return self._to_bounded_int("int32")

    def to_uint32(self) -> int:
        return self._to_bounded_int("uint32")

    def to_int64(self) -> int:
        return self._to_bounded_int("int64")

    def to_uint64(self) -> int:
        return self._to_bounded_int("uint64")

    def to_bigint(self) -> int:
        """Truncated integer value of any size."""
        self._require_finite("bigint")
        return self._truncated()

    def __int__(self) -> int:
        return self.to_bigint()

    def to_double(self) -> float:
        """
        Nearest binary64 value (round half to even).

        Raises:
            NumericOverflowError: If the magnitude exceeds the binary64 range
        """
        return float(bridge.to_binary(self.numerator, self.denominator, BINARY64))

    def __float__(self) -> float:
        return self.to_double()

    def to_single(self) -> np.float32:
        """Nearest binary32 value (round half to even)."""
        return bridge.to_binary(self.numerator, self.denominator, BINARY32)

    def to_packed_decimal(self) -> PackedDecimal:
        """Nearest 96-bit decimal, at most 28 fractional digits."""
        return bridge.to_packed_decimal(self.numerator, self.denominator)

    def to_decimal(self) -> Decimal:
        """Nearest 96-bit decimal as ``decimal.Decimal``."""
        return self.to_packed_decimal().to_decimal()

    def as_integer_ratio(self) -> tuple[int, int]:
        """``(numerator, denominator)`` for finite values."""
        if self.denominator == 0:
            raise DomainError(f"{self.to_string()} has no integer ratio", "value", self.to_string())
        return (self.numerator, self.denominator)

    # ------------------------------------------------------------------
    # Formatting and alternate representations
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        from .formatting import to_string_natural

        return to_string_natural(self)

    def to_string_natural(self) -> str:
        return self.to_string()

    def to_string_decimal(self) -> str:
        """Decimal notation with the repeating group in parentheses, e.g. ``0.1(6)``."""
        from .formatting import to_string_decimal

        return to_string_decimal(self)

    def to_tex(self) -> str:
        """Convert to LaTeX representation."""
        if self.denominator == 0:
            if self.numerator == 0:
                return r"\mathrm{NaN}"
            return r"\infty" if self.numerator > 0 else r"-\infty"
        if self.denominator == 1:
            return int_to_digits(self.numerator)
        sign = "-" if self.numerator < 0 else ""
        return f"{sign}\\frac{{{int_to_digits(abs(self.numerator))}}}{{{int_to_digits(self.denominator)}}}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"RationalNumber({int_to_digits(self.numerator)}, {int_to_digits(self.denominator)})"

    def __format__(self, format_spec: str) -> str:
        from .formatting import format_rational

        return format_rational(self, format_spec)

    def fractional_digits(self) -> Iterator[int]:
        from .formatting import fractional_digits

        return fractional_digits(self)

    def to_radix(self, radix: int) -> Iterator[str]:
        from .formatting import to_radix

        return to_radix(self, radix)

    def to_continued_fraction(self) -> Iterator[int]:
        from .conversions import to_continued_fraction

        return to_continued_fraction(self)

    @classmethod
    def from_continued_fraction(cls, terms: Iterable[int]) -> RationalNumber:
        from .conversions import from_continued_fraction

        return from_continued_fraction(terms)

    @classmethod
    def from_radix(cls, text: str, radix: int) -> RationalNumber:
        from .conversions import from_radix

        return from_radix(text, radix)


def _coerce(value: Any) -> RationalNumber | None:
    """Exact RationalNumber for supported numeric operands, else None."""
    if isinstance(value, RationalNumber):
        return value
    if isinstance(value, int):
        return RationalNumber(int(value))
    if isinstance(value, Fraction):
        return RationalNumber(value.numerator, value.denominator)
    if isinstance(value, float):
        return RationalNumber.from_double(value)
    if isinstance(value, Decimal):
        return RationalNumber.from_decimal(value)
    return None


def _require(value: Any, name: str = "value") -> RationalNumber:
    coerced = _coerce(value)
    if coerced is None:
        raise DomainError(f"{name} must be a rational operand, got {type(value).__name__}", name, repr(value))
    return coerced


# ----------------------------------------------------------------------
# Named arithmetic
# ----------------------------------------------------------------------


def compare(left: Any, right: Any) -> int:
    """``sign(l.num * r.den - l.den * r.num)``; -1, 0 or 1."""
    left, right = _require(left, "left"), _require(right, "right")
    value = left.numerator * right.denominator - left.denominator * right.numerator
    return (value > 0) - (value < 0)


def add(left: Any, right: Any) -> RationalNumber:
    """
    ``a/b + c/d = (a*d + c*b) / (b*d)``.

    Two infinities of the same sign add up to that infinity; every other
    special case falls out of the canonical form.
    """
    left, right = _require(left, "left"), _require(right, "right")
    if left.is_infinity and left.numerator == right.numerator and right.denominator == 0:
        return left
    return RationalNumber(
        left.numerator * right.denominator + right.numerator * left.denominator,
        left.denominator * right.denominator,
    )


def sub(left: Any, right: Any) -> RationalNumber:
    """``a/b - c/d = (a*d - c*b) / (b*d)``."""
    left, right = _require(left, "left"), _require(right, "right")
    if left.is_infinity and left.numerator == -right.numerator and right.denominator == 0:
        return left
    return RationalNumber(
        left.numerator * right.denominator - right.numerator * left.denominator,
        left.denominator * right.denominator,
    )


def mul(left: Any, right: Any) -> RationalNumber:
    """``a/b * c/d = (a*c) / (b*d)``."""
    left, right = _require(left, "left"), _require(right, "right")
    return RationalNumber(left.numerator * right.numerator, left.denominator * right.denominator)


def div(left: Any, right: Any) -> RationalNumber:
    """
    ``a/b / c/d = (a*d) / (b*c)``.

    Division by zero yields a signed infinity, ``0 / 0`` yields NaN.
    """
    left, right = _require(left, "left"), _require(right, "right")
    return RationalNumber(left.numerator * right.denominator, left.denominator * right.numerator)


def mod(left: Any, right: Any) -> RationalNumber:
    """
    Floored modulo: ``((a*d) mod (c*b)) / (b*d)``, sign follows the divisor.

    Raises:
        DomainError: If the modulus is zero
    """
    left, right = _require(left, "left"), _require(right, "right")
    if right.is_zero:
        raise DomainError("Modulus must be non-zero", "right", 0)
    if not (left.is_finite and right.is_finite):
        return NAN
    return RationalNumber(
        (left.numerator * right.denominator) % (right.numerator * left.denominator),
        left.denominator * right.denominator,
    )


def rem(left: Any, right: Any) -> RationalNumber:
    """Truncated remainder, sign follows the dividend."""
    left, right = _require(left, "left"), _require(right, "right")
    if right.is_zero:
        raise DomainError("Modulus must be non-zero", "right", 0)
    if not (left.is_finite and right.is_finite):
        return NAN

    dividend = left.numerator * right.denominator
    divisor = right.numerator * left.denominator
    remainder = abs(dividend) % abs(divisor)
    return RationalNumber(-remainder if dividend < 0 else remainder, left.denominator * right.denominator)


def floordiv(left: Any, right: Any) -> int:
    """
    Floor of ``left / right`` as an integer.

    Raises:
        DomainError: If right is zero
        NumericOverflowError: If either operand is not finite
    """
    left, right = _require(left, "left"), _require(right, "right")
    if right.is_zero:
        raise DomainError("Divisor must be non-zero", "right", 0)
    if not (left.is_finite and right.is_finite):
        raise NumericOverflowError("int", "operands are not finite")
    return (left.numerator * right.denominator) // (right.numerator * left.denominator)


def minimum(left: Any, right: Any) -> RationalNumber:
    left, right = _require(left, "left"), _require(right, "right")
    return left if left <= right else right


def maximum(left: Any, right: Any) -> RationalNumber:
    left, right = _require(left, "left"), _require(right, "right")
    return left if left >= right else right


ZERO = RationalNumber(0, 1)
ONE = RationalNumber(1, 1)
MINUS_ONE = RationalNumber(-1, 1)
NAN = RationalNumber(0, 0)
POSITIVE_INFINITY = RationalNumber(1, 0)
NEGATIVE_INFINITY = RationalNumber(-1, 0)
