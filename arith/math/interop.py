"""
Conversion between RationalNumber and other exact number types.

- ``fractions.Fraction`` (finite values only)
- SymPy ``Rational`` / ``oo`` / ``nan``
- ``decimal.Decimal`` through the 96-bit packed decimal
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any

import sympy as sp

from ..core.errors import DomainError
from .rational import NAN, NEGATIVE_INFINITY, POSITIVE_INFINITY, RationalNumber


def to_fraction(value: RationalNumber) -> Fraction:
    """
    Convert to ``fractions.Fraction``.

    Raises:
        DomainError: For NaN and infinities
    """
    if not value.is_finite:
        raise DomainError(f"{value} cannot be represented as a Fraction", "value", str(value))
    return Fraction(value.numerator, value.denominator)


def from_fraction(value: Fraction) -> RationalNumber:
    return RationalNumber(value.numerator, value.denominator)


def to_sympy(value: RationalNumber) -> sp.Expr:
    """
    Convert to a SymPy number.

    Examples:
        >>> to_sympy(RationalNumber(-3, 4))
        -3/4
        >>> to_sympy(RationalNumber(1, 0))
        oo
    """
    if value.is_nan:
        return sp.nan
    if value.is_positive_infinity:
        return sp.oo
    if value.is_negative_infinity:
        return -sp.oo
    return sp.Rational(value.numerator, value.denominator)


def from_sympy(expr: Any) -> RationalNumber:
    """
    Convert a SymPy rational, integer or extended-real infinity.

    Raises:
        DomainError: For anything that is not an exact rational value
    """
    expr = sp.sympify(expr)

    if expr is sp.nan:
        return NAN
    if expr == sp.oo:
        return POSITIVE_INFINITY
    if expr == -sp.oo:
        return NEGATIVE_INFINITY
    if expr.is_Rational:
        return RationalNumber(int(expr.p), int(expr.q))

    raise DomainError(f"{expr} is not a rational number", "expr", str(expr))


def to_python_decimal(value: RationalNumber) -> Decimal:
    """Nearest 96-bit decimal (28 fractional digits at most) as ``Decimal``."""
    return value.to_decimal()


def from_python_decimal(value: Decimal) -> RationalNumber:
    """Exact value of a ``Decimal``, including NaN and infinities."""
    return RationalNumber.from_decimal(value)
