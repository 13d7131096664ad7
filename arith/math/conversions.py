"""Continued fractions, Farey sequences and radix parsing."""

from __future__ import annotations

from typing import Iterable, Iterator

from ..core.errors import DomainError, FormatError
from .formatting import DIGITS
from .rational import POSITIVE_INFINITY, ZERO, RationalNumber


def _continued_fraction_terms(numerator: int, denominator: int) -> Iterator[int]:
    while denominator:
        term, remainder = divmod(numerator, denominator)
        yield term
        numerator, denominator = denominator, remainder


def to_continued_fraction(value: RationalNumber) -> Iterator[int]:
    """
    Terms ``[a0; a1, a2, ...]`` of the regular continued fraction.

    ``a0`` is the floor of the value, every later term is positive.

    Raises:
        DomainError: If value is not finite (raised immediately)

    Examples:
        >>> list(to_continued_fraction(RationalNumber(415, 93)))
        [4, 2, 6, 7]
    """
    if not value.is_finite:
        raise DomainError(f"{value} has no continued fraction", "value", str(value))
    return _continued_fraction_terms(value.numerator, value.denominator)


def from_continued_fraction(terms: Iterable[int]) -> RationalNumber:
    """
    Evaluate ``a0 + 1/(a1 + 1/(a2 + ...))``.

    An empty sequence evaluates to +Infinity (the empty tail).
    """
    result = POSITIVE_INFINITY
    for term in reversed(list(terms)):
        result = RationalNumber(term) + result.reciprocal()
    return result


def _farey_terms(order: int) -> Iterator[RationalNumber]:
    a, b, c, d = 0, 1, 1, order
    yield ZERO
    while c <= order:
        k = (order + b) // d
        a, b, c, d = c, d, k * c - a, k * d - b
        yield RationalNumber(a, b)


def farey(order: int) -> Iterator[RationalNumber]:
    """
    Farey sequence of the given order: reduced fractions in ``[0, 1]``
    with denominators up to ``order``, ascending.

    Raises:
        DomainError: If order < 1 (raised immediately)

    Examples:
        >>> [str(x) for x in farey(3)]
        ['0', '1/3', '1/2', '2/3', '1']
    """
    if order < 1:
        raise DomainError(f"Farey order must be positive, got {order}", "order", order)
    return _farey_terms(order)


def from_radix(text: str, radix: int) -> RationalNumber:
    """
    Parse a positional number in ``radix`` (2..36).

    A leading ``-`` negates, one ``.`` or ``,`` separates the fraction,
    whitespace and ``_`` are ignored, digits are case-insensitive.

    Raises:
        DomainError: If radix is outside 2..36
        FormatError: If the text is malformed

    Examples:
        >>> from_radix("1.01", 2)
        RationalNumber(5, 4)
    """
    if not 2 <= radix <= len(DIGITS):
        raise DomainError(f"Radix must be between 2 and {len(DIGITS)}, got {radix}", "radix", radix)

    numerator, denominator = 0, 1
    negative = False
    seen_point = False
    seen_digit = False
    seen_significant = False

    for position, char in enumerate(text):
        if char.isspace() or char == "_":
            continue

        if char == "-":
            if seen_significant:
                raise FormatError(text, f"Unexpected '-' at position {position}")
            negative = True
            seen_significant = True
            continue

        if char in ".,":
            if seen_point:
                raise FormatError(text, f"Second separator at position {position}")
            seen_point = True
            seen_significant = True
            continue

        digit = DIGITS.find(char.lower())
        if digit < 0 or digit >= radix:
            raise FormatError(text, f"Invalid base-{radix} digit {char!r}")

        seen_digit = True
        seen_significant = True
        numerator = numerator * radix + digit
        if seen_point:
            denominator *= radix

    if not seen_digit:
        raise FormatError(text, "No digits")

    result = RationalNumber(numerator, denominator)
    return -result if negative else result

