"""
Text renderings of rational numbers.

- natural notation: ``-3/4``, ``5``, ``NaN``, ``+Inf``, ``-Inf``
- decimal notation with the repeating group in parentheses: ``0.1(6)``
- positional digits in any radix from 2 to 36
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from ..core.config import get_settings
from ..core.digits import int_to_digits
from ..core.errors import DomainError, FormatError

if TYPE_CHECKING:
    from .rational import RationalNumber

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

NAN_TEXT = "NaN"
POSITIVE_INFINITY_TEXT = "+Inf"
NEGATIVE_INFINITY_TEXT = "-Inf"


def _special_text(value: RationalNumber) -> str:
    if value.numerator == 0:
        return NAN_TEXT
    return POSITIVE_INFINITY_TEXT if value.numerator > 0 else NEGATIVE_INFINITY_TEXT


def to_string_natural(value: RationalNumber) -> str:
    """
    Natural notation.

    Examples:
        >>> to_string_natural(RationalNumber(-3, 4))
        '-3/4'
        >>> to_string_natural(RationalNumber(6, 3))
        '2'
    """
    if value.denominator == 0:
        return _special_text(value)
    if value.denominator == 1:
        return int_to_digits(value.numerator)
    return f"{int_to_digits(value.numerator)}/{int_to_digits(value.denominator)}"


def to_string_decimal(value: RationalNumber, separator: str | None = None) -> str:
    """
    Exact decimal notation; a repeating tail is written once in parentheses.

    The digits are produced by long division. Each remainder is remembered
    with the position of the digit it produces, so the first repeated
    remainder marks the start of the shortest cycle.

    Args:
        value: Number to render
        separator: Decimal separator (defaults to the configured one)

    Examples:
        >>> to_string_decimal(RationalNumber(1, 6))
        '0.1(6)'
        >>> to_string_decimal(RationalNumber(-1, 4))
        '-0.25'
    """
    if value.denominator == 0:
        return _special_text(value)
    if value.denominator == 1:
        return int_to_digits(value.numerator)

    if separator is None:
        separator = get_settings().DECIMAL_SEPARATOR

    whole, remainder = divmod(abs(value.numerator), value.denominator)

    digits: list[str] = []
    seen: dict[int, int] = {}
    while remainder and remainder not in seen:
        seen[remainder] = len(digits)
        digit, remainder = divmod(remainder * 10, value.denominator)
        digits.append(DIGITS[digit])

    sign = "-" if value.numerator < 0 else ""
    if not remainder:
        return f"{sign}{int_to_digits(whole)}{separator}{''.join(digits)}"

    start = seen[remainder]
    head, cycle = "".join(digits[:start]), "".join(digits[start:])
    return f"{sign}{int_to_digits(whole)}{separator}{head}({cycle})"


def format_rational(value: RationalNumber, format_spec: str) -> str:
    """
    ``format()`` support.

    ``""``, ``g``/``G`` and ``n``/``N`` give natural notation, ``d``/``D``
    decimal notation.

    Raises:
        FormatError: For any other format code
    """
    if format_spec in ("", "g", "G", "n", "N"):
        return to_string_natural(value)
    if format_spec in ("d", "D"):
        return to_string_decimal(value)
    raise FormatError(format_spec, "Unsupported format code")


def fractional_digits(value: RationalNumber) -> Iterator[int]:
    """
    Yield the decimal digits after the point (possibly forever).

    Nothing is yielded for integers and non-finite values.

    Examples:
        >>> list(fractional_digits(RationalNumber(1, 8)))
        [1, 2, 5]
    """
    if value.denominator <= 1:
        return

    remainder = abs(value.numerator) % value.denominator
    while remainder:
        digit, remainder = divmod(remainder * 10, value.denominator)
        yield digit


def _radix_digits(value: RationalNumber, radix: int) -> Iterator[str]:
    if value.denominator == 0:
        yield from _special_text(value)
        return

    if value.numerator < 0:
        yield "-"

    whole, remainder = divmod(abs(value.numerator), value.denominator)

    integer_digits: list[str] = []
    while True:
        whole, digit = divmod(whole, radix)
        integer_digits.append(DIGITS[digit])
        if not whole:
            break
    yield from reversed(integer_digits)

    if not remainder:
        return

    yield "."
    while remainder:
        digit, remainder = divmod(remainder * radix, value.denominator)
        yield DIGITS[digit]


def to_radix(value: RationalNumber, radix: int) -> Iterator[str]:
    """
    Positional representation in ``radix`` as a stream of characters.

    Expansions that do not terminate in the radix go on forever; take a
    prefix with ``itertools.islice``.

    Raises:
        DomainError: If radix is outside 2..36 (raised immediately)

    Examples:
        >>> "".join(to_radix(RationalNumber(5, 4), 2))
        '1.01'
    """
    if not 2 <= radix <= len(DIGITS):
        raise DomainError(f"Radix must be between 2 and {len(DIGITS)}, got {radix}", "radix", radix)
    return _radix_digits(value, radix)
