"""
Text to RationalNumber.

Tries natural notation first (``"-3/4"``, ``"7"``, ``"NaN"``) and then
decimal notation with an optional repeating group and exponent
(``"1.2(41)e-3"``). The ``try_*`` methods return None on failure; ``parse``
raises :class:`~arith.core.errors.FormatError`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from ..core.cache import PowerTable
from ..core.config import get_settings
from ..core.errors import FormatError
from ..core.digits import digits_to_int
from ..core.logging import get_context_logger
from . import grammar

if TYPE_CHECKING:
    from ..math.rational import RationalNumber

logger = get_context_logger(__name__, component="parser")


class RationalParser:
    """
    Parser for both textual notations.

    Example:
        >>> RationalParser().parse("0.1(6)")
        RationalNumber(1, 6)
    """

    def __init__(self, exponent_limit: int | None = None, powers: PowerTable | None = None):
        """
        Initialize parser.

        Args:
            exponent_limit: Largest accepted ``|EXP|`` (defaults to settings)
            powers: Cached powers of ten for digit-group scaling
        """
        if exponent_limit is None:
            exponent_limit = get_settings().PARSE_EXPONENT_LIMIT
        self.exponent_limit = exponent_limit
        self.powers = powers if powers is not None else PowerTable(10)

    def try_parse_natural(self, text: str | None) -> RationalNumber | None:
        """Parse ``NaN``, ``+Inf``, ``-Inf``, ``N`` or ``N/D`` (also ``N\\D``, ``N:D``)."""
        from ..math.rational import NAN, NEGATIVE_INFINITY, POSITIVE_INFINITY, RationalNumber

        if not text:
            return None

        special = grammar.SPECIAL.match(text)
        if special:
            literal = special.group("special").lower()
            if literal == "nan":
                return NAN
            return POSITIVE_INFINITY if literal == "+inf" else NEGATIVE_INFINITY

        match = grammar.NATURAL.match(text)
        if not match:
            return None

        numerator = digits_to_int(match.group("numerator"))
        denominator = match.group("denominator")
        return RationalNumber(numerator, digits_to_int(denominator) if denominator is not None else 1)

    def try_parse_decimal(self, text: str | None) -> RationalNumber | None:
        """
        Parse ``[sign][INT][.[FRAC][(REPEAT)]][e[sign]EXP]``.

        The value is ``INT + FRAC/10**f + REPEAT/((10**r - 1) * 10**f)``
        (f, r digit counts) scaled by ``10**EXP``.
        """
        from ..math.rational import RationalNumber

        if not text:
            return None

        match = grammar.DECIMAL.match(text)
        if not match:
            return None

        integer, fraction, period, exponent = match.group("int", "fraction", "period", "exponent")
        if integer is None and fraction is None and period is None:
            return None

        power = 0
        if exponent is not None:
            power = self._exponent(exponent)
            if power is None:
                return None

        fraction = fraction or ""
        scale = self._power_of_ten(len(fraction))

        numerator = digits_to_int(integer or "0") * scale + digits_to_int(fraction or "0")
        denominator = scale

        if period is not None:
            cycle = self._power_of_ten(len(period)) - 1
            numerator = numerator * cycle + digits_to_int(period)
            denominator *= cycle

        if power >= 0:
            numerator *= self._power_of_ten(power)
        else:
            denominator *= self._power_of_ten(-power)

        if match.group("sign") == "-":
            numerator = -numerator

        return RationalNumber(numerator, denominator)

    def _exponent(self, text: str) -> int | None:
        digits = text.lstrip("+-").lstrip("0") or "0"
        if len(digits) > len(str(self.exponent_limit)) or int(digits) > self.exponent_limit:
            logger.debug(
                "Exponent exceeds limit %d", self.exponent_limit,
                extra_data={"exponent_digits": len(digits)},
            )
            return None
        return -int(digits) if text.startswith("-") else int(digits)

    def _power_of_ten(self, exponent: int) -> int:
        # Input lengths never grow the shared table
        if exponent < len(self.powers.cache):
            return self.powers(exponent)
        return 10 ** exponent

    def try_parse(self, text: str | None) -> RationalNumber | None:
        """Natural notation first, then decimal; None if neither matches."""
        result = self.try_parse_natural(text)
        if result is None:
            result = self.try_parse_decimal(text)
        if result is None:
            logger.debug("Not a rational number: %.40r", text, extra_data={"length": len(text or "")})
        return result

    def parse(self, text: str | None) -> RationalNumber:
        """
        Parse text in either notation.

        Raises:
            FormatError: If the text matches neither notation
        """
        result = self.try_parse(text)
        if result is None:
            raise FormatError(text)
        return result


@lru_cache()
def get_parser() -> RationalParser:
    """Shared parser configured from settings"""
    return RationalParser()


def try_parse_natural(text: str | None) -> RationalNumber | None:
    return get_parser().try_parse_natural(text)


def try_parse_decimal(text: str | None) -> RationalNumber | None:
    return get_parser().try_parse_decimal(text)


def try_parse(text: str | None) -> RationalNumber | None:
    return get_parser().try_parse(text)


def parse(text: str | None) -> RationalNumber:
    return get_parser().parse(text)
