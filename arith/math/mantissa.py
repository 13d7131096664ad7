"""Mantissa/exponent pair exchanged with the floating point and decimal codecs."""

from __future__ import annotations

from typing import NamedTuple


class MantissaExponent(NamedTuple):
    """
    ``value == mantissa * base ** exponent`` (base 2 or 10 depending on the codec).

    Being a tuple, it compares equal to ``(mantissa, exponent)``.
    """

    mantissa: int
    exponent: int
