"""
Decimal digit strings of any length.

``int(str)`` and ``str(int)`` refuse operands longer than the interpreter's
``sys.get_int_max_str_digits()`` (4300 by default). These helpers split long
operands in halves on a power of ten, so every builtin conversion they make
stays below that limit and the process-wide setting is never touched.
"""

from __future__ import annotations

from functools import lru_cache

# Largest piece handed to int()/str() in one call
CHUNK_DIGITS = 2000

_LOG10_2 = 0.30102999566398120


@lru_cache(maxsize=128)
def _power_of_ten(exponent: int) -> int:
    return 10 ** exponent


def digits_to_int(text: str) -> int:
    """
    Value of an optionally signed run of ASCII digits.

    ``_`` group separators are dropped, as ``int()`` does.

    Examples:
        >>> digits_to_int("-1_000")
        -1000
    """
    text = text.replace("_", "")
    if text[:1] in ("+", "-"):
        magnitude = _unsigned_digits_to_int(text[1:])
        return -magnitude if text[0] == "-" else magnitude
    return _unsigned_digits_to_int(text)


def _unsigned_digits_to_int(text: str) -> int:
    if len(text) <= CHUNK_DIGITS:
        return int(text)

    low_length = len(text) // 2
    high = _unsigned_digits_to_int(text[:-low_length])
    low = _unsigned_digits_to_int(text[-low_length:])
    return high * _power_of_ten(low_length) + low


def int_to_digits(value: int) -> str:
    """
    Decimal text of an integer of any size.

    Examples:
        >>> int_to_digits(-1000)
        '-1000'
    """
    if value < 0:
        return "-" + _unsigned_int_to_digits(-value)
    return _unsigned_int_to_digits(value)


def _unsigned_int_to_digits(value: int) -> str:
    # bit_length * log10(2) undercounts the digit count by at most one
    estimate = int(value.bit_length() * _LOG10_2)
    if estimate < CHUNK_DIGITS:
        return str(value)

    low_length = estimate // 2
    high, low = divmod(value, _power_of_ten(low_length))
    return _unsigned_int_to_digits(high) + _unsigned_int_to_digits(low).zfill(low_length)
