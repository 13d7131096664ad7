"""arith - exact rational arithmetic.

Namespace package containing:
- arith.math: RationalNumber, float/decimal codecs, formatting, conversions
- arith.parser: natural and repeating-decimal notation
- arith.core: settings, logging, errors and shared table caches
"""

__version__ = "0.1.0"

from .core.errors import ArithError, DomainError, FormatError, NumericOverflowError, RangeError
from .math import MidpointRounding, Parity, RationalNumber
from .parser import parse, try_parse

__all__ = [
    "RationalNumber",
    "Parity",
    "MidpointRounding",
    "parse",
    "try_parse",
    "ArithError",
    "DomainError",
    "FormatError",
    "RangeError",
    "NumericOverflowError",
]
