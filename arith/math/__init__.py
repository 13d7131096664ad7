"""
Exact rational numbers and the codecs around them.

- RationalNumber: canonical numerator/denominator pair with NaN and ±Infinity
- Bit-exact IEEE 754 binary32/binary64 and 96-bit decimal codecs
- Natural and repeating-decimal formatting, radix digits
- Continued fractions and Farey sequences
"""

from .conversions import farey, from_continued_fraction, from_radix, to_continued_fraction
from .decimals import PackedDecimal, decompose_decimal, decompose_python_decimal, reconstruct_decimal
from .floating import (
    BINARY32,
    BINARY64,
    FloatFormat,
    decompose_double,
    decompose_single,
    reconstruct_double,
    reconstruct_single,
)
from .formatting import fractional_digits, to_radix, to_string_decimal, to_string_natural
from .interop import (
    from_fraction,
    from_python_decimal,
    from_sympy,
    to_fraction,
    to_python_decimal,
    to_sympy,
)
from .mantissa import MantissaExponent
from .rational import (
    MINUS_ONE,
    NAN,
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    RationalNumber,
    add,
    canonicalize,
    compare,
    div,
    floordiv,
    maximum,
    minimum,
    mod,
    mul,
    rem,
    sub,
)
from .value import MidpointRounding, NumericValue, Parity

__all__ = [
    "RationalNumber",
    "NumericValue",
    "Parity",
    "MidpointRounding",
    "MantissaExponent",
    "PackedDecimal",
    "FloatFormat",
    "BINARY32",
    "BINARY64",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "NAN",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "canonicalize",
    "compare",
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "rem",
    "floordiv",
    "minimum",
    "maximum",
    "decompose_double",
    "decompose_single",
    "reconstruct_double",
    "reconstruct_single",
    "decompose_decimal",
    "decompose_python_decimal",
    "reconstruct_decimal",
    "to_string_natural",
    "to_string_decimal",
    "fractional_digits",
    "to_radix",
    "from_radix",
    "to_continued_fraction",
    "from_continued_fraction",
    "farey",
    "to_fraction",
    "from_fraction",
    "to_sympy",
    "from_sympy",
    "to_python_decimal",
    "from_python_decimal",
]
