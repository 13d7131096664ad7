"""
Regular grammars for the two textual notations of a rational number.

Natural notation::

    NaN | +Inf | -Inf
    [sign] INT [ SEP [sign] INT ]          SEP is one of  /  \\  :

Decimal notation::

    [sign] [INT] [ '.' [FRAC] [ '(' REPEAT ')' ] ] [ ('e' | 'E') [sign] EXP ]

INT accepts ``_`` between digit groups, as Python's ``int()`` does.
"""

import re

# Building blocks, combined into the full-match grammars below
PATTERNS = {
    "INT": r"[0-9]+(?:_[0-9]+)*",
    "DIGITS": r"[0-9]+",
    "SIGN": r"[+-]",
    "SEPARATOR": r"[/\\:]",
    "SPECIAL": r"nan|[+-]inf",
}

SPECIAL = re.compile(rf"^\s*(?P<special>{PATTERNS['SPECIAL']})\s*$", re.IGNORECASE)

NATURAL = re.compile(
    rf"^\s*(?P<numerator>{PATTERNS['SIGN']}?{PATTERNS['INT']})"
    rf"(?:\s*{PATTERNS['SEPARATOR']}\s*(?P<denominator>{PATTERNS['SIGN']}?{PATTERNS['INT']}))?"
    r"\s*$"
)

DECIMAL = re.compile(
    rf"^\s*(?P<sign>{PATTERNS['SIGN']})?"
    rf"(?P<int>{PATTERNS['INT']})?"
    rf"(?:\.(?P<fraction>{PATTERNS['DIGITS']})?(?:\((?P<period>{PATTERNS['DIGITS']})\))?)?"
    rf"(?:[eE](?P<exponent>{PATTERNS['SIGN']}?{PATTERNS['DIGITS']}))?"
    r"\s*$"
)
