"""Parsing of natural and decimal rational notation"""

from .parser import (
    RationalParser,
    get_parser,
    parse,
    try_parse,
    try_parse_decimal,
    try_parse_natural,
)

__all__ = [
    "RationalParser",
    "get_parser",
    "parse",
    "try_parse",
    "try_parse_decimal",
    "try_parse_natural",
]
