"""Core utilities package"""

from .config import Settings, get_settings
from .digits import digits_to_int, int_to_digits
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    ArithError,
    DomainError,
    FormatError,
    RangeError,
    NumericOverflowError,
)
from .cache import TableCache, PowerTable

__all__ = [
    "Settings",
    "get_settings",
    "digits_to_int",
    "int_to_digits",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "ArithError",
    "DomainError",
    "FormatError",
    "RangeError",
    "NumericOverflowError",
    "TableCache",
    "PowerTable",
]
