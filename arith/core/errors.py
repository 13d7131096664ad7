"""
Library exceptions.

Every error raised by ``arith`` derives from :class:`ArithError` and from the
builtin exception a caller would naturally catch (``ValueError`` for bad
arguments and bad text, ``OverflowError`` for lossy conversions).
"""

from typing import Any, Dict, Optional


class ArithError(Exception):
    """Base exception for arith errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DomainError(ArithError, ValueError):
    """Raised eagerly when an argument has an invalid shape (negative radix, zero modulus...)"""

    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        details = {"argument": argument, "value": value} if argument else {}
        super().__init__(message=message, details=details)


class FormatError(ArithError, ValueError):
    """Raised for malformed textual input"""

    def __init__(self, text: Optional[str], reason: str = "Not a valid fraction"):
        super().__init__(
            message=f"{reason}: {text!r}",
            details={"text": text, "reason": reason}
        )


class RangeError(ArithError, ValueError):
    """Raised when a codec value does not fit the destination bit layout"""

    def __init__(self, message: str, mantissa: Optional[int] = None, exponent: Optional[int] = None):
        super().__init__(
            message=message,
            details={"mantissa": mantissa, "exponent": exponent}
        )


class NumericOverflowError(ArithError, OverflowError):
    """Raised when a lossy conversion exceeds the target's representable magnitude"""

    def __init__(self, target: str, reason: Optional[str] = None):
        message = f"Overflow when converting to {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message=message, details={"target": target})
