"""
Capabilities shared by exact numeric values.

This module provides:
- The NumericValue abstract base (ordering, formatting hooks)
- Parity of a value
- Midpoint rounding modes
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Any


class Parity(IntEnum):
    """
    Parity of a rational value.

    NONE is used for values that are not integers (or not finite).
    """

    ODD = -1
    NONE = 0
    EVEN = 1


class MidpointRounding(Enum):
    """How to round a value lying exactly halfway between two integers."""

    TO_EVEN = "to_even"  # banker's rounding (default)
    AWAY_FROM_ZERO = "away_from_zero"
    TO_ZERO = "to_zero"
    TO_NEGATIVE_INFINITY = "to_negative_infinity"
    TO_POSITIVE_INFINITY = "to_positive_infinity"


class NumericValue(ABC):
    """
    Base class for exact numeric value objects.

    Subclasses must implement:
    - compare: three-way comparison (-1, 0, 1)
    - to_string: canonical text form
    - sign: -1, 0 or 1

    Note: Concrete subclasses inherit from both BaseModel and NumericValue,
    e.g. ``class RationalNumber(BaseModel, NumericValue)``; NumericValue itself
    does not inherit from BaseModel to avoid MRO conflicts.
    """

    @abstractmethod
    def compare(self, other: Any) -> int:
        """
        Three-way comparison.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """

    @abstractmethod
    def to_string(self) -> str:
        """Convert to canonical human-readable string."""

    @abstractmethod
    def sign(self) -> int:
        """Sign of the value: -1, 0 or 1."""

    def __str__(self) -> str:
        """String representation (uses to_string)."""
        return self.to_string()

    def __repr__(self) -> str:
        """Debug representation."""
        return f"{self.__class__.__name__}({self.to_string()})"

    def is_positive(self) -> bool:
        return self.sign() > 0

    def is_negative(self) -> bool:
        return self.sign() < 0
