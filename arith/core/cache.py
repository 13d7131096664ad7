"""
Grow-only lookup tables shared between threads.

Collaborators that memoize expensive integer sequences (factorials, primes,
powers) keep them in a :class:`TableCache`:

- readers grab the current tuple without taking a lock;
- a writer builds a complete new table off to the side and publishes it;
- when two writers race, the longer completed table wins and the table
  never shrinks.

Caches are passed in explicitly; nothing in this module is a process-wide
singleton.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, Sequence, TypeVar

from .config import get_settings
from .errors import DomainError
from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TableCache(Generic[T]):
    """
    Grow-only, publish-whole-table cache.

    Example:
        >>> cache = TableCache([1])
        >>> cache.publish([1, 2, 4])
        (1, 2, 4)
        >>> cache.publish([1, 2])
        (1, 2, 4)
    """

    def __init__(self, initial: Sequence[T] = ()):
        self._table: tuple[T, ...] = tuple(initial)
        self._lock = threading.Lock()

    def snapshot(self) -> tuple[T, ...]:
        """Return the current table (a single reference read, never blocks)."""
        return self._table

    def __len__(self) -> int:
        return len(self._table)

    def publish(self, table: Sequence[T]) -> tuple[T, ...]:
        """
        Offer a completed table; keep whichever of current/offered is longer.

        Returns:
            The table that is current after the call
        """
        candidate = tuple(table)
        current = self._table

        # Fast path: nothing to do when the offer is not an improvement
        if len(candidate) <= len(current):
            return current

        with self._lock:
            current = self._table
            if len(candidate) > len(current):
                self._table = candidate
                logger.debug("Table grown from %d to %d entries", len(current), len(candidate))
            return self._table

    def ensure(self, size: int, builder: Callable[[tuple[T, ...], int], Sequence[T]]) -> tuple[T, ...]:
        """
        Return a table with at least ``size`` entries.

        Args:
            size: Required number of entries
            builder: ``builder(current_table, size)`` returns a complete table
                with at least ``size`` entries (it may reuse the current prefix)
        """
        table = self._table
        if len(table) >= size:
            return table
        return self.publish(builder(table, size))


class PowerTable:
    """
    Cached powers ``base ** k`` for ``k >= 0``.

    The table grows by doubling so repeated requests for larger exponents
    stay amortized linear.
    """

    def __init__(self, base: int, cache: TableCache[int] | None = None):
        if base < 2:
            raise DomainError(f"Power table base must be at least 2, got {base}", "base", base)

        self.base = base
        self.cache: TableCache[int] = cache if cache is not None else TableCache([1])

        if len(self.cache) == 0:
            self.cache.publish([1])

        self.cache.ensure(get_settings().POWER_TABLE_SIZE, self._build)

    def _build(self, table: tuple[int, ...], size: int) -> list[int]:
        target = max(size, 2 * len(table))
        powers = list(table) or [1]
        while len(powers) < target:
            powers.append(powers[-1] * self.base)
        return powers

    def __call__(self, exponent: int) -> int:
        """Return ``base ** exponent``."""
        if exponent < 0:
            raise DomainError(f"Exponent must be non-negative, got {exponent}", "exponent", exponent)
        return self.cache.ensure(exponent + 1, self._build)[exponent]
