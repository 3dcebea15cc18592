__all__ = ['Interval', 'Ordering', 'InvalidInterval', 'compare']

import enum
import logging
from dataclasses import dataclass
from functools import total_ordering

logger = logging.getLogger(__name__)

class InvalidInterval(ValueError):
    """Raised when an Interval is built from unusable bounds"""

class Ordering(enum.Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def __int__(self):
        return self.value

    @classmethod
    def of(cls, a, b):
        """Ordering of two plain values, a relative to b"""
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL

    def then(self, other: 'Ordering') -> 'Ordering':
        """Fall through to other when self is EQUAL"""
        return other if self is Ordering.EQUAL else self

@total_ordering
@dataclass(frozen=True)
class Interval():
    """Half-open integer range [start, end).

    Ordered by length, then by start. Equality is on (start, end) only.

    :param start: inclusive lower bound, non-negative
    :param end: exclusive upper bound, no smaller than start
    """
    start: int
    end: int

    def __post_init__(self):
        for name in ('start', 'end'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInterval(f"{name} must be an int, got {value!r}")
            if value < 0:
                raise InvalidInterval(f"{name} must be non-negative, got {value}")
        if self.end < self.start:
            raise InvalidInterval(f"end ({self.end}) is before start ({self.start})")

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"

    def length(self) -> int:
        return self.end - self.start

    def __lt__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return (self.length(), self.start) < (other.length(), other.start)

def compare(a: Interval, b: Interval) -> Ordering:
    """Comparator for a maximum-first priority queue that yields the shortest interval first.

    Both levels compare b against a, so the shortest interval (then the one
    with the smallest start) is the one reported as the maximum.
    """
    ordering = Ordering.of(b.length(), a.length()).then(Ordering.of(b.start, a.start))
    logger.debug("comparing %r and %r : %s", a, b, ordering.name)
    return ordering
