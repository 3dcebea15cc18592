__all__ = ['build_fixture', 'extract_in_order']

from typing import Iterable

from .interval import Interval, compare
from .queue import MaxPriorityQueue

def build_fixture() -> list[Interval]:
    """Reference set: two intervals of length 5 and one of length 30"""
    return [
        Interval(15, 20),
        Interval(0, 30),
        Interval(5, 10),
    ]

def extract_in_order(intervals: Iterable[Interval]) -> list[Interval]:
    """Push every interval into a max-first queue driven by `compare` and drain it.

    The result is ordered by ascending length, then ascending start.
    """
    queue = MaxPriorityQueue(compare)
    for interval in intervals:
        queue.add(interval)
    return [queue.pop() for _ in range(len(queue))]
