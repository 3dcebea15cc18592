__all__ = ['MaxPriorityQueue']

from functools import cmp_to_key
from typing import Callable, Iterable

import sortedcontainers

class MaxPriorityQueue():
    """Priority queue that always hands back the largest item under its comparator.

    :param comparator: callable(a, b) returning something int() maps to -1, 0 or 1
    :param data: optional initial items
    """

    def __init__(self, comparator: Callable, data: Iterable | None = None):
        self.comparator = comparator
        self.queue = sortedcontainers.SortedKeyList(
            key=cmp_to_key(lambda a, b: int(comparator(a, b)))
        )
        if data is not None:
            self.queue.update(data)

    def __repr__(self) -> str:
        name = getattr(self.comparator, "__name__", repr(self.comparator))
        return f"MaxPriorityQueue({name}, {list(self.queue)!r})"

    def add(self, item):
        """Push item onto the queue"""
        self.queue.add(item)

    def pop(self):
        """Pop the maximum item (last item)"""
        return self.queue.pop()

    def peek(self):
        return self.queue[-1]

    def __getitem__(self, index):
        return self.queue[index]

    def __len__(self):
        return len(self.queue)

    def clear(self):
        self.queue.clear()
