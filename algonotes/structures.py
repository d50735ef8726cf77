"""Small container classes: a min-tracking stack, adapters and a pair counter."""

from __future__ import annotations

from collections import Counter, deque
from typing import Iterable


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        current_min = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, current_min))

    def pop(self) -> None:
        if not self._items:
            raise IndexError("pop from empty stack")
        self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]


class QueueBackedStack:
    """A LIFO stack kept in a single FIFO queue, rotated on each push."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        self._queue.append(x)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> int:
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def is_empty(self) -> bool:
        return not self._queue


class StackBackedQueue:
    """A FIFO queue kept in two LIFO stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, x: int) -> None:
        self._inbox.append(x)

    def pop(self) -> int:
        self._refill()
        return self._outbox.pop()

    def peek(self) -> int:
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox


class FindSumPairs:
    """Counts pairs (a, b) from two lists with a + b equal to a total."""

    def __init__(self, nums1: Iterable[int], nums2: Iterable[int]) -> None:
        self._first = list(nums1)
        self._second = list(nums2)
        self._second_counts = Counter(self._second)

    def add(self, index: int, val: int) -> None:
        """Add ``val`` to the element at ``index`` of the second list."""
        old = self._second[index]
        self._second_counts[old] -= 1
        self._second[index] = old + val
        self._second_counts[old + val] += 1

    def count(self, total: int) -> int:
        """Return how many index pairs sum to ``total``."""
        return sum(self._second_counts[total - num] for num in self._first)