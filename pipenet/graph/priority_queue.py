"""
Min-priority queue used by the shortest-path search.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PriorityQueueEntry:
    """
    A queued value and its priority.

    Attributes:
        value: The queued item (a vertex id during the search)
        priority: Numeric priority, smaller comes out first
    """

    value: Any
    priority: float


class PriorityQueue:
    """
    Binary-heap priority queue keyed by a numeric priority.

    The same value may be queued several times at different priorities;
    callers decide what to do with stale entries. Equal priorities come
    out in insertion order.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Any]] = []
        self._counter = itertools.count()

    def enqueue(self, value: Any, priority: float) -> None:
        """Insert a value at the given priority."""
        heapq.heappush(self._heap, (priority, next(self._counter), value))

    def dequeue(self) -> PriorityQueueEntry:
        """
        Remove and return the entry with the smallest priority.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("dequeue from empty priority queue")
        priority, _, value = heapq.heappop(self._heap)
        return PriorityQueueEntry(value=value, priority=priority)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._heap)})"
