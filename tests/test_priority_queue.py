"""
Unit tests for the priority queue.
"""

import pytest

from pipenet.graph import PriorityQueue, PriorityQueueEntry


class TestPriorityQueue:
    """Test enqueue/dequeue ordering."""

    def test_new_queue_is_empty(self):
        """A new queue has no entries."""
        queue = PriorityQueue()
        assert queue.is_empty()
        assert len(queue) == 0
        assert not queue

    def test_dequeue_returns_smallest_priority(self):
        """Entries come out in priority order."""
        queue = PriorityQueue()
        queue.enqueue("c", 3.0)
        queue.enqueue("a", 1.0)
        queue.enqueue("b", 2.0)

        assert [queue.dequeue().value for _ in range(3)] == ["a", "b", "c"]
        assert queue.is_empty()

    def test_dequeue_returns_entry(self):
        """Dequeue returns the value with its priority."""
        queue = PriorityQueue()
        queue.enqueue("a", 4.5)
        assert queue.dequeue() == PriorityQueueEntry(value="a", priority=4.5)

    def test_duplicate_values_coexist(self):
        """The same value can be queued at several priorities."""
        queue = PriorityQueue()
        queue.enqueue("a", 5.0)
        queue.enqueue("a", 1.0)

        assert len(queue) == 2
        assert queue.dequeue().priority == 1.0
        assert queue.dequeue().priority == 5.0

    def test_ties_come_out_in_insertion_order(self):
        """Equal priorities are FIFO."""
        queue = PriorityQueue()
        for value in ["x", "y", "z"]:
            queue.enqueue(value, 1.0)
        assert [queue.dequeue().value for _ in range(3)] == ["x", "y", "z"]

    def test_infinite_priority_sorts_last(self):
        """math.inf is a valid priority."""
        queue = PriorityQueue()
        queue.enqueue("far", float("inf"))
        queue.enqueue("near", 0.0)
        assert queue.dequeue().value == "near"

    def test_unorderable_values_allowed(self):
        """Values never need to be compared with each other."""
        queue = PriorityQueue()
        queue.enqueue({"id": 1}, 1.0)
        queue.enqueue({"id": 2}, 1.0)
        assert queue.dequeue().value == {"id": 1}

    def test_dequeue_empty_raises(self):
        """Dequeue on an empty queue raises IndexError."""
        with pytest.raises(IndexError):
            PriorityQueue().dequeue()
