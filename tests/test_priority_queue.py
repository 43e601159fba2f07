"""
Unit tests for the priority selection queue.

Run with: pytest tests/test_priority_queue.py
"""

import pytest

from queue_scheduler.exceptions import EmptyQueueError
from queue_scheduler.priority_queue import PrioritySelectionQueue, select_highest_index
from queue_scheduler.types import PriorityEntry, QueueConfig, SelectionStrategy


@pytest.fixture(params=list(SelectionStrategy), ids=lambda s: s.value)
def queue(request):
    return PrioritySelectionQueue(QueueConfig(selection=request.param))


class TestEmptyQueue:
    """Test dequeueing from an empty queue."""

    def test_dequeue_empty_raises(self, queue):
        """Dequeue on an empty queue should raise EmptyQueueError."""
        with pytest.raises(EmptyQueueError, match="The queue is empty."):
            queue.dequeue_highest()

        assert queue.length == 0

    def test_empty_error_is_index_error(self, queue):
        """Callers catching IndexError should still see the failure."""
        with pytest.raises(IndexError):
            queue.dequeue_highest()

    def test_dequeue_after_drained_raises(self, queue):
        queue.enqueue("Only", 3)
        queue.dequeue_highest()

        with pytest.raises(EmptyQueueError):
            queue.dequeue_highest()
        assert queue.is_empty()


class TestHighestPriority:
    """Test highest priority selection."""

    def test_distinct_priorities(self, queue):
        """Highest priority should come out first, then the next highest."""
        queue.enqueue("Low", 1)
        queue.enqueue("Medium", 5)
        queue.enqueue("High", 10)

        assert queue.length == 3

        assert queue.dequeue_highest() == "High"
        assert queue.length == 2
        assert queue.dequeue_highest() == "Medium"
        assert queue.length == 1
        assert queue.dequeue_highest() == "Low"
        assert queue.length == 0

    def test_highest_added_last(self, queue):
        """The last entry must be considered by the scan."""
        queue.enqueue("A", 1)
        queue.enqueue("B", 2)
        queue.enqueue("C", 3)

        assert queue.dequeue_highest() == "C"

    def test_negative_priorities(self, queue):
        queue.enqueue("Minus five", -5)
        queue.enqueue("Minus one", -1)

        assert queue.dequeue_highest() == "Minus one"
        assert queue.dequeue_highest() == "Minus five"


class TestTieBreaking:
    """Test FIFO ordering among equal priorities."""

    def test_first_enqueued_wins(self, queue):
        """Among equal priorities the earliest entry should be removed."""
        queue.enqueue("First", 10)
        queue.enqueue("Mid", 5)
        queue.enqueue("Second", 10)
        queue.enqueue("Last", 10)

        assert queue.dequeue_highest() == "First"
        assert queue.length == 3
        assert queue.dequeue_highest() == "Second"
        assert queue.length == 2
        assert queue.dequeue_highest() == "Last"
        assert queue.length == 1
        assert queue.dequeue_highest() == "Mid"
        assert queue.length == 0

    def test_mixed_scenario(self, queue):
        """Selection and tie-breaking should hold across many dequeues."""
        for value, priority in [("A", 5), ("B", 10), ("C", 3), ("D", 10), ("E", 7)]:
            queue.enqueue(value, priority)

        assert [queue.dequeue_highest() for _ in range(5)] == ["B", "D", "E", "A", "C"]

        with pytest.raises(EmptyQueueError):
            queue.dequeue_highest()

    def test_tie_with_entry_added_after_dequeue(self, queue):
        """An entry added later still queues behind earlier equal entries."""
        queue.enqueue("x", 4)
        queue.enqueue("y", 4)
        assert queue.dequeue_highest() == "x"

        queue.enqueue("z", 4)

        assert queue.dequeue_highest() == "y"
        assert queue.dequeue_highest() == "z"


class TestValidation:
    """Test input validation."""

    def test_non_integer_priority(self, queue):
        with pytest.raises(TypeError):
            queue.enqueue("bad", 1.5)
        assert queue.length == 0

    def test_bool_priority(self, queue):
        with pytest.raises(TypeError):
            queue.enqueue("bad", True)

    def test_non_string_value(self, queue):
        with pytest.raises(TypeError):
            queue.enqueue(42, 1)
        assert queue.is_empty()


class TestRendering:
    """Test the diagnostic string form."""

    def test_empty(self, queue):
        assert str(queue) == "[]"

    def test_insertion_order(self, queue):
        """Rendering should follow insertion order, not priority."""
        queue.enqueue("Low", 1)
        queue.enqueue("High", 10)
        queue.enqueue("Mid", 5)

        assert str(queue) == "[Low (Pri:1), High (Pri:10), Mid (Pri:5)]"

    def test_repr_names_strategy(self, queue):
        queue.enqueue("Low", 1)

        strategy = queue.config.selection.value
        assert repr(queue) == f"PrioritySelectionQueue({strategy}, [Low (Pri:1)])"

    def test_iteration_does_not_mutate(self, queue):
        queue.enqueue("a", 1)
        queue.enqueue("b", 2)

        entries = list(queue)

        assert entries == [PriorityEntry("a", 1), PriorityEntry("b", 2)]
        assert queue.length == 2


class TestSelectHighestIndex:
    """Test the linear scan helper."""

    def test_returns_first_of_ties(self):
        entries = [PriorityEntry("a", 2), PriorityEntry("b", 7), PriorityEntry("c", 7)]

        assert select_highest_index(entries) == 1

    def test_empty_list(self):
        with pytest.raises(EmptyQueueError):
            select_highest_index([])

    def test_default_strategy_is_linear(self):
        queue = PrioritySelectionQueue()

        assert queue.config.selection == SelectionStrategy.LINEAR_SCAN


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
