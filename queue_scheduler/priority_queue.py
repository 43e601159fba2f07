"""
Priority selection queue.

Entries are always added to the back of the queue. Selection removes the
entry with the highest priority; among entries that share it, the one
closest to the front of the queue wins.

Two selection strategies give the same observable order:
- LINEAR_SCAN keeps entries in a list and scans it on every dequeue
- HEAP keeps a max-heap keyed on (priority, insertion sequence)
"""

import heapq
import logging
from itertools import count
from typing import Iterator, List, Optional, Tuple

from .exceptions import EmptyQueueError
from .types import PriorityEntry, QueueConfig, SelectionStrategy


logger = logging.getLogger(__name__)


def select_highest_index(entries: List[PriorityEntry]) -> int:
    """
    Find the index of the entry to dequeue next.

    The best candidate is only replaced by a strictly greater priority,
    so the first entry seen among equal priorities is kept (FIFO).

    Args:
        entries: Entries in insertion order

    Returns:
        Index of the highest priority entry

    Raises:
        EmptyQueueError: If there are no entries
    """
    if not entries:
        raise EmptyQueueError("The queue is empty.")

    best_index = 0
    best_priority = entries[0].priority

    for index in range(1, len(entries)):
        if entries[index].priority > best_priority:
            best_priority = entries[index].priority
            best_index = index

    return best_index


class PrioritySelectionQueue:
    """
    Queue that hands out the highest priority value first.

    Example:
        >>> queue = PrioritySelectionQueue()
        >>> queue.enqueue("Low", 1)
        >>> queue.enqueue("High", 10)
        >>> queue.dequeue_highest()
        'High'
    """

    def __init__(self, config: Optional[QueueConfig] = None):
        self.config = config or QueueConfig()
        self._strategy = self.config.selection
        # LINEAR_SCAN: entries in insertion order
        self._entries: List[PriorityEntry] = []
        # HEAP: (-priority, sequence, entry)
        self._heap: List[Tuple[int, int, PriorityEntry]] = []
        self._sequence = count()

    @property
    def length(self) -> int:
        if self._strategy == SelectionStrategy.HEAP:
            return len(self._heap)
        return len(self._entries)

    def __len__(self) -> int:
        return self.length

    def is_empty(self) -> bool:
        return self.length == 0

    def enqueue(self, value: str, priority: int) -> None:
        """
        Add a value to the back of the queue regardless of its priority.

        Args:
            value: The value
            priority: The priority (higher is dequeued sooner)
        """
        entry = PriorityEntry(value, priority)

        if self._strategy == SelectionStrategy.HEAP:
            heapq.heappush(self._heap, (-priority, next(self._sequence), entry))
        else:
            self._entries.append(entry)

        logger.debug(f"Enqueued {entry} ({self.length} pending)")

    def dequeue_highest(self) -> str:
        """
        Remove the entry with the highest priority and return its value.

        If several entries share the highest priority, the one closest
        to the front of the queue is removed.

        Returns:
            Value of the removed entry

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if self._strategy == SelectionStrategy.HEAP:
            if not self._heap:
                raise EmptyQueueError("The queue is empty.")
            _, _, entry = heapq.heappop(self._heap)
        else:
            entry = self._entries.pop(select_highest_index(self._entries))

        logger.debug(f"Dequeued {entry} ({self.length} pending)")
        return entry.value

    def __iter__(self) -> Iterator[PriorityEntry]:
        """Iterate over pending entries in insertion order."""
        if self._strategy == SelectionStrategy.HEAP:
            ordered = sorted(self._heap, key=lambda item: item[1])
            return iter([entry for _, _, entry in ordered])
        return iter(list(self._entries))

    def __str__(self) -> str:
        return "[" + ", ".join(str(entry) for entry in self) + "]"

    def __repr__(self) -> str:
        return f"PrioritySelectionQueue({self._strategy.value}, {self})"
