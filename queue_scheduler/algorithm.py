"""
Batch operations over the scheduling queues.

These helpers drive the queues through many selections at once and
summarize their state for logging.
"""

from typing import List, Union

from .priority_queue import PrioritySelectionQueue
from .turn_queue import RoundRobinTurnQueue
from .types import TurnEntity, require_int


def drain_by_priority(queue: PrioritySelectionQueue) -> List[str]:
    """
    Dequeue every value from a priority queue.

    Values come out highest priority first, and in insertion order
    within the same priority.

    Args:
        queue: Queue to empty

    Returns:
        Values in the order they were dequeued
    """
    values = []
    while not queue.is_empty():
        values.append(queue.dequeue_highest())
    return values


def serve_turns(queue: RoundRobinTurnQueue, count: int) -> List[TurnEntity]:
    """
    Serve up to ``count`` turns from a round-robin queue.

    Serving stops early, without an error, once everyone has used up
    their turns.

    Args:
        queue: Queue to serve from
        count: Maximum number of turns to serve

    Returns:
        People in the order they were served

    Raises:
        TypeError: If count is not an integer
        ValueError: If count is negative
    """
    require_int("count", count)
    if count < 0:
        raise ValueError(f"Turn count cannot be negative, got {count}")

    served = []
    for _ in range(count):
        if queue.is_empty():
            break
        served.append(queue.get_next_person())
    return served


def calculate_queue_metrics(
    queue: Union[PrioritySelectionQueue, RoundRobinTurnQueue]
) -> dict:
    """
    Calculate metrics about the current contents of a queue.

    Args:
        queue: Priority or round-robin queue to inspect

    Returns:
        Dictionary containing queue metrics
    """
    if isinstance(queue, PrioritySelectionQueue):
        priorities = [entry.priority for entry in queue]
        return {
            "entries": len(priorities),
            "highest_priority": max(priorities) if priorities else None,
            "distinct_priorities": len(set(priorities)),
        }

    if isinstance(queue, RoundRobinTurnQueue):
        people = list(queue)
        return {
            "entities": len(people),
            "infinite_entities": sum(1 for p in people if p.is_infinite),
            "finite_turns_remaining": sum(
                p.remaining_turns for p in people if not p.is_infinite
            ),
        }

    raise TypeError(f"Unsupported queue type: {type(queue).__name__}")
