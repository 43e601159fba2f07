"""
Queue Scheduler Package

In-memory scheduling primitives: a priority selection queue that
hands out the highest priority value first (FIFO among ties), and a
round-robin queue that cycles people through a limited or unlimited
number of turns.
"""

__version__ = '0.1.0'

from .exceptions import QueueError, EmptyQueueError

from .types import (
    PriorityEntry,
    TurnEntity,
    QueueConfig,
    SelectionStrategy
)

from .config import load_config, configure_logging

from .priority_queue import PrioritySelectionQueue, select_highest_index

from .turn_queue import PersonQueue, RoundRobinTurnQueue

from .algorithm import (
    drain_by_priority,
    serve_turns,
    calculate_queue_metrics
)

__all__ = [
    'QueueError',
    'EmptyQueueError',
    'PriorityEntry',
    'TurnEntity',
    'QueueConfig',
    'SelectionStrategy',
    'load_config',
    'configure_logging',
    'PrioritySelectionQueue',
    'select_highest_index',
    'PersonQueue',
    'RoundRobinTurnQueue',
    'drain_by_priority',
    'serve_turns',
    'calculate_queue_metrics',
]
