"""
Exceptions raised by the queue scheduler.
"""


class QueueError(Exception):
    """Base class for all queue scheduler errors."""


class EmptyQueueError(QueueError, IndexError):
    """
    Raised when selecting from a queue that holds no entries.

    The queue is left untouched when this is raised.
    """
