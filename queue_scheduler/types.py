"""
Data models for the queue scheduler.

This module defines the core data structures used in scheduling:
- Entries waiting in the priority selection queue
- Entities taking turns in the round-robin queue
- Configuration shared by the queues
"""

from dataclasses import dataclass
from enum import Enum


class SelectionStrategy(Enum):
    """Strategy used by the priority queue to find the next entry."""
    LINEAR_SCAN = "linear"
    HEAP = "heap"


def require_int(name: str, value) -> None:
    """Raise TypeError unless value is an int. Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def require_str(name: str, value) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")


@dataclass(frozen=True)
class PriorityEntry:
    """
    A value waiting in the priority selection queue.
    
    Attributes:
        value: Payload returned when the entry is selected
        priority: Priority level (higher is more important)
    """
    value: str
    priority: int
    
    def __post_init__(self):
        """Validate entry fields."""
        require_str("value", self.value)
        require_int("priority", self.priority)
    
    def __str__(self) -> str:
        return f"{self.value} (Pri:{self.priority})"


@dataclass(frozen=True)
class TurnEntity:
    """
    A person taking turns in the round-robin queue.
    
    Attributes:
        name: Name of the person
        remaining_turns: Turns left; zero or less means unlimited turns
    """
    name: str
    remaining_turns: int
    
    def __post_init__(self):
        """Validate entity fields."""
        require_str("name", self.name)
        require_int("remaining_turns", self.remaining_turns)
    
    @property
    def is_infinite(self) -> bool:
        return self.remaining_turns <= 0
    
    def __str__(self) -> str:
        return f"({self.name}, {self.remaining_turns})"


@dataclass
class QueueConfig:
    """
    Configuration for the queue scheduler.
    
    Attributes:
        selection: Algorithm the priority queue uses to pick entries
        log_level: Level name passed to configure_logging
    """
    selection: SelectionStrategy = SelectionStrategy.LINEAR_SCAN
    log_level: str = "WARNING"
