"""
Round-robin turn queue.

The queue is circular. People are added to the back and each call to
get_next_person takes the person at the front, uses up one of their
turns and puts them back at the end of the line. A person whose turns
run out is not put back. A turn count of zero or less means the person
stays in the queue forever.
"""

import logging
from collections import deque
from dataclasses import replace
from typing import Deque, Iterator

from .exceptions import EmptyQueueError
from .types import TurnEntity


logger = logging.getLogger(__name__)


class PersonQueue:
    """Plain FIFO queue of people."""

    def __init__(self):
        self._queue: Deque[TurnEntity] = deque()

    @property
    def length(self) -> int:
        return len(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def is_empty(self) -> bool:
        return not self._queue

    def enqueue(self, person: TurnEntity) -> None:
        self._queue.append(person)

    def dequeue(self) -> TurnEntity:
        if not self._queue:
            raise EmptyQueueError("No one in the queue.")
        return self._queue.popleft()

    def __iter__(self) -> Iterator[TurnEntity]:
        return iter(list(self._queue))

    def __str__(self) -> str:
        return "[" + ", ".join(str(person) for person in self._queue) + "]"


class RoundRobinTurnQueue:
    """
    Circular queue that gives each person a number of turns.

    Example:
        >>> queue = RoundRobinTurnQueue()
        >>> queue.add_person("Bob", 2)
        >>> queue.add_person("Sue", 0)
        >>> queue.get_next_person()
        TurnEntity(name='Bob', remaining_turns=1)
    """

    def __init__(self):
        self._people = PersonQueue()

    @property
    def length(self) -> int:
        return self._people.length

    def __len__(self) -> int:
        return self._people.length

    def is_empty(self) -> bool:
        return self._people.is_empty()

    def add_person(self, name: str, turns: int) -> None:
        """
        Add a person to the back of the queue.

        Args:
            name: Name of the person
            turns: Number of turns; zero or less means unlimited
        """
        person = TurnEntity(name, turns)
        self._people.enqueue(person)
        logger.debug(f"Added {person} ({self.length} in queue)")

    def get_next_person(self) -> TurnEntity:
        """
        Take the next person's turn and return them.

        The person goes to the back of the queue again unless this was
        their last turn. People with unlimited turns are returned as-is.

        Returns:
            The person served, with their remaining turns after this one

        Raises:
            EmptyQueueError: If the queue is empty
        """
        person = self._people.dequeue()

        if person.is_infinite:
            self._people.enqueue(person)
            logger.debug(f"Served {person} (unlimited turns)")
            return person

        person = replace(person, remaining_turns=person.remaining_turns - 1)

        if person.remaining_turns > 0:
            self._people.enqueue(person)
            logger.debug(f"Served {person}")
        else:
            logger.info(f"{person.name} has no turns left, removed from queue")

        return person

    def __iter__(self) -> Iterator[TurnEntity]:
        """Iterate over people from the front of the queue to the back."""
        return iter(self._people)

    def __str__(self) -> str:
        return str(self._people)

    def __repr__(self) -> str:
        return f"RoundRobinTurnQueue({self})"
