"""A queue with three priority levels, served highest level first."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Deque, Dict, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Priority(IntEnum):
    """Priority levels, ordered LOW < MIDDLE < HIGH."""

    LOW = 0
    MIDDLE = 1
    HIGH = 2


_SERVICE_ORDER = (Priority.HIGH, Priority.MIDDLE, Priority.LOW)


class PriorityQueue(Generic[T]):
    """A queue whose items each carry a priority.

    Items of higher priority are served first; within one priority the
    order is first in, first out.
    """

    def __init__(self) -> None:
        self._queues: Dict[Priority, Deque[T]] = {p: deque() for p in _SERVICE_ORDER}

    def _first_nonempty(self) -> Optional[Deque[T]]:
        return next((q for q in self._ordered() if q), None)

    def _ordered(self) -> Iterator[Deque[T]]:
        return (self._queues[p] for p in _SERVICE_ORDER)

    def enqueue(self, item: T, priority: Priority) -> None:
        """Add ``item`` at the back of its priority level."""
        self._queues[Priority(priority)].append(item)

    def dequeue(self) -> Optional[T]:
        """Remove and return the next item to serve, or ``None`` if empty."""
        queue = self._first_nonempty()
        return None if queue is None else queue.popleft()

    def peek(self) -> Optional[T]:
        """Return the next item to serve without removing it, or ``None``."""
        queue = self._first_nonempty()
        return None if queue is None else queue[0]

    def replace_front(self, item: T) -> None:
        """Replace the next item to serve; raises IndexError if empty."""
        queue = self._first_nonempty()
        if queue is None:
            raise IndexError("replace_front on an empty queue")
        queue[0] = item

    def search(self, item: T) -> Optional[T]:
        """Return the first stored item equal to ``item``, or ``None``."""
        return next((el for queue in self._ordered() for el in queue if el == item), None)

    def replace(self, item: T, new_item: T) -> bool:
        """Replace the first item equal to ``item`` with ``new_item``.

        Levels are searched from HIGH to LOW. Returns True if an item was
        replaced.
        """
        for queue in self._ordered():
            for pos, el in enumerate(queue):
                if el == item:
                    queue[pos] = new_item
                    return True
        return False

    def change_priority(self, item: T, find_priority: Priority, new_priority: Priority) -> bool:
        """Move an item equal to ``item`` from one level to the back of another.

        When several equal items sit in ``find_priority``, the last one is
        moved. Returns True if an item was moved.
        """
        queue = self._queues[Priority(find_priority)]
        pos = next(
            (i for i, el in reversed(list(enumerate(queue))) if el == item),
            None,
        )
        if pos is None:
            return False
        found = queue[pos]
        del queue[pos]
        self._queues[Priority(new_priority)].append(found)
        return True

    def is_empty(self) -> bool:
        """Return True if no level holds any item."""
        return not any(self._ordered())

    def __len__(self) -> int:
        return sum(len(q) for q in self._ordered())

    def __iter__(self) -> Iterator[T]:
        for queue in self._ordered():
            yield from queue