"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A FIFO queue: items are added at the back and taken from the front."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> Optional[T]:
        """Remove and return the front item, or ``None`` if the queue is empty."""
        return self._items.popleft() if self._items else None

    def peek(self) -> Optional[T]:
        """Return the front item without removing it, or ``None`` if empty."""
        return self._items[0] if self._items else None

    def replace_front(self, item: T) -> None:
        """Replace the front item; raises IndexError if the queue is empty."""
        if not self._items:
            raise IndexError("replace_front on an empty queue")
        self._items[0] = item

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._items

    def search(self, item: T) -> Optional[T]:
        """Return the first stored item equal to ``item``, or ``None``."""
        return next((el for el in self._items if el == item), None)

    def replace(self, item: T, new_item: T) -> bool:
        """Replace the first item equal to ``item`` with ``new_item``.

        Returns True if an item was replaced.
        """
        for pos, el in enumerate(self._items):
            if el == item:
                self._items[pos] = new_item
                return True
        return False