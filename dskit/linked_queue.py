"""A FIFO queue built from a singly linked chain of nodes."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class QueueNode(Generic[T]):
    """A node holding one item and a link to the next node."""

    __slots__ = ("data", "next")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: Optional[QueueNode[T]] = None

    def set_next(self, node: Optional[QueueNode[T]]) -> bool:
        """Attach ``node`` after the last node of the chain starting here."""
        last = self
        while last.next is not None:
            last = last.next
        last.next = node
        return True

    def peek_all(self) -> List[T]:
        """Return the data of this node and every node after it."""
        result: List[T] = []
        node: Optional[QueueNode[T]] = self
        while node is not None:
            result.append(node.data)
            node = node.next
        return result

    def __repr__(self) -> str:
        return f"QueueNode({self.data!r})"


class LinkedQueue(Generic[T]):
    """A FIFO queue of linked nodes.

    Iterating over the queue consumes it: each step dequeues one item.
    """

    def __init__(self, head: Optional[QueueNode[T]] = None) -> None:
        self._head = head
        self._count = 0 if head is None else 1

    def enqueue(self, node: QueueNode[T]) -> None:
        """Add ``node`` at the back of the queue."""
        if self._head is None:
            self._head = node
            self._count = 1
            return
        self._head.set_next(node)
        self._count += 1

    def dequeue(self) -> Optional[T]:
        """Remove and return the front item, or ``None`` if the queue is empty."""
        head = self._head
        if head is None:
            return None
        self._head = head.next
        self._count = 0 if self._head is None else self._count - 1
        return head.data

    def peek(self) -> Optional[T]:
        """Return the front item without removing it, or ``None`` if empty."""
        return None if self._head is None else self._head.data

    def peek_all(self) -> List[T]:
        """Return every item from front to back without removing any."""
        return [] if self._head is None else self._head.peek_all()

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return self._count == 0

    def __iter__(self) -> LinkedQueue[T]:
        return self

    def __next__(self) -> T:
        if self._head is None:
            raise StopIteration
        return self.dequeue()  # type: ignore[return-value]