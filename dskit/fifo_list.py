"""A singly linked first-in, first-out list with a tail pointer."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("elem", "next")

    def __init__(self, elem: T) -> None:
        self.elem = elem
        self.next: Optional[_Node[T]] = None


class FifoList(Generic[T]):
    """A queue of linked nodes: ``push`` adds at the back, ``pop`` takes the front."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None

    def push(self, elem: T) -> None:
        """Add ``elem`` at the back."""
        node = _Node(elem)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def pop(self) -> Optional[T]:
        """Remove and return the front element, or ``None`` if empty."""
        head = self._head
        if head is None:
            return None
        self._head = head.next
        if self._head is None:
            self._tail = None
        head.next = None
        return head.elem

    def peek(self) -> Optional[T]:
        """Return the front element without removing it, or ``None``."""
        return None if self._head is None else self._head.elem

    def set_front(self, value: T) -> None:
        """Replace the front element; raises IndexError if empty."""
        if self._head is None:
            raise IndexError("set_front on an empty list")
        self._head.elem = value

    def apply(self, func: Callable[[T], T]) -> None:
        """Replace every element with ``func(element)``, front to back."""
        node = self._head
        while node is not None:
            node.elem = func(node.elem)
            node = node.next

    def drain(self) -> Iterator[T]:
        """Yield the elements front to back, removing each one as it goes."""
        while self._head is not None:
            yield self.pop()  # type: ignore[misc]

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.elem
            node = node.next