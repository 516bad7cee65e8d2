"""A minimal singly linked FIFO chain of items."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Link(Generic[T]):
    __slots__ = ("item", "next")

    def __init__(self, item: T) -> None:
        self.item = item
        self.next: Optional[_Link[T]] = None


class ChainList(Generic[T]):
    """A chain of items: ``push`` appends at the end, ``pop`` takes the first."""

    def __init__(self) -> None:
        self._first: Optional[_Link[T]] = None
        self._last: Optional[_Link[T]] = None

    def push(self, item: T) -> None:
        """Append ``item`` at the end of the chain."""
        link = _Link(item)
        if self._last is None:
            self._first = link
        else:
            self._last.next = link
        self._last = link

    def pop(self) -> Optional[T]:
        """Remove and return the first item, or ``None`` if the chain is empty."""
        first = self._first
        if first is None:
            return None
        self._first = first.next
        if self._first is None:
            self._last = None
        return first.item

    def __iter__(self) -> Iterator[T]:
        link = self._first
        while link is not None:
            yield link.item
            link = link.next