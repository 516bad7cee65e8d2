"""A doubly linked list with constant-time pushes and pops at both ends."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    """A list node; ``prev`` points towards the front, ``next`` towards the back."""

    __slots__ = ("elem", "prev", "next")

    def __init__(self, elem: T) -> None:
        self.elem = elem
        self.prev: Optional[_Node[T]] = None
        self.next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """A doubly linked list of elements.

    Lists compare lexicographically, element by element. Elements that
    cannot be ordered against each other (such as NaN) make the whole
    comparison come out false.
    """

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._front: Optional[_Node[T]] = None
        self._back: Optional[_Node[T]] = None
        self._len = 0
        if iterable is not None:
            self.extend(iterable)

    def push_front(self, elem: T) -> None:
        """Add ``elem`` before the first element."""
        node = _Node(elem)
        if self._front is None:
            self._back = node
        else:
            self._front.prev = node
            node.next = self._front
        self._front = node
        self._len += 1

    def push_back(self, elem: T) -> None:
        """Add ``elem`` after the last element."""
        node = _Node(elem)
        if self._back is None:
            self._front = node
        else:
            self._back.next = node
            node.prev = self._back
        self._back = node
        self._len += 1

    def pop_front(self) -> Optional[T]:
        """Remove and return the first element, or ``None`` if empty."""
        node = self._front
        if node is None:
            return None
        self._front = node.next
        if self._front is None:
            self._back = None
        else:
            self._front.prev = None
        node.next = None
        self._len -= 1
        return node.elem

    def pop_back(self) -> Optional[T]:
        """Remove and return the last element, or ``None`` if empty."""
        node = self._back
        if node is None:
            return None
        self._back = node.prev
        if self._back is None:
            self._front = None
        else:
            self._back.next = None
        node.prev = None
        self._len -= 1
        return node.elem

    def front(self) -> Optional[T]:
        """Return the first element, or ``None`` if empty."""
        return None if self._front is None else self._front.elem

    def back(self) -> Optional[T]:
        """Return the last element, or ``None`` if empty."""
        return None if self._back is None else self._back.elem

    def set_front(self, value: T) -> None:
        """Replace the first element; raises IndexError if empty."""
        if self._front is None:
            raise IndexError("set_front on an empty list")
        self._front.elem = value

    def set_back(self, value: T) -> None:
        """Replace the last element; raises IndexError if empty."""
        if self._back is None:
            raise IndexError("set_back on an empty list")
        self._back.elem = value

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._len == 0

    def clear(self) -> None:
        """Remove every element."""
        while self._front is not None:
            self.pop_front()

    def extend(self, iterable: Iterable[T]) -> None:
        """Append every element of ``iterable`` at the back."""
        for item in iterable:
            self.push_back(item)

    def copy(self) -> LinkedList[T]:
        """Return a new list holding the same elements."""
        return LinkedList(self)

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.elem
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._back
        while node is not None:
            yield node.elem
            node = node.prev

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def _compare(self, other: LinkedList[T]) -> Optional[int]:
        """Return -1, 0 or 1 lexicographically, or ``None`` if incomparable."""
        for a, b in zip(self, other):
            if a == b:
                continue
            if a < b:
                return -1
            if a > b:
                return 1
            return None
        return (len(self) > len(other)) - (len(self) < len(other))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._compare(other) == -1

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._compare(other) in (-1, 0)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._compare(other) == 1

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._compare(other) in (0, 1)

    def __hash__(self) -> int:
        return hash((self._len, tuple(self)))

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(item) for item in self) + "]"