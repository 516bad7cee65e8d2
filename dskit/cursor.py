"""A cursor over a LinkedList that can move, peek, split and splice."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from dskit.linked_list import LinkedList, _Node

T = TypeVar("T")


def _detach(source: LinkedList[T]) -> LinkedList[T]:
    """Move every node of ``source`` into a new list and leave ``source`` empty."""
    moved: LinkedList[T] = LinkedList()
    moved._front, moved._back, moved._len = source._front, source._back, source._len
    source._front = source._back = None
    source._len = 0
    return moved


def _from_nodes(front: Optional[_Node[T]], back: Optional[_Node[T]], length: int) -> LinkedList[T]:
    result: LinkedList[T] = LinkedList()
    if length:
        result._front, result._back, result._len = front, back, length
    return result


class CursorMut(Generic[T]):
    """A position inside a LinkedList.

    Besides the real elements there is a "ghost" position between the back
    and the front of the list. A new cursor starts on the ghost; moving
    past either end returns to it. On the ghost, ``index()`` is ``None``.
    """

    def __init__(self, linked_list: LinkedList[T]) -> None:
        self._list = linked_list
        self._cur: Optional[_Node[T]] = None
        self._index: Optional[int] = None

    def index(self) -> Optional[int]:
        """Return the position of the current element, or ``None`` on the ghost."""
        return self._index

    def move_next(self) -> None:
        """Step towards the back, wrapping through the ghost."""
        if self._cur is not None:
            self._cur = self._cur.next
            if self._cur is None:
                self._index = None
            else:
                assert self._index is not None
                self._index += 1
        elif not self._list.is_empty():
            self._cur = self._list._front
            self._index = 0

    def move_prev(self) -> None:
        """Step towards the front, wrapping through the ghost."""
        if self._cur is not None:
            self._cur = self._cur.prev
            if self._cur is None:
                self._index = None
            else:
                assert self._index is not None
                self._index -= 1
        elif not self._list.is_empty():
            self._cur = self._list._back
            self._index = len(self._list) - 1

    def current(self) -> Optional[T]:
        """Return the current element, or ``None`` on the ghost."""
        return None if self._cur is None else self._cur.elem

    def set_current(self, value: T) -> None:
        """Replace the current element; raises IndexError on the ghost."""
        if self._cur is None:
            raise IndexError("cursor is not on an element")
        self._cur.elem = value

    def peek_next(self) -> Optional[T]:
        """Return the element after the cursor, or ``None``."""
        node = self._list._front if self._cur is None else self._cur.next
        return None if node is None else node.elem

    def peek_prev(self) -> Optional[T]:
        """Return the element before the cursor, or ``None``."""
        node = self._list._back if self._cur is None else self._cur.prev
        return None if node is None else node.elem

    def split_before(self) -> LinkedList[T]:
        """Cut off and return everything before the current element.

        On the ghost the whole list is returned and the cursor's list
        becomes empty.
        """
        cur = self._cur
        if cur is None:
            return _detach(self._list)
        assert self._index is not None
        lst = self._list
        prev = cur.prev
        output = _from_nodes(lst._front, prev, self._index)
        if prev is not None:
            cur.prev = None
            prev.next = None
        lst._len -= self._index
        lst._front = cur
        self._index = 0
        return output

    def split_after(self) -> LinkedList[T]:
        """Cut off and return everything after the current element.

        On the ghost the whole list is returned and the cursor's list
        becomes empty.
        """
        cur = self._cur
        if cur is None:
            return _detach(self._list)
        assert self._index is not None
        lst = self._list
        nxt = cur.next
        kept = self._index + 1
        output = _from_nodes(nxt, lst._back, lst._len - kept)
        if nxt is not None:
            cur.next = None
            nxt.prev = None
        lst._len = kept
        lst._back = cur
        return output

    def splice_before(self, other: LinkedList[T]) -> None:
        """Move every element of ``other`` in front of the current element.

        On the ghost the elements go to the back of the list. ``other``
        is left empty.
        """
        if other.is_empty():
            return
        incoming = _detach(other)
        in_front, in_back = incoming._front, incoming._back
        assert in_front is not None and in_back is not None
        lst = self._list
        cur = self._cur
        if cur is not None:
            prev = cur.prev
            if prev is None:
                lst._front = in_front
            else:
                prev.next = in_front
                in_front.prev = prev
            cur.prev = in_back
            in_back.next = cur
            assert self._index is not None
            self._index += incoming._len
        elif lst._back is not None:
            lst._back.next = in_front
            in_front.prev = lst._back
            lst._back = in_back
        else:
            lst._front, lst._back = in_front, in_back
        lst._len += incoming._len

    def splice_after(self, other: LinkedList[T]) -> None:
        """Move every element of ``other`` behind the current element.

        On the ghost the elements go to the front of the list. ``other``
        is left empty.
        """
        if other.is_empty():
            return
        incoming = _detach(other)
        in_front, in_back = incoming._front, incoming._back
        assert in_front is not None and in_back is not None
        lst = self._list
        cur = self._cur
        if cur is not None:
            nxt = cur.next
            if nxt is None:
                lst._back = in_back
            else:
                nxt.prev = in_back
                in_back.next = nxt
            cur.next = in_front
            in_front.prev = cur
        elif lst._front is not None:
            lst._front.prev = in_back
            in_back.next = lst._front
            lst._front = in_front
        else:
            lst._front, lst._back = in_front, in_back
        lst._len += incoming._len