"""A red-black tree map with parent links, ordered iteration and deletion."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Iterator, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Color(Enum):
    """Colour of a tree node."""

    RED = "red"
    BLACK = "black"


class RBNode(Generic[K, V]):
    """A node of a red-black tree holding one key and its value."""

    __slots__ = ("key", "value", "color", "parent", "left", "right")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.color = Color.RED
        self.parent: Optional[RBNode[K, V]] = None
        self.left: Optional[RBNode[K, V]] = None
        self.right: Optional[RBNode[K, V]] = None

    def __repr__(self) -> str:
        return f"RBNode(key={self.key!r}, value={self.value!r}, color={self.color.value})"


def _is_red(node: Optional[RBNode[Any, Any]]) -> bool:
    return node is not None and node.color is Color.RED


class RBTree(Generic[K, V]):
    """An ordered map kept balanced as a red-black tree.

    Inserting an existing key replaces its value; deleting a missing key
    does nothing. Iteration yields the nodes in ascending key order.
    """

    def __init__(self) -> None:
        self._root: Optional[RBNode[K, V]] = None

    def find(self, key: K) -> Optional[V]:
        """Return the value stored under ``key``, or ``None``."""
        node = self._root
        while node is not None:
            if node.key < key:
                node = node.right
            elif key < node.key:
                node = node.left
            else:
                return node.value
        return None

    def insert(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        parent: Optional[RBNode[K, V]] = None
        node = self._root
        while node is not None:
            parent = node
            if node.key < key:
                node = node.right
            elif key < node.key:
                node = node.left
            else:
                node.value = value
                return
        new = RBNode(key, value)
        if parent is None:
            self._root = new
        elif new.key < parent.key:
            parent.left = new
        else:
            parent.right = new
        new.parent = parent
        self._insert_fixup(new)

    def delete(self, key: K) -> None:
        """Remove ``key`` from the tree if it is present."""
        parent: Optional[RBNode[K, V]] = None
        node = self._root
        while node is not None:
            if node.key < key:
                parent = node
                node = node.right
            elif key < node.key:
                parent = node
                node = node.left
            else:
                break
        if node is None:
            return

        cl, cr = node.left, node.right
        if cl is None:
            self._replace_node(parent, node, cr)
            if cr is None:
                deleted_color = node.color
            else:
                cr.parent = parent
                cr.color = Color.BLACK
                deleted_color = Color.RED
        elif cr is None:
            self._replace_node(parent, node, cl)
            cl.parent = parent
            cl.color = Color.BLACK
            deleted_color = Color.RED
        else:
            victim = cr
            while victim.left is not None:
                victim = victim.left
            if victim is cr:
                self._replace_node(parent, node, victim)
                victim.parent = parent
                deleted_color = victim.color
                victim.color = node.color
                victim.left = cl
                cl.parent = victim
                if victim.right is None:
                    parent = victim
                else:
                    deleted_color = Color.RED
                    victim.right.color = Color.BLACK
            else:
                vp = victim.parent
                assert vp is not None
                vr = victim.right
                vp.left = vr
                if vr is None:
                    deleted_color = victim.color
                else:
                    deleted_color = Color.RED
                    vr.parent = vp
                    vr.color = Color.BLACK
                self._replace_node(parent, node, victim)
                victim.parent = parent
                victim.color = node.color
                victim.left = cl
                victim.right = cr
                cl.parent = victim
                cr.parent = victim
                parent = vp

        node.parent = node.left = node.right = None
        if deleted_color is Color.BLACK and parent is not None:
            self._delete_fixup(parent)

    def __iter__(self) -> Iterator[RBNode[K, V]]:
        stack: list[RBNode[K, V]] = []
        node = self._root
        while node is not None:
            stack.append(node)
            node = node.left
        while stack:
            top = stack.pop()
            nxt = top.right
            while nxt is not None:
                stack.append(nxt)
                nxt = nxt.left
            yield top

    def items(self) -> Iterator[Tuple[K, V]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        for node in self:
            yield node.key, node.value

    def _insert_fixup(self, node: RBNode[K, V]) -> None:
        parent = node.parent
        while True:
            if parent is None:
                node.color = Color.BLACK
                break
            if parent.color is Color.BLACK:
                break
            gparent = parent.parent
            assert gparent is not None
            if parent is not gparent.right:
                uncle = gparent.right
                if _is_red(uncle):
                    assert uncle is not None
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    gparent.color = Color.RED
                    node = gparent
                    parent = node.parent
                    continue
                if node is parent.right:
                    self._left_rotate(parent)
                    parent = node
                parent.color = Color.BLACK
                gparent.color = Color.RED
                self._right_rotate(gparent)
            else:
                uncle = gparent.left
                if _is_red(uncle):
                    assert uncle is not None
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    gparent.color = Color.RED
                    node = gparent
                    parent = node.parent
                    continue
                if node is parent.left:
                    self._right_rotate(parent)
                    parent = node
                parent.color = Color.BLACK
                gparent.color = Color.RED
                self._left_rotate(gparent)
            break

    def _delete_fixup(self, parent: RBNode[K, V]) -> None:
        node: Optional[RBNode[K, V]] = None
        while True:
            sibling = parent.right
            if node is not sibling:
                assert sibling is not None
                if sibling.color is Color.RED:
                    self._left_rotate(parent)
                    parent.color = Color.RED
                    sibling.color = Color.BLACK
                    sibling = parent.right
                    assert sibling is not None
                sl, sr = sibling.left, sibling.right
                if _is_red(sl):
                    assert sl is not None
                    sl.color = parent.color
                    parent.color = Color.BLACK
                    self._right_rotate(sibling)
                    self._left_rotate(parent)
                elif _is_red(sr):
                    assert sr is not None
                    sr.color = parent.color
                    self._left_rotate(parent)
                else:
                    sibling.color = Color.RED
                    if parent.color is Color.BLACK:
                        node = parent
                        if node.parent is None:
                            break
                        parent = node.parent
                        continue
                    parent.color = Color.BLACK
            else:
                sibling = parent.left
                assert sibling is not None
                if sibling.color is Color.RED:
                    self._right_rotate(parent)
                    parent.color = Color.RED
                    sibling.color = Color.BLACK
                    sibling = parent.left
                    assert sibling is not None
                sl, sr = sibling.left, sibling.right
                if _is_red(sr):
                    assert sr is not None
                    sr.color = parent.color
                    parent.color = Color.BLACK
                    self._left_rotate(sibling)
                    self._right_rotate(parent)
                elif _is_red(sl):
                    assert sl is not None
                    sl.color = parent.color
                    self._right_rotate(parent)
                else:
                    sibling.color = Color.RED
                    if parent.color is Color.BLACK:
                        node = parent
                        if node.parent is None:
                            break
                        parent = node.parent
                        continue
                    parent.color = Color.BLACK
            break

    def _left_rotate(self, x: RBNode[K, V]) -> None:
        p = x.parent
        y = x.right
        assert y is not None
        c = y.left
        y.left = x
        x.parent = y
        x.right = c
        if c is not None:
            c.parent = x
        self._relink(p, x, y)
        y.parent = p

    def _right_rotate(self, x: RBNode[K, V]) -> None:
        p = x.parent
        y = x.left
        assert y is not None
        c = y.right
        y.right = x
        x.parent = y
        x.left = c
        if c is not None:
            c.parent = x
        self._relink(p, x, y)
        y.parent = p

    def _relink(
        self,
        parent: Optional[RBNode[K, V]],
        old: RBNode[K, V],
        new: Optional[RBNode[K, V]],
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _replace_node(
        self,
        parent: Optional[RBNode[K, V]],
        node: RBNode[K, V],
        new: Optional[RBNode[K, V]],
    ) -> None:
        self._relink(parent, node, new)