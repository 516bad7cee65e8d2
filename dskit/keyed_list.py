"""Doubly linked list whose nodes are also indexed by key for O(1) lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterator, Optional


@dataclass
class Node:
    """A list node; ``left`` and ``right`` hold the keys of its neighbours."""

    key: Hashable
    left: Optional[Hashable] = None
    right: Optional[Hashable] = None


class KeyedList:
    """A doubly linked list that always holds at least one node.

    Nodes are stored in a dictionary by key, so finding, removing and
    inserting next to a node by key all take constant time.
    """

    def __init__(self, node: Node) -> None:
        node.left = None
        node.right = None
        self._nodes: dict[Hashable, Node] = {node.key: node}
        self._head: Hashable = node.key
        self._tail: Hashable = node.key

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: Any) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[Hashable]:
        key: Optional[Hashable] = self._head
        while key is not None:
            yield key
            key = self._nodes[key].right

    def keys(self) -> str:
        """Return the keys from head to tail joined by ``->``."""
        return "->".join(str(key) for key in self)

    def show(self) -> str:
        """Print the keys' reprs from head to tail joined by ``->`` and return that text."""
        rendered = "->".join(repr(key) for key in self)
        print(rendered, end="")
        return rendered

    def _check_new(self, node: Node) -> None:
        if node.key in self._nodes:
            raise ValueError(f"duplicate key {node.key!r}")

    def insert_after(self, node: Node, key: Hashable) -> None:
        """Insert ``node`` right after the node stored under ``key``."""
        if key not in self._nodes:
            raise KeyError(key)
        self._check_new(node)
        anchor = self._nodes[key]
        node.left = key
        node.right = anchor.right
        if anchor.right is None:
            self._tail = node.key
        else:
            self._nodes[anchor.right].left = node.key
        anchor.right = node.key
        self._nodes[node.key] = node

    def remove(self, key: Hashable) -> Optional[Node]:
        """Unlink and return the node stored under ``key``.

        Raises KeyError if there is no such node. The last remaining node
        is never removed; ``None`` is returned instead.
        """
        if key not in self._nodes:
            raise KeyError(key)
        if len(self._nodes) == 1:
            return None
        node = self._nodes.pop(key)
        if node.left is None:
            self._head = node.right
        else:
            self._nodes[node.left].right = node.right
        if node.right is None:
            self._tail = node.left
        else:
            self._nodes[node.right].left = node.left
        return node

    def pop_back(self) -> Optional[Node]:
        """Remove and return the tail node, or ``None`` if it is the only one."""
        return self.remove(self._tail)

    def pop_front(self) -> Optional[Node]:
        """Remove and return the head node, or ``None`` if it is the only one."""
        return self.remove(self._head)

    def push_back(self, node: Node) -> None:
        """Append ``node`` after the tail."""
        self._check_new(node)
        node.left = self._tail
        node.right = None
        self._nodes[self._tail].right = node.key
        self._nodes[node.key] = node
        self._tail = node.key

    def push_front(self, node: Node) -> None:
        """Prepend ``node`` before the head."""
        self._check_new(node)
        node.left = None
        node.right = self._head
        self._nodes[self._head].left = node.key
        self._nodes[node.key] = node
        self._head = node.key