# dskit

A small library of classic data structures in plain Python, with no
runtime dependencies.

## Contents

| Module | What it provides |
| --- | --- |
| `dskit.linked_list` | `LinkedList`: a doubly linked list with pushes and pops at both ends, forward and reverse iteration, lexicographic comparison, hashing and `copy()` |
| `dskit.cursor` | `CursorMut`: a cursor over a `LinkedList` that moves, peeks, replaces the current element, splits and splices |
| `dskit.keyed_list` | `KeyedList` and `Node`: a doubly linked list whose nodes are indexed by key for O(1) lookup |
| `dskit.fifo_list` | `FifoList`: a singly linked FIFO list with `push`, `pop`, `peek`, `apply` and a consuming `drain()` |
| `dskit.chain_list` | `ChainList`: a minimal append-and-pop chain |
| `dskit.queue` | `Queue`: a FIFO queue with `search` and `replace` |
| `dskit.linked_queue` | `LinkedQueue` and `QueueNode`: a FIFO queue built from linked nodes |
| `dskit.priority_queue` | `PriorityQueue` with three `Priority` levels (`LOW`, `MIDDLE`, `HIGH`) |
| `dskit.hashmap` | `HashMap` with a caller-supplied hash function and a fixed bucket count, `LocationInformation`, and the hash functions `adler32` and `hashcode` |
| `dskit.rb_tree` | `RBTree` and `RBNode`: a red-black tree map with insertion, deletion and ordered iteration |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

A doubly linked list and a cursor. A new cursor sits on a "ghost"
position between the back and the front; `index()` is `None` there.

```python
from dskit.linked_list import LinkedList
from dskit.cursor import CursorMut

items = LinkedList([1, 2, 3, 4])
cursor = CursorMut(items)
cursor.move_next()
cursor.move_next()            # on 2
tail = cursor.split_after()   # items: [1, 2], tail: [3, 4]
cursor.splice_before(LinkedList([9]))
print(list(items))            # [1, 9, 2]
```

A keyed list. It always holds at least one node: removing or popping the
last node returns `None` and leaves it in place. Removing a missing key
raises `KeyError`, and adding a duplicate key raises `ValueError`.

```python
from dskit.keyed_list import KeyedList, Node

kl = KeyedList(Node("node1"))
kl.insert_after(Node("node2"), "node1")
kl.insert_after(Node("node3"), "node1")
kl.push_front(Node("node4"))
print(kl.keys())              # node4->node1->node3->node2
```

A priority queue. Higher levels are served first; within a level the order
is first in, first out.

```python
from dskit.priority_queue import PriorityQueue, Priority

pq = PriorityQueue()
pq.enqueue(18, Priority.LOW)
pq.enqueue(7, Priority.HIGH)
pq.enqueue(6, Priority.MIDDLE)
pq.change_priority(18, Priority.LOW, Priority.HIGH)
print(pq.dequeue(), pq.dequeue(), pq.dequeue())   # 7 18 6
```

A red-black tree. Inserting an existing key replaces its value; deleting a
missing key does nothing. Iterating yields `RBNode` objects in key order;
`items()` yields `(key, value)` pairs.

```python
from dskit.rb_tree import RBTree

tree = RBTree()
for key, ch in enumerate("hello, world!"):
    tree.insert(key, ch)
tree.delete(1)
print(tree.find(3))                          # 'l'
print("".join(v for _, v in tree.items()))   # hllo, world!
```

A hash map with a custom hash function. The bucket of a key is
`hash_fn(key) & (buckets - 1)`, so use a power of two for the bucket count;
fewer than one bucket raises `ValueError`.

```python
from dskit.hashmap import HashMap, adler32

table = HashMap(lambda key: adler32(key.encode()), 16)
table.insert("alpha", 1)
print(table.get("alpha"), len(table))   # 1 1
```

## Notes

- Iterating over a `LinkedQueue` consumes it: each step dequeues an item.
  Use `peek_all()` to look at every item without removing any.
- `FifoList.drain()` removes elements as it yields them; plain iteration
  does not.
- `HashMap` never grows: the bucket count is fixed when it is created.

## What this package does not do

It is a library only. It has no command-line tool, and none of its
structures are persisted to disk or shared between processes.