"""Classic data structures: linked lists with cursors, queues, a priority queue, a hash map and a red-black tree."""

__version__ = "0.1.0"