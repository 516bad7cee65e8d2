from dskit.linked_queue import LinkedQueue, QueueNode


def test_success():
    queue = LinkedQueue(QueueNode(1))
    for value in (2, 3, 4, 5):
        queue.enqueue(QueueNode(value))
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    assert queue.dequeue() == 3
    assert queue.dequeue() == 4
    assert queue.peek() == 5
    assert queue.dequeue() == 5
    assert queue.peek() is None


def test_enqueue():
    queue = LinkedQueue(QueueNode(1))
    queue.enqueue(QueueNode(2))
    assert queue.peek() == 1
    assert len(queue) == 2
    assert not queue.is_empty()


def test_dequeue():
    queue = LinkedQueue(QueueNode(1))
    queue.enqueue(QueueNode(2))

    assert queue.dequeue() == 1
    assert queue.peek() == 2
    assert len(queue) == 1
    assert not queue.is_empty()

    assert queue.dequeue() == 2
    assert queue.peek() is None
    assert len(queue) == 0
    assert queue.is_empty()
    assert queue.dequeue() is None


def test_peek_all():
    queue = LinkedQueue(QueueNode(1))
    queue.enqueue(QueueNode(2))
    queue.enqueue(QueueNode(3))
    assert queue.peek_all() == [1, 2, 3]
    assert len(queue) == 3


def test_iteration_consumes():
    queue = LinkedQueue(QueueNode(1))
    queue.enqueue(QueueNode(2))
    queue.enqueue(QueueNode(3))
    assert list(queue) == [1, 2, 3]
    assert queue.is_empty()


def test_enqueue_after_emptying():
    queue = LinkedQueue(QueueNode(1))
    queue.dequeue()
    queue.enqueue(QueueNode(9))
    assert queue.peek() == 9
    assert len(queue) == 1


def test_node_set_next_appends_to_chain():
    first = QueueNode("a")
    assert first.set_next(QueueNode("b")) is True
    first.set_next(QueueNode("c"))
    assert first.peek_all() == ["a", "b", "c"]


def test_empty_queue():
    queue = LinkedQueue()
    assert queue.peek_all() == []
    assert len(queue) == 0