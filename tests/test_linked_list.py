import pytest

from dskit.linked_list import LinkedList


def generate_test():
    return LinkedList([0, 1, 2, 3, 4, 5, 6])


def test_basic_front():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert len(lst) == 0

    lst.push_front(10)
    assert len(lst) == 1
    assert lst.pop_front() == 10
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert len(lst) == 0

    lst.push_front(10)
    assert len(lst) == 1
    lst.push_front(20)
    assert len(lst) == 2
    lst.push_front(30)
    assert len(lst) == 3
    assert lst.pop_front() == 30
    assert len(lst) == 2
    lst.push_front(40)
    assert len(lst) == 3
    assert lst.pop_front() == 40
    assert len(lst) == 2
    assert lst.pop_front() == 20
    assert len(lst) == 1
    assert lst.pop_front() == 10
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert len(lst) == 0
    assert lst.pop_front() is None
    assert len(lst) == 0


def test_basic():
    m = LinkedList()
    assert m.pop_front() is None
    assert m.pop_back() is None
    assert m.pop_front() is None
    m.push_front(1)
    assert m.pop_front() == 1
    m.push_back(2)
    m.push_back(3)
    assert len(m) == 2
    assert m.pop_front() == 2
    assert m.pop_front() == 3
    assert len(m) == 0
    assert m.pop_front() is None
    m.push_back(1)
    m.push_back(3)
    m.push_back(5)
    m.push_back(7)
    assert m.pop_front() == 1

    n = LinkedList()
    n.push_front(2)
    n.push_front(3)
    assert n.front() == 3
    n.set_front(0)
    assert n.back() == 2
    n.set_back(1)
    assert n.pop_front() == 0
    assert n.pop_front() == 1


def test_pop_back_order():
    m = LinkedList([1, 2, 3])
    assert m.pop_back() == 3
    assert m.pop_back() == 2
    assert m.pop_back() == 1
    assert m.pop_back() is None
    assert m.is_empty()


def test_front_back_empty():
    m = LinkedList()
    assert m.front() is None
    assert m.back() is None


def test_set_on_empty_raises():
    m = LinkedList()
    with pytest.raises(IndexError):
        m.set_front(1)
    with pytest.raises(IndexError):
        m.set_back(1)


def test_iterator():
    m = generate_test()
    assert list(m) == [0, 1, 2, 3, 4, 5, 6]
    n = LinkedList()
    assert next(iter(n), None) is None
    n.push_front(4)
    it = iter(n)
    assert next(it) == 4
    assert next(it, None) is None


def test_rev_iter():
    m = generate_test()
    for i, elt in enumerate(reversed(m)):
        assert elt == 6 - i
    assert list(reversed(m)) == [6, 5, 4, 3, 2, 1, 0]
    n = LinkedList()
    assert next(reversed(n), None) is None
    n.push_front(4)
    assert list(reversed(n)) == [4]


def test_mut_iter():
    m = generate_test()
    remaining = len(m)
    for i, elt in enumerate(m):
        assert elt == i
        remaining -= 1
    assert remaining == 0
    n = LinkedList()
    n.push_front(4)
    n.push_back(5)
    assert list(n) == [4, 5]
    assert list(reversed(n)) == [5, 4]


def test_iterator_from_both_ends():
    n = LinkedList()
    n.push_front(4)
    n.push_front(5)
    n.push_front(6)
    assert list(n) == [6, 5, 4]
    assert list(reversed(n)) == [4, 5, 6]


def test_eq():
    n = LinkedList()
    m = LinkedList()
    assert n == m
    n.push_front(1)
    assert n != m
    m.push_back(1)
    assert n == m

    assert LinkedList([2, 3, 4]) != LinkedList([1, 2, 3])


def test_eq_other_type():
    assert (LinkedList([1]) == [1]) is False


def test_ord():
    n = LinkedList()
    m = LinkedList([1, 2, 3])
    assert n < m
    assert m > n
    assert n <= n
    assert n >= n


def test_ord_other_type_raises():
    with pytest.raises(TypeError):
        LinkedList([1]) < [1]  # noqa: B015


def test_ord_nan():
    nan = float("nan")
    n = LinkedList([nan])
    m = LinkedList([nan])
    assert not (n < m)
    assert not (n > m)
    assert not (n <= m)
    assert not (n >= m)

    n = LinkedList([nan])
    one = LinkedList([1.0])
    assert not (n < one)
    assert not (n > one)
    assert not (n <= one)
    assert not (n >= one)

    u = LinkedList([1.0, 2.0, nan])
    v = LinkedList([1.0, 2.0, 3.0])
    assert not (u < v)
    assert not (u > v)
    assert not (u <= v)
    assert not (u >= v)

    s = LinkedList([1.0, 2.0, 4.0, 2.0])
    LinkedList([1.0, 2.0, 3.0, 2.0])
    assert s > LinkedList([1.0, 2.0, 3.0, 2.0])
    assert not (s < LinkedList([1.0, 2.0, 3.0, 2.0]))
    assert s > one
    assert not (s <= one)
    assert s >= one


def test_repr():
    assert repr(LinkedList(range(10))) == "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9]"
    words = LinkedList(["just", "one", "test", "more"])
    assert repr(words) == "['just', 'one', 'test', 'more']"


def test_hashmap():
    list1 = LinkedList(range(10))
    list2 = LinkedList(range(1, 11))
    mapping = {}
    mapping[list1.copy()] = "list1"
    mapping[list2.copy()] = "list2"
    assert len(mapping) == 2
    assert mapping.get(list1) == "list1"
    assert mapping.get(list2) == "list2"
    assert mapping.pop(list1) == "list1"
    assert mapping.pop(list2) == "list2"
    assert not mapping


def test_copy_is_independent():
    original = LinkedList([1, 2, 3])
    clone = original.copy()
    assert clone == original
    clone.push_back(4)
    clone.set_front(9)
    assert list(original) == [1, 2, 3]
    assert list(clone) == [9, 2, 3, 4]


def test_extend_and_clear():
    m = LinkedList([1])
    m.extend([2, 3])
    assert list(m) == [1, 2, 3]
    assert len(m) == 3
    m.clear()
    assert len(m) == 0
    assert m.is_empty()
    assert m.front() is None
    m.push_back(5)
    assert list(m) == [5]
    assert list(reversed(m)) == [5]


def test_links_consistent():
    m = LinkedList()
    for i in range(5):
        m.push_front(i)
        m.push_back(-i)
    m.pop_front()
    m.pop_back()
    assert list(m) == list(reversed(list(reversed(m))))
    assert list(m) == [3, 2, 1, 0, 0, -1, -2, -3]