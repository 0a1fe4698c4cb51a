import pytest

from advutils.boundedlist import BoundedList
from advutils.errors import EmptyError, FullError


def test_capacity_and_length():
    lst = BoundedList(4)
    assert lst.capacity == 4
    assert len(lst) == 0
    lst.push("a")
    assert len(lst) == 1


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedList(0)


def test_push_and_pop_order():
    lst = BoundedList(3)
    lst.push(1)
    lst.push(2)
    lst.push_front(0)
    assert list(lst) == [0, 1, 2]
    assert lst.pop() == 0
    assert lst.pop_back() == 2
    assert lst.pop() == 1
    assert len(lst) == 0


def test_full_raises():
    lst = BoundedList(2)
    lst.push(1)
    lst.push(2)
    with pytest.raises(FullError):
        lst.push(3)
    with pytest.raises(FullError):
        lst.push_front(3)
    with pytest.raises(FullError):
        lst.insert(3, 0)
    assert list(lst) == [1, 2]


def test_empty_raises():
    lst = BoundedList(2)
    with pytest.raises(EmptyError):
        lst.pop()
    with pytest.raises(EmptyError):
        lst.pop_back()
    with pytest.raises(EmptyError):
        lst.peek()
    with pytest.raises(EmptyError):
        lst.peek_back()
    with pytest.raises(EmptyError):
        lst.peek_at(0)
    with pytest.raises(EmptyError):
        lst.remove(0)


def test_insert_positions():
    lst = BoundedList(5)
    lst.insert("b", 0)
    lst.insert("d", 1)
    lst.insert("a", 0)
    lst.insert("c", 2)
    assert list(lst) == ["a", "b", "c", "d"]


def test_insert_invalid_position():
    lst = BoundedList(5)
    lst.push(1)
    with pytest.raises(IndexError):
        lst.insert(2, 2)
    with pytest.raises(IndexError):
        lst.insert(2, -1)
    assert list(lst) == [1]


def test_update():
    lst = BoundedList(3)
    lst.push(1)
    lst.push(2)
    lst.update(20, 1)
    assert lst.peek_at(1) == 20
    with pytest.raises(IndexError):
        lst.update(5, 2)


def test_remove_at_position():
    lst = BoundedList(4)
    for value in (10, 20, 30):
        lst.push(value)
    assert lst.remove(1) == 20
    assert list(lst) == [10, 30]
    with pytest.raises(IndexError):
        lst.remove(2)


def test_peeks_do_not_remove():
    lst = BoundedList(3)
    lst.push("x")
    lst.push("y")
    assert lst.peek() == "x"
    assert lst.peek_back() == "y"
    assert lst.peek_at(1) == "y"
    assert len(lst) == 2


def test_flush():
    lst = BoundedList(3)
    lst.push(1)
    lst.push(2)
    lst.flush()
    assert len(lst) == 0
    with pytest.raises(EmptyError):
        lst.flush()


def test_iteration_matches_peek_at():
    lst = BoundedList(6)
    for value in range(6):
        lst.push(value * value)
    assert list(lst) == [lst.peek_at(i) for i in range(len(lst))]