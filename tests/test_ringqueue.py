import pytest

from advutils.errors import EmptyError, FullError, UtilsError
from advutils.ringqueue import RingQueue


def drain(queue):
    return queue.pop_many(len(queue))


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        RingQueue(capacity)


def test_new_queue_reports_capacity_and_is_empty():
    queue = RingQueue(5)
    assert queue.capacity == 5
    assert len(queue) == 0


def test_push_pop_is_fifo():
    queue = RingQueue(3)
    for value in (10, 20, 30):
        queue.push(value)
    assert len(queue) == 3
    assert [queue.pop(), queue.pop(), queue.pop()] == [10, 20, 30]
    assert len(queue) == 0


def test_push_when_full_raises():
    queue = RingQueue(2)
    queue.push(1)
    queue.push(2)
    with pytest.raises(FullError):
        queue.push(3)
    with pytest.raises(FullError):
        queue.push_front(3)
    assert drain(queue) == [1, 2]


def test_pop_and_peek_on_empty_raise():
    queue = RingQueue(2)
    for operation in (queue.pop, queue.pop_back, queue.peek, queue.peek_back):
        with pytest.raises(EmptyError):
            operation()


def test_errors_share_base_class():
    queue = RingQueue(1)
    with pytest.raises(UtilsError):
        queue.pop()


def test_push_front_puts_value_first():
    queue = RingQueue(4)
    queue.push(2)
    queue.push(3)
    queue.push_front(1)
    assert queue.peek() == 1
    assert queue.peek_back() == 3
    assert drain(queue) == [1, 2, 3]


def test_pop_back_takes_rear():
    queue = RingQueue(4)
    queue.push_many([1, 2, 3])
    assert queue.pop_back() == 3
    assert queue.pop_back() == 2
    assert len(queue) == 1
    assert queue.pop() == 1


def test_peek_does_not_remove():
    queue = RingQueue(3)
    queue.push_many(["a", "b"])
    assert queue.peek() == "a"
    assert queue.peek_back() == "b"
    assert len(queue) == 2


def test_wraparound_keeps_order():
    queue = RingQueue(3)
    data = list(range(20))
    out = []
    for value in data:
        if len(queue) == queue.capacity:
            out.append(queue.pop())
        queue.push(value)
    out.extend(drain(queue))
    assert out == data


def test_push_many_and_pop_many_round_trip():
    queue = RingQueue(6)
    queue.push_many([1, 2, 3])
    queue.push_many([4, 5])
    assert len(queue) == 5
    assert queue.pop_many(2) == [1, 2]
    assert queue.pop_many(3) == [3, 4, 5]


def test_push_many_too_many_leaves_queue_unchanged():
    queue = RingQueue(4)
    queue.push_many([1, 2])
    with pytest.raises(FullError):
        queue.push_many([3, 4, 5])
    with pytest.raises(FullError):
        queue.push_front_many([3, 4, 5])
    assert drain(queue) == [1, 2]


def test_push_many_fills_exactly():
    queue = RingQueue(3)
    queue.push_many([7, 8, 9])
    assert len(queue) == queue.capacity
    with pytest.raises(FullError):
        queue.push(1)


def test_push_front_many_keeps_given_order_at_front():
    queue = RingQueue(6)
    queue.push_many([4, 5])
    queue.push_front_many([1, 2, 3])
    assert queue.peek() == 1
    assert drain(queue) == [1, 2, 3, 4, 5]


def test_pop_many_too_many_raises_and_keeps_items():
    queue = RingQueue(4)
    queue.push_many([1, 2])
    with pytest.raises(EmptyError):
        queue.pop_many(3)
    with pytest.raises(EmptyError):
        queue.pop_back_many(3)
    assert drain(queue) == [1, 2]


def test_pop_back_many_returns_tail_in_queue_order():
    queue = RingQueue(5)
    queue.push_many([1, 2, 3, 4, 5])
    assert queue.pop_back_many(3) == [3, 4, 5]
    assert drain(queue) == [1, 2]


def test_bulk_operations_across_wraparound():
    queue = RingQueue(4)
    queue.push_many([1, 2, 3])
    assert queue.pop_many(2) == [1, 2]
    queue.push_many([4, 5, 6])
    assert len(queue) == 4
    assert queue.pop_back_many(2) == [5, 6]
    queue.push_front_many([0, 1])
    assert drain(queue) == [0, 1, 3, 4]


def test_negative_count_rejected():
    queue = RingQueue(2)
    with pytest.raises(ValueError):
        queue.pop_many(-1)
    with pytest.raises(ValueError):
        queue.pop_back_many(-1)


def test_zero_count_returns_empty_list():
    queue = RingQueue(2)
    queue.push("x")
    assert queue.pop_many(0) == []
    assert queue.pop_back_many(0) == []
    assert len(queue) == 1


def test_flush_empties_and_queue_is_reusable():
    queue = RingQueue(3)
    queue.push_many([1, 2, 3])
    queue.flush()
    assert len(queue) == 0
    with pytest.raises(EmptyError):
        queue.peek()
    queue.push_many(["a", "b", "c"])
    assert drain(queue) == ["a", "b", "c"]


def test_push_many_accepts_generator():
    queue = RingQueue(5)
    queue.push_many(str(n) for n in range(3))
    assert drain(queue) == ["0", "1", "2"]