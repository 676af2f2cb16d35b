import pytest

from algokit.queues import (
    CircularQueue,
    LinkedRingQueue,
    QueueEmptyError,
    QueueFullError,
    TwoStackQueue,
)


def test_circular_queue_of_five_slots_holds_four():
    queue = CircularQueue(5)
    for value in "abcd":
        queue.push(value)
    with pytest.raises(QueueFullError):
        queue.push("e")
    with pytest.raises(QueueFullError):
        queue.push("f")
    assert list(queue) == ["a", "b", "c", "d"]
    assert queue.is_full()


def test_circular_queue_pops_in_fifo_order_until_empty():
    queue = CircularQueue(5)
    for value in "abcd":
        queue.push(value)
    for value in "bcdef":
        with pytest.raises(QueueFullError):
            queue.push(value)
    popped = []
    while not queue.is_empty():
        popped.append(queue.pop())
    assert popped == ["a", "b", "c", "d"]
    assert len(queue) == 0


def test_circular_queue_of_three_slots():
    queue = CircularQueue(3)
    queue.push(1)
    queue.push(2)
    with pytest.raises(QueueFullError):
        queue.push(3)
    assert queue.pop() == 1
    assert queue.pop() == 2
    with pytest.raises(QueueEmptyError):
        queue.pop()


def test_circular_queue_wraps_around():
    queue = CircularQueue(3)
    for value in range(10):
        queue.push(value)
        assert queue.pop() == value
    queue.push("x")
    queue.push("y")
    assert list(queue) == ["x", "y"]
    assert len(queue) == 2


def test_circular_queue_zero_capacity_uses_default():
    queue = CircularQueue(0)
    assert queue.capacity == 10
    for value in range(9):
        queue.push(value)
    assert queue.is_full()


def test_circular_queue_rejects_single_slot():
    with pytest.raises(ValueError):
        CircularQueue(1)


def test_linked_ring_queue_starts_empty():
    queue = LinkedRingQueue(5)
    assert queue.is_empty()
    assert not queue.is_full()
    assert list(queue) == []


def test_linked_ring_queue_holds_capacity_values():
    queue = LinkedRingQueue(5)
    for value in "abcde":
        queue.push(value)
    assert list(queue) == ["a", "b", "c", "d", "e"]
    assert queue.is_full()
    assert not queue.is_empty()
    with pytest.raises(QueueFullError):
        queue.push("f")


def test_linked_ring_queue_pop():
    queue = LinkedRingQueue(5)
    queue.push("a")
    assert queue.pop() == "a"
    with pytest.raises(QueueEmptyError):
        queue.pop()


def test_linked_ring_queue_reuses_slots():
    queue = LinkedRingQueue(2)
    queue.push(1)
    queue.push(2)
    assert queue.pop() == 1
    queue.push(3)
    assert list(queue) == [2, 3]
    assert queue.is_full()


def test_linked_ring_queue_rejects_negative_capacity():
    with pytest.raises(ValueError):
        LinkedRingQueue(-1)


def test_two_stack_queue_sequence():
    queue = TwoStackQueue()
    with pytest.raises(QueueEmptyError):
        queue.delete_head()
    queue.append_tail(1)
    queue.append_tail(2)
    queue.append_tail(3)
    assert queue.delete_head() == 1
    assert queue.delete_head() == 2
    assert queue.delete_head() == 3
    with pytest.raises(QueueEmptyError):
        queue.delete_head()
    queue.append_tail(3)
    assert queue.delete_head() == 3


def test_two_stack_queue_interleaved():
    queue = TwoStackQueue()
    queue.append_tail("a")
    queue.append_tail("b")
    assert queue.delete_head() == "a"
    queue.append_tail("c")
    assert [queue.delete_head(), queue.delete_head()] == ["b", "c"]