import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.containers import (
    BoundedStack,
    CapacityError,
    CircularQueue,
    EmptyError,
    LinearQueue,
)


def test_stack_pops_in_reverse_push_order():
    stack = BoundedStack(3)
    for value in (10, 20, 30):
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == [30, 20, 10]
    assert len(stack) == 0


def test_stack_default_capacity_overflows_after_six():
    stack = BoundedStack()
    for value in range(6):
        stack.push(value)
    with pytest.raises(CapacityError):
        stack.push(99)
    assert len(stack) == 6


def test_stack_underflow():
    stack = BoundedStack(3)
    with pytest.raises(EmptyError):
        stack.pop()
    with pytest.raises(EmptyError):
        stack.peek()
    with pytest.raises(EmptyError):
        stack.index(1)


def test_stack_peek_and_iteration_top_first():
    stack = BoundedStack(4)
    values = [4, 8, 15]
    for value in values:
        stack.push(value)
    assert stack.peek() == values[-1]
    assert list(stack) == values[::-1]
    assert len(stack) == len(values)


def test_stack_index_counts_from_bottom():
    stack = BoundedStack(5)
    values = [4, 8, 15, 16]
    for value in values:
        stack.push(value)
    for position, value in enumerate(values):
        assert stack.index(value) == position
    with pytest.raises(ValueError):
        stack.index(42)


def test_stack_rejects_bad_capacity():
    with pytest.raises(ValueError):
        BoundedStack(0)


@given(st.lists(st.integers(), max_size=10))
def test_stack_round_trip(values):
    stack = BoundedStack(10)
    for value in values:
        stack.push(value)
    assert list(stack) == values[::-1]
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]


def test_linear_queue_fifo():
    queue = LinearQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert list(queue) == [1, 2, 3]
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    with pytest.raises(EmptyError):
        queue.dequeue()


def test_linear_queue_stays_full_after_dequeue_until_emptied():
    queue = LinearQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    with pytest.raises(CapacityError):
        queue.enqueue(4)
    queue.dequeue()
    queue.dequeue()
    queue.enqueue(4)
    assert list(queue) == [4]


def test_linear_queue_peek_returns_rear():
    queue = LinearQueue(3)
    queue.enqueue(7)
    queue.enqueue(9)
    assert queue.peek() == 9
    with pytest.raises(EmptyError):
        LinearQueue(3).peek()


def test_linear_queue_index_is_slot_position():
    queue = LinearQueue(4)
    values = [5, 6, 7]
    for value in values:
        queue.enqueue(value)
    slots = {value: queue.index(value) for value in values}
    assert [slots[v] for v in values] == list(range(len(values)))
    queue.dequeue()
    assert queue.index(7) == slots[7]
    with pytest.raises(ValueError):
        queue.index(5)
    with pytest.raises(EmptyError):
        LinearQueue(2).index(5)


def test_linear_queue_len():
    queue = LinearQueue(3)
    assert len(queue) == 0
    queue.enqueue("x")
    queue.enqueue("y")
    queue.dequeue()
    assert len(queue) == 1


def test_circular_queue_reuses_freed_slots():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    with pytest.raises(CapacityError):
        queue.enqueue(4)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert len(queue) == 3


def test_circular_queue_underflow():
    queue = CircularQueue(2)
    with pytest.raises(EmptyError):
        queue.dequeue()
    queue.enqueue("a")
    assert queue.dequeue() == "a"
    with pytest.raises(EmptyError):
        queue.dequeue()


def test_circular_queue_capacity_one():
    queue = CircularQueue(1)
    queue.enqueue(8)
    with pytest.raises(CapacityError):
        queue.enqueue(9)
    assert queue.dequeue() == 8
    queue.enqueue(9)
    assert list(queue) == [9]


@given(st.lists(st.tuples(st.booleans(), st.integers()), max_size=40))
def test_circular_queue_matches_fifo_model(operations):
    queue = CircularQueue(4)
    model: list[int] = []
    for is_enqueue, value in operations:
        if is_enqueue:
            if len(model) == 4:
                with pytest.raises(CapacityError):
                    queue.enqueue(value)
            else:
                queue.enqueue(value)
                model.append(value)
        elif model:
            assert queue.dequeue() == model.pop(0)
        else:
            with pytest.raises(EmptyError):
                queue.dequeue()
        assert list(queue) == model
        assert len(queue) == len(model)