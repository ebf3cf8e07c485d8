import pytest

from algodemos.containers import Queue, Stack, run_containers


def test_queue_is_first_in_first_out():
    queue = Queue()
    values = [10, 20, 30]
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


def test_queue_peek_does_not_remove():
    queue = Queue([10, 20])
    assert queue.peek() == 10
    assert len(queue) == 2
    assert queue.dequeue() == 10


def test_queue_size_tracks_operations():
    queue = Queue()
    assert len(queue) == 0
    queue.enqueue(1)
    queue.enqueue(2)
    assert len(queue) == 2
    queue.dequeue()
    assert len(queue) == 1
    assert not queue.is_empty()


def test_queue_dequeue_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_queue_peek_empty_raises():
    with pytest.raises(IndexError):
        Queue().peek()


def test_stack_is_last_in_first_out():
    stack = Stack()
    values = [10, 20, 30]
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.is_empty()


def test_stack_peek_does_not_remove():
    stack = Stack([10, 20])
    assert stack.peek() == 20
    assert len(stack) == 2
    assert stack.pop() == 20


def test_stack_size_tracks_operations():
    stack = Stack()
    assert stack.is_empty()
    stack.push(5)
    assert len(stack) == 1
    assert not stack.is_empty()


def test_stack_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_stack_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_run_containers_output(capsys):
    run_containers()
    lines = capsys.readouterr().out.splitlines()
    assert "Queue size: 3" in lines
    assert "Front element: 10" in lines
    assert "Top element: 30" in lines