"""A first-in first-out queue and a last-in first-out stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Queue:
    """Items leave in the order they arrived."""

    def __init__(self, items: Iterable = ()) -> None:
        self._items = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, item) -> None:
        """Add an item at the back."""
        self._items.append(item)

    def dequeue(self):
        """Remove and return the front item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self):
        """Return the front item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return whether the queue holds no items."""
        return not self._items


class Stack:
    """Items leave in the reverse of the order they arrived."""

    def __init__(self, items: Iterable = ()) -> None:
        self._items = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item) -> None:
        """Put an item on top."""
        self._items.append(item)

    def pop(self):
        """Remove and return the top item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self):
        """Return the top item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return whether the stack holds no items."""
        return not self._items


def run_containers() -> None:
    """Print the queue and stack examples."""
    queue = Queue()
    for item in (10, 20, 30):
        queue.enqueue(item)
    print("Queue size:", len(queue))
    print("Front element:", queue.peek())
    print("Dequeued element:", queue.dequeue())
    print("Is queue empty?", str(queue.is_empty()).lower())

    stack = Stack()
    for item in (10, 20, 30):
        stack.push(item)
    print("Stack size:", len(stack))
    print("Top element:", stack.peek())
    print("Popped element:", stack.pop())
    print("Is stack empty?", str(stack.is_empty()).lower())