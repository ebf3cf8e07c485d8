"""Singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


@dataclass(eq=False)
class _DNode:
    data: Any
    prev: _DNode | None = None
    next: _DNode | None = None


class SinglyLinkedList:
    """A list of nodes each linked to the next."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _Node | None = None
        for value in values:
            self.insert_at_end(value)

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def insert_at_end(self, value) -> None:
        """Append a value after the last node."""
        new_node = _Node(value)
        if self._head is None:
            self._head = new_node
            return
        node = self._head
        while node.next is not None:
            node = node.next
        node.next = new_node

    def insert_at_beginning(self, value) -> None:
        """Put a value in front of the first node."""
        self._head = _Node(value, self._head)

    def delete(self, value) -> bool:
        """Remove the first node holding value; return whether one was removed."""
        if self._head is None:
            return False
        if self._head.data == value:
            self._head = self._head.next
            return True
        node = self._head
        while node.next is not None and node.next.data != value:
            node = node.next
        if node.next is None:
            return False
        node.next = node.next.next
        return True

    def display(self) -> str:
        """Return the list drawn as 'a -> b -> nil'."""
        return "".join(f"{value} -> " for value in self) + "nil"


class DoublyLinkedList:
    """A list of nodes linked in both directions."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _DNode | None = None
        self._tail: _DNode | None = None
        for value in values:
            self.insert_at_end(value)

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def insert_at_end(self, value) -> None:
        """Append a value after the last node."""
        new_node = _DNode(value, prev=self._tail)
        if self._tail is None:
            self._head = new_node
        else:
            self._tail.next = new_node
        self._tail = new_node

    def insert_at_beginning(self, value) -> None:
        """Put a value in front of the first node."""
        new_node = _DNode(value, next=self._head)
        if self._head is None:
            self._tail = new_node
        else:
            self._head.prev = new_node
        self._head = new_node

    def delete(self, value) -> bool:
        """Remove the first node holding value; return whether one was removed."""
        node = self._head
        while node is not None and node.data != value:
            node = node.next
        if node is None:
            return False
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        return True

    def display_forward(self) -> str:
        """Return the list drawn head to tail as 'a <-> b <-> nil'."""
        return "".join(f"{value} <-> " for value in self) + "nil"

    def display_backward(self) -> str:
        """Return the list drawn tail to head, or a note that it is empty."""
        if self._head is None:
            return "List is empty"
        return "".join(f"{value} <-> " for value in reversed(self)) + "nil"


def run_linked_lists() -> None:
    """Print the doubly and singly linked list examples."""
    doubly = DoublyLinkedList()
    doubly.insert_at_end(10)
    doubly.insert_at_end(20)
    doubly.insert_at_end(30)
    doubly.insert_at_beginning(5)

    print("Forward Traversal:")
    print(doubly.display_forward())
    print("Backward Traversal:")
    print(doubly.display_backward())
    print("Deleting node with value 20")
    doubly.delete(20)
    print(doubly.display_forward())

    singly = SinglyLinkedList()
    singly.insert_at_end(10)
    singly.insert_at_end(20)
    singly.insert_at_end(30)
    print(singly.display())
    singly.insert_at_beginning(5)
    print(singly.display())
    singly.delete(20)
    print(singly.display())
    print("Search 10:", str(10 in singly).lower())
    print("Search 50:", str(50 in singly).lower())