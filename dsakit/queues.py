"""Queues backed by a dynamic array and by a linked list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


class ArrayQueue:
    """A first-in, first-out queue stored in a growable array.

    Storage is reset once the queue becomes empty.
    """

    def __init__(self, values: Iterable = ()) -> None:
        self._items: list = list(values)
        self._front = 0

    def enqueue(self, value) -> None:
        """Add value at the rear."""
        self._items.append(value)

    def dequeue(self):
        """Remove and return the front value."""
        if self.is_empty():
            raise IndexError("queue underflow")
        value = self._items[self._front]
        self._front += 1
        if self._front == len(self._items):
            self._items.clear()
            self._front = 0
        return value

    def front(self):
        """Return the front value without removing it."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._items[self._front]

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __repr__(self) -> str:
        return f"ArrayQueue({self._items[self._front:]!r})"


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedQueue:
    """A first-in, first-out queue stored as a chain of nodes."""

    def __init__(self, values: Iterable = ()) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value) -> None:
        """Add value at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self):
        """Remove and return the front value."""
        if self._front is None:
            raise IndexError("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def front(self):
        """Return the front value without removing it."""
        if self._front is None:
            raise IndexError("queue is empty")
        return self._front.value

    def rear(self):
        """Return the rear value without removing it."""
        if self._rear is None:
            raise IndexError("queue is empty")
        return self._rear.value

    def is_empty(self) -> bool:
        return self._front is None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        values = []
        node = self._front
        while node is not None:
            values.append(node.value)
            node = node.next
        return f"LinkedQueue({values!r})"