"""Stacks backed by a dynamic array and by a linked list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


class ArrayStack:
    """A last-in, first-out stack stored in a growable array."""

    def __init__(self, values: Iterable = ()) -> None:
        self._items: list = list(values)

    def push(self, value) -> None:
        """Put value on top of the stack."""
        self._items.append(value)

    def pop(self):
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self):
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r})"


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedStack:
    """A last-in, first-out stack stored as a chain of nodes."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value) -> None:
        """Put value on top of the stack."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self):
        """Remove and return the top value."""
        if self._head is None:
            raise IndexError("stack underflow")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self):
        """Return the top value without removing it."""
        if self._head is None:
            raise IndexError("stack is empty")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        values = []
        node = self._head
        while node is not None:
            values.append(node.value)
            node = node.next
        return f"LinkedStack({values[::-1]!r})"