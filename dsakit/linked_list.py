"""Singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _SinglyNode:
    value: Any
    next: _SinglyNode | None = None


@dataclass(eq=False)
class _DoublyNode:
    value: Any
    next: _DoublyNode | None = None
    prev: _DoublyNode | None = None


class SinglyLinkedList:
    """A linked list with forward links and constant-time insertion at both ends."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _SinglyNode | None = None
        self._tail: _SinglyNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value) -> None:
        """Insert value before the first element."""
        node = _SinglyNode(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value) -> None:
        """Insert value after the last element."""
        node = _SinglyNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


class DoublyLinkedList:
    """A linked list with links in both directions."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _DoublyNode | None = None
        self._tail: _DoublyNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value) -> None:
        """Insert value before the first element."""
        node = _DoublyNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value) -> None:
        """Insert value after the last element."""
        node = _DoublyNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"