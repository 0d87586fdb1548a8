"""A queue built from two stacks and a stack built from two queues."""

from __future__ import annotations

from .queues import ArrayQueue
from .stacks import ArrayStack


class StackQueue:
    """A first-in, first-out queue kept in two stacks.

    Enqueueing reorders the stacks so the oldest value is always on top.
    """

    def __init__(self) -> None:
        self._main = ArrayStack()
        self._spare = ArrayStack()

    def enqueue(self, value) -> None:
        """Add value at the rear."""
        while not self._main.is_empty():
            self._spare.push(self._main.pop())
        self._main.push(value)
        while not self._spare.is_empty():
            self._main.push(self._spare.pop())

    def dequeue(self):
        """Remove and return the oldest value."""
        if self._main.is_empty():
            raise IndexError("queue is empty")
        return self._main.pop()

    def is_empty(self) -> bool:
        return self._main.is_empty()

    def __len__(self) -> int:
        return len(self._main)


class QueueStack:
    """A last-in, first-out stack kept in two queues.

    Pushing reorders the queues so the newest value is always at the front.
    """

    def __init__(self) -> None:
        self._main = ArrayQueue()
        self._spare = ArrayQueue()

    def push(self, value) -> None:
        """Put value on top of the stack."""
        while not self._main.is_empty():
            self._spare.enqueue(self._main.dequeue())
        self._main.enqueue(value)
        while not self._spare.is_empty():
            self._main.enqueue(self._spare.dequeue())

    def pop(self):
        """Remove and return the newest value."""
        if self._main.is_empty():
            raise IndexError("stack is empty")
        return self._main.dequeue()

    def is_empty(self) -> bool:
        return self._main.is_empty()

    def __len__(self) -> int:
        return len(self._main)