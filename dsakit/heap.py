"""Max-heap, heapify, heap construction and heapsort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence


def heapify(items: MutableSequence, n: int, i: int) -> None:
    """Sift items[i] down within the first n items so its subtree is a max-heap."""
    while True:
        largest = i
        left = 2 * i + 1
        right = left + 1
        if left < n and items[largest] < items[left]:
            largest = left
        if right < n and items[largest] < items[right]:
            largest = right
        if largest == i:
            return
        items[largest], items[i] = items[i], items[largest]
        i = largest


def build_heap(items: MutableSequence) -> None:
    """Rearrange items in place into a max-heap."""
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        heapify(items, n, i)


def heapsort(items: MutableSequence) -> None:
    """Sort items in place in ascending order."""
    build_heap(items)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)


class MaxHeap:
    """A binary max-heap stored in a list."""

    def __init__(self, values: Iterable = ()) -> None:
        self._items: list = []
        for value in values:
            self.insert(value)

    def insert(self, value) -> None:
        """Add value and restore the heap order."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] < items[index]:
                items[parent], items[index] = items[index], items[parent]
                index = parent
            else:
                break

    def delete_root(self):
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("nothing to delete")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            heapify(items, len(items), 0)
        return top

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"