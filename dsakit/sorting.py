"""Merge sort and quick sort."""

from __future__ import annotations

from collections.abc import Iterable


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable) -> list:
    """Return a new list with the items in ascending order."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list, start: int, end: int) -> int:
    pivot = values[start]
    pivot_index = start + sum(1 for v in values[start + 1 : end + 1] if v <= pivot)
    values[pivot_index], values[start] = values[start], values[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(items: Iterable) -> list:
    """Return a new list with the items in ascending order.

    The first element of each range is the pivot.
    """
    values = list(items)
    ranges = [(0, len(values) - 1)]
    while ranges:
        start, end = ranges.pop()
        if start >= end:
            continue
        p = _partition(values, start, end)
        ranges.append((start, p - 1))
        ranges.append((p + 1, end))
    return values