import random

import pytest

from dsakit.heap import MaxHeap, build_heap, heapify, heapsort


def _is_max_heap(items):
    return all(items[(i - 1) // 2] >= items[i] for i in range(1, len(items)))


def test_insert_order_matches_source_demo():
    heap = MaxHeap()
    for value in (50, 55, 53, 52, 54):
        heap.insert(value)
    assert list(heap) == [55, 54, 53, 50, 52]


def test_delete_root_matches_source_demo():
    heap = MaxHeap([50, 55, 53, 52, 54])
    assert heap.delete_root() == 55
    assert list(heap) == [54, 52, 53, 50]
    assert len(heap) == 4


def test_delete_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().delete_root()


def test_delete_last_element():
    heap = MaxHeap([9])
    assert heap.delete_root() == 9
    assert len(heap) == 0
    assert list(heap) == []


def test_repeated_delete_gives_descending():
    rng = random.Random(3)
    values = [rng.randint(-50, 50) for _ in range(80)]
    heap = MaxHeap(values)
    assert _is_max_heap(list(heap))
    drained = [heap.delete_root() for _ in range(len(values))]
    assert drained == sorted(values, reverse=True)


def test_heap_property_after_each_operation():
    rng = random.Random(11)
    heap = MaxHeap()
    for _ in range(100):
        if len(heap) and rng.random() < 0.3:
            top = heap.delete_root()
            assert all(top >= v for v in heap)
        else:
            heap.insert(rng.randint(0, 100))
        assert _is_max_heap(list(heap))


def test_heapify_moves_larger_child_up():
    items = [1, 5, 3]
    heapify(items, 3, 0)
    assert items[0] == max(items)
    assert _is_max_heap(items)


def test_heapify_respects_size_limit():
    items = [1, 2, 9]
    heapify(items, 2, 0)
    assert items[2] == 9
    assert items[0] == 2


def test_build_heap_source_array():
    items = [54, 53, 55, 52, 50]
    build_heap(items)
    assert _is_max_heap(items)
    assert items[0] == 55
    assert sorted(items) == sorted([54, 53, 55, 52, 50])


def test_heapsort_source_array():
    items = [54, 53, 55, 52, 50]
    heapsort(items)
    assert items == sorted([54, 53, 55, 52, 50])


@pytest.mark.parametrize(
    "values",
    [[], [1], [2, 1], [5, 5, 5], [3, -1, 2, -7, 0], list(range(20, 0, -1))],
)
def test_heapsort_small_cases(values):
    items = list(values)
    heapsort(items)
    assert items == sorted(values)


def test_heapsort_random():
    rng = random.Random(5)
    values = [rng.randint(-1000, 1000) for _ in range(300)]
    items = list(values)
    heapsort(items)
    assert items == sorted(values)