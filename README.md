# dsakit

A small library of classic data structures and algorithms, using only the
standard library:

- `dsakit.binary_tree`: build a binary tree from pre-order input, traverse it
  and find the lowest common ancestor of two values
- `dsakit.bst`: binary search tree insertion, search, minimum, maximum,
  deletion and k-th smallest value
- `dsakit.heap`: a `MaxHeap` class, plus `heapify`, `build_heap` and
  `heapsort` for lists
- `dsakit.sorting`: `merge_sort` and `quick_sort`
- `dsakit.linked_list`: `SinglyLinkedList` and `DoublyLinkedList`
- `dsakit.stacks`: `ArrayStack` and `LinkedStack`
- `dsakit.queues`: `ArrayQueue` and `LinkedQueue`
- `dsakit.adapters`: `StackQueue`, a queue kept in two stacks, and
  `QueueStack`, a stack kept in two queues

## Installation

```
pip install .
```

## Binary trees

`build_tree` reads values in pre-order, with `-1` marking an empty child. It
raises `ValueError` if the values run out before the tree is complete. The
traversals return lists; `level_order` returns one list per level.

```python
from dsakit.binary_tree import (
    build_tree, inorder, preorder, postorder, level_order, lowest_common_ancestor,
)

root = build_tree([1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1])
inorder(root)      # [7, 3, 11, 1, 17, 5]
preorder(root)     # [1, 3, 7, 11, 5, 17]
postorder(root)    # [7, 11, 3, 17, 5, 1]
level_order(root)  # [[1], [3, 5], [7, 11, 17]]
lowest_common_ancestor(root, 7, 11).data  # 3
```

`lowest_common_ancestor` matches nodes by value. If only one of the two values
is in the tree, its node is returned; if neither is, the result is `None`.
Nodes are `TreeNode` objects with `data`, `left` and `right` attributes.

## Binary search trees

The functions in `dsakit.bst` work on the same `TreeNode` trees. Equal values
are inserted to the left. `build_bst` inserts values in order and stops at the
first `-1`.

```python
from dsakit.bst import build_bst, insert, search, min_node, max_node, delete, kth_smallest

root = build_bst([50, 20, 70, 10, 30, 90, 110])
search(root, 30)        # True
min_node(root).data     # 10
max_node(root).data     # 110
kth_smallest(root, 3)   # 30
root = delete(root, 30)
root = insert(root, 40)
```

`delete` removes one occurrence and returns the new root; a node with two
children takes the smallest value of its right subtree. `min_node` and
`max_node` raise `ValueError` on an empty tree, and `kth_smallest` raises
`IndexError` when there is no k-th value (k counts from 1).

## Heaps

```python
from dsakit.heap import MaxHeap, build_heap, heapify, heapsort

heap = MaxHeap()
for value in (50, 55, 53, 52, 54):
    heap.insert(value)
list(heap)           # [55, 54, 53, 50, 52]
heap.delete_root()   # 55
list(heap)           # [54, 52, 53, 50]
len(heap)            # 4

items = [54, 53, 55, 52, 50]
build_heap(items)    # in place: items is now a max-heap
heapsort(items)      # in place: [50, 52, 53, 54, 55]
```

`MaxHeap` also accepts an iterable of starting values. `delete_root` raises
`IndexError` on an empty heap. `heapify(items, n, i)` sifts `items[i]` down
within the first `n` items, using zero-based indexes.

## Sorting

Both functions take any iterable and return a new ascending list.

```python
from dsakit.sorting import merge_sort, quick_sort

merge_sort([8, 2, 4, 7, 9, 12, 1, 8, 8, 34])  # [1, 2, 4, 7, 8, 8, 8, 9, 12, 34]
quick_sort([8, 2, 4, 7, 9, 12, 1, 8, 8, 34])  # same result
```

`quick_sort` uses the first element of each range as the pivot.

## Linked lists

```python
from dsakit.linked_list import SinglyLinkedList, DoublyLinkedList

items = SinglyLinkedList([11])
items.push_front(18)
items.push_back(14)
list(items)            # [18, 11, 14]

both_ways = DoublyLinkedList()
both_ways.push_back(11)
both_ways.push_front(18)
list(both_ways)            # [18, 11]
list(reversed(both_ways))  # [11, 18]
```

Both lists support `len()` and can be built from an iterable.

## Stacks and queues

```python
from dsakit.stacks import ArrayStack, LinkedStack
from dsakit.queues import ArrayQueue, LinkedQueue
from dsakit.adapters import StackQueue, QueueStack

stack = LinkedStack()
stack.push(8)
stack.push(78)
stack.peek()   # 78
stack.pop()    # 78

queue = LinkedQueue([8, 43, 988])
queue.dequeue()  # 8
queue.front()    # 43
queue.rear()     # 988

fifo = StackQueue()
fifo.enqueue(2)
fifo.enqueue(3)
fifo.dequeue()   # 2

lifo = QueueStack()
lifo.push(2)
lifo.push(3)
lifo.pop()       # 3
```

`ArrayStack` and `LinkedStack` offer `push`, `pop`, `peek`, `is_empty` and
`len()`. `ArrayQueue` offers `enqueue`, `dequeue`, `front`, `is_empty` and
`len()`; `LinkedQueue` adds `rear`. `StackQueue` and `QueueStack` offer
`is_empty` and `len()` besides their adding and removing methods. Taking from,
or looking at, an empty stack or queue raises `IndexError`.

## What it does not do

dsakit is a library only. It has no command-line program, does not read input
from the terminal and prints nothing; build structures by calling the
functions and classes above.

## Running the tests

```
pip install .[test]
pytest
```