"""Classic data structures and algorithms: binary trees, binary search trees, heaps, sorting, linked lists, stacks and queues."""

__version__ = "0.1.0"

__all__ = [
    "adapters",
    "binary_tree",
    "bst",
    "heap",
    "linked_list",
    "queues",
    "sorting",
    "stacks",
]