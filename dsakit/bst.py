"""Binary search tree operations on TreeNode trees."""

from __future__ import annotations

from collections.abc import Iterable

from .binary_tree import NULL_MARKER, TreeNode, _inorder_nodes


def insert(root: TreeNode | None, value: int) -> TreeNode:
    """Insert value and return the root. Equal values go to the left."""
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value > current.data:
            if current.right is None:
                current.right = node
                return root
            current = current.right
        else:
            if current.left is None:
                current.left = node
                return root
            current = current.left


def build_bst(values: Iterable[int]) -> TreeNode | None:
    """Insert values in order, stopping at the first -1."""
    root: TreeNode | None = None
    for value in values:
        if value == NULL_MARKER:
            break
        root = insert(root, value)
    return root


def search(root: TreeNode | None, value: int) -> bool:
    """Return True if value is in the tree."""
    current = root
    while current is not None:
        if current.data == value:
            return True
        current = current.left if current.data > value else current.right
    return False


def min_node(root: TreeNode | None) -> TreeNode:
    """Return the node holding the smallest value."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    current = root
    while current.left is not None:
        current = current.left
    return current


def max_node(root: TreeNode | None) -> TreeNode:
    """Return the node holding the largest value."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    current = root
    while current.right is not None:
        current = current.right
    return current


def delete(root: TreeNode | None, value: int) -> TreeNode | None:
    """Remove one occurrence of value and return the new root.

    A node with two children takes the smallest value of its right subtree.
    """
    if root is None:
        return None
    if root.data == value:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_node(root.right).data
        root.data = successor
        root.right = delete(root.right, successor)
        return root
    if root.data > value:
        root.left = delete(root.left, value)
    else:
        root.right = delete(root.right, value)
    return root


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the k-th smallest value, counting from 1."""
    if k >= 1:
        for position, node in enumerate(_inorder_nodes(root), start=1):
            if position == k:
                return node.data
    raise IndexError(f"tree has no element number {k}")