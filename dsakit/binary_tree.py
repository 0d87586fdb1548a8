"""Binary tree construction, traversals and lowest common ancestor."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from a pre-order sequence where -1 marks a missing child.

    Raises ValueError if the sequence ends before the tree is complete.
    """
    stream = iter(values)

    def build() -> TreeNode | None:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("input ended before the tree was complete") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, node, right order."""
    return [node.data for node in _inorder_nodes(root)]


def preorder(root: TreeNode | None) -> list[int]:
    """Return the values in node, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, right, node order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values level by level, each level left to right."""
    levels: list[list[int]] = []
    current = deque([root]) if root is not None else deque()
    while current:
        level: list[int] = []
        for _ in range(len(current)):
            node = current.popleft()
            level.append(node.data)
            if node.left is not None:
                current.append(node.left)
            if node.right is not None:
                current.append(node.right)
        levels.append(level)
    return levels


def lowest_common_ancestor(
    root: TreeNode | None, p: int, q: int
) -> TreeNode | None:
    """Return the lowest node whose subtree holds the values p and q.

    Nodes are matched by value. If only one of the values is present its
    node is returned; if neither is present the result is None.
    """
    if root is None:
        return None
    if root.data == p or root.data == q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right