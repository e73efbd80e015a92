"""General binary trees: properties, traversals, searches and level-order insertion."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class TreeProps(NamedTuple):
    """Number of nodes and height of a tree."""

    order: int
    height: int


def tree_property(root: Optional[TreeNode]) -> TreeProps:
    """Return the number of nodes and the height of the tree at ``root``."""
    if root is None:
        return TreeProps(0, 0)
    left = tree_property(root.left)
    right = tree_property(root.right)
    return TreeProps(1 + left.order + right.order, 1 + max(left.height, right.height))


def preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield node data in pre-order."""
    if root is not None:
        yield root.data
        yield from preorder(root.left)
        yield from preorder(root.right)


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield node data in in-order."""
    if root is not None:
        yield from inorder(root.left)
        yield root.data
        yield from inorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield node data in post-order."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.data


def _level_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def bforder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield node data in breadth-first order, left to right."""
    return (node.data for node in _level_nodes(root))


def bfs(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Return the first node holding ``key`` in breadth-first order, or None."""
    return next((node for node in _level_nodes(root) if node.data == key), None)


def dfs(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Return the first node holding ``key`` in depth-first pre-order, or None."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.data == key:
            return node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return None


def insert_tree(root: Optional[TreeNode], val: Any) -> TreeNode:
    """Insert ``val`` at the first free place in level order; return the root."""
    new = TreeNode(val)
    if root is None:
        return new
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = new
            break
        queue.append(node.left)
        if node.right is None:
            node.right = new
            break
        queue.append(node.right)
    return root