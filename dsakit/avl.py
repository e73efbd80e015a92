"""A self-balancing AVL tree of score records keyed by name."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from dsakit.records import Record


@dataclass(eq=False)
class AVLNode:
    """A tree node holding one record, its subtree height and two children."""

    data: Record
    height: int = 1
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None


def height(node: Optional[AVLNode]) -> int:
    """Return the height of the subtree at ``node``; an empty tree has height 0."""
    return 0 if node is None else node.height


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def balance_factor(node: Optional[AVLNode]) -> int:
    """Return the left subtree height minus the right subtree height."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rotate_left(node: AVLNode) -> AVLNode:
    """Rotate left at ``node`` and return the node that takes its place.

    Raises ValueError if ``node`` has no right child.
    """
    if node is None or node.right is None:
        raise ValueError("left rotation needs a node with a right child")
    new_root = node.right
    node.right = new_root.left
    new_root.left = node
    _update_height(node)
    _update_height(new_root)
    return new_root


def rotate_right(node: AVLNode) -> AVLNode:
    """Rotate right at ``node`` and return the node that takes its place.

    Raises ValueError if ``node`` has no left child.
    """
    if node is None or node.left is None:
        raise ValueError("right rotation needs a node with a left child")
    new_root = node.left
    node.left = new_root.right
    new_root.right = node
    _update_height(node)
    _update_height(new_root)
    return new_root


def _insert(node: Optional[AVLNode], record: Record) -> AVLNode:
    if node is None:
        return AVLNode(record)
    name = record.name
    if name < node.data.name:
        node.left = _insert(node.left, record)
    elif name > node.data.name:
        node.right = _insert(node.right, record)
    else:
        return node

    _update_height(node)
    balance = balance_factor(node)
    if balance > 1 and name < node.left.data.name:
        return rotate_right(node)
    if balance < -1 and name > node.right.data.name:
        return rotate_left(node)
    if balance > 1 and name > node.left.data.name:
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if balance < -1 and name < node.right.data.name:
        node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


def _delete(node: Optional[AVLNode], key: str) -> Optional[AVLNode]:
    if node is None:
        return None
    if key < node.data.name:
        node.left = _delete(node.left, key)
    elif key > node.data.name:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        child = node.left if node.left is not None else node.right
        if child is None:
            return None
        node = child
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.data = successor.data
        node.right = _delete(node.right, successor.data.name)

    _update_height(node)
    balance = balance_factor(node)
    if balance > 1 and balance_factor(node.left) >= 0:
        return rotate_right(node)
    if balance > 1 and balance_factor(node.left) < 0:
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if balance < -1 and balance_factor(node.right) <= 0:
        return rotate_left(node)
    if balance < -1 and balance_factor(node.right) > 0:
        node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


class AVLTree:
    """Records ordered by name and kept height-balanced.

    A record whose name is already present is not inserted again.
    """

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None

    def insert(self, record: Record) -> None:
        """Insert ``record`` unless a record with its name is already present."""
        self.root = _insert(self.root, record)

    def delete(self, key: str) -> None:
        """Remove the record named ``key``; nothing happens if it is absent."""
        self.root = _delete(self.root, key)

    def search(self, key: str) -> Optional[Record]:
        """Return the record named ``key``, or None."""
        node = self.root
        while node is not None:
            if key == node.data.name:
                return node.data
            node = node.left if key < node.data.name else node.right
        return None

    def clear(self) -> None:
        """Remove every record."""
        self.root = None

    def __iter__(self) -> Iterator[Record]:
        """Yield records in increasing order of name."""
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)