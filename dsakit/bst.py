"""A binary search tree of score records keyed by name."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from dsakit.records import Record


@dataclass
class BSTNode:
    """A tree node holding one record and links to its two subtrees."""

    data: Record
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


def _extract_smallest(node: BSTNode) -> tuple[Optional[BSTNode], BSTNode]:
    """Detach the leftmost node; return the new subtree root and that node."""
    if node.left is None:
        return node.right, node
    node.left, smallest = _extract_smallest(node.left)
    return node, smallest


def _delete(node: Optional[BSTNode], key: str) -> Optional[BSTNode]:
    if node is None:
        return None
    if key < node.data.name:
        node.left = _delete(node.left, key)
    elif key > node.data.name:
        node.right = _delete(node.right, key)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        node.right, smallest = _extract_smallest(node.right)
        node.data = smallest.data
    return node


class BinarySearchTree:
    """Records ordered by name; a name already present is not inserted again."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def search(self, key: str) -> Optional[Record]:
        """Return the record named ``key``, or None."""
        node = self.root
        while node is not None:
            if key == node.data.name:
                return node.data
            node = node.left if key < node.data.name else node.right
        return None

    def insert(self, record: Record) -> None:
        """Insert ``record`` unless a record with its name is already present."""
        new = BSTNode(record)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if record.name < node.data.name:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            elif record.name > node.data.name:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                return

    def delete(self, key: str) -> None:
        """Remove the record named ``key``; nothing happens if it is absent."""
        self.root = _delete(self.root, key)

    def extract_smallest(self) -> Optional[Record]:
        """Remove and return the record with the smallest name, or None if empty."""
        if self.root is None:
            return None
        self.root, node = _extract_smallest(self.root)
        node.left = node.right = None
        return node.data

    def clear(self) -> None:
        """Remove every record."""
        self.root = None

    def __iter__(self) -> Iterator[Record]:
        """Yield records in increasing order of name."""
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right