"""A record store backed by an AVL tree with running statistics."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Optional

from dsakit.avl import AVLNode, AVLTree
from dsakit.records import Record


def _preorder(node: Optional[AVLNode]) -> Iterator[Record]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current.data
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def avl_merge(dest: AVLTree, source: AVLTree) -> None:
    """Insert every record of ``source`` into ``dest``; ``source`` is not changed.

    Records are taken in pre-order; names already in ``dest`` are skipped.
    """
    for record in list(_preorder(source.root)):
        dest.insert(record)


def _sqrt(value: float) -> float:
    return math.sqrt(max(value, 0.0))


class AVLRecordStore:
    """Records in an AVL tree together with count, mean and standard deviation."""

    def __init__(self) -> None:
        self.tree = AVLTree()
        self.count = 0
        self.mean = 0.0
        self.stddev = 0.0

    def add_record(self, record: Record) -> None:
        """Insert ``record`` and update the statistics.

        Raises ValueError if a record with the same name exists.
        """
        if self.tree.search(record.name) is not None:
            raise ValueError(f"record exists: {record.name!r}")
        self.tree.insert(record)
        count, mean, stddev = self.count, self.mean, self.stddev
        self.count = count + 1
        self.mean = (mean * count + record.score) / (count + 1.0)
        if count > 0:
            self.stddev = _sqrt(
                record.score * record.score / (count + 1.0)
                + (stddev * stddev + mean * mean) * (count / (count + 1.0))
                - self.mean * self.mean
            )
        else:
            self.stddev = 0.0

    def remove_record(self, name: str) -> None:
        """Remove the record named ``name`` and update the statistics.

        Raises KeyError if there is no such record.
        """
        record = self.tree.search(name)
        if record is None:
            raise KeyError(name)
        score = record.score
        self.tree.delete(name)
        count, mean, stddev = self.count, self.mean, self.stddev
        self.count = count - 1
        if count >= 3:
            self.mean = (mean * count - score) / (count - 1.0)
            self.stddev = _sqrt(
                (stddev * stddev + mean * mean) * (count / (count - 1.0))
                - score * score / (count - 1.0)
                - self.mean * self.mean
            )
        elif count == 2:
            self.mean = mean * count - score
            self.stddev = 0.0
        else:
            self.mean = 0.0
            self.stddev = 0.0

    def merge(self, source: AVLRecordStore) -> None:
        """Move every record of ``source`` into this store and combine statistics.

        ``source`` is cleared afterwards. An empty ``source`` changes nothing.
        """
        if source.tree.root is None:
            return
        avl_merge(self.tree, source.tree)
        new_count = self.count + source.count
        if new_count == 0:
            return
        new_mean = (self.mean * self.count + source.mean * source.count) / new_count
        new_stddev = _sqrt(
            (
                (self.stddev * self.stddev + self.mean * self.mean) * self.count
                + (source.stddev * source.stddev + source.mean * source.mean)
                * source.count
            )
            / new_count
            - new_mean * new_mean
        )
        self.count = new_count
        self.mean = new_mean
        self.stddev = new_stddev
        source.clear()

    def clear(self) -> None:
        """Remove every record and reset the statistics."""
        self.tree.clear()
        self.count = 0
        self.mean = 0.0
        self.stddev = 0.0