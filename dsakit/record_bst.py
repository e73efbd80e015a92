"""A record store backed by a binary search tree with running statistics."""

from __future__ import annotations

import math

from dsakit.bst import BinarySearchTree
from dsakit.records import Record


class RecordStore:
    """Records in a search tree together with count, mean and standard deviation.

    The statistics are updated incrementally on each addition and removal.
    """

    def __init__(self) -> None:
        self.tree = BinarySearchTree()
        self.count = 0
        self.mean = 0.0
        self.stddev = 0.0

    def add_record(self, record: Record) -> None:
        """Insert ``record`` and update the statistics."""
        self.tree.insert(record)
        self.count += 1
        old_mean = self.mean
        old_stddev = self.stddev
        self.mean = old_mean + (record.score - old_mean) / self.count
        if self.count > 1:
            delta = record.score - old_mean
            delta2 = record.score - self.mean
            variance = (old_stddev * old_stddev * (self.count - 1) + delta * delta2) / self.count
            self.stddev = math.sqrt(max(variance, 0.0))
        else:
            self.stddev = 0.0

    def remove_record(self, name: str) -> None:
        """Remove the record named ``name`` and update the statistics.

        Nothing happens if there is no such record.
        """
        if self.count == 0:
            return
        record = self.tree.search(name)
        if record is None:
            return
        score = record.score
        self.tree.delete(name)
        if self.count == 1:
            self.clear()
            return
        self.count -= 1
        old_mean = self.mean
        old_stddev = self.stddev
        self.mean = (old_mean * (self.count + 1) - score) / self.count
        if self.count > 1:
            delta = score - old_mean
            delta2 = score - self.mean
            variance = (old_stddev * old_stddev * (self.count + 1) - delta * delta2) / self.count
            self.stddev = math.sqrt(max(variance, 0.0))
        else:
            self.stddev = 0.0

    def clear(self) -> None:
        """Remove every record and reset the statistics."""
        self.tree.clear()
        self.count = 0
        self.mean = 0.0
        self.stddev = 0.0