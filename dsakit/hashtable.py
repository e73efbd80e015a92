"""A chained hash table mapping string names to integer values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class Entry:
    """A name and its integer value."""

    name: str
    value: int


def hash_key(key: str, size: int) -> int:
    """Return the sum of the character codes of ``key`` modulo ``size``."""
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    return sum(ord(ch) for ch in key) % size


class HashTable:
    """A fixed number of buckets, each a chain of entries.

    New entries go to the front of their bucket's chain.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self._size = size
        self._buckets: list[list[Entry]] = [[] for _ in range(size)]
        self._count = 0

    @property
    def size(self) -> int:
        """Number of buckets."""
        return self._size

    def _bucket(self, name: str) -> list[Entry]:
        return self._buckets[hash_key(name, self._size)]

    def insert(self, name: str, value: int) -> bool:
        """Store ``value`` under ``name``.

        Returns True if a new entry was added, False if an existing entry
        had its value updated.
        """
        bucket = self._bucket(name)
        for entry in bucket:
            if entry.name == name:
                entry.value = value
                return False
        bucket.insert(0, Entry(name, value))
        self._count += 1
        return True

    def search(self, name: str) -> Optional[Entry]:
        """Return the entry for ``name``, or None."""
        return next((e for e in self._bucket(name) if e.name == name), None)

    def delete(self, name: str) -> None:
        """Remove the entry for ``name``.

        Raises KeyError if there is none.
        """
        bucket = self._bucket(name)
        for i, entry in enumerate(bucket):
            if entry.name == name:
                del bucket[i]
                self._count -= 1
                return
        raise KeyError(name)

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.search(name) is not None

    def __iter__(self) -> Iterator[Entry]:
        """Yield entries bucket by bucket, each chain from front to back."""
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return self._count