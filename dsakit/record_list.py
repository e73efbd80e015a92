"""A list of score records kept in order of name."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from operator import attrgetter
from typing import Optional

from dsakit.records import Record

_name = attrgetter("name")


class SortedRecordList:
    """Records ordered by name, allowing repeated names."""

    def __init__(self) -> None:
        self._records: list[Record] = []

    def search(self, name: str) -> Optional[Record]:
        """Return the first record with ``name``, or None."""
        return next((r for r in self._records if r.name == name), None)

    def insert(self, name: str, score: float) -> None:
        """Insert a new record at its place in name order.

        A name equal to the first record's goes after it; a name equal to any
        later record's goes before that record.
        """
        records = self._records
        if not records or name < records[0].name:
            position = 0
        else:
            position = max(1, bisect_left(records, name, key=_name))
        records.insert(position, Record(name, score))

    def delete(self, name: str) -> None:
        """Remove the first record with ``name``.

        Raises KeyError if there is none.
        """
        for i, record in enumerate(self._records):
            if record.name == name:
                del self._records[i]
                return
        raise KeyError(name)

    def clear(self) -> None:
        """Remove every record."""
        self._records.clear()

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)