"""A set of strings stored in an AVL tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dsakit.avl import AVLTree
from dsakit.records import Record


class AVLSet:
    """A set of strings kept in sorted order in a balanced tree."""

    def __init__(self, elements: Iterable[str] = ()) -> None:
        self.tree = AVLTree()
        for element in elements:
            self.add(element)

    def __len__(self) -> int:
        return len(self.tree)

    def __contains__(self, element: object) -> bool:
        return isinstance(element, str) and self.tree.search(element) is not None

    def __iter__(self) -> Iterator[str]:
        """Yield the elements in increasing order."""
        return (record.name for record in self.tree)

    def add(self, element: str) -> None:
        """Add ``element``; adding an existing element changes nothing."""
        self.tree.insert(Record(element, 0.0))

    def remove(self, element: str) -> None:
        """Remove ``element`` if present; a missing element is ignored."""
        self.tree.delete(element)

    def clear(self) -> None:
        """Remove every element."""
        self.tree.clear()