"""A doubly linked list with insertion and deletion at both ends."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Optional[_Node[T]] = None
        self.next: Optional[_Node[T]] = None


class DoublyLinkedList(Generic[T]):
    """A sequence of values linked in both directions."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._start: Optional[_Node[T]] = None
        self._end: Optional[_Node[T]] = None
        self._length = 0
        for value in values:
            self.insert_end(value)

    def insert_start(self, value: T) -> None:
        """Put ``value`` in front of the first element."""
        node = _Node(value)
        node.next = self._start
        if self._start is None:
            self._end = node
        else:
            self._start.prev = node
        self._start = node
        self._length += 1

    def insert_end(self, value: T) -> None:
        """Put ``value`` after the last element."""
        node = _Node(value)
        node.prev = self._end
        if self._end is None:
            self._start = node
        else:
            self._end.next = node
        self._end = node
        self._length += 1

    def delete_start(self) -> Optional[T]:
        """Remove the first element and return its value; do nothing if empty."""
        node = self._start
        if node is None:
            return None
        self._start = node.next
        if self._start is None:
            self._end = None
        else:
            self._start.prev = None
        self._length -= 1
        return node.value

    def delete_end(self) -> Optional[T]:
        """Remove the last element and return its value; do nothing if empty."""
        node = self._end
        if node is None:
            return None
        self._end = node.prev
        if self._end is None:
            self._start = None
        else:
            self._end.next = None
        self._length -= 1
        return node.value

    def clear(self) -> None:
        """Remove every element."""
        self._start = None
        self._end = None
        self._length = 0

    def __iter__(self) -> Iterator[T]:
        node = self._start
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._end
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"