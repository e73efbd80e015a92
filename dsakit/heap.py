"""A binary min-heap of key/value items with a growing and shrinking capacity."""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass, replace
from typing import Optional

DEFAULT_CAPACITY = 4


@dataclass(frozen=True)
class HeapItem:
    """An integer key used for ordering and its associated value."""

    key: int
    value: int


class MinHeap:
    """A min-heap ordered by item key.

    The capacity doubles when an insertion finds the heap full, and halves
    when an extraction leaves at most a quarter of it used (never below 4).
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: list[HeapItem] = []

    @property
    def capacity(self) -> int:
        """Current capacity of the heap array."""
        return self._capacity

    @property
    def items(self) -> tuple[HeapItem, ...]:
        """The heap array in its current order."""
        return tuple(self._items)

    def _sift_up(self, index: int) -> int:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index].key < items[parent].key:
                items[index], items[parent] = items[parent], items[index]
                index = parent
            else:
                break
        return index

    def _sift_down(self, index: int) -> int:
        items = self._items
        n = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < n and items[child].key < items[smallest].key:
                    smallest = child
            if smallest == index:
                return index
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def insert(self, item: HeapItem) -> None:
        """Add ``item``, doubling the capacity first if the heap is full."""
        if len(self._items) >= self._capacity:
            self._capacity *= 2
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def find_min(self) -> HeapItem:
        """Return the item with the smallest key.

        Raises IndexError if the heap is empty.
        """
        if not self._items:
            raise IndexError("find_min from an empty heap")
        return self._items[0]

    def extract_min(self) -> HeapItem:
        """Remove and return the item with the smallest key.

        Raises IndexError if the heap is empty.
        """
        if not self._items:
            raise IndexError("extract_min from an empty heap")
        smallest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        if len(self._items) <= self._capacity // 4 and self._capacity > 4:
            self._capacity //= 2
        return smallest

    def change_key(self, index: int, new_key: int) -> int:
        """Give the item at ``index`` a new key and return its new position.

        Raises IndexError if ``index`` is out of range.
        """
        if not 0 <= index < len(self._items):
            raise IndexError(f"heap index out of range: {index}")
        old_key = self._items[index].key
        self._items[index] = replace(self._items[index], key=new_key)
        if new_key < old_key:
            return self._sift_up(index)
        return self._sift_down(index)

    def search_value(self, val: int) -> Optional[int]:
        """Return the position of the first item whose value is ``val``, or None."""
        return next(
            (i for i, item in enumerate(self._items) if item.value == val), None
        )

    def __len__(self) -> int:
        return len(self._items)


def heap_sort(items: MutableSequence[HeapItem]) -> None:
    """Sort ``items`` in place in decreasing order of key."""
    if not items:
        return
    heap = MinHeap(len(items))
    for item in items:
        heap.insert(item)
    for i in range(len(items) - 1, -1, -1):
        items[i] = heap.extract_min()