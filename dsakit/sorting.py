"""In-place selection sort, quick sort and a hybrid of the two."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional

Key = Optional[Callable[[Any], Any]]

_SMALL_RANGE = 10


def _identity(x: Any) -> Any:
    return x


def _selection(items: MutableSequence[Any], lo: int, hi: int, key: Callable) -> None:
    for i in range(lo, hi):
        smallest = min(range(i, hi + 1), key=lambda j: key(items[j]))
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]


def _partition(items: MutableSequence[Any], lo: int, hi: int, key: Callable) -> int:
    pivot = key(items[hi])
    i = lo - 1
    for j in range(lo, hi):
        if key(items[j]) <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[hi] = items[hi], items[i + 1]
    return i + 1


def _quick(items: MutableSequence[Any], lo: int, hi: int, key: Callable) -> None:
    if lo >= hi:
        return
    p = _partition(items, lo, hi, key)
    _quick(items, lo, p - 1, key)
    _quick(items, p + 1, hi, key)


def _hybrid(items: MutableSequence[Any], lo: int, hi: int, key: Callable) -> None:
    if hi - lo < _SMALL_RANGE:
        _selection(items, lo, hi, key)
        return
    p = _partition(items, lo, hi, key)
    _hybrid(items, lo, p - 1, key)
    _hybrid(items, p + 1, hi, key)


def select_sort(items: MutableSequence[Any], key: Key = None) -> None:
    """Sort ``items`` in place in increasing order by selection sort."""
    _selection(items, 0, len(items) - 1, key or _identity)


def quick_sort(items: MutableSequence[Any], key: Key = None) -> None:
    """Sort ``items`` in place in increasing order by quick sort."""
    _quick(items, 0, len(items) - 1, key or _identity)


def hybrid_sort(items: MutableSequence[Any], key: Key = None) -> None:
    """Sort ``items`` in place, using quick sort on large ranges and
    selection sort on ranges of fewer than ten elements."""
    _hybrid(items, 0, len(items) - 1, key or _identity)