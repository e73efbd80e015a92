import statistics

import pytest

from dsakit.avl import AVLTree
from dsakit.record_avl import AVLRecordStore, avl_merge
from dsakit.records import Record

SCORES = {"ann": 72.0, "bob": 88.5, "cat": 64.0, "dan": 91.0, "eve": 55.5}


def _store(data):
    store = AVLRecordStore()
    for name, score in data.items():
        store.add_record(Record(name, score))
    return store


def test_add_updates_statistics():
    store = _store(SCORES)
    values = list(SCORES.values())
    assert store.count == len(values)
    assert store.mean == pytest.approx(statistics.fmean(values))
    assert store.stddev == pytest.approx(statistics.pstdev(values), abs=1e-6)
    assert [r.name for r in store.tree] == sorted(SCORES)


def test_single_record_has_zero_stddev():
    store = _store({"solo": 42.0})
    assert store.count == 1
    assert store.mean == 42.0
    assert store.stddev == 0.0


def test_duplicate_add_raises_and_keeps_stats():
    store = _store(SCORES)
    mean, stddev = store.mean, store.stddev
    with pytest.raises(ValueError):
        store.add_record(Record("bob", 10.0))
    assert store.count == len(SCORES)
    assert store.mean == mean
    assert store.stddev == stddev


def test_remove_updates_statistics():
    store = _store(SCORES)
    store.remove_record("dan")
    remaining = [v for k, v in SCORES.items() if k != "dan"]
    assert store.count == len(remaining)
    assert store.mean == pytest.approx(statistics.fmean(remaining))
    assert store.stddev == pytest.approx(statistics.pstdev(remaining), abs=1e-6)
    assert store.tree.search("dan") is None


def test_remove_down_to_one_and_zero():
    store = _store({"ann": 70.0, "bob": 80.0})
    store.remove_record("ann")
    assert store.count == 1
    assert store.mean == pytest.approx(80.0)
    assert store.stddev == 0.0
    store.remove_record("bob")
    assert store.count == 0
    assert store.mean == 0.0
    assert store.stddev == 0.0


def test_remove_missing_raises():
    store = _store(SCORES)
    with pytest.raises(KeyError):
        store.remove_record("nobody")
    assert store.count == len(SCORES)


def test_merge_combines_statistics_and_clears_source():
    first = {"ann": 72.0, "bob": 88.5, "cat": 64.0}
    second = {"dan": 91.0, "eve": 55.5, "fay": 77.0}
    dest = _store(first)
    source = _store(second)
    dest.merge(source)
    combined = list(first.values()) + list(second.values())
    assert dest.count == len(combined)
    assert dest.mean == pytest.approx(statistics.fmean(combined))
    assert dest.stddev == pytest.approx(statistics.pstdev(combined), abs=1e-5)
    assert [r.name for r in dest.tree] == sorted({**first, **second})
    assert source.count == 0
    assert source.tree.root is None


def test_merge_empty_source_changes_nothing():
    dest = _store(SCORES)
    mean = dest.mean
    dest.merge(AVLRecordStore())
    assert dest.count == len(SCORES)
    assert dest.mean == mean


def test_avl_merge_leaves_source_unchanged():
    dest = AVLTree()
    source = AVLTree()
    for name in ("m", "c", "x"):
        source.insert(Record(name, 1.0))
    dest.insert(Record("a", 2.0))
    avl_merge(dest, source)
    assert [r.name for r in dest] == ["a", "c", "m", "x"]
    assert [r.name for r in source] == ["c", "m", "x"]


def test_clear_resets_everything():
    store = _store(SCORES)
    store.clear()
    assert store.count == 0
    assert store.mean == 0.0
    assert store.stddev == 0.0
    assert list(store.tree) == []