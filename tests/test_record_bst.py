import statistics

import pytest

from dsakit.record_bst import RecordStore
from dsakit.records import Record

DATA = [("ann", 70.0), ("bob", 85.0), ("cat", 92.5), ("dan", 60.0), ("eve", 77.0)]


@pytest.fixture
def store():
    s = RecordStore()
    for name, score in DATA:
        s.add_record(Record(name, score))
    return s


def test_stats_after_adds(store):
    scores = [s for _, s in DATA]
    assert store.count == len(DATA)
    assert store.mean == pytest.approx(statistics.fmean(scores))
    assert store.stddev == pytest.approx(statistics.pstdev(scores))


def test_records_in_tree(store):
    assert [r.name for r in store.tree] == [n for n, _ in DATA]


def test_single_record():
    s = RecordStore()
    s.add_record(Record("solo", 42.0))
    assert s.count == 1
    assert s.mean == 42.0
    assert s.stddev == 0.0


def test_remove_updates_stats(store):
    store.remove_record("cat")
    remaining = [s for n, s in DATA if n != "cat"]
    assert store.count == len(remaining)
    assert store.mean == pytest.approx(statistics.fmean(remaining))
    assert store.stddev == pytest.approx(statistics.pstdev(remaining), abs=1e-6)
    assert store.tree.search("cat") is None


def test_remove_down_to_one(store):
    for name, _ in DATA[1:]:
        store.remove_record(name)
    assert store.count == 1
    assert store.mean == pytest.approx(DATA[0][1])
    assert store.stddev == 0.0


def test_remove_last_resets(store):
    for name, _ in DATA:
        store.remove_record(name)
    assert (store.count, store.mean, store.stddev) == (0, 0.0, 0.0)
    assert list(store.tree) == []


def test_remove_missing_no_change(store):
    before = (store.count, store.mean, store.stddev)
    store.remove_record("nobody")
    assert (store.count, store.mean, store.stddev) == before


def test_remove_from_empty():
    s = RecordStore()
    s.remove_record("x")
    assert s.count == 0


def test_clear(store):
    store.clear()
    assert (store.count, store.mean, store.stddev) == (0, 0.0, 0.0)
    assert store.tree.root is None