"""Score records: letter grades, import, summary statistics and reports."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from operator import attrgetter
from typing import TextIO

from dsakit.sorting import hybrid_sort

NAME_MAX_LENGTH = 19

_GRADE_TABLE = (
    (90.0, "A+"),
    (85.0, "A"),
    (80.0, "A-"),
    (77.0, "B+"),
    (73.0, "B"),
    (70.0, "B-"),
    (67.0, "C+"),
    (63.0, "C"),
    (60.0, "C-"),
    (57.0, "D+"),
    (53.0, "D"),
    (50.0, "D-"),
)

_RECORD = re.compile(
    r"([^,]{1,%d}),\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*"
    % NAME_MAX_LENGTH
)


@dataclass
class Record:
    """A person's name and score."""

    name: str
    score: float


@dataclass
class Stats:
    """Summary statistics of a set of scores."""

    count: int
    mean: float
    stddev: float
    median: float


def grade(score: float) -> str:
    """Return the letter grade for a percentage score."""
    for threshold, letter in _GRADE_TABLE:
        if score >= threshold:
            return letter
    return "F"


def import_data(fp: TextIO) -> list[Record]:
    """Read ``name,score`` entries from ``fp``.

    Reading stops at the first entry that does not match, including a
    name longer than ``NAME_MAX_LENGTH`` characters.
    """
    text = fp.read()
    records: list[Record] = []
    pos = 0
    while (match := _RECORD.match(text, pos)) is not None:
        records.append(Record(match.group(1), float(match.group(2))))
        pos = match.end()
    return records


def process_data(records: list[Record]) -> Stats:
    """Return count, mean, population standard deviation and median of scores."""
    count = len(records)
    if count < 1:
        return Stats(0, 0.0, 0.0, 0.0)
    scores = [r.score for r in records]
    mean = sum(scores) / count
    variance = sum(s * s for s in scores) / count - mean * mean
    stddev = math.sqrt(max(variance, 0.0))
    hybrid_sort(scores)
    mid = count // 2
    median = scores[mid] if count % 2 else (scores[mid - 1] + scores[mid]) / 2.0
    return Stats(count, mean, stddev, median)


def report_data(fp: TextIO, records: list[Record], stats: Stats) -> None:
    """Write the statistics and the graded records, highest score first, to ``fp``.

    Raises ValueError if ``stats`` describes no records.
    """
    if stats.count < 1:
        raise ValueError("no records to report")
    ordered = list(records[: stats.count])
    hybrid_sort(ordered, key=attrgetter("score"))
    ordered.reverse()
    fp.write("stats:value\n")
    fp.write(f"count:{stats.count}\n")
    fp.write(f"mean:{stats.mean:.1f}\n")
    fp.write(f"stddev:{stats.stddev:.1f}\n")
    fp.write(f"median:{stats.median:.1f}\n\n")
    fp.write("name:score,grade\n")
    for record in ordered:
        fp.write(f"{record.name}:{record.score:.1f},{grade(record.score)}\n")