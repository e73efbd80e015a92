"""Real roots of quadratic equations ``a*x*x + b*x + c = 0``."""

from __future__ import annotations

import math
from enum import IntEnum

EPSILON = 1e-6


class SolutionType(IntEnum):
    """Kind of solution a quadratic equation has."""

    NOT_QUADRATIC = 0
    ONE_REAL = 1
    TWO_REAL = 2
    COMPLEX = 3


def solution_type(a: float, b: float, c: float) -> SolutionType:
    """Classify the solutions of ``a*x*x + b*x + c = 0``."""
    if abs(a) < EPSILON:
        return SolutionType.NOT_QUADRATIC
    disc = b * b - 4 * a * c
    if abs(disc) < EPSILON:
        return SolutionType.ONE_REAL
    if disc > 0:
        return SolutionType.TWO_REAL
    return SolutionType.COMPLEX


def _real_roots(a: float, b: float, c: float) -> tuple[float, float]:
    kind = solution_type(a, b, c)
    if kind is SolutionType.ONE_REAL:
        root = -b / (2 * a)
        return root, root
    if kind is SolutionType.TWO_REAL:
        sq = math.sqrt(b * b - 4 * a * c)
        r1 = (-b + sq) / (2 * a)
        r2 = (-b - sq) / (2 * a)
        return min(r1, r2), max(r1, r2)
    raise ValueError(f"equation has no real roots ({kind.name.lower()})")


def real_root_big(a: float, b: float, c: float) -> float:
    """Return the unique or the larger real root.

    Raises ValueError if the equation is not quadratic or has complex roots.
    """
    return _real_roots(a, b, c)[1]


def real_root_small(a: float, b: float, c: float) -> float:
    """Return the unique or the smaller real root.

    Raises ValueError if the equation is not quadratic or has complex roots.
    """
    return _real_roots(a, b, c)[0]