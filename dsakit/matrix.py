"""Vector and square-matrix arithmetic on plain Python sequences."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vector = Sequence[float]
Matrix = Sequence[Sequence[float]]


def norm(v: Vector) -> float:
    """Return the Euclidean norm of ``v``."""
    return math.sqrt(sum(x * x for x in v))


def dot_product(v1: Vector, v2: Vector) -> float:
    """Return the dot product of two vectors of equal length."""
    if len(v1) != len(v2):
        raise ValueError("vectors must have the same length")
    return sum(a * b for a, b in zip(v1, v2))


def _check_square(m: Matrix, n: int) -> None:
    if len(m) != n or any(len(row) != n for row in m):
        raise ValueError(f"expected a {n}x{n} matrix")


def matrix_multiply_vector(m: Matrix, v: Vector) -> list[float]:
    """Return the product of the n-by-n matrix ``m`` and the vector ``v``."""
    _check_square(m, len(v))
    return [dot_product(row, v) for row in m]


def matrix_multiply_matrix(m1: Matrix, m2: Matrix) -> list[list[float]]:
    """Return the product of two n-by-n matrices."""
    n = len(m1)
    _check_square(m1, n)
    _check_square(m2, n)
    columns = list(zip(*m2))
    return [[dot_product(row, col) for col in columns] for row in m1]