"""Polynomial evaluation, differentiation and root finding.

A polynomial is a sequence of coefficients from the highest power down,
so ``[p0, p1, ..., pk]`` means ``p0*x**k + ... + pk``.
"""

from __future__ import annotations

from collections.abc import Sequence

TOLERANCE = 1e-6
MAX_ITERATIONS = 100


def horner(p: Sequence[float], x: float) -> float:
    """Evaluate the polynomial ``p`` at ``x`` by Horner's method."""
    result = 0.0
    for coefficient in p:
        result = result * x + coefficient
    return result


def derivative(p: Sequence[float]) -> list[float]:
    """Return the coefficients of the derivative of ``p``."""
    degree = len(p) - 1
    return [(degree - i) * coefficient for i, coefficient in enumerate(p[:-1])]


def newton(p: Sequence[float], x0: float) -> float:
    """Approximate a real root of ``p`` by Newton's method starting at ``x0``.

    Stops when a step is smaller than the tolerance, after the iteration
    limit, or when the derivative vanishes, returning the current estimate.
    """
    d = derivative(p)
    x = x0
    for _ in range(MAX_ITERATIONS):
        fx = horner(p, x)
        fpx = horner(d, x)
        if fpx == 0:
            return x
        x_new = x - fx / fpx
        if abs(x_new - x) < TOLERANCE:
            return x_new
        x = x_new
    return x