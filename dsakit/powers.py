"""Integer powers and sums of powers with 32-bit signed overflow detection."""

from __future__ import annotations

INT_MAX = 2_147_483_647


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def power_overflow(b: int, n: int) -> bool:
    """Tell whether ``b`` to the power ``n`` overflows a 32-bit signed integer.

    A negative exponent counts as overflow unless the base is 0, 1 or -1.
    """
    if n == 0 or b in (0, 1, -1):
        return False
    if n < 0:
        return True
    limit = _trunc_div(INT_MAX, b)
    result = 1
    for _ in range(n):
        if result > limit:
            return True
        result *= b
    return False


def power(b: int, n: int) -> int:
    """Return ``b`` to the power ``n``.

    Raises OverflowError if the result does not fit a 32-bit signed integer.
    """
    if power_overflow(b, n):
        raise OverflowError(f"{b}**{n} overflows a 32-bit integer")
    return b**n if n > 0 else 1


def power_sum(b: int, n: int) -> int:
    """Return ``b**0 + b**1 + ... + b**n``.

    Raises OverflowError if ``b**n`` does not fit a 32-bit signed integer.
    """
    if power_overflow(b, n):
        raise OverflowError(f"{b}**{n} overflows a 32-bit integer")
    if b == 1:
        return n + 1
    if b == 0:
        return 1
    return sum(b**i for i in range(n + 1))