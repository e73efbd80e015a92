"""Fibonacci numbers computed by several classic algorithms."""

from __future__ import annotations


def _check(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def iterative_fibonacci(n: int) -> int:
    """Return F(n) using a loop."""
    _check(n)
    prev, current = 0, 1
    for _ in range(n):
        prev, current = current, prev + current
    return prev


def recursive_fibonacci(n: int) -> int:
    """Return F(n) by plain recursion."""
    _check(n)
    if n <= 1:
        return n
    return recursive_fibonacci(n - 1) + recursive_fibonacci(n - 2)


def bottom_up_fibonacci(n: int) -> int:
    """Return F(n) by filling a table from F(0) upward."""
    _check(n)
    table = [0, 1]
    for i in range(2, n + 1):
        table.append(table[i - 2] + table[i - 1])
    return table[n]


def top_down_fibonacci(n: int) -> int:
    """Return F(n) by memoised recursion."""
    _check(n)
    memo: dict[int, int] = {0: 0, 1: 1}

    def fib(k: int) -> int:
        if k not in memo:
            memo[k] = fib(k - 1) + fib(k - 2)
        return memo[k]

    return fib(n)