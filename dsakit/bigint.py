"""Arbitrary-length non-negative decimal integers stored digit by digit."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import zip_longest

from dsakit.dllist import DoublyLinkedList


class BigInt:
    """A decimal integer held as a doubly linked list of digits.

    Digits are kept exactly as given, leading zeros included.
    """

    def __init__(self, digits: str = "") -> None:
        if not isinstance(digits, str):
            raise TypeError(f"expected a digit string, got {type(digits).__name__}")
        self._digits: DoublyLinkedList[int] = DoublyLinkedList()
        for ch in digits:
            if not "0" <= ch <= "9":
                raise ValueError(f"invalid digit {ch!r} in {digits!r}")
            self._digits.insert_end(ord(ch) - ord("0"))

    def __add__(self, other: object) -> BigInt:
        if not isinstance(other, BigInt):
            return NotImplemented
        result = BigInt()
        carry = 0
        for a, b in zip_longest(
            reversed(self._digits), reversed(other._digits), fillvalue=0
        ):
            carry, digit = divmod(a + b + carry, 10)
            result._digits.insert_start(digit)
        if carry:
            result._digits.insert_start(carry)
        return result

    def __str__(self) -> str:
        return "".join(str(d) for d in self._digits)

    def __repr__(self) -> str:
        return f"BigInt({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return list(self._digits) == list(other._digits)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[int]:
        return iter(self._digits)

    def __len__(self) -> int:
        return len(self._digits)


def bigint_fibonacci(n: int) -> BigInt:
    """Return the ``n``-th Fibonacci number as a BigInt."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return BigInt("0")
    a, b = BigInt("0"), BigInt("1")
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b