"""Classification and conversion of single ASCII characters."""

from __future__ import annotations

from enum import IntEnum


class CharType(IntEnum):
    """Category of a character in an arithmetic expression."""

    OTHER = -1
    DIGIT = 0
    OPERATOR = 1
    LEFT_PAREN = 2
    RIGHT_PAREN = 3
    LETTER = 4


_OPERATORS = frozenset("+-*/%")


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _is_letter(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def char_type(c: str) -> CharType:
    """Return the category of the character ``c``."""
    _check_char(c)
    if "0" <= c <= "9":
        return CharType.DIGIT
    if c in _OPERATORS:
        return CharType.OPERATOR
    if c == "(":
        return CharType.LEFT_PAREN
    if c == ")":
        return CharType.RIGHT_PAREN
    if _is_letter(c):
        return CharType.LETTER
    return CharType.OTHER


def case_flip(c: str) -> str:
    """Swap the case of an English letter; any other character is returned unchanged."""
    _check_char(c)
    if "A" <= c <= "Z":
        return chr(ord(c) + 32)
    if "a" <= c <= "z":
        return chr(ord(c) - 32)
    return c


def digit_to_int(c: str) -> int:
    """Return the value of a decimal digit character.

    Raises ValueError if ``c`` is not a digit.
    """
    if char_type(c) is not CharType.DIGIT:
        raise ValueError(f"not a digit character: {c!r}")
    return ord(c) - ord("0")