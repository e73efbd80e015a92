"""Simple ASCII string utilities: word counting, lower-casing and trimming."""

from __future__ import annotations

_WORD_BREAKS = frozenset(" \t,.")
_LOWER_TABLE = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _is_letter(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def count_words(s: str) -> int:
    """Count the words in ``s``.

    A word starts with an English letter and ends at a space, tab, comma
    or period. Other characters neither start nor end a word.
    """
    count = 0
    in_word = False
    for ch in s:
        if _is_letter(ch):
            if not in_word:
                count += 1
                in_word = True
        elif ch in _WORD_BREAKS:
            in_word = False
    return count


def str_lower(s: str) -> tuple[str, int]:
    """Lower-case every English capital in ``s``.

    Returns the new string and the number of letters that were changed.
    """
    flips = sum(1 for ch in s if "A" <= ch <= "Z")
    return s.translate(_LOWER_TABLE), flips


def str_trim(s: str) -> str:
    """Drop leading and trailing spaces and collapse runs of spaces to one.

    Only the space character is affected; tabs are kept.
    """
    return " ".join(part for part in s.split(" ") if part)