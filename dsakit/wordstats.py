"""Word statistics over text, ignoring words listed in a stop-word dictionary."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from dsakit.text import str_lower, str_trim

DICTIONARY_MAX_SIZE = 2000

_TOKEN_SPLIT = re.compile(r"[ \t\n]+")


@dataclass
class WordStats:
    """Counts of lines, all words, and frequencies of non-dictionary words."""

    line_count: int = 0
    word_count: int = 0
    keywords: dict[str, int] = field(default_factory=dict)

    @property
    def keyword_count(self) -> int:
        """Number of distinct non-dictionary words."""
        return len(self.keywords)


def create_dictionary(fp: Iterable[str]) -> list[str]:
    """Read comma-separated dictionary words from the lines of ``fp``.

    Words are added while their packed size, each followed by a separator,
    stays below ``DICTIONARY_MAX_SIZE``; a word that does not fit is skipped
    together with the rest of its line.
    """
    words: list[str] = []
    used = 0
    for line in fp:
        for token in line.rstrip("\r\n").split(","):
            if not token:
                continue
            if used + len(token) + 2 >= DICTIONARY_MAX_SIZE:
                break
            words.append(token)
            used += len(token) + 1
    return words


def contain_word(dictionary: Sequence[str], word: str) -> bool:
    """Tell whether ``word`` is one of the space-separated words of ``dictionary``."""
    if not word:
        return False
    return any(word in entry.split(" ") for entry in dictionary)


def process_words(fp: Iterable[str], dictionary: Sequence[str]) -> WordStats:
    """Count lines and words of ``fp`` and the frequency of each keyword.

    Words are lower-cased before lookup; words found in ``dictionary`` are
    counted as words but not as keywords. Keywords keep first-seen order.
    """
    stats = WordStats()
    for line in fp:
        stats.line_count += 1
        for token in _TOKEN_SPLIT.split(line):
            if not token:
                continue
            word = str_trim(str_lower(token)[0])
            stats.word_count += 1
            if contain_word(dictionary, word):
                continue
            stats.keywords[word] = stats.keywords.get(word, 0) + 1
    return stats