import pytest

from dsakit.text import count_words, str_lower, str_trim


@pytest.mark.parametrize(
    "words",
    [["hello"], ["hello", "world"], ["one", "two", "three", "four"]],
)
def test_count_words_space_separated(words):
    assert count_words(" ".join(words)) == len(words)


def test_count_words_empty():
    assert count_words("") == 0


def test_count_words_separators_are_equivalent():
    assert count_words("abc,def.ghi\tjkl") == count_words("abc def ghi jkl")


def test_count_words_digits_do_not_start_words():
    assert count_words("123 456 abc") == count_words("abc")


def test_count_words_digits_do_not_break_words():
    assert count_words("a1b c") == count_words("ab c")


def test_count_words_repeated_separators():
    assert count_words("  hi ,, there..  ") == count_words("hi there")


def test_str_lower_changes_capitals():
    lowered, flips = str_lower("HeLLo World")
    assert lowered == "hello world"
    assert flips == len([c for c in "HeLLo World" if c in "HLW"])


def test_str_lower_no_capitals():
    assert str_lower("abc 123!") == ("abc 123!", 0)


def test_str_lower_leaves_non_ascii():
    lowered, _ = str_lower("ÄB")
    assert lowered == "Äb"


def test_str_trim_collapses_spaces():
    assert str_trim("  hello   world  ") == "hello world"


def test_str_trim_only_spaces():
    assert str_trim("     ") == ""


def test_str_trim_keeps_tabs():
    assert str_trim("a\t  b") == "a\t b"


def test_str_trim_idempotent():
    once = str_trim("  x  y   z ")
    assert str_trim(once) == once