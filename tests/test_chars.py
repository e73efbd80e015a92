import string

import pytest

from dsakit.chars import CharType, case_flip, char_type, digit_to_int


@pytest.mark.parametrize("c", list(string.digits))
def test_digits_are_digits(c):
    assert char_type(c) is CharType.DIGIT


@pytest.mark.parametrize("c", list("+-*/%"))
def test_operators(c):
    assert char_type(c) is CharType.OPERATOR


def test_parentheses():
    assert char_type("(") is CharType.LEFT_PAREN
    assert char_type(")") is CharType.RIGHT_PAREN


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters(c):
    assert char_type(c) is CharType.LETTER


@pytest.mark.parametrize("c", [" ", "\t", "=", "^", "_", ".", "é"])
def test_other_characters(c):
    assert char_type(c) is CharType.OTHER


def test_type_codes_match_documented_values():
    assert int(char_type("=")) == -1
    assert int(char_type("7")) == 0
    assert int(char_type("*")) == 1
    assert int(char_type("(")) == 2
    assert int(char_type(")")) == 3
    assert int(char_type("q")) == 4


def test_char_type_rejects_multi_character_input():
    with pytest.raises(ValueError):
        char_type("ab")
    with pytest.raises(ValueError):
        char_type("")


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_case_flip_letters_swaps_case(c):
    assert case_flip(c) == c.swapcase()
    assert case_flip(c) != c


@pytest.mark.parametrize("c", [chr(i) for i in range(32, 127)])
def test_case_flip_is_an_involution(c):
    assert case_flip(case_flip(c)) == c


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " "))
def test_case_flip_leaves_non_letters(c):
    assert case_flip(c) == c


@pytest.mark.parametrize("c", list(string.digits))
def test_digit_to_int(c):
    assert digit_to_int(c) == int(c)


@pytest.mark.parametrize("c", ["a", "+", " ", "("])
def test_digit_to_int_rejects_non_digits(c):
    with pytest.raises(ValueError):
        digit_to_int(c)