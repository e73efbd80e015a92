import pytest

from dsakit.bigint import BigInt, bigint_fibonacci
from dsakit.fibonacci import iterative_fibonacci


@pytest.mark.parametrize("text", ["0", "5", "123456789012345678901234567890"])
def test_string_round_trip(text):
    assert str(BigInt(text)) == text
    assert len(BigInt(text)) == len(text)


def test_digits_iterate_in_order():
    assert list(BigInt("907")) == [9, 0, 7]


def test_empty_string_gives_empty_number():
    assert str(BigInt("")) == ""
    assert len(BigInt()) == 0


@pytest.mark.parametrize("bad", ["12a", "-5", "1 2", "3.0"])
def test_invalid_digit_raises(bad):
    with pytest.raises(ValueError):
        BigInt(bad)


def test_non_string_raises():
    with pytest.raises(TypeError):
        BigInt(12)


@pytest.mark.parametrize(
    "x, y",
    [(0, 0), (1, 9), (999, 1), (123, 98765), (99999999999999999999, 1)],
)
def test_addition_matches_int(x, y):
    assert str(BigInt(str(x)) + BigInt(str(y))) == str(x + y)


def test_addition_is_commutative():
    a, b = BigInt("4096"), BigInt("77")
    assert a + b == b + a


def test_leading_zeros_are_kept():
    assert str(BigInt("007") + BigInt("1")) == "008"


def test_equality():
    assert BigInt("42") == BigInt("42")
    assert not BigInt("42") == BigInt("43")


@pytest.mark.parametrize("n", [0, 1, 2, 10, 50, 100, 300])
def test_fibonacci_matches_int_fibonacci(n):
    assert str(bigint_fibonacci(n)) == str(iterative_fibonacci(n))


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        bigint_fibonacci(-1)