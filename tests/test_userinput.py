import pytest

from vidconvert.userinput import (
    InputError,
    in_options,
    in_range,
    is_int,
    parse_yes_no,
    to_int,
    to_int_in_range,
    to_int_minimum,
    to_int_positive,
)


@pytest.mark.parametrize("text", ["0", "42", "-7", "007"])
def test_is_int_accepts_numbers(text):
    assert is_int(text) is True


@pytest.mark.parametrize("text", ["", "abc", "1a", "1.5", " 3", "+3", "--1"])
def test_is_int_rejects_non_numbers(text):
    assert is_int(text) is False


@pytest.mark.parametrize("text", ["42", "-7", "0"])
def test_to_int_round_trip(text):
    assert str(to_int(text)) == text


def test_to_int_lone_minus_is_zero():
    assert to_int("-") == 0


def test_to_int_rejects_text():
    with pytest.raises(InputError):
        to_int("ten")


def test_to_int_minimum():
    assert to_int_minimum("5", 5) == 5
    with pytest.raises(InputError):
        to_int_minimum("4", 5)


def test_to_int_positive():
    assert to_int_positive("0") == 0
    with pytest.raises(InputError):
        to_int_positive("-1")


def test_to_int_in_range():
    assert to_int_in_range("3", 0, 3) == 3
    with pytest.raises(InputError):
        to_int_in_range("5", 0, 3)
    with pytest.raises(InputError):
        to_int_in_range("x", 0, 3)


def test_in_range_bounds():
    assert in_range(0, 0, 3)
    assert in_range(3, 0, 3)
    assert not in_range(-1, 0, 3)
    assert not in_range(4, 0, 3)


def test_in_options():
    assert in_options("a:1", ["a:-1", "a:1", "f"])
    assert not in_options("a:2", ["a:-1", "a:1", "f"])
    assert in_options(5, [0, 5, 8])
    assert not in_options(6, [0, 5, 8])


@pytest.mark.parametrize("text", ["y", "Y", "yes", "YES"])
def test_parse_yes(text):
    assert parse_yes_no(text) is True


@pytest.mark.parametrize("text", ["n", "N", "no", "NO"])
def test_parse_no(text):
    assert parse_yes_no(text) is False


@pytest.mark.parametrize("text", ["", "Yes", "maybe", "1"])
def test_parse_yes_no_rejects(text):
    with pytest.raises(InputError):
        parse_yes_no(text)