"""Validation of text typed by the user."""

from __future__ import annotations

from typing import Iterable

from .display import list_to_string

_DIGITS = frozenset("0123456789")
_YES = ("y", "Y", "yes", "YES")
_NO = ("n", "N", "no", "NO")


class InputError(ValueError):
    """Raised when user input is not acceptable."""


def is_int(text: str) -> bool:
    """Tell whether text is an optionally negative run of decimal digits."""
    if not text:
        return False
    digits = text[1:] if text[0] == "-" else text
    return all(char in _DIGITS for char in digits)


def to_int(text: str) -> int:
    """Convert text to an integer, raising InputError when it is not a number."""
    if not is_int(text):
        raise InputError(f"{text} is not a number")
    digits = text[1:] if text[0] == "-" else text
    if not digits:
        return 0
    return int(text)


def to_int_minimum(text: str, minimum: int) -> int:
    """Convert text to an integer not lower than minimum."""
    value = to_int(text)
    if value < minimum:
        raise InputError(
            f"Introduced number is lesser than minimum value {minimum} required"
        )
    return value


def to_int_positive(text: str) -> int:
    """Convert text to a non-negative integer."""
    return to_int_minimum(text, 0)


def to_int_in_range(text: str, minimum: int, maximum: int) -> int:
    """Convert text to an integer between minimum and maximum inclusive."""
    value = to_int(text)
    if not in_range(value, minimum, maximum):
        raise InputError(
            f"Number {value} is not in range between {minimum} and {maximum}"
        )
    return value


def in_range(number: int, minimum: int, maximum: int) -> bool:
    """Tell whether number lies between minimum and maximum inclusive."""
    return minimum <= number <= maximum


def in_options(value: object, options: Iterable[object]) -> bool:
    """Tell whether value is one of the options."""
    return value in list(options)


def parse_yes_no(text: str) -> bool:
    """Read a yes/no answer; raise InputError for anything else."""
    if text in _YES:
        return True
    if text in _NO:
        return False
    options = list_to_string(_YES[:2] + _NO[:2] + _YES[2:] + _NO[2:], "[", " ", "]")
    raise InputError(f"Selected option {text} not found in {options}")