"""ANSI escape codes for coloured terminal text."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

RESET = "\033[0m"


class Ansi(IntEnum):
    """SGR codes for text styles and colours."""

    BOLD_TEXT = 1
    FAINT_TEXT = 2
    ITALICS_TEXT = 3
    UNDERLINED_TEXT = 4
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    LIGHT_GRAY = 37
    GRAY = 90
    LIGHT_RED = 91
    LIGHT_GREEN = 92
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    LIGHT_MAGENTA = 95
    LIGHT_CYAN = 96
    WHITE = 97


def ansi_code(code: Union[Ansi, int]) -> str:
    """The escape sequence that turns on code."""
    return f"\033[{int(code)}m"


def colored(text: object, code: Union[Ansi, int]) -> str:
    """Text wrapped in code and a reset."""
    return f"{ansi_code(code)}{text}{RESET}"