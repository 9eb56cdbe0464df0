import pytest

from vidconvert.colors import RESET, Ansi, ansi_code, colored


def test_enum_values_fixed_by_source():
    assert ansi_code(Ansi.BOLD_TEXT) == "\033[1m"
    assert ansi_code(Ansi.UNDERLINED_TEXT) == "\033[4m"
    assert ansi_code(Ansi.BLACK) == "\033[30m"
    assert ansi_code(Ansi.LIGHT_GRAY) == "\033[37m"
    assert ansi_code(Ansi.GRAY) == "\033[90m"
    assert ansi_code(Ansi.WHITE) == "\033[97m"


def test_ansi_code_format():
    assert ansi_code(Ansi.BOLD_TEXT) == "\033[1m"


def test_colored_text():
    assert colored("x", Ansi.BOLD_TEXT) == "\033[1mx\033[0m"


def test_colored_number():
    assert colored(5, Ansi.GRAY) == ansi_code(Ansi.GRAY) + "5" + RESET


@pytest.mark.parametrize("code", list(Ansi))
def test_colored_wraps_text(code):
    result = colored("hello", code)
    assert result.startswith(ansi_code(code))
    assert result.endswith(RESET)
    assert result[len(ansi_code(code)) : -len(RESET)] == "hello"
    assert ansi_code(code) == f"\033[{code.value}m"