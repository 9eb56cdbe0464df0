"""Configuration files in libconfig syntax and validated setting stores."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional, Union

PathLike = Union[str, Path]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_TOKEN_RE = re.compile(
    r"""
    (?P<ws>[ \t\r\f\v]+)
    |(?P<newline>\n)
    |(?P<comment>(?:\#|//)[^\n]*)
    |(?P<block>/\*.*?\*/)
    |(?P<string>"(?:[^"\\\n]|\\.)*")
    |(?P<float>[-+]?(?:\d+\.\d*(?:[eE][-+]?\d+)?|\.\d+(?:[eE][-+]?\d+)?|\d+[eE][-+]?\d+))
    |(?P<hex>0[xX][0-9A-Fa-f]+L{0,2})
    |(?P<int>[-+]?\d+L{0,2})
    |(?P<bool>(?i:true|false)\b)
    |(?P<name>[A-Za-z*][-A-Za-z0-9_*]*)
    |(?P<punct>[=:;,{}\[\]()])
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPE_RE = re.compile(r"\\(x[0-9A-Fa-f]{2}|.)", re.DOTALL)
_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "r": "\r", "t": "\t", "f": "\f"}
_VALUE_KINDS = ("string", "float", "hex", "int", "bool", "name", "punct")


class ConfigSyntaxError(ValueError):
    """Raised when configuration text is not valid."""

    def __init__(self, line: int, message: str):
        super().__init__(f"line {line}: {message}")
        self.line = line
        self.message = message


@dataclass
class _Token:
    kind: str
    text: str
    value: Any
    line: int


def _unescape(body: str, line: int) -> str:
    def replace(match: re.Match) -> str:
        sequence = match.group(1)
        if len(sequence) == 3 and sequence[0] == "x":
            return chr(int(sequence[1:], 16))
        if sequence in _ESCAPES:
            return _ESCAPES[sequence]
        raise ConfigSyntaxError(line, "invalid escape sequence")

    return _ESCAPE_RE.sub(replace, body)


def _convert(kind: str, text: str, line: int) -> Any:
    if kind == "string":
        return _unescape(text[1:-1], line)
    if kind == "int":
        return int(text.rstrip("L"))
    if kind == "hex":
        return int(text[2:].rstrip("L"), 16)
    if kind == "float":
        return float(text)
    if kind == "bool":
        return text.lower() == "true"
    return text


def _tokenize(text: str) -> tuple[list[_Token], int]:
    tokens: list[_Token] = []
    line = 1
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise ConfigSyntaxError(line, "syntax error")
        kind = match.lastgroup
        chunk = match.group()
        if kind in _VALUE_KINDS:
            tokens.append(_Token(kind, chunk, _convert(kind, chunk, line), line))
        line += chunk.count("\n")
        pos = match.end()
    return tokens, line


class _Parser:
    def __init__(self, tokens: list[_Token], last_line: int):
        self._tokens = tokens
        self._pos = 0
        self._last_line = last_line

    def _peek(self) -> Optional[_Token]:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self) -> _Token:
        token = self._peek()
        if token is None:
            raise ConfigSyntaxError(self._last_line, "syntax error")
        self._pos += 1
        return token

    @staticmethod
    def _is_punct(token: Optional[_Token], *chars: str) -> bool:
        return token is not None and token.kind == "punct" and token.text in chars

    def settings(self, closing: Optional[str]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        while True:
            token = self._peek()
            if token is None:
                if closing is None:
                    return result
                raise ConfigSyntaxError(self._last_line, "syntax error")
            if self._is_punct(token, closing or ""):
                self._pos += 1
                return result
            self._setting(result)

    def _setting(self, target: dict[str, Any]) -> None:
        name = self._next()
        if name.kind != "name":
            raise ConfigSyntaxError(name.line, "syntax error")
        separator = self._next()
        if not self._is_punct(separator, "=", ":"):
            raise ConfigSyntaxError(separator.line, "syntax error")
        value = self._value()
        if name.text in target:
            raise ConfigSyntaxError(name.line, "duplicate setting name")
        target[name.text] = value
        if self._is_punct(self._peek(), ";", ","):
            self._pos += 1

    def _value(self) -> Any:
        token = self._next()
        if token.kind == "string":
            parts = [token.value]
            while (following := self._peek()) is not None and following.kind == "string":
                parts.append(self._next().value)
            return "".join(parts)
        if token.kind in ("int", "hex", "float", "bool"):
            return token.value
        if self._is_punct(token, "["):
            return self._sequence("]", scalars_only=True)
        if self._is_punct(token, "("):
            return self._sequence(")", scalars_only=False)
        if self._is_punct(token, "{"):
            return self.settings("}")
        raise ConfigSyntaxError(token.line, "syntax error")

    def _sequence(self, closing: str, scalars_only: bool) -> list[Any]:
        items: list[Any] = []
        if self._is_punct(self._peek(), closing):
            self._pos += 1
            return items
        while True:
            start = self._peek()
            line = start.line if start is not None else self._last_line
            value = self._value()
            if scalars_only:
                if isinstance(value, (list, dict)):
                    raise ConfigSyntaxError(line, "syntax error")
                if items and type(value) is not type(items[0]):
                    raise ConfigSyntaxError(line, "mismatched element type in array")
            items.append(value)
            separator = self._next()
            if self._is_punct(separator, closing):
                return items
            if not self._is_punct(separator, ","):
                raise ConfigSyntaxError(separator.line, "syntax error")


def parse_config_text(text: str) -> dict[str, Any]:
    """Parse libconfig-style text into a dict of settings.

    Groups become dicts, arrays and lists become lists.
    """
    tokens, last_line = _tokenize(text)
    return _Parser(tokens, last_line).settings(None)


class ConfigurationBase:
    """String and integer settings, some mandatory, with per-setting errors.

    Setting a value never replaces one already present.
    """

    def __init__(
        self,
        mandatory_string: Iterable[str],
        mandatory_int: Iterable[str],
        optional_string: Iterable[str],
        optional_int: Iterable[str],
    ):
        self.mandatory_string = tuple(mandatory_string)
        self.mandatory_int = tuple(mandatory_int)
        self.optional_string = tuple(optional_string)
        self.optional_int = tuple(optional_int)
        self.values_string: dict[str, str] = {}
        self.values_int: dict[str, int] = {}
        self.errors: dict[str, str] = {}

    def _set_string_value(self, key: str, value: Any) -> None:
        self.values_string.setdefault(key, str(value))
        self.errors.pop(key, None)

    def _set_int_value(self, key: str, value: int) -> None:
        self.values_int.setdefault(key, int(value))
        self.errors.pop(key, None)

    def _get_string_value(self, key: str) -> Optional[str]:
        return self.values_string.get(key)

    def _get_int_value(self, key: str) -> Optional[int]:
        return self.values_int.get(key)

    def _add_error(self, key: str, message: str) -> None:
        self.errors.setdefault(key, message)

    def _take_string(self, key: str, value: Any) -> None:
        if isinstance(value, str):
            self._set_string_value(key, value)
        else:
            self._add_error(key, "Value is not a string")

    def _take_int(self, key: str, value: Any) -> None:
        if (
            isinstance(value, int)
            and not isinstance(value, bool)
            and _INT32_MIN <= value <= _INT32_MAX
        ):
            self._set_int_value(key, value)
        else:
            self._add_error(key, "Value is not an integer")

    def parse(self, file: PathLike) -> None:
        """Replace all values with those read from file, recording any errors."""
        self.errors.clear()
        self.values_int.clear()
        self.values_string.clear()

        try:
            text = Path(file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            self._add_error("read error", f"Can not open configuration file {file}")
            return
        try:
            settings = parse_config_text(text)
        except ConfigSyntaxError as exc:
            self._add_error("parse error", f"{file} at line {exc.line} {exc.message}")
            return

        for item in self.mandatory_string:
            if item in settings:
                self._take_string(item, settings[item])
            else:
                self._add_error(item, "Mandatory item missing in config")
        for item in self.mandatory_int:
            if item in settings:
                self._take_int(item, settings[item])
        for item in self.optional_string:
            if item in settings:
                self._take_string(item, settings[item])
        for item in self.optional_int:
            if item in settings:
                self._take_int(item, settings[item])

    def merge(self, other: "ConfigurationBase") -> None:
        """Add the values of other that are not set here yet."""
        for key, value in other.values_string.items():
            self._set_string_value(key, value)
        for key, value in other.values_int.items():
            self._set_int_value(key, value)

    def have_all_mandatory_values(self) -> bool:
        """Tell whether every mandatory setting has a value."""
        return all(key in self.values_string for key in self.mandatory_string) and all(
            key in self.values_int for key in self.mandatory_int
        )

    def check(self) -> bool:
        """Validate the settings; True when no error is recorded."""
        return not self.errors