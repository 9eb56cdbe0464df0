"""Leveled, timestamped logging to a file."""

from __future__ import annotations

import time
from enum import IntEnum
from pathlib import Path
from typing import Union


class Level(IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    WARNING = 1
    NOTICE = 2
    INFO = 3
    ERROR = 4
    FATAL = 5
    MAX = 6


_LABELS = {
    Level.DEBUG: "[DEBUG]",
    Level.WARNING: "[WARNING]",
    Level.NOTICE: "[NOTICE]",
    Level.INFO: "[INFO]",
    Level.ERROR: "[ERROR]",
    Level.FATAL: "[FATAL]",
    Level.MAX: "",
}


class Logger:
    """Appends messages at or above a display level to a log file."""

    def __init__(self, logfile: Union[str, Path], display_level: Union[Level, int]):
        self.display_level = Level(display_level)
        try:
            self._file = open(logfile, "a", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Log file could not be opened for write: {logfile}") from exc

    def _shown(self, level: Level) -> bool:
        return self.display_level <= level

    def _header(self, level: Level) -> None:
        if self._shown(level):
            stamp = time.strftime("%d-%m-%Y %H:%M:%S", time.localtime())
            self._file.write(f"{stamp}: {_LABELS[Level(level)]} ")

    def message_part_begin(self, level: Level, msg: str) -> None:
        """Start a line with a header and the first part of a message."""
        if self._shown(level):
            self._header(level)
            self._file.write(msg)

    def message_part_continue(self, level: Level, msg: str) -> None:
        """Append to a line started with message_part_begin."""
        if self._shown(level):
            self._file.write(msg)

    def message_part_end(self, level: Level, msg: str) -> None:
        """Append the last part of a message and end the line."""
        if self._shown(level):
            self._file.write(msg)
            self.end_line(level)

    def message_line(self, level: Level, msg: str) -> None:
        """Write a whole message line with its header."""
        self._header(level)
        self.message_part_end(level, msg)

    def end_line(self, level: Level) -> None:
        """End the current line and flush it to disk."""
        if self._shown(level):
            self._file.write("\n")
            self._file.flush()

    def close(self) -> None:
        """Close the log file."""
        self._file.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *args) -> None:
        self.close()