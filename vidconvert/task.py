"""Tasks that run in three steps and report how they ended."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from enum import IntEnum


class Status(IntEnum):
    """State of a task."""

    STOPPED = 0
    HALTED = 1
    RUNNING = 2
    HALT_OK = 3
    HALT_ERROR = 4


def format_elapsed(seconds: float) -> str:
    """Format a duration as H:MM:SS, dropping fractions of a second."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"


class Task(ABC):
    """A unit of work run as pre-run actions, work and post-run actions."""

    def __init__(self) -> None:
        self.status = Status.STOPPED
        self._start = 0.0
        self._end = 0.0

    def run(self) -> Status:
        """Run the task and return HALT_OK or HALT_ERROR."""
        self._start = time.monotonic()
        status = self.pre_run_actions()
        if status == Status.RUNNING:
            status = self.do_work()
        self._end = time.monotonic()
        status = self.post_run_actions(status)
        if status not in (Status.HALT_OK, Status.HALT_ERROR):
            raise RuntimeError(f"Task finished with unexpected status {status.name}")
        return status

    def ask_stop(self) -> None:
        """Ask a running task to stop; safe to call from a signal handler."""
        self.status = Status.HALTED

    def elapsed_time_string(self) -> str:
        """Duration of the last run as H:MM:SS."""
        return format_elapsed(self._end - self._start)

    def pre_run_actions(self) -> Status:
        """Prepare the work; anything but RUNNING skips it."""
        return Status.RUNNING

    @abstractmethod
    def do_work(self) -> Status:
        """Do the work of the task."""

    def post_run_actions(self, status: Status) -> Status:
        """Finish after the work; turns RUNNING into HALT_OK."""
        return Status.HALT_OK if status == Status.RUNNING else status