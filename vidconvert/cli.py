"""Command line parsing and the program entry point."""

from __future__ import annotations

import signal
import sqlite3
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Sequence

from . import helptext
from .appconfig import AppConfiguration
from .colors import Ansi, colored
from .logger import Level, Logger
from .task import Status, Task
from .userinput import InputError, to_int_in_range, to_int_positive


class Action(Enum):
    """What the command line asks the program to do."""

    TEST = "test"
    DAEMON = "daemon"
    ADD = "add"
    HELP = "help"
    VERSION = "version"


class CliError(Exception):
    """Raised for a bad command line or an invalid configuration."""

    def __init__(self, message: str, errors: Optional[dict[str, str]] = None):
        super().__init__(message)
        self.errors = dict(errors or {})


@dataclass
class ParsedCommand:
    """The selected action and the settings given on the command line."""

    action: Action
    config: AppConfiguration = field(default_factory=AppConfiguration)


_VALUE_OPTIONS = {
    "-c": ("config_file", "Config specified without argument, correct usage:"),
    "--config": ("config_file", "Config specified without argument, correct usage:"),
    "-db": ("database_file", "Database specified without argument, correct usage:"),
    "--database": ("database_file", "Database specified without argument, correct usage:"),
    "-i": ("input_folder", "Input path specified without argument, correct usage:"),
    "--input": ("input_folder", "Input path specified without argument, correct usage:"),
    "-o": ("output_folder", "Output path specified without argument, correct usage:"),
    "--output": ("output_folder", "Output path specified without argument, correct usage:"),
    "-w": ("work_folder", "Work path specified without argument, correct usage:"),
    "--work": ("work_folder", "Work path specified without argument, correct usage:"),
    "-l": ("log_file", "Logfile specified without argument, correct usage:"),
    "--logfile": ("log_file", "Logfile specified without argument, correct usage:"),
}


def _next_value(args: Iterator[str], message: str) -> str:
    value = next(args, None)
    if value is None:
        raise CliError(message)
    return value


def parse_arguments(argv: Sequence[str]) -> ParsedCommand:
    """Parse the arguments after the program name; raise CliError when invalid."""
    config = AppConfiguration()
    action: Optional[Action] = None
    args = iter(argv)

    for argument in args:
        if argument in ("-t", "--test"):
            action = Action.TEST
        elif argument in ("-d", "--daemon"):
            action = Action.DAEMON
        elif argument in _VALUE_OPTIONS:
            attribute, message = _VALUE_OPTIONS[argument]
            setattr(config, attribute, _next_value(args, message))
        elif argument in ("-ll", "--loglevel"):
            value = _next_value(args, "Loglevel specified without argument, correct usage:")
            max_level = int(Level.MAX) - 1
            try:
                config.log_level = to_int_in_range(value, 0, max_level)
            except InputError:
                raise CliError(
                    "Loglevel is not recognized as integer or it has a value "
                    f"not between 0 and {max_level}"
                ) from None
        elif argument in ("-s", "--sleep"):
            value = _next_value(args, "Sleep time specified without argument, correct usage:")
            try:
                config.sleep_time = to_int_positive(value)
            except InputError:
                raise CliError(
                    "Sleep time is not recognized as integer or it has a negative value"
                ) from None
        elif argument in ("-p", "--pause"):
            value = _next_value(args, "Pause time specified without argument, correct usage:")
            try:
                config.pause_time = to_int_positive(value)
            except InputError:
                raise CliError(
                    "Pause time is not recognized as integer or it has a negative value"
                ) from None
        elif argument in ("-of", "--onfinish"):
            value = _next_value(
                args, "Onfinish action specified without argument, correct usage:"
            )
            if value not in ("copy", "move"):
                raise CliError(
                    f"Onfinish specified action {value} is not recognized; accepted "
                    "values are copy and move. Correct usage:"
                )
            config.onfinish = value
        elif argument in ("-a", "--add"):
            value = _next_value(args, "Add film specified without argument, correct usage:")
            # Undo shell escaping of special characters.
            config.interactive_parameter = value.replace("\\", "")
            action = Action.ADD
        elif argument in ("-v", "--version"):
            return ParsedCommand(Action.VERSION, config)
        elif argument in ("-h", "--help"):
            return ParsedCommand(Action.HELP, config)
        else:
            raise CliError(f"Unknown argument: {argument}, correct usage:")

    if action is None:
        raise CliError(
            "No action specified, select --add(-a), --daemon(-d) or --test(-t) "
            "to execute the program"
        )
    return ParsedCommand(action, config)


def resolve_configuration(config: AppConfiguration) -> AppConfiguration:
    """Complete config from its configuration file when needed, then validate it.

    Raises CliError carrying the per-setting errors when validation fails.
    """
    if not config.have_all_mandatory_values():
        from_file = AppConfiguration()
        from_file.parse(config.config_file)
        from_file.merge(config)
        config = from_file
    if not config.check():
        raise CliError("Invalid configuration", config.errors)
    return config


class SelfTest(Task):
    """Checks that the log file and the database can be opened."""

    def __init__(self, config: AppConfiguration):
        super().__init__()
        self.config = config
        self._logger: Optional[Logger] = None

    def pre_run_actions(self) -> Status:
        try:
            self._logger = Logger(self.config.log_file, Level(self.config.log_level))
            connection = sqlite3.connect(str(self.config.database_file))
            try:
                connection.execute("PRAGMA schema_version")
            finally:
                connection.close()
        except (OSError, ValueError, TypeError, sqlite3.Error) as exc:
            print(colored(exc, Ansi.RED), file=sys.stderr)
            return Status.HALT_ERROR
        return Status.RUNNING

    def do_work(self) -> Status:
        print(colored("Test is successful", Ansi.GREEN))
        return Status.HALT_OK

    def post_run_actions(self, status: Status) -> Status:
        if self._logger is not None:
            self._logger.close()
            self._logger = None
        return super().post_run_actions(status)


@contextmanager
def _stop_on_signals(task: Task) -> Iterator[None]:
    def stop(signum, frame):
        task.ask_stop()

    def wake(signum, frame):
        # Only interrupts a sleep.
        pass

    wanted = [(signal.SIGINT, stop), (signal.SIGTERM, stop)]
    wanted += [
        (getattr(signal, name), wake)
        for name in ("SIGUSR1", "SIGUSR2")
        if hasattr(signal, name)
    ]
    previous = {}
    for signum, handler in wanted:
        previous[signum] = signal.signal(signum, handler)
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


def _print_usage_error(message: str) -> None:
    print(helptext.header())
    print(colored(message, Ansi.RED), file=sys.stderr)
    print(file=sys.stderr)
    print(helptext.usage())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        command = parse_arguments(argv)
    except CliError as exc:
        _print_usage_error(str(exc))
        return 1

    if command.action is Action.HELP:
        print(helptext.header())
        print(helptext.usage())
        return 0
    if command.action is Action.VERSION:
        print(helptext.version())
        return 0

    try:
        config = resolve_configuration(command.config)
    except CliError as exc:
        print(helptext.header())
        for key, message in exc.errors.items():
            print(f"{colored(colored(key, Ansi.BOLD_TEXT), Ansi.RED)}: {message}", file=sys.stderr)
        print()
        print(helptext.usage())
        return 1

    if command.action is not Action.TEST:
        print(
            colored(f"Action {command.action.value} is not available in this build", Ansi.RED),
            file=sys.stderr,
        )
        return 1

    task = SelfTest(config)
    with _stop_on_signals(task):
        status = task.run()
    return 0 if status == Status.HALT_OK else 1


if __name__ == "__main__":
    sys.exit(main())