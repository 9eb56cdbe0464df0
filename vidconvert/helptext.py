"""Banner, usage and version texts shown on the terminal."""

from __future__ import annotations

import platform

from .appconfig import PROGRAM_NAME, AppConfiguration
from .colors import Ansi, colored
from .logger import Level

PROGRAM_VERSION = "1.0.0"
PROGRAM_DESCRIPTION = (
    "Keeps a queue of films and converts them with FFmpeg, "
    "re-encoding or copying the selected video, audio and subtitle streams."
)


def _caption() -> str:
    return f"{PROGRAM_NAME} {PROGRAM_VERSION}"


def header() -> str:
    """Program name and version, underlined, followed by the description."""
    caption = _caption()
    return "\n".join(
        [
            colored(caption, Ansi.GREEN),
            colored("=" * len(caption), Ansi.LIGHT_BLUE),
            PROGRAM_DESCRIPTION,
            "",
        ]
    )


def _option(flags: str, *parts: str) -> str:
    return colored(flags, Ansi.MAGENTA) + "".join(parts)


def usage() -> str:
    """The list of command line options."""
    max_level = int(Level.MAX) - 1
    lines = [
        colored("This is the list of available options:", Ansi.GREEN),
        _option(
            "\t-t, --test\t\t",
            colored("Test if program can be run without any other action", Ansi.LIGHT_GREEN),
        ),
        _option(
            "\t-d, --daemon\t\t",
            colored(
                "Run daemon reading database items to keep converting files",
                Ansi.LIGHT_GREEN,
            ),
        ),
        _option(
            "\t-c, --config <file>\t",
            colored("Specifies a config file instead of the default ", Ansi.LIGHT_GREEN),
            colored(AppConfiguration.DEFAULT_CONFIG_FILE, Ansi.LIGHT_BLUE),
        ),
        _option(
            "\t-a, --add <file>\t",
            colored("Interactivelly add a new film to database files", Ansi.LIGHT_GREEN),
        ),
        _option(
            "\t-db,--database <file>\t",
            colored("Specify SQLite database file to be used", Ansi.LIGHT_GREEN),
        ),
        _option(
            "\t-i, --input <folder>\t",
            colored("Specify input folder to read films from", Ansi.LIGHT_GREEN),
        ),
        _option(
            "\t-o, --output <folder>\t",
            colored(
                "Specify output folder to store converted files once finished",
                Ansi.LIGHT_GREEN,
            ),
        ),
        _option(
            "\t-w, --work <folder>\t",
            colored(
                "Specify temprary working folder to store files while being converted",
                Ansi.LIGHT_GREEN,
            ),
        ),
        _option(
            "\t-l, --logfile <file>\t",
            colored("Specify a file for storing logs", Ansi.LIGHT_GREEN),
        ),
        _option(
            "\t-ll,--loglevel <level>\t",
            colored("Specify which loglevel to display ", Ansi.LIGHT_GREEN),
            colored(f"(Should be between 0 and {max_level})", Ansi.GRAY),
        ),
        _option(
            "\t-s, --sleep <seconds>\t",
            colored("Specify the time to sleep in main loop. ", Ansi.LIGHT_GREEN),
            colored("(It should be positive integer)", Ansi.GRAY),
        ),
        _option(
            "\t-of,--onfinish <action>\t",
            colored("Specify action to take once film is converted. ", Ansi.LIGHT_GREEN),
            colored("Accepted values are ", Ansi.GRAY),
            colored("copy", Ansi.LIGHT_BLUE),
            colored(" and ", Ansi.GRAY),
            colored("move", Ansi.LIGHT_BLUE),
        ),
        _option(
            "\t-v, --version\t\t",
            colored("Show version and compile information", Ansi.LIGHT_GREEN),
        ),
        _option("\t-h, --help\t\t", colored("Show this message", Ansi.LIGHT_RED)),
        "",
        colored(
            "Please note that every unrecognized option in config file will be ignored "
            "but every unrecognized option in command line will throw an error.",
            Ansi.LIGHT_YELLOW,
        ),
    ]
    return "\n".join(lines)


def version() -> str:
    """Program version and the interpreter it runs on."""
    runtime = f"{platform.python_implementation()}({platform.python_version()})"
    return "\n".join(
        [
            colored(_caption(), Ansi.GREEN),
            colored(f"Running on {runtime}", Ansi.GRAY),
        ]
    )