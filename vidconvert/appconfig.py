"""Settings of the conversion program and their validation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .configuration import ConfigurationBase
from .data import Codec
from .fsutils import is_folder_readable_and_writable
from .logger import Level

PathLike = Union[str, Path]

PROGRAM_NAME = "vidconvert"

_MANDATORY_STRING_VALUES = ("database", "input", "output", "work", "logfile")
_MANDATORY_INT_VALUES = ("loglevel",)
_OPTIONAL_STRING_VALUES = ("onfinish",)
_OPTIONAL_INT_VALUES = ("sleep", "pause")

_ONFINISH_ACTIONS = ("move", "copy")


def _path_property(key: str, doc: str) -> property:
    def getter(self: "AppConfiguration") -> Optional[Path]:
        value = self._get_string_value(key)
        return Path(value) if value is not None else None

    def setter(self: "AppConfiguration", value: PathLike) -> None:
        self._set_string_value(key, str(value))

    return property(getter, setter, doc=doc)


def _has_filename(text: str) -> bool:
    return bool(text) and not text.endswith("/")


class AppConfiguration(ConfigurationBase):
    """Folders, files and timings used by the converter.

    As with every configuration store, assigning a setting that already has
    a value keeps the first value.
    """

    SUPPORTED_MULTIMEDIA_EXTENSIONS = (
        ".asf", ".asx", ".avi", ".wav", ".wma", ".wax", ".wm", ".wmv", ".wvx",
        ".ra", ".ram", ".rm", ".rmm",
        ".m3u", ".mp2v", ".mpg", ".mpeg", ".m1v", ".mp2", ".mp3", ".mpa",
        ".vob",
        "-aif", ".aifc", "-aiff",
        ".au", ".snd",
        ".ivf",
        ".mov", ".qt",
        ".flv",
        ".mkv", ".mp4",
    )
    SUPPORTED_CODECS = (
        Codec.VIDEO_HEVC,
        Codec.AUDIO_AAC,
        Codec.AUDIO_FDKAAC,
        Codec.AUDIO_AC3,
        Codec.AUDIO_EAC3,
        Codec.AUDIO_OPUS,
        Codec.VIDEO_COPY,
        Codec.AUDIO_COPY,
        Codec.SUBTITLE_COPY,
    )

    DEFAULT_CONFIG_FILE = Path("/etc/conf.d") / f"{PROGRAM_NAME}.conf"
    DEFAULT_SLEEP_TIME = 3600
    DEFAULT_PAUSE_TIME = 60
    DEFAULT_ONFINISH = "move"

    def __init__(self) -> None:
        super().__init__(
            _MANDATORY_STRING_VALUES,
            _MANDATORY_INT_VALUES,
            _OPTIONAL_STRING_VALUES,
            _OPTIONAL_INT_VALUES,
        )

    database_file = _path_property("database", "SQLite database file.")
    input_folder = _path_property("input", "Folder films are read from.")
    output_folder = _path_property("output", "Folder converted films go to.")
    work_folder = _path_property("work", "Folder used while converting.")
    log_file = _path_property("logfile", "File logs are appended to.")
    interactive_parameter = _path_property(
        "interactive_parameter", "File or folder to add interactively."
    )

    @property
    def config_file(self) -> Path:
        """Configuration file to read, or the default one."""
        value = self._get_string_value("configfile")
        return Path(value) if value is not None else self.DEFAULT_CONFIG_FILE

    @config_file.setter
    def config_file(self, value: PathLike) -> None:
        self._set_string_value("configfile", str(value))

    @property
    def log_level(self) -> Optional[int]:
        """Lowest level written to the log, if set."""
        return self._get_int_value("loglevel")

    @log_level.setter
    def log_level(self, value: int) -> None:
        self._set_int_value("loglevel", int(value))

    @property
    def sleep_time(self) -> int:
        """Seconds to wait when no film is pending."""
        value = self._get_int_value("sleep")
        return self.DEFAULT_SLEEP_TIME if value is None else value

    @sleep_time.setter
    def sleep_time(self, value: int) -> None:
        self._set_int_value("sleep", value)

    @property
    def pause_time(self) -> int:
        """Seconds to wait between two conversions."""
        value = self._get_int_value("pause")
        return self.DEFAULT_PAUSE_TIME if value is None else value

    @pause_time.setter
    def pause_time(self, value: int) -> None:
        self._set_int_value("pause", value)

    @property
    def onfinish(self) -> str:
        """What to do with a converted file: move or copy."""
        value = self._get_string_value("onfinish")
        return self.DEFAULT_ONFINISH if value is None else value

    @onfinish.setter
    def onfinish(self, value: str) -> None:
        self._set_string_value("onfinish", value)

    def is_codec_supported(self, codec: Union[Codec, int]) -> bool:
        """Tell whether codec can be produced."""
        return codec in self.SUPPORTED_CODECS

    def is_extension_supported(self, extension: str) -> bool:
        """Tell whether files with extension are taken as films."""
        return extension in self.SUPPORTED_MULTIMEDIA_EXTENSIONS

    def check(self) -> bool:
        """Validate folders, files and numbers; True when no error remains."""
        errors = self.errors
        values = self.values_string
        ints = self.values_int

        for item in ("database", "input", "output", "work"):
            if item not in values:
                errors[item] = "Item is not set"
                continue
            folder = values[item]
            if not Path(folder).is_dir():
                errors[item] = "Is not a directory"
            elif not is_folder_readable_and_writable(folder):
                errors[item] = f"Directory {folder} is not readable or not writable"
            else:
                errors.pop(item, None)

        # Files only need a usable parent directory.
        for item in ("database", "logfile"):
            if item not in values:
                errors[item] = "Item is not set"
                continue
            file = values[item]
            parent = os.path.dirname(file)
            if not _has_filename(file):
                errors[item] = f"{file} is not a regular file"
            elif not is_folder_readable_and_writable(parent):
                errors[item] = f"Directory {parent} is not readable or not writable"
            else:
                errors.pop(item, None)

        for item in ("loglevel", "sleep", "pause"):
            if item in ints:
                value = ints[item]
                if value < 0:
                    errors[item] = f"Value {value} is not a positive integer"
                else:
                    errors.pop(item, None)

        if "loglevel" in ints:
            if "loglevel" not in errors:
                value = ints["loglevel"]
                if value >= Level.MAX:
                    errors["loglevel"] = (
                        f"Value {value} should be lesser than {int(Level.MAX)}"
                    )
        else:
            errors.pop("loglevel", None)

        if "onfinish" in values and "onfinish" not in errors:
            value = values["onfinish"]
            if value not in _ONFINISH_ACTIONS:
                errors["onfinish"] = (
                    f"Unrecognized value {value}; it should be either move either copy"
                )

        return not errors