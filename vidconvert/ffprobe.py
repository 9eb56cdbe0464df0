"""Media information read from the JSON that ffprobe prints."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional

from .hevc import DEFAULT_HDR, HDR
from .userinput import is_int, to_int


class StreamType(str, Enum):
    """Kind of a media stream, using the ffmpeg stream specifier letter."""

    VIDEO = "v"
    AUDIO = "a"
    SUBTITLE = "s"


class Resolution(IntEnum):
    """Nominal video resolution class."""

    RES_480P = 0
    RES_720P = 1
    RES_1080P = 2
    RES_4K = 3
    RES_8K = 4


RESOLUTION_STRING = {
    Resolution.RES_480P: "480p",
    Resolution.RES_720P: "720p",
    Resolution.RES_1080P: "1080p",
    Resolution.RES_4K: "4K",
    Resolution.RES_8K: "8K",
}

RESOLUTION_MAX_HEIGHT = {
    Resolution.RES_480P: 480,
    Resolution.RES_720P: 720,
    Resolution.RES_1080P: 1080,
    Resolution.RES_4K: 2160,
    Resolution.RES_8K: 4320,
}

_COLOR_KEYS = ("pix_fmt", "color_space", "color_primaries", "color_transfer")
_FRACTION_KEYS = (
    "red_x", "red_y", "green_x", "green_y", "blue_x", "blue_y",
    "white_point_x", "white_point_y", "min_luminance", "max_luminance",
)
_LIGHT_LEVEL_KEYS = ("max_average", "max_content")


def resolution_for_height(height: int) -> Optional[Resolution]:
    """Smallest resolution class holding height, or None when above 8K."""
    for resolution in Resolution:
        if height <= RESOLUTION_MAX_HEIGHT[resolution]:
            return resolution
    return None


@dataclass
class ProbeStream:
    """One stream as reported by ffprobe."""

    codec_name: str = ""
    language: Optional[str] = None
    channels: Optional[int] = None


def _parse_json(text: str) -> Optional[Any]:
    try:
        root = json.loads(text)
    except ValueError:
        return None
    if isinstance(root, (dict, list)) and root:
        return root
    return None


def _as_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise TypeError(f"value {value!r} is not convertible to a string")


def _integral(value: Any, low: int, high: int) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and low <= value <= high:
        return value
    return None


def _as_int(value: Any) -> Optional[int]:
    return _integral(value, -(2**31), 2**31 - 1)


def _as_uint(value: Any) -> Optional[int]:
    return _integral(value, 0, 2**32 - 1)


class FFprobe:
    """Colour, resolution and stream information of one media file."""

    def __init__(self) -> None:
        self.pix_fmt: Optional[str] = None
        self.color_space: Optional[str] = None
        self.color_primaries: Optional[str] = None
        self.color_transfer: Optional[str] = None
        self.width: Optional[int] = None
        self.height: Optional[int] = None
        self.side_data: dict[str, str] = {}
        self._streams: dict[StreamType, list[ProbeStream]] = {
            kind: [] for kind in StreamType
        }

    def load_video_color(self, text: str) -> None:
        """Read colour data and HDR side data of the first video frame."""
        root = _parse_json(text)
        if root is None:
            return
        frames = next(iter(root.values())) if isinstance(root, dict) else root[0]
        if not isinstance(frames, list) or not frames:
            return
        frame = frames[0]
        if not isinstance(frame, dict):
            return
        try:
            for key, value in frame.items():
                if value is None:
                    continue
                if key in _COLOR_KEYS:
                    setattr(self, key, _as_string(value))
                elif key == "side_data_list" and isinstance(value, list):
                    self._load_side_data(value)
        except TypeError:
            # Malformed data is ignored; whatever was read so far is kept.
            pass

    def _load_side_data(self, entries: list) -> None:
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            for key, value in entry.items():
                if value is None:
                    continue
                if key in _FRACTION_KEYS:
                    self.side_data[key] = _as_string(value).split("/", 1)[0]
                elif key in _LIGHT_LEVEL_KEYS:
                    self.side_data[key] = _as_string(value)

    def load_video_resolution(self, text: str) -> None:
        """Read width and height of the first video stream."""
        root = _parse_json(text)
        if not isinstance(root, dict):
            return
        streams = root.get("streams")
        if isinstance(streams, dict):
            streams = list(streams.values())
        if not isinstance(streams, list):
            return
        for item in streams:
            if not isinstance(item, dict):
                continue
            for key, value in item.items():
                number = _as_uint(value)
                if number is None:
                    continue
                if key == "height":
                    self.height = number
                elif key == "width":
                    self.width = number

    def load_stream_data(self, text: str, stream_type: StreamType | str) -> None:
        """Replace the streams of one type with those listed in text."""
        kind = StreamType(stream_type)
        found: list[ProbeStream] = []
        self._streams[kind] = found
        root = _parse_json(text)
        if not isinstance(root, dict):
            return
        streams = root.get("streams")
        if not isinstance(streams, list):
            return
        try:
            for item in streams:
                stream = ProbeStream()
                if isinstance(item, dict):
                    self._load_stream(item, stream)
                found.append(stream)
        except TypeError:
            # Malformed data is ignored; streams read so far are kept.
            pass

    def _load_stream(self, item: dict, stream: ProbeStream) -> None:
        for key, value in item.items():
            if key == "codec_name" and value is not None:
                stream.codec_name = _as_string(value)
            elif key == "channels" and _as_int(value) is not None:
                stream.channels = _as_int(value)
            elif key == "width" and _as_int(value) is not None:
                self.width = _as_int(value)
            elif key == "height" and _as_int(value) is not None:
                self.height = _as_int(value)
            elif key == "tags" and value:
                if isinstance(value, dict):
                    first = value[min(value)]
                elif isinstance(value, list):
                    first = value[0]
                else:
                    continue
                if first is not None:
                    stream.language = _as_string(first)

    def streams(self, stream_type: StreamType | str) -> list[ProbeStream]:
        """The streams of one type, in file order."""
        return list(self._streams[StreamType(stream_type)])

    def resolution(self) -> Optional[Resolution]:
        """Resolution class from the detected height, if any."""
        if self.height is None:
            return None
        return resolution_for_height(self.height)

    def is_hdr_detected(self) -> bool:
        """Tell whether complete HDR mastering metadata was found."""
        return all(
            key in self.side_data and is_int(self.side_data[key])
            for key in _FRACTION_KEYS
        )

    def is_hdr_factible(self) -> bool:
        """Tell whether the colour format suits HDR even without metadata."""
        return (
            self.pix_fmt == "yuv420p10le"
            and self.color_space == "bt2020nc"
            and self.color_primaries == "bt2020"
            and self.color_transfer == "smpte2084"
        )

    def get_hdr(self) -> HDR:
        """Detected HDR metadata, or the default HDR when none was found."""
        if not self.is_hdr_detected():
            return DEFAULT_HDR
        values = {key: to_int(self.side_data[key]) for key in _FRACTION_KEYS}
        light_level = None
        if "max_content" in self.side_data and "max_average" in self.side_data:
            light_level = (
                int(self.side_data["max_content"]),
                int(self.side_data["max_average"]),
            )
        return HDR(
            red_x=values["red_x"],
            red_y=values["red_y"],
            green_x=values["green_x"],
            green_y=values["green_y"],
            blue_x=values["blue_x"],
            blue_y=values["blue_y"],
            white_point_x=values["white_point_x"],
            white_point_y=values["white_point_y"],
            luminance_min=values["min_luminance"],
            luminance_max=values["max_luminance"],
            light_level=light_level,
        )