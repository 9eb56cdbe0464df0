"""Records describing films, their streams and groups as kept in the database."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Optional, Tuple


class Priority(IntEnum):
    """Conversion priority of a film."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    IMPORTANT = 3
    MAX = 4


class Codec(IntEnum):
    """Target codec of a stream; the values are stored in the database."""

    VIDEO_HEVC = 0
    VIDEO_COPY = 1
    AUDIO_AAC = 2
    AUDIO_FDKAAC = 3
    AUDIO_AC3 = 4
    AUDIO_COPY = 5
    AUDIO_EAC3 = 6
    AUDIO_OPUS = 7
    SUBTITLE_COPY = 8
    INVALID_CODEC = 666


_CODEC_DESCRIPTIONS = {
    Codec.VIDEO_HEVC: "HEVC/H.265",
    Codec.VIDEO_COPY: "Video Copy",
    Codec.AUDIO_AAC: "Advanced Audio Codec (AAC)",
    Codec.AUDIO_FDKAAC: "Fraunhoffer Advanced Audio Codec (AAC-HE)",
    Codec.AUDIO_AC3: "Dolby AC-3",
    Codec.AUDIO_COPY: "Audio Copy",
    Codec.AUDIO_EAC3: "Dolby Enhanced AC-3",
    Codec.AUDIO_OPUS: "Opus",
    Codec.SUBTITLE_COPY: "Subtitle Copy",
    Codec.INVALID_CODEC: "Invalid or unsupported codec",
}


def codec_description(codec: Codec | int) -> str:
    """Return the human readable name of a codec; ValueError for unknown values."""
    return _CODEC_DESCRIPTIONS[Codec(codec)]


@dataclass
class HDRData:
    """HDR mastering display metadata of a video stream."""

    red_x: int
    red_y: int
    green_x: int
    green_y: int
    blue_x: int
    blue_y: int
    white_point_x: int
    white_point_y: int
    luminance_min: int
    luminance_max: int
    light_level: Optional[Tuple[int, int]] = None


@dataclass
class StreamData:
    """A stream selection of a film; an id of -1 means every stream of its type."""

    codec: Codec
    id: int = 0
    is_animation: bool = False
    max_rate: Optional[str] = None
    bitrate: Optional[str] = None
    hdr: Optional[HDRData] = None
    channels: Optional[int] = None


@dataclass
class Group:
    """A folder of films added together."""

    id: int
    folder: Path


@dataclass
class Film:
    """A film queued for conversion; id is None when not stored yet."""

    file: Path
    id: Optional[int] = None
    priority: Priority = Priority.NORMAL
    title: Optional[Path] = None
    processing: bool = False
    unsupported: bool = False
    group: Optional[Group] = None
    streams: list[StreamData] = field(default_factory=list)