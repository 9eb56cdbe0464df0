"""Stream selections and the FFmpeg arguments that encode them."""

from __future__ import annotations

import copy
from typing import Optional

from .data import Codec


class Stream:
    """A mapped input stream with its encoder and output position.

    A stream id of -1 selects every stream of its kind.
    """

    def __init__(self, stream_id: int, encoder: str, codec: Codec, kind: str):
        self.stream_id = stream_id
        self.encoder = encoder
        self.codec = Codec(codec)
        self.kind = kind
        self.stream_position = 0
        self.bitrate: Optional[str] = None

    def ffmpeg_stream_id(self) -> str:
        """Specifier of the input stream, e.g. ``a:1``, or just the kind for all."""
        if self.stream_id >= 0:
            return f"{self.kind}:{self.stream_id}"
        return self.kind

    def ffmpeg_stream_pos(self) -> str:
        """Specifier of the output stream, e.g. ``a:0``, or just the kind for all."""
        if self.stream_id >= 0:
            return f"{self.kind}:{self.stream_position}"
        return self.kind

    def ffmpeg_parameters(self) -> list[str]:
        """FFmpeg arguments mapping and encoding this stream."""
        # An "all streams" selection may match nothing, so it is made optional.
        optional = "?" if self.stream_id == -1 else ""
        result = [
            "-map",
            f"0:{self.ffmpeg_stream_id()}{optional}",
            f"-c:{self.ffmpeg_stream_pos()}",
            self.encoder,
        ]
        if self.bitrate:
            result += [f"-b:{self.ffmpeg_stream_pos()}", self.bitrate]
        return result

    def clone(self) -> "Stream":
        """Return an independent copy of this stream."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(stream_id={self.stream_id}, "
            f"position={self.stream_position})"
        )


class AudioStream(Stream):
    """An audio stream, optionally downmixed to a channel count."""

    def __init__(self, stream_id: int, encoder: str, codec: Codec):
        super().__init__(stream_id, encoder, codec, "a")
        self.channels: Optional[int] = None
        self.bitrate_per_channel: Optional[int] = None

    def set_channels(self, channels: int) -> None:
        """Set the channel count, deriving the bitrate when it scales per channel."""
        self.channels = channels
        if self.bitrate_per_channel:
            self.bitrate = f"{self.bitrate_per_channel * channels}k"

    def ffmpeg_parameters(self) -> list[str]:
        result = super().ffmpeg_parameters()
        if self.channels:
            result += [f"-ac:{self.ffmpeg_stream_pos()}", str(self.channels)]
        return result


class AAC(AudioStream):
    """Native FFmpeg AAC encoder."""

    def __init__(self, stream_id: int):
        super().__init__(stream_id, "aac", Codec.AUDIO_AAC)


class AC3(AudioStream):
    """Dolby AC-3 encoder."""

    def __init__(self, stream_id: int):
        super().__init__(stream_id, "ac3", Codec.AUDIO_AC3)


class EAC3(AudioStream):
    """Dolby Enhanced AC-3 encoder."""

    def __init__(self, stream_id: int):
        super().__init__(stream_id, "eac3", Codec.AUDIO_EAC3)


class FDKAAC(AudioStream):
    """Fraunhofer AAC encoder using the HE profile."""

    DEFAULT_PROFILE = "aac_he"

    def __init__(self, stream_id: int):
        super().__init__(stream_id, "libfdk_aac", Codec.AUDIO_FDKAAC)
        self.bitrate_per_channel = 128
        self.profile: Optional[str] = self.DEFAULT_PROFILE

    def ffmpeg_parameters(self) -> list[str]:
        result = super().ffmpeg_parameters()
        if self.profile:
            result += [f"-profile:{self.ffmpeg_stream_pos()}", self.profile]
        return result


class Opus(AudioStream):
    """Opus encoder; surround input is remapped to an N.1 layout."""

    def __init__(self, stream_id: int):
        super().__init__(stream_id, "libopus", Codec.AUDIO_OPUS)
        self.bitrate_per_channel = 128

    def ffmpeg_parameters(self) -> list[str]:
        result = super().ffmpeg_parameters()
        if self.channels and self.channels >= 6:
            result += [
                f"-filter:{self.ffmpeg_stream_pos()}",
                f"channelmap=channel_layout={self.channels - 1}.1",
            ]
        return result


class AudioCopy(AudioStream):
    """Audio passed through unchanged."""

    def __init__(self, stream_id: int):
        super().__init__(stream_id, "copy", Codec.AUDIO_COPY)


class SubtitleStream(Stream):
    """A subtitle stream."""

    def __init__(self, stream_id: int, encoder: str, codec: Codec):
        super().__init__(stream_id, encoder, codec, "s")


class SubtitleCopy(SubtitleStream):
    """Subtitles passed through unchanged."""

    def __init__(self, stream_id: int):
        super().__init__(stream_id, "copy", Codec.SUBTITLE_COPY)


class VideoStream(Stream):
    """A video stream with an optional maximum rate and animation tuning."""

    def __init__(self, stream_id: int, encoder: str, codec: Codec):
        super().__init__(stream_id, encoder, codec, "v")
        self.is_animation = False
        self.max_rate: Optional[str] = None

    def set_tune_animation(self) -> None:
        """Tune encoding for animated content."""
        self.is_animation = True

    def ffmpeg_parameters(self) -> list[str]:
        result = super().ffmpeg_parameters()
        if self.max_rate:
            result += [f"-maxrate:{self.ffmpeg_stream_id()}", self.max_rate]
        return result


class VideoCopy(VideoStream):
    """Video passed through unchanged; rate settings do not apply."""

    def __init__(self, stream_id: int):
        super().__init__(stream_id, "copy", Codec.VIDEO_COPY)

    def ffmpeg_parameters(self) -> list[str]:
        result = super().ffmpeg_parameters()
        if self.max_rate:
            del result[-2:]
        if self.bitrate:
            del result[-2:]
        return result