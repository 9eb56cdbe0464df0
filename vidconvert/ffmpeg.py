"""A film conversion job and the FFmpeg command line that performs it."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .data import Group
from .streams import Stream

PathLike = Union[str, Path]

FFMPEG_INIT_OPTIONS = (
    "-hide_banner", "-y", "-loglevel", "error",
    "-map_metadata", "0", "-map_chapters", "0",
)


class FFmpegJob:
    """The streams to encode for one film, in output order."""

    def __init__(
        self,
        film_id: int,
        input_file: PathLike,
        group: Optional[Group] = None,
        title: Optional[PathLike] = None,
    ):
        self.film_id = film_id
        self.input_file = Path(input_file)
        self.group = group
        self.title: Optional[Path] = Path(title) if title is not None else None
        self.container = "mkv"
        self.streams: list[Stream] = []
        self._positions = {"v": 0, "a": 0, "s": 0}

    def add_stream(self, stream: Stream) -> Stream:
        """Append a copy of stream, numbering it within its kind; return the copy."""
        added = stream.clone()
        if added.kind in self._positions:
            added.stream_position = self._positions[added.kind]
            self._positions[added.kind] += 1
        self.streams.append(added)
        return added

    def is_empty(self) -> bool:
        """Tell whether no stream has been added."""
        return not self.streams

    def output_file(self) -> Path:
        """Relative output path: the title or input name with the container extension."""
        name = self.title.name if self.title is not None else self.input_file.name
        return (self.input_file.parent / name).with_suffix("." + self.container)


def convert_arguments(
    job: FFmpegJob,
    input_folder: PathLike,
    work_folder: PathLike,
    encoder_tag: str,
) -> list[str]:
    """FFmpeg arguments converting job from input_folder into work_folder.

    encoder_tag is written as the encoder metadata of the video streams.
    """
    arguments = ["-i", str(Path(input_folder) / job.input_file), *FFMPEG_INIT_OPTIONS]
    for stream in job.streams:
        arguments += stream.ffmpeg_parameters()
    arguments += [
        "-metadata", "title=",
        "-metadata:s:v", f"encoder={encoder_tag}",
        "-map", "0:t?",
        "-c:t", "copy",
        str(Path(work_folder) / job.output_file()),
    ]
    return arguments