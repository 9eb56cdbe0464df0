"""HEVC (libx265) video encoding, including HDR10 mastering metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

from .data import Codec, HDRData
from .streams import VideoStream


@dataclass(frozen=True)
class HDR:
    """HDR10 mastering display colour volume and optional content light level."""

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

    DEFAULT_REDX: ClassVar[int] = 34000
    DEFAULT_REDY: ClassVar[int] = 16000
    DEFAULT_GREENX: ClassVar[int] = 13250
    DEFAULT_GREENY: ClassVar[int] = 34500
    DEFAULT_BLUEX: ClassVar[int] = 7500
    DEFAULT_BLUEY: ClassVar[int] = 3000
    DEFAULT_WHITEPOINTX: ClassVar[int] = 15635
    DEFAULT_WHITEPOINTY: ClassVar[int] = 16450
    DEFAULT_LUMINANCEMIN: ClassVar[int] = 1
    DEFAULT_LUMINANCEMAX: ClassVar[int] = 10000000

    @classmethod
    def from_data(cls, data: HDRData) -> "HDR":
        """Build from the stored database record."""
        light_level = tuple(data.light_level) if data.light_level is not None else None
        return cls(
            red_x=data.red_x,
            red_y=data.red_y,
            green_x=data.green_x,
            green_y=data.green_y,
            blue_x=data.blue_x,
            blue_y=data.blue_y,
            white_point_x=data.white_point_x,
            white_point_y=data.white_point_y,
            luminance_min=data.luminance_min,
            luminance_max=data.luminance_max,
            light_level=light_level,
        )

    def to_data(self) -> HDRData:
        """Return the database record holding these values."""
        return HDRData(
            red_x=self.red_x,
            red_y=self.red_y,
            green_x=self.green_x,
            green_y=self.green_y,
            blue_x=self.blue_x,
            blue_y=self.blue_y,
            white_point_x=self.white_point_x,
            white_point_y=self.white_point_y,
            luminance_min=self.luminance_min,
            luminance_max=self.luminance_max,
            light_level=self.light_level,
        )

    def ffmpeg_parameters(self) -> str:
        """The x265 parameter fragment describing this HDR metadata."""
        # libx265 ignores master-display unless the order is G, B, R, WP, L.
        result = (
            "colorprim=bt2020:colormatrix=bt2020nc:transfer=smpte2084:master-display="
            f"G({self.green_x},{self.green_y})"
            f"B({self.blue_x},{self.blue_y})"
            f"R({self.red_x},{self.red_y})"
            f"WP({self.white_point_x},{self.white_point_y})"
            f"L({self.luminance_min},{self.luminance_max})"
        )
        if self.light_level is not None:
            content, average = self.light_level
            result += f":max-cll={content},{average}"
        return result + ":hdr10=1"


DEFAULT_HDR = HDR(
    HDR.DEFAULT_REDX,
    HDR.DEFAULT_REDY,
    HDR.DEFAULT_GREENX,
    HDR.DEFAULT_GREENY,
    HDR.DEFAULT_BLUEX,
    HDR.DEFAULT_BLUEY,
    HDR.DEFAULT_WHITEPOINTX,
    HDR.DEFAULT_WHITEPOINTY,
    HDR.DEFAULT_LUMINANCEMIN,
    HDR.DEFAULT_LUMINANCEMAX,
)


class HEVC(VideoStream):
    """A video stream encoded to 10-bit HEVC with libx265."""

    DEFAULT_HDR: ClassVar[HDR] = DEFAULT_HDR
    DEFAULT_BUFFSIZE: ClassVar[str] = "200M"
    X265_PARAMS: ClassVar[str] = (
        "level=5.1:ref=4:hme=1:hme-search=umh,umh,star:subme=4:bframes=8:rd=4:"
        "rd-refine=0:qcomp=0.65:fades=1:strong-intra-smoothing=1:ctu=32:qg-size=32:"
        "aq-mode=4:sao=1:selective-sao=4:rdoq-level=1:psy-rd=4.0:psy-rdoq=15.0:"
        "limit-modes=0:limit-refs=0:limit-tu=0:weightb=1:weightp=1:rect=1:amp=1:"
        "wpp=1:pmode=0:pme=0:b-intra=1:b-adapt=2:b-pyramid=1:vbv-bufsize=160000:"
        "vbv-maxrate=160000:log-level=error"
    )

    def __init__(self, stream_id: int):
        super().__init__(stream_id, "libx265", Codec.VIDEO_HEVC)
        self._hdr: Optional[HDR] = None

    @property
    def hdr(self) -> Optional[HDR]:
        """HDR metadata to embed, or None for SDR output."""
        return self._hdr

    @hdr.setter
    def hdr(self, value: Union[HDR, HDRData, None]) -> None:
        if isinstance(value, HDRData):
            value = HDR.from_data(value)
        self._hdr = value

    def x265_params(self) -> str:
        """The value handed to -x265-params."""
        deblock = "deblock=-2,-2" if self.is_animation else "deblock=-4,-4"
        params = f"{self.X265_PARAMS}:{deblock}"
        if self._hdr is not None:
            params += ":" + self._hdr.ffmpeg_parameters()
        return params

    def ffmpeg_parameters(self) -> list[str]:
        result = super().ffmpeg_parameters()
        stream = self.ffmpeg_stream_id()
        result += [
            f"-profile:{stream}", "main10",
            f"-level:{stream}", "5.1",
            f"-x265-params:{stream}", self.x265_params(),
            f"-pix_fmt:{stream}", "yuv420p10le",
            f"-bufsize:{stream}", self.DEFAULT_BUFFSIZE,
        ]
        if self.is_animation:
            result += [f"-tune:{stream}", "animation"]
        return result