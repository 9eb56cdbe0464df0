import json

import pytest

from vidconvert.ffprobe import (
    RESOLUTION_STRING,
    FFprobe,
    ProbeStream,
    Resolution,
    StreamType,
    resolution_for_height,
)
from vidconvert.hevc import DEFAULT_HDR, HDR

SIDE_DATA = {
    "side_data_type": "Mastering display metadata",
    "red_x": "35400/50000",
    "red_y": "14600/50000",
    "green_x": "8500/50000",
    "green_y": "39850/50000",
    "blue_x": "6550/50000",
    "blue_y": "2300/50000",
    "white_point_x": "15635/50000",
    "white_point_y": "16450/50000",
    "min_luminance": "50/10000",
    "max_luminance": "40000000/10000",
}

LIGHT_DATA = {
    "side_data_type": "Content light level metadata",
    "max_content": 1000,
    "max_average": 400,
}


def color_json(side_data_list):
    return json.dumps(
        {
            "frames": [
                {
                    "pix_fmt": "yuv420p10le",
                    "color_space": "bt2020nc",
                    "color_primaries": "bt2020",
                    "color_transfer": "smpte2084",
                    "side_data_list": side_data_list,
                }
            ]
        }
    )


@pytest.mark.parametrize(
    "height, expected",
    [
        (480, Resolution.RES_480P),
        (481, Resolution.RES_720P),
        (1080, Resolution.RES_1080P),
        (2160, Resolution.RES_4K),
        (4320, Resolution.RES_8K),
        (4321, None),
    ],
)
def test_resolution_for_height(height, expected):
    assert resolution_for_height(height) == expected


def test_resolution_strings():
    assert RESOLUTION_STRING[resolution_for_height(2160)] == "4K"
    assert RESOLUTION_STRING[resolution_for_height(1080)] == "1080p"


def test_new_probe_is_empty():
    probe = FFprobe()
    assert all(probe.streams(kind) == [] for kind in StreamType)
    assert probe.resolution() is None
    assert probe.is_hdr_detected() is False


def test_load_stream_data():
    probe = FFprobe()
    text = json.dumps(
        {
            "streams": [
                {"index": 1, "codec_name": "aac", "channels": 6, "tags": {"language": "eng"}},
                {"index": 2, "codec_name": "ac3", "channels": 2},
            ]
        }
    )
    probe.load_stream_data(text, StreamType.AUDIO)
    assert probe.streams("a") == [
        ProbeStream(codec_name="aac", language="eng", channels=6),
        ProbeStream(codec_name="ac3", language=None, channels=2),
    ]
    assert probe.streams(StreamType.VIDEO) == []


def test_load_stream_data_replaces_previous():
    probe = FFprobe()
    probe.load_stream_data(json.dumps({"streams": [{"codec_name": "srt"}]}), "s")
    probe.load_stream_data(json.dumps({"streams": [{"codec_name": "ass"}]}), "s")
    assert [s.codec_name for s in probe.streams("s")] == ["ass"]


def test_invalid_json_clears_streams():
    probe = FFprobe()
    probe.load_stream_data(json.dumps({"streams": [{"codec_name": "h264"}]}), "v")
    probe.load_stream_data("not json", "v")
    assert probe.streams("v") == []


def test_stream_data_sets_dimensions():
    probe = FFprobe()
    probe.load_stream_data(
        json.dumps({"streams": [{"codec_name": "hevc", "width": 3840, "height": 2160}]}),
        StreamType.VIDEO,
    )
    assert (probe.width, probe.height) == (3840, 2160)
    assert probe.resolution() == Resolution.RES_4K


def test_load_video_resolution():
    probe = FFprobe()
    probe.load_video_resolution(json.dumps({"streams": [{"width": 1920, "height": 1080}]}))
    assert (probe.width, probe.height) == (1920, 1080)
    assert probe.resolution() == Resolution.RES_1080P


def test_load_video_resolution_ignores_negative():
    probe = FFprobe()
    probe.load_video_resolution(json.dumps({"streams": [{"width": -1, "height": -1}]}))
    assert probe.width is None
    assert probe.height is None


def test_load_video_color_with_hdr():
    probe = FFprobe()
    probe.load_video_color(color_json([SIDE_DATA, LIGHT_DATA]))
    assert probe.pix_fmt == "yuv420p10le"
    assert probe.color_transfer == "smpte2084"
    assert probe.is_hdr_factible() is True
    assert probe.is_hdr_detected() is True
    assert probe.side_data["red_x"] == "35400"
    assert probe.get_hdr() == HDR(
        35400, 14600, 8500, 39850, 6550, 2300, 15635, 16450, 50, 40000000, (1000, 400)
    )


def test_get_hdr_without_light_level():
    probe = FFprobe()
    probe.load_video_color(color_json([SIDE_DATA]))
    hdr = probe.get_hdr()
    assert hdr.light_level is None
    assert hdr.luminance_max == 40000000


def test_get_hdr_defaults_when_not_detected():
    probe = FFprobe()
    probe.load_video_color(color_json([]))
    assert probe.is_hdr_detected() is False
    assert probe.is_hdr_factible() is True
    assert probe.get_hdr() == DEFAULT_HDR


def test_sdr_is_not_factible_and_nulls_ignored():
    probe = FFprobe()
    probe.load_video_color(
        json.dumps({"frames": [{"pix_fmt": "yuv420p", "color_space": None}]})
    )
    assert probe.pix_fmt == "yuv420p"
    assert probe.color_space is None
    assert probe.is_hdr_factible() is False


def test_incomplete_side_data_not_detected():
    probe = FFprobe()
    partial = {k: v for k, v in SIDE_DATA.items() if k != "blue_y"}
    probe.load_video_color(color_json([partial]))
    assert probe.is_hdr_detected() is False
    assert probe.get_hdr() == DEFAULT_HDR