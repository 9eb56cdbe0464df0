from vidconvert.data import Codec, HDRData
from vidconvert.hevc import DEFAULT_HDR, HDR, HEVC


def test_default_hdr_parameters():
    assert DEFAULT_HDR.ffmpeg_parameters() == (
        "colorprim=bt2020:colormatrix=bt2020nc:transfer=smpte2084:master-display="
        "G(13250,34500)B(7500,3000)R(34000,16000)WP(15635,16450)L(1,10000000)"
        ":hdr10=1"
    )


def test_light_level_is_appended():
    hdr = HDR(1, 2, 3, 4, 5, 6, 7, 8, 9, 10, light_level=(1000, 400))
    params = hdr.ffmpeg_parameters()
    assert params.endswith(":max-cll=1000,400:hdr10=1")
    assert "G(3,4)B(5,6)R(1,2)WP(7,8)L(9,10)" in params


def test_data_round_trip():
    data = HDRData(1, 2, 3, 4, 5, 6, 7, 8, 9, 10, light_level=(11, 12))
    assert HDR.from_data(data).to_data() == data
    hdr = HDR(1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
    assert HDR.from_data(hdr.to_data()) == hdr


def test_hevc_parameters_without_hdr():
    stream = HEVC(0)
    params = stream.ffmpeg_parameters()
    assert stream.codec is Codec.VIDEO_HEVC
    assert params[:4] == ["-map", "0:v:0", "-c:v:0", "libx265"]
    assert params[params.index("-profile:v:0") + 1] == "main10"
    assert params[params.index("-level:v:0") + 1] == "5.1"
    assert params[params.index("-pix_fmt:v:0") + 1] == "yuv420p10le"
    assert params[params.index("-bufsize:v:0") + 1] == "200M"
    x265 = params[params.index("-x265-params:v:0") + 1]
    assert x265 == HEVC.X265_PARAMS + ":deblock=-4,-4"
    assert "-tune:v:0" not in params


def test_hevc_animation_tuning():
    stream = HEVC(0)
    stream.set_tune_animation()
    params = stream.ffmpeg_parameters()
    assert params[-2:] == ["-tune:v:0", "animation"]
    assert stream.x265_params().endswith(":deblock=-2,-2")


def test_hevc_with_hdr_record():
    stream = HEVC(1)
    stream.hdr = DEFAULT_HDR.to_data()
    assert stream.hdr == DEFAULT_HDR
    assert stream.x265_params().endswith(":" + DEFAULT_HDR.ffmpeg_parameters())


def test_clone_keeps_hdr_and_is_independent():
    stream = HEVC(0)
    stream.hdr = DEFAULT_HDR
    copy = stream.clone()
    copy.set_tune_animation()
    assert copy.hdr == DEFAULT_HDR
    assert stream.is_animation is False