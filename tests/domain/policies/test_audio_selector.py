from __future__ import annotations

from loudcheck.domain.entities.loudness import AudioStreamParams
from loudcheck.domain.policies.audio_selector import select_audio_params
from loudcheck.domain.policies.probe_parser import parse_probe_json, parse_probe_report


def test_single_audio_stream_selected(probe_json):
    a = select_audio_params(parse_probe_json(probe_json))
    assert a == AudioStreamParams(codec="aac", bit_rate="128000", sample_rate="48000", channels=2)


def test_last_audio_stream_wins():
    report = parse_probe_report({
        "streams": [
            {"codec_type": "audio", "codec_name": "ac3", "bit_rate": "384000", "sample_rate": "48000", "channels": 6},
            {"codec_type": "video", "codec_name": "h264"},
            {"codec_type": "audio", "codec_name": "aac", "bit_rate": "96000", "sample_rate": "44100", "channels": 2},
            {"codec_type": "subtitle", "codec_name": "subrip"},
        ]
    })
    a = select_audio_params(report)
    assert a.codec == "aac"
    assert a.bit_rate == "96000"
    assert a.sample_rate == "44100"
    assert a.channels == 2


def test_no_audio_stream_yields_zero_values():
    report = parse_probe_report({"streams": [{"codec_type": "video", "codec_name": "h264"}]})
    assert select_audio_params(report) == AudioStreamParams()


def test_last_audio_stream_overwrites_even_with_missing_fields():
    report = parse_probe_report({
        "streams": [
            {"codec_type": "audio", "codec_name": "aac", "bit_rate": "128000", "sample_rate": "48000", "channels": 2},
            {"codec_type": "audio", "codec_name": "pcm_s16le", "channels": 1},
        ]
    })
    a = select_audio_params(report)
    assert a == AudioStreamParams(codec="pcm_s16le", bit_rate="", sample_rate="", channels=1)
