# tests/conftest.py
from __future__ import annotations

import json

import pytest

from loudcheck.common import settings as settings_mod


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    # keep .env files and cached settings from leaking between tests
    monkeypatch.chdir(tmp_path)
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def probe_json() -> str:
    return json.dumps({
        "streams": [
            {
                "index": 0,
                "codec_type": "video",
                "codec_name": "h264",
                "width": 1920,
                "height": 1080,
                "pix_fmt": "yuv420p",
                "r_frame_rate": "25/1",
                "bit_rate": "5000000",
            },
            {
                "index": 1,
                "codec_type": "audio",
                "codec_name": "aac",
                "bit_rate": "128000",
                "sample_rate": "48000",
                "channels": 2,
                "tags": {"language": "eng"},
            },
        ],
        "format": {
            "filename": "show.mkv",
            "format_name": "matroska,webm",
            "nb_streams": 2,
            "duration": "60.000000",
            "size": "1048576",
        },
    })


@pytest.fixture()
def ebur128_stderr() -> str:
    return (
        "Input #0, matroska,webm, from 'show.mkv':\n"
        "[Parsed_ebur128_0 @ 0x55d] t: 0.4     TARGET:-23 LUFS    M: -25.1 S:-120.7     I: -25.1 LUFS       LRA:   0.0 LU\n"
        "[Parsed_ebur128_0 @ 0x55d] t: 59.9    TARGET:-23 LUFS    M: -18.2 S: -19.0     I: -19.5 LUFS       LRA:   3.1 LU\n"
        "[Parsed_ebur128_0 @ 0x55d] Summary:\n"
        "\n"
        "  Integrated loudness:\n"
        "    I:         -19.4 LUFS\n"
        "    Threshold: -29.6 LUFS\n"
        "\n"
        "  Loudness range:\n"
        "    LRA:         3.1 LU\n"
    )
