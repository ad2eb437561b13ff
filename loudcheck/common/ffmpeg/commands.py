# loudcheck/common/ffmpeg/commands.py
from __future__ import annotations
from pathlib import Path
from typing import List

from loudcheck.domain.entities.loudness import CorrectionPlan


def build_ffprobe_cmd(input_path: str | Path, *, ffprobe_bin: str = "ffprobe", log_level: str = "error") -> List[str]:
    """
    Build an ffprobe command that emits container and stream metadata as JSON.
    """
    return [
        ffprobe_bin,
        "-v", log_level,
        "-print_format", "json",
        "-show_format",
        "-show_streams",
        "--",  # Stop option parsing in case of weird filenames
        str(input_path),
    ]


def build_ebur128_cmd(input_path: str | Path, *, ffmpeg_bin: str = "ffmpeg") -> List[str]:
    """
    Decode the input through the ebur128 filter and discard the output.
    The loudness readings end up on stderr.
    """
    return [
        ffmpeg_bin,
        "-nostdin",
        "-i", str(input_path),
        "-filter_complex", "ebur128",
        "-f", "null",
        "-",
    ]


def build_transcode_cmd(plan: CorrectionPlan, *, ffmpeg_bin: str = "ffmpeg") -> List[str]:
    """
    Copy video untouched, re-encode audio with the original codec/bitrate/
    channels/sample rate and apply the corrective gain. Overwrites the target.
    """
    a = plan.audio
    return [
        ffmpeg_bin,
        "-threads", "auto",
        "-i", str(plan.input_path),
        "-vcodec", "copy",
        "-acodec", a.codec,
        "-b:a", a.bit_rate,
        "-ac", str(a.channels),
        "-ar", a.sample_rate,
        "-strict", "experimental",
        "-q:v", "1",
        "-q:a", "1",
        "-filter_complex", plan.volume_filter,
        "-y",
        str(plan.output_path),
    ]
