# loudcheck/domain/entities/probe.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from loudcheck.domain.enums.codec_type import CodecType


@dataclass(frozen=True)
class StreamDescriptor:
    """
    One elementary stream as reported by ffprobe.
    Absent or mistyped fields hold their zero value ("" / 0), never None.
    Only codec_type, codec_name, bit_rate, sample_rate and channels feed
    the loudness decision; the rest is carried through for reporting.
    """
    index: int = 0
    codec_type: CodecType = CodecType.other
    codec_name: str = ""
    codec_long_name: str = ""
    profile: str = ""
    bit_rate: str = ""       # bits/sec, string-encoded by ffprobe
    sample_rate: str = ""    # Hz, string-encoded by ffprobe
    channels: int = 0
    sample_fmt: str = ""
    bits_per_sample: int = 0
    width: int = 0
    height: int = 0
    pix_fmt: str = ""
    avg_frame_rate: str = ""
    r_frame_rate: str = ""
    time_base: str = ""
    start_time: str = ""
    duration: str = ""
    tags: Dict[str, str] = field(default_factory=dict)

    @property
    def is_audio(self) -> bool:
        return self.codec_type is CodecType.audio


@dataclass(frozen=True)
class FormatDescriptor:
    filename: str = ""
    format_name: str = ""
    format_long_name: str = ""
    nb_streams: int = 0
    start_time: str = ""
    duration: str = ""
    size: str = ""
    bit_rate: str = ""
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class MediaProbeReport:
    """Parsed ffprobe output: ordered streams plus the container format."""
    streams: Tuple[StreamDescriptor, ...] = ()
    format: FormatDescriptor = field(default_factory=FormatDescriptor)

    @property
    def audio_streams(self) -> Tuple[StreamDescriptor, ...]:
        return tuple(s for s in self.streams if s.is_audio)
