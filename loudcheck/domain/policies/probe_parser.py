# loudcheck/domain/policies/probe_parser.py
from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from loudcheck.common.logging import get_logger
from loudcheck.domain.entities.probe import FormatDescriptor, MediaProbeReport, StreamDescriptor
from loudcheck.domain.enums.codec_type import CodecType

logger = get_logger(__name__)


def parse_probe_json(text: str | bytes | None) -> MediaProbeReport:
    """
    Best-effort decode of `ffprobe -print_format json` output.
    Malformed JSON yields an empty report rather than an error; downstream
    selection then falls back to zero values.
    """
    try:
        data = json.loads(text or "{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("ffprobe output is not valid JSON (%s); using an empty report", e)
        data = {}
    return parse_probe_report(data)


def parse_probe_report(data: Any) -> MediaProbeReport:
    """
    Map already-decoded ffprobe JSON onto MediaProbeReport.
    Every field that is missing or of the wrong JSON type becomes the zero
    value of its declared type. No semantic validation happens here.
    """
    obj = _as_dict(data)
    raw_streams = obj.get("streams")
    streams = raw_streams if isinstance(raw_streams, list) else []
    return MediaProbeReport(
        streams=tuple(_parse_stream(_as_dict(s)) for s in streams),
        format=_parse_format(_as_dict(obj.get("format"))),
    )


def _parse_stream(s: Mapping[str, Any]) -> StreamDescriptor:
    return StreamDescriptor(
        index=_as_int(s.get("index")),
        codec_type=CodecType.parse(s.get("codec_type")),
        codec_name=_as_str(s.get("codec_name")),
        codec_long_name=_as_str(s.get("codec_long_name")),
        profile=_as_str(s.get("profile")),
        bit_rate=_as_str(s.get("bit_rate")),
        sample_rate=_as_str(s.get("sample_rate")),
        channels=_as_int(s.get("channels")),
        sample_fmt=_as_str(s.get("sample_fmt")),
        bits_per_sample=_as_int(s.get("bits_per_sample")),
        width=_as_int(s.get("width")),
        height=_as_int(s.get("height")),
        pix_fmt=_as_str(s.get("pix_fmt")),
        avg_frame_rate=_as_str(s.get("avg_frame_rate")),
        r_frame_rate=_as_str(s.get("r_frame_rate")),
        time_base=_as_str(s.get("time_base")),
        start_time=_as_str(s.get("start_time")),
        duration=_as_str(s.get("duration")),
        tags=_as_tags(s.get("tags")),
    )


def _parse_format(f: Mapping[str, Any]) -> FormatDescriptor:
    return FormatDescriptor(
        filename=_as_str(f.get("filename")),
        format_name=_as_str(f.get("format_name")),
        format_long_name=_as_str(f.get("format_long_name")),
        nb_streams=_as_int(f.get("nb_streams")),
        start_time=_as_str(f.get("start_time")),
        duration=_as_str(f.get("duration")),
        size=_as_str(f.get("size")),
        bit_rate=_as_str(f.get("bit_rate")),
        tags=_as_tags(f.get("tags")),
    )


# ---- tiny coercion helpers ----------------------------------------------------
def _as_dict(x: Any) -> Dict[str, Any]:
    return x if isinstance(x, dict) else {}

def _as_str(x: Any) -> str:
    return x if isinstance(x, str) else ""

def _as_int(x: Any) -> int:
    # JSON numbers only; bool is an int subclass but not a JSON number
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return 0
    try:
        return int(x)
    except (OverflowError, ValueError):
        return 0

def _as_tags(x: Any) -> Dict[str, str]:
    return {str(k): v for k, v in _as_dict(x).items() if isinstance(v, str)}
