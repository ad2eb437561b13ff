# loudcheck/domain/policies/audio_selector.py
from __future__ import annotations

from functools import reduce

from loudcheck.domain.entities.loudness import AudioStreamParams
from loudcheck.domain.entities.probe import MediaProbeReport, StreamDescriptor


def select_audio_params(report: MediaProbeReport) -> AudioStreamParams:
    """
    Fold over the streams in report order; each audio stream overwrites the
    running selection, so the last audio stream wins. With no audio stream
    the zero-valued AudioStreamParams comes back and no error is raised.
    """
    return reduce(_take_if_audio, report.streams, AudioStreamParams())


def _take_if_audio(acc: AudioStreamParams, stream: StreamDescriptor) -> AudioStreamParams:
    if not stream.is_audio:
        return acc
    return AudioStreamParams(
        codec=stream.codec_name,
        bit_rate=stream.bit_rate,
        sample_rate=stream.sample_rate,
        channels=stream.channels,
    )
