# loudcheck/domain/policies/correction_planner.py
from __future__ import annotations

import os
from pathlib import Path

from loudcheck.domain.entities.loudness import AudioStreamParams, ComplianceResult, CorrectionPlan

FIXED_AUDIO_SUFFIX = "-fixedAudio"


def derive_output_path(input_path: Path | str, suffix: str = FIXED_AUDIO_SUFFIX) -> Path:
    """
    "<dir>/show.mkv" -> "<dir>/show-fixedAudio.mkv".

    The stem is everything before the FIRST dot of the base name while the
    extension is taken from the LAST dot, so "a.b.mov" becomes
    "a-fixedAudio.mov" (the ".b" segment is dropped).
    """
    raw = os.fspath(input_path)
    directory, name = os.path.split(raw)
    dot = name.rfind(".")
    ext = name[dot:] if dot >= 0 else ""
    stem = name.split(".")[0]
    return Path(os.path.join(directory, f"{stem}{suffix}{ext}"))


def build_correction_plan(
    input_path: Path | str,
    audio: AudioStreamParams,
    result: ComplianceResult,
    *,
    suffix: str = FIXED_AUDIO_SUFFIX,
) -> CorrectionPlan:
    """
    Combine the preserved audio parameters and the computed gain into a
    re-encode plan. Built for every check; only executed when the result
    failed and auto-correction was requested.
    """
    return CorrectionPlan(
        input_path=Path(input_path),
        output_path=derive_output_path(input_path, suffix=suffix),
        audio=audio,
        gain=result.adjustment_string,
    )
