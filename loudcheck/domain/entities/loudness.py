# loudcheck/domain/entities/loudness.py
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loudcheck.domain.enums.loudness_standard import LoudnessStandard


@dataclass(frozen=True)
class AudioStreamParams:
    """Encoding characteristics preserved by a corrective re-encode."""
    codec: str = ""
    bit_rate: str = ""
    sample_rate: str = ""
    channels: int = 0


@dataclass(frozen=True)
class LoudnessMeasurement:
    """
    Integrated loudness read from ebur128 diagnostics.
    `raw` is the matched numeric text; `integrated_lufs` is None when that
    text would not parse as a float (a degraded, non-fatal reading).
    """
    raw: str
    integrated_lufs: Optional[float] = None

    @property
    def degraded(self) -> bool:
        return self.integrated_lufs is None


def format_gain(adjustment_db: float) -> str:
    return f"{adjustment_db:.1f}dB"


@dataclass(frozen=True)
class ComplianceResult:
    passed: bool
    measured_lufs: str          # "" when no usable measurement
    adjustment_db: float        # 0.0 when passed; target - measured otherwise
    standard: LoudnessStandard = LoudnessStandard.ebu_r128

    @property
    def adjustment_string(self) -> str:
        return format_gain(self.adjustment_db)


@dataclass(frozen=True)
class CorrectionPlan:
    input_path: Path
    output_path: Path
    audio: AudioStreamParams
    gain: str                   # e.g. "-3.6dB", used as volume filter argument

    @property
    def volume_filter(self) -> str:
        return f"volume=volume={self.gain}"


@dataclass(frozen=True)
class TranscodeOutcome:
    output_path: Path
    rc: int = 0
    stderr: str = ""


_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_lufs(text: str) -> Optional[float]:
    """Plain decimal text to float; anything else (commas, underscores, blanks) is None."""
    if not text or not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)
