# loudcheck/domain/dataclasses/check.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loudcheck.domain.entities.loudness import (
    AudioStreamParams,
    ComplianceResult,
    CorrectionPlan,
    LoudnessMeasurement,
    TranscodeOutcome,
)
from loudcheck.domain.enums.loudness_standard import LoudnessStandard
from loudcheck.domain.enums.report_format import ReportFormat


@dataclass(frozen=True)
class CheckOptions:
    """Per-run configuration threaded explicitly into ComplianceService.check()."""
    input_path: Path
    standard: LoudnessStandard = LoudnessStandard.ebu_r128
    autofix: bool = False
    report_format: ReportFormat = ReportFormat.json


@dataclass(frozen=True)
class ComplianceOutcome:
    input_path: Path
    audio: AudioStreamParams
    measurement: LoudnessMeasurement
    result: ComplianceResult
    plan: CorrectionPlan
    transcode: Optional[TranscodeOutcome] = None

    @property
    def corrected(self) -> bool:
        return self.transcode is not None
