from __future__ import annotations

from typing import Protocol

from loudcheck.domain.entities.loudness import CorrectionPlan, TranscodeOutcome


class TranscoderPort(Protocol):
    def transcode(self, plan: CorrectionPlan) -> TranscodeOutcome: ...
