# loudcheck/domain/enums/loudness_standard.py
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class ToleranceBand:
    """Inclusive integrated-loudness band and the target used for correction."""
    low: float
    high: float
    target: float

    def contains(self, lufs: float) -> bool:
        return self.low <= lufs <= self.high


class LoudnessStandard(StrEnum):
    ebu_r128 = "ebu_r128"
    atsc_a85 = "atsc_a85"

    @classmethod
    def from_flag(cls, ebu: bool) -> "LoudnessStandard":
        """True selects EBU R128, False selects ATSC A/85."""
        return cls.ebu_r128 if ebu else cls.atsc_a85

    @property
    def band(self) -> ToleranceBand:
        return _BANDS[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_BANDS = {
    LoudnessStandard.ebu_r128: ToleranceBand(low=-24.0, high=-22.0, target=-23.0),
    LoudnessStandard.atsc_a85: ToleranceBand(low=-26.0, high=-22.0, target=-24.0),
}

_DESCRIPTIONS = {
    LoudnessStandard.ebu_r128: "EBU R128 standard = -23 LUFS +/- 1, True Peak -2dB maximum",
    LoudnessStandard.atsc_a85: "ATSC A/85 RP  = -24 LKFS +/- 2, True Peak -2dB maximum",
}
