# loudcheck/domain/policies/compliance.py
from __future__ import annotations

from loudcheck.domain.entities.loudness import ComplianceResult, LoudnessMeasurement, parse_lufs
from loudcheck.domain.enums.loudness_standard import LoudnessStandard


def evaluate_compliance(measured: str, standard: LoudnessStandard | bool) -> ComplianceResult:
    """
    Compare a measured integrated loudness (as text) against a standard.

    `standard` may also be the legacy flag: True for EBU R128, False for ATSC A/85.
    Unparseable text is not an error; it yields passed=False, loudness="" and
    a zero adjustment.
    """
    if isinstance(standard, bool):
        standard = LoudnessStandard.from_flag(standard)

    value = parse_lufs(measured)
    if value is None:
        return ComplianceResult(passed=False, measured_lufs="", adjustment_db=0.0, standard=standard)

    band = standard.band
    if band.contains(value):
        return ComplianceResult(passed=True, measured_lufs=measured, adjustment_db=0.0, standard=standard)
    return ComplianceResult(
        passed=False,
        measured_lufs=measured,
        adjustment_db=band.target - value,
        standard=standard,
    )


def evaluate_measurement(measurement: LoudnessMeasurement, standard: LoudnessStandard | bool) -> ComplianceResult:
    return evaluate_compliance(measurement.raw, standard)
