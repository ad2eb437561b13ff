# services/schemas/report.py
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from loudcheck.domain.entities.loudness import ComplianceResult


class LoudnessReportSchema(BaseModel):
    """Serialized compliance report; aliases are the external field names."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    file_name: str = Field(..., alias="FileName", examples=["show.mkv"])
    passed: bool = Field(..., alias="PassedOrFailed")
    loudness: str = Field("", alias="Loudness", examples=["-19.4"])
    adjustment: float = Field(0.0, alias="RecommendedAdjustment", examples=[-3.6])
    adjustment_string: str = Field("0.0dB", alias="RecommendedAdjustmentString", examples=["-3.6dB"])
    standard: str = Field(..., alias="Standard")

    @classmethod
    def from_result(cls, input_path: Path | str, result: ComplianceResult) -> "LoudnessReportSchema":
        return cls(
            file_name=Path(input_path).name,
            passed=result.passed,
            loudness=result.measured_lufs,
            adjustment=result.adjustment_db,
            adjustment_string=result.adjustment_string,
            standard=result.standard.description,
        )
