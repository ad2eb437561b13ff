from loudcheck.domain.enums.codec_type import CodecType
from loudcheck.domain.enums.loudness_standard import LoudnessStandard, ToleranceBand
from loudcheck.domain.enums.report_format import ReportFormat
__all__ = [
    "CodecType",
    "LoudnessStandard",
    "ToleranceBand",
    "ReportFormat",
]
