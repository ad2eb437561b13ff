from .report import LoudnessReportSchema

__all__ = ["LoudnessReportSchema"]
