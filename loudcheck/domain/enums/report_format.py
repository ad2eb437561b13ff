from __future__ import annotations
from enum import StrEnum

class ReportFormat(StrEnum):
    json = "json"
    xml = "xml"
    simple = "simple"
    text = "text"

    @classmethod
    def parse(cls, value: str | None) -> "ReportFormat":
        """Case-insensitive lookup; anything unrecognized renders as text."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.text
