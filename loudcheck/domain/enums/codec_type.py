from __future__ import annotations
from enum import StrEnum

class CodecType(StrEnum):
    audio = "audio"
    video = "video"
    subtitle = "subtitle"
    other = "other"

    @classmethod
    def parse(cls, value: object) -> "CodecType":
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.other
