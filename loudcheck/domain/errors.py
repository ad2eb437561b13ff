# loudcheck/domain/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class LoudCheckError(RuntimeError):
    """Base for every fatal error that aborts a compliance check."""
    message: str
    stderr: Optional[str] = None
    rc: Optional[int] = None

    def __str__(self) -> str:
        return self.message


class MediaFileNotFoundError(LoudCheckError):
    """Input path does not exist; raised before any probing."""


class ToolUnavailableError(LoudCheckError):
    """ffprobe/ffmpeg could not be located."""


class ToolInvocationError(LoudCheckError):
    """External process failed to start, timed out or exited non-zero."""


class LoudnessParseError(LoudCheckError):
    """Diagnostic text held no integrated-loudness reading at all."""
