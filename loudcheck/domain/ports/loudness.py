from __future__ import annotations
from pathlib import Path
from typing import Protocol

class LoudnessMeterPort(Protocol):
    # Returns the meter's full diagnostic (stderr) capture, unparsed.
    def measure(self, path: Path) -> str: ...
