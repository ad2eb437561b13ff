from __future__ import annotations
from pathlib import Path
from typing import Protocol
from loudcheck.domain.entities.probe import MediaProbeReport

class MediaProbePort(Protocol):
    def probe(self, path: Path) -> MediaProbeReport: ...
