# loudcheck/domain/policies/loudness_extractor.py
from __future__ import annotations

import re

from loudcheck.common.logging import get_logger
from loudcheck.domain.entities.loudness import LoudnessMeasurement, parse_lufs
from loudcheck.domain.errors import LoudnessParseError

logger = get_logger(__name__)

# ebur128 prints "I: -19.4 LUFS" on every progress line and once more in the
# closing summary. The separator between the digits is deliberately any single
# character: a reading such as "-19,4" still matches but fails numeric parsing.
INTEGRATED_RE = re.compile(r"i:\s*(-?\d+.\d)\s*lufs", re.IGNORECASE | re.ASCII)


def extract_loudness(diagnostics: str) -> LoudnessMeasurement:
    """
    Pull the integrated loudness out of ffmpeg ebur128 stderr.

    The last occurrence wins (the summary follows the per-frame lines).
    Raises LoudnessParseError when nothing matches. A match whose number
    does not parse is returned as a degraded measurement instead.
    """
    matches = INTEGRATED_RE.findall((diagnostics or "").casefold())
    if not matches:
        raise LoudnessParseError("no loudness measurement found in diagnostic output")

    raw = matches[-1]
    value = parse_lufs(raw)
    if value is None:
        logger.warning("integrated loudness %r is not a number; treating as unmeasured", raw)
    return LoudnessMeasurement(raw=raw, integrated_lufs=value)
