# loudcheck/services/loudness/ebur128_meter.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from loudcheck.common.ffmpeg.commands import build_ebur128_cmd
from loudcheck.common.ffmpeg.process import resolve_binary, run_tool
from loudcheck.common.logging import get_logger
from loudcheck.common.settings import Settings, get_settings
from loudcheck.domain.errors import ToolInvocationError
from loudcheck.domain.ports.loudness import LoudnessMeterPort

logger = get_logger(__name__)


class FFmpegLoudnessMeter(LoudnessMeterPort):
    """Runs ffmpeg's ebur128 filter and hands back its stderr untouched."""

    def __init__(
        self,
        ffmpeg_bin: Optional[str] = None,
        timeout_sec: Optional[int] = None,
        settings: Optional[Settings] = None,
    ):
        cfg = settings or get_settings()
        self.ffmpeg_bin = resolve_binary(ffmpeg_bin or cfg.ffmpeg.bin, "ffmpeg")
        self.timeout_sec = timeout_sec or cfg.ffmpeg.measure_timeout_sec

    def measure(self, path: Path) -> str:
        proc = run_tool(build_ebur128_cmd(path, ffmpeg_bin=self.ffmpeg_bin), "ffmpeg ebur128", timeout_sec=self.timeout_sec)
        if not proc.stderr:
            raise ToolInvocationError("ffmpeg ebur128 produced no diagnostic output", rc=proc.returncode)
        logger.debug("ebur128 diagnostics for %s: %d chars", path, len(proc.stderr))
        return proc.stderr
