# loudcheck/services/probe/ffprobe_adapter.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from loudcheck.common.ffmpeg.commands import build_ffprobe_cmd
from loudcheck.common.ffmpeg.process import resolve_binary, run_tool
from loudcheck.common.logging import get_logger
from loudcheck.common.settings import Settings, get_settings
from loudcheck.domain.entities.probe import MediaProbeReport
from loudcheck.domain.errors import ToolInvocationError
from loudcheck.domain.policies.probe_parser import parse_probe_json
from loudcheck.domain.ports.probe import MediaProbePort

logger = get_logger(__name__)


class FFprobeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort using `ffprobe`.
    """

    def __init__(
        self,
        ffprobe_bin: Optional[str] = None,
        timeout_sec: Optional[int] = None,
        settings: Optional[Settings] = None,
    ):
        cfg = settings or get_settings()
        self.ffprobe_bin = resolve_binary(ffprobe_bin or cfg.ffprobe.bin, "ffprobe")
        self.timeout_sec = timeout_sec or cfg.ffprobe.timeout_sec
        self.log_level = cfg.ffprobe.log_level

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: Path) -> MediaProbeReport:
        cmd = build_ffprobe_cmd(path, ffprobe_bin=self.ffprobe_bin, log_level=self.log_level)
        proc = run_tool(cmd, "ffprobe", timeout_sec=self.timeout_sec)
        if not (proc.stdout or "").strip():
            raise ToolInvocationError("ffprobe produced no output", stderr=proc.stderr, rc=proc.returncode)

        report = parse_probe_json(proc.stdout)
        logger.info("probed %s: %d stream(s), %d audio", path, len(report.streams), len(report.audio_streams))
        return report
