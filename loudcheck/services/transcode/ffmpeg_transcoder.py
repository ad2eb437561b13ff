# loudcheck/services/transcode/ffmpeg_transcoder.py
from __future__ import annotations

from typing import Optional

from loudcheck.common.ffmpeg.commands import build_transcode_cmd
from loudcheck.common.ffmpeg.process import resolve_binary, run_tool
from loudcheck.common.logging import get_logger
from loudcheck.common.settings import Settings, get_settings
from loudcheck.domain.entities.loudness import CorrectionPlan, TranscodeOutcome
from loudcheck.domain.ports.transcode import TranscoderPort

logger = get_logger(__name__)


class FFmpegTranscoder(TranscoderPort):
    """Executes a CorrectionPlan with ffmpeg, overwriting the destination."""

    def __init__(
        self,
        ffmpeg_bin: Optional[str] = None,
        timeout_sec: Optional[int] = None,
        settings: Optional[Settings] = None,
    ):
        cfg = settings or get_settings()
        self.ffmpeg_bin = resolve_binary(ffmpeg_bin or cfg.ffmpeg.bin, "ffmpeg")
        self.timeout_sec = timeout_sec or cfg.ffmpeg.transcode_timeout_sec

    def transcode(self, plan: CorrectionPlan) -> TranscodeOutcome:
        logger.info("correcting %s -> %s (gain %s)", plan.input_path, plan.output_path, plan.gain)
        proc = run_tool(build_transcode_cmd(plan, ffmpeg_bin=self.ffmpeg_bin), "ffmpeg transcode", timeout_sec=self.timeout_sec)
        return TranscodeOutcome(output_path=plan.output_path, rc=proc.returncode, stderr=proc.stderr or "")
