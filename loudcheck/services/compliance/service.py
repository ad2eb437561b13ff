# loudcheck/services/compliance/service.py
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Tuple

from loudcheck.common.logging import get_logger
from loudcheck.common.settings import Settings, get_settings
from loudcheck.domain.dataclasses.check import CheckOptions, ComplianceOutcome
from loudcheck.domain.entities.probe import MediaProbeReport
from loudcheck.domain.errors import MediaFileNotFoundError
from loudcheck.domain.policies.audio_selector import select_audio_params
from loudcheck.domain.policies.compliance import evaluate_measurement
from loudcheck.domain.policies.correction_planner import build_correction_plan
from loudcheck.domain.policies.loudness_extractor import extract_loudness
from loudcheck.domain.ports.loudness import LoudnessMeterPort
from loudcheck.domain.ports.probe import MediaProbePort
from loudcheck.domain.ports.transcode import TranscoderPort

logger = get_logger(__name__)


class ComplianceService:
    """
    Orchestrates one loudness check:
    probe -> select audio -> measure -> extract -> evaluate -> plan -> (optional) correct.

    Ports default to the ffmpeg/ffprobe adapters; tests pass fakes instead.
    """

    def __init__(
        self,
        prober: Optional[MediaProbePort] = None,
        meter: Optional[LoudnessMeterPort] = None,
        transcoder: Optional[TranscoderPort] = None,
        settings: Optional[Settings] = None,
    ):
        self.cfg = settings or get_settings()
        self._prober = prober
        self._meter = meter
        self._transcoder = transcoder

    # ---- lazily built adapters -------------------------------------------------
    @property
    def prober(self) -> MediaProbePort:
        if self._prober is None:
            from loudcheck.services.probe.ffprobe_adapter import FFprobeAdapter
            self._prober = FFprobeAdapter(settings=self.cfg)
        return self._prober

    @property
    def meter(self) -> LoudnessMeterPort:
        if self._meter is None:
            from loudcheck.services.loudness.ebur128_meter import FFmpegLoudnessMeter
            self._meter = FFmpegLoudnessMeter(settings=self.cfg)
        return self._meter

    @property
    def transcoder(self) -> TranscoderPort:
        if self._transcoder is None:
            from loudcheck.services.transcode.ffmpeg_transcoder import FFmpegTranscoder
            self._transcoder = FFmpegTranscoder(settings=self.cfg)
        return self._transcoder

    # ---- public ------------------------------------------------------------------
    def check(self, options: CheckOptions) -> ComplianceOutcome:
        path = Path(options.input_path)
        if not path.exists():
            raise MediaFileNotFoundError(f"File not found: {path}")

        report, diagnostics = self._analyze(path)

        audio = select_audio_params(report)
        if not audio.codec:
            logger.warning("no audio stream reported for %s; correction plan will be empty", path)

        measurement = extract_loudness(diagnostics)
        result = evaluate_measurement(measurement, options.standard)
        plan = build_correction_plan(path, audio, result, suffix=self.cfg.analysis.output_suffix)
        logger.info(
            "%s: loudness=%s passed=%s adjustment=%s (%s)",
            path.name, result.measured_lufs or "n/a", result.passed, result.adjustment_string, options.standard,
        )

        transcode = None
        if not result.passed and options.autofix:
            transcode = self.transcoder.transcode(plan)

        return ComplianceOutcome(
            input_path=path,
            audio=audio,
            measurement=measurement,
            result=result,
            plan=plan,
            transcode=transcode,
        )

    # ---- internals -----------------------------------------------------------------
    def _analyze(self, path: Path) -> Tuple[MediaProbeReport, str]:
        if not self.cfg.analysis.concurrent:
            return self.prober.probe(path), self.meter.measure(path)

        # probe and measure are independent; join both before evaluating
        prober, meter = self.prober, self.meter
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="loudcheck") as pool:
            probe_fut = pool.submit(prober.probe, path)
            measure_fut = pool.submit(meter.measure, path)
            # surface errors in pipeline order: probe first
            report = probe_fut.result()
            diagnostics = measure_fut.result()
        return report, diagnostics
