# loudcheck/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from loudcheck.common.logging import get_logger
from loudcheck.common.settings import get_settings
from loudcheck.domain.dataclasses.check import CheckOptions
from loudcheck.domain.enums.loudness_standard import LoudnessStandard
from loudcheck.domain.enums.report_format import ReportFormat
from loudcheck.domain.errors import LoudCheckError
from loudcheck.services.compliance.service import ComplianceService
from loudcheck.services.reporting.renderers import render
from loudcheck.services.schemas.report import LoudnessReportSchema


def build_parser() -> argparse.ArgumentParser:
    cfg = get_settings()
    p = argparse.ArgumentParser(prog="loudcheck", description="Check a media file against EBU R128 / ATSC A/85 loudness.")
    p.add_argument("--filename", "-f", required=True, type=Path, help="Full path of file to check")
    p.add_argument(
        "--ebu",
        action=argparse.BooleanOptionalAction,
        default=cfg.analysis.standard is LoudnessStandard.ebu_r128,
        help="EBU R128 (default); --no-ebu checks against ATSC A/85 RP",
    )
    p.add_argument(
        "--autofix",
        action=argparse.BooleanOptionalAction,
        default=cfg.analysis.autofix,
        help="Re-encode a non-compliant file with the recommended gain; --no-autofix only reports",
    )
    p.add_argument("--output", "-o", type=ReportFormat.parse, default=cfg.analysis.report_format,
                   help="Report format: json | xml | simple | text")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = get_logger(level=logging.DEBUG if args.verbose else get_settings().log_level)

    options = CheckOptions(
        input_path=args.filename,
        standard=LoudnessStandard.from_flag(args.ebu),
        autofix=args.autofix,
        report_format=args.output,
    )
    try:
        outcome = ComplianceService().check(options)
    except LoudCheckError as e:
        logger.debug("check failed", exc_info=True)
        print(f"loudcheck: {e}", file=sys.stderr)
        if e.stderr:
            print(e.stderr.rstrip(), file=sys.stderr)
        return 1

    rep = LoudnessReportSchema.from_result(outcome.input_path, outcome.result)
    print(render(rep, options.report_format))
    if outcome.transcode is not None:
        logger.info("corrected file written to %s", outcome.transcode.output_path)
    return 0
