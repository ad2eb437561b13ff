# loudcheck/services/reporting/renderers.py
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Callable, Dict

from loudcheck.domain.enums.report_format import ReportFormat
from loudcheck.services.schemas.report import LoudnessReportSchema


def render_json(rep: LoudnessReportSchema) -> str:
    return rep.model_dump_json(by_alias=True, indent=1)


def render_xml(rep: LoudnessReportSchema) -> str:
    root = ET.Element("MediaFileLoudness")
    for key, value in rep.model_dump(by_alias=True).items():
        child = ET.SubElement(root, key)
        child.text = str(value).lower() if isinstance(value, bool) else str(value)
    ET.indent(root, space=" ")
    return ET.tostring(root, encoding="unicode")


def render_simple(rep: LoudnessReportSchema) -> str:
    return (
        f"{rep.file_name}\n"
        f"Loudness: {rep.loudness}\n"
        f"Adjustment: {rep.adjustment_string}\n"
        f"Passed={str(rep.passed).lower()}"
    )


def render_text(rep: LoudnessReportSchema) -> str:
    lines = [f"File checked to loudness standard:  {rep.standard}"]
    if rep.passed:
        lines += [
            "FILE IS COMPLIANT TO STANDARD",
            rep.standard,
            f"LOUDNESS: {rep.loudness} LUFS",
        ]
    else:
        lines += [
            "FILE IS NOT COMPLIANT TO STANDARD",
            rep.standard,
            f"LOUDNESS: {rep.loudness} LUFS",
            f"RECOMMENDED ADJUSTMENT: {rep.adjustment_string}",
            "IN ORDER TO ACHIEVE THE MEDIAN VALUE",
        ]
    return "\n".join(lines)


RENDERERS: Dict[ReportFormat, Callable[[LoudnessReportSchema], str]] = {
    ReportFormat.json: render_json,
    ReportFormat.xml: render_xml,
    ReportFormat.simple: render_simple,
    ReportFormat.text: render_text,
}


def render(rep: LoudnessReportSchema, fmt: ReportFormat | str) -> str:
    if not isinstance(fmt, ReportFormat):
        fmt = ReportFormat.parse(fmt)
    return RENDERERS[fmt](rep)
