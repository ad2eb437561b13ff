from __future__ import annotations

import json
import xml.etree.ElementTree as ET

import pytest

from loudcheck.domain.enums import LoudnessStandard, ReportFormat
from loudcheck.domain.policies.compliance import evaluate_compliance
from loudcheck.services.reporting.renderers import render
from loudcheck.services.schemas import LoudnessReportSchema


@pytest.fixture()
def failed_report() -> LoudnessReportSchema:
    return LoudnessReportSchema.from_result("/media/in/show.mkv", evaluate_compliance("-19.4", LoudnessStandard.ebu_r128))


@pytest.fixture()
def passed_report() -> LoudnessReportSchema:
    return LoudnessReportSchema.from_result("show.mkv", evaluate_compliance("-25.0", LoudnessStandard.atsc_a85))


def test_schema_from_result(failed_report):
    assert failed_report.file_name == "show.mkv"
    assert failed_report.passed is False
    assert failed_report.loudness == "-19.4"
    assert failed_report.adjustment == pytest.approx(-3.6)
    assert failed_report.adjustment_string == "-3.6dB"
    assert failed_report.standard == LoudnessStandard.ebu_r128.description


def test_json_uses_external_field_names(failed_report):
    out = render(failed_report, ReportFormat.json)
    data = json.loads(out)
    assert list(data) == [
        "FileName", "PassedOrFailed", "Loudness",
        "RecommendedAdjustment", "RecommendedAdjustmentString", "Standard",
    ]
    assert data["PassedOrFailed"] is False
    assert data["RecommendedAdjustmentString"] == "-3.6dB"
    assert out.startswith('{\n "FileName"')


def test_xml(failed_report):
    root = ET.fromstring(render(failed_report, "xml"))
    assert root.tag == "MediaFileLoudness"
    assert root.findtext("FileName") == "show.mkv"
    assert root.findtext("PassedOrFailed") == "false"
    assert root.findtext("Loudness") == "-19.4"


def test_simple(passed_report):
    assert render(passed_report, ReportFormat.simple) == (
        "show.mkv\nLoudness: -25.0\nAdjustment: 0.0dB\nPassed=true"
    )


def test_text_failed(failed_report):
    out = render(failed_report, ReportFormat.text)
    assert "FILE IS NOT COMPLIANT TO STANDARD" in out
    assert "LOUDNESS: -19.4 LUFS" in out
    assert "RECOMMENDED ADJUSTMENT: -3.6dB" in out


def test_text_passed(passed_report):
    out = render(passed_report, "text")
    assert "FILE IS COMPLIANT TO STANDARD" in out
    assert "RECOMMENDED ADJUSTMENT" not in out
    assert "ATSC A/85" in out


def test_unknown_format_falls_back_to_text(passed_report):
    assert render(passed_report, "yaml") == render(passed_report, ReportFormat.text)
