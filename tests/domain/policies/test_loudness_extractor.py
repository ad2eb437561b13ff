from __future__ import annotations

import pytest

from loudcheck.domain.errors import LoudnessParseError
from loudcheck.domain.policies.loudness_extractor import extract_loudness


def test_summary_reading_wins_over_progress_lines(ebur128_stderr):
    m = extract_loudness(ebur128_stderr)
    assert m.raw == "-19.4"
    assert m.integrated_lufs == pytest.approx(-19.4)
    assert m.degraded is False


def test_last_occurrence_is_authoritative():
    text = "pass 1 I: -30.0 LUFS\npass 2 I: -21.7 LUFS\n"
    assert extract_loudness(text).raw == "-21.7"


def test_case_insensitive_and_positive_values():
    assert extract_loudness("i: 3.2 lufs").integrated_lufs == pytest.approx(3.2)
    assert extract_loudness("I:-23.0 Lufs").raw == "-23.0"


def test_no_reading_is_a_hard_failure():
    with pytest.raises(LoudnessParseError) as exc:
        extract_loudness("Stream #0:0: Video: h264\nLRA: 3.1 LU\n")
    assert "no loudness measurement" in str(exc.value)


def test_empty_text_is_a_hard_failure():
    with pytest.raises(LoudnessParseError):
        extract_loudness("")


def test_unparseable_number_degrades_without_raising():
    m = extract_loudness("I: -19,4 LUFS")
    assert m.raw == "-19,4"
    assert m.integrated_lufs is None
    assert m.degraded is True
