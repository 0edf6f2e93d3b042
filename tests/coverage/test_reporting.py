"""Tests for format_report."""

from __future__ import annotations

import pytest

from domain.coverage.reporting import format_report
from domain.coverage.services import check_coverage
from domain.coverage.value_objects import CoverageResult
from tests.conftest_utils import make_camera, make_target


def test_report_for_complete_coverage():
    target = make_target((1, 10), (100, 1000))
    result = check_coverage(target, [make_camera("cam", (0, 15), (50, 1500))])

    report = format_report(result, name="single-camera")

    assert report.splitlines() == [
        "Scenario: single-camera",
        "Status: sufficient",
        "Message: Coverage complete: 1 camera(s) fully cover the target range",
        "Statistics: 100% coverage, 1 cells checked",
    ]


def test_report_lists_first_regions_and_remainder():
    target = make_target((0, 10), (0, 10))
    result = check_coverage(target, [make_camera("centre", (4, 6), (4, 6))])

    lines = format_report(result).splitlines()

    assert lines[0] == "Status: insufficient"
    assert "Uncovered regions: 8" in lines
    assert "  1. Distance: [0, 4], Light: [0, 4]" in lines
    assert "  3. Distance: [0, 4], Light: [6, 10]" in lines
    assert "  4. Distance: [4, 6], Light: [0, 4]" not in lines
    assert lines[-1] == "  ... and 5 more"


def test_report_max_regions_zero():
    target = make_target((0, 10), (0, 10))
    result = check_coverage(target, [make_camera("left", (0, 5), (0, 10))])

    lines = format_report(result, max_regions=0).splitlines()

    assert lines[-2:] == ["Uncovered regions: 1", "  ... and 1 more"]


def test_report_without_statistics():
    result = CoverageResult(is_sufficient=False, message="Validation error: bad")

    assert format_report(result) == (
        "Status: insufficient\nMessage: Validation error: bad"
    )


def test_report_rejects_negative_max_regions():
    result = CoverageResult(is_sufficient=True, message="ok")

    with pytest.raises(ValueError):
        format_report(result, max_regions=-1)
