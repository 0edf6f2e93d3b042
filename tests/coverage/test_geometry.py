"""Tests for the Range helper functions."""

from __future__ import annotations

import pytest

from domain.coverage.geometry import (
    format_range,
    range_area,
    ranges_overlap,
    region_area,
)
from tests.conftest_utils import make_range


@pytest.mark.parametrize(
    "interval, expected",
    [
        ((1, 10), "[1, 10]"),
        ((-5, 5), "[-5, 5]"),
        ((0.5, 2), "[0.5, 2]"),
        ((0.25, 0.75), "[0.25, 0.75]"),
    ],
)
def test_format_range(interval, expected):
    assert format_range(make_range(interval)) == expected


def test_range_area():
    assert range_area(make_range((0, 10))) == 10


def test_range_area_zero_width():
    assert range_area(make_range((5, 5))) == 0


def test_region_area():
    assert region_area(make_range((0, 10)), make_range((0, 20))) == 200


def test_ranges_overlap():
    assert ranges_overlap(make_range((0, 10)), make_range((5, 15))) is True


def test_ranges_do_not_overlap():
    assert ranges_overlap(make_range((0, 5)), make_range((10, 15))) is False


def test_touching_ranges_overlap():
    assert ranges_overlap(make_range((0, 10)), make_range((10, 20))) is True
    assert ranges_overlap(make_range((10, 20)), make_range((0, 10))) is True
