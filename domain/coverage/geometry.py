"""Free functions over Range values, used for display and debugging."""

from __future__ import annotations

from domain.coverage.value_objects import Range


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_range(range_: Range) -> str:
    """Format a range as ``[min, max]``; integral values drop the ``.0``."""
    return f"[{_format_number(range_.min)}, {_format_number(range_.max)}]"


def range_area(range_: Range) -> float:
    """Return the length of a range (max - min)."""
    return range_.max - range_.min


def region_area(distance_range: Range, light_range: Range) -> float:
    """Return the 2D area of a distance x light rectangle."""
    return range_area(distance_range) * range_area(light_range)


def ranges_overlap(range1: Range, range2: Range) -> bool:
    """Check if two closed ranges overlap.

    Touching ranges (``range1.max == range2.min``) count as overlapping.
    """
    return range1.min <= range2.max and range2.min <= range1.max
