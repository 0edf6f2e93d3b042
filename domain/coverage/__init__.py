"""Coverage Bounded Context.

Responsible for deciding whether hardware cameras cover a target rectangle
in distance x light-level space:
- Value Objects: Range, TargetSpec, Camera, CoverageResult
- Services: check_coverage (coordinate-compressed sweep)
- Helpers: format_range, range_area, region_area, ranges_overlap
"""

from domain.coverage.geometry import (
    format_range,
    range_area,
    ranges_overlap,
    region_area,
)
from domain.coverage.services import check_coverage
from domain.coverage.value_objects import (
    Camera,
    CoverageConfig,
    CoverageResult,
    CoverageScenario,
    CoverageStatistics,
    Range,
    TargetSpec,
    UncoveredRegion,
)

__all__ = [
    "Camera",
    "CoverageConfig",
    "CoverageResult",
    "CoverageScenario",
    "CoverageStatistics",
    "Range",
    "TargetSpec",
    "UncoveredRegion",
    "check_coverage",
    "format_range",
    "range_area",
    "ranges_overlap",
    "region_area",
]
