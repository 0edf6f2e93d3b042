"""Human-readable rendering of coverage results.

Formatting only; nothing here changes a result.
"""

from __future__ import annotations

from domain.coverage.geometry import format_range
from domain.coverage.value_objects import CoverageResult

DEFAULT_MAX_REGIONS = 3


def format_report(
    result: CoverageResult,
    name: str | None = None,
    max_regions: int = DEFAULT_MAX_REGIONS,
) -> str:
    """Render a multi-line summary of a coverage result.

    Args:
        result: Result of ``check_coverage``
        name: Optional scenario name for the heading line
        max_regions: How many uncovered regions to list before summarising
            the remainder as "... and N more"

    Returns:
        Report text without a trailing newline
    """
    if max_regions < 0:
        raise ValueError("max_regions must be non-negative")

    lines: list[str] = []
    if name:
        lines.append(f"Scenario: {name}")
    lines.append(f"Status: {'sufficient' if result.is_sufficient else 'insufficient'}")
    lines.append(f"Message: {result.message}")

    stats = result.statistics
    if stats is not None:
        lines.append(
            f"Statistics: {stats.coverage_percentage}% coverage, "
            f"{stats.grid_cells_checked} cells checked"
        )

    regions = result.uncovered_regions or ()
    if regions:
        lines.append(f"Uncovered regions: {len(regions)}")
        for idx, region in enumerate(regions[:max_regions], start=1):
            lines.append(
                f"  {idx}. Distance: {format_range(region.distance_range)}, "
                f"Light: {format_range(region.light_range)}"
            )
        if len(regions) > max_regions:
            lines.append(f"  ... and {len(regions) - max_regions} more")

    return "\n".join(lines)
