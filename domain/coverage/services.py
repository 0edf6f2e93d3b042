"""Coverage Bounded Context - Domain Services.

Pure domain logic deciding whether a set of hardware cameras covers a target
rectangle in distance x light-level space.
NO I/O and NO logging - callers decide what to report.

Algorithm: coordinate-compressed sweep
1. Collect every camera boundary that falls inside the target, per axis
2. Build the grid of cells between consecutive boundaries
3. A cell is covered iff one single camera fully contains it

No camera edge crosses the interior of a cell, so single-camera containment
of every cell is equivalent to the union of cameras covering the target.
Time: O(n^2 * m) for n boundaries per axis and m cameras. Space: O(n^2).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray
from pydantic import ValidationError

from domain.coverage.errors import (
    CoverageValidationError,
    DuplicateCameraIdError,
    GridTooLargeError,
    InvalidCameraError,
    InvalidRangeError,
)
from domain.coverage.value_objects import (
    Camera,
    CoverageConfig,
    CoverageResult,
    CoverageStatistics,
    Range,
    TargetSpec,
    UncoveredRegion,
)

# Pydantic error locations (field name or camelCase alias) -> message label
_RANGE_LABELS = {
    "distance_range": "distance range",
    "distanceRange": "distance range",
    "light_range": "light range",
    "lightRange": "light range",
}

# Pydantic error types raised for non-numeric range endpoints
_NUMERIC_ERROR_TYPES = frozenset({"float_type", "float_parsing"})

# Empty-input statistics: the whole target as one uncovered cell
_EMPTY_BOUNDARIES = 2


# ---------------------------------------------------------------------------
# Helper: Pydantic error translation
# ---------------------------------------------------------------------------
def _range_label(error: Mapping[str, Any]) -> str | None:
    for part in error.get("loc", ()):
        if part in _RANGE_LABELS:
            return _RANGE_LABELS[part]
    return None


def _error_detail(error: Mapping[str, Any]) -> str:
    """Turn one pydantic error dict into a phrase that follows a subject."""
    ctx_error = error.get("ctx", {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    if error["type"] == "missing":
        loc = error.get("loc", ())
        if loc and loc[-1] in ("min", "max"):
            return f"is missing its {loc[-1]} value"
        return "is missing"
    if error["type"] in _NUMERIC_ERROR_TYPES:
        return "must have numeric min and max values"
    return f"is invalid: {error['msg']}"


def _is_id_error(error: Mapping[str, Any]) -> bool:
    loc = error.get("loc", ())
    return bool(loc) and loc[0] == "id"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def validate_target(target: TargetSpec | Mapping[str, Any]) -> TargetSpec:
    """Return ``target`` as a validated TargetSpec.

    Raises:
        InvalidRangeError: If a target range is missing, non-finite or inverted
        CoverageValidationError: If the target is not a mapping at all
    """
    if isinstance(target, TargetSpec):
        return target

    try:
        return TargetSpec.model_validate(target)
    except ValidationError as e:
        error = e.errors()[0]
        label = _range_label(error)
        if label is None:
            raise CoverageValidationError(
                "Target specification is null or not a mapping"
            ) from e
        raise InvalidRangeError(f"Target {label}", _error_detail(error)) from e


def _validate_camera(index: int, camera: Camera | Mapping[str, Any]) -> Camera:
    if isinstance(camera, Camera):
        return camera

    try:
        return Camera.model_validate(camera)
    except ValidationError as e:
        errors = e.errors()
        if not errors[0].get("loc"):
            raise InvalidCameraError(index, "is null or not a mapping") from e
        if any(_is_id_error(error) for error in errors):
            raise InvalidCameraError(index, "has invalid or missing id") from e

        error = errors[0]
        label = _range_label(error) or "definition"
        raise InvalidRangeError(
            f'Camera "{camera["id"]}" {label}', _error_detail(error)
        ) from e


def _find_duplicates(ids: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    duplicates: list[str] = []
    for camera_id in ids:
        if camera_id in seen and camera_id not in duplicates:
            duplicates.append(camera_id)
        seen.add(camera_id)
    return duplicates


def validate_cameras(
    cameras: Sequence[Camera | Mapping[str, Any]],
) -> tuple[Camera, ...]:
    """Validate every camera and check that ids are unique.

    Cameras are checked in order; the first malformed one is reported.
    An empty sequence is valid.

    Raises:
        InvalidCameraError: If an entry is not a camera or has a bad id
        InvalidRangeError: If a camera range is missing, non-finite or inverted
        DuplicateCameraIdError: If ids repeat (all duplicates are reported)
        CoverageValidationError: If ``cameras`` is not a sequence
    """
    if isinstance(cameras, (str, bytes)) or not isinstance(cameras, Sequence):
        raise CoverageValidationError("Cameras must be a sequence")

    validated = tuple(
        _validate_camera(index, camera) for index, camera in enumerate(cameras)
    )

    duplicates = _find_duplicates(camera.id for camera in validated)
    if duplicates:
        raise DuplicateCameraIdError(duplicates)

    return validated


# ---------------------------------------------------------------------------
# Coordinate Compression
# ---------------------------------------------------------------------------
def collect_boundaries(
    target: Range, camera_ranges: Iterable[Range]
) -> NDArray[np.float64]:
    """Collect sorted, unique boundary values for one axis.

    The target's own min and max are always included. Camera endpoints are
    included only when they fall inside [target.min, target.max] (inclusive);
    endpoints outside cannot draw a grid line inside the tested area.
    """
    values = [target.min, target.max]
    for range_ in camera_ranges:
        for value in (range_.min, range_.max):
            if target.min <= value <= target.max:
                values.append(value)

    # np.unique sorts ascending
    return np.unique(np.asarray(values, dtype=np.float64))


def axis_cells(
    boundaries: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Return (lower, upper) edge arrays of the cells along one axis.

    A single boundary (zero-width target) yields one zero-width cell [v, v].
    """
    if boundaries.size == 1:
        return boundaries.copy(), boundaries.copy()
    return boundaries[:-1], boundaries[1:]


def covered_cells(
    cameras: Sequence[Camera],
    distance_cells: tuple[NDArray[np.float64], NDArray[np.float64]],
    light_cells: tuple[NDArray[np.float64], NDArray[np.float64]],
) -> NDArray[np.bool_]:
    """Build the coverage mask of the grid.

    Returns:
        Boolean array of shape (distance cells, light cells); True where at
        least one camera fully contains the cell (inclusive comparisons).
    """
    dist_lo, dist_hi = distance_cells
    light_lo, light_hi = light_cells

    covered = np.zeros((dist_lo.size, light_lo.size), dtype=bool)
    for camera in cameras:
        dist_ok = (camera.distance_range.min <= dist_lo) & (
            camera.distance_range.max >= dist_hi
        )
        light_ok = (camera.light_range.min <= light_lo) & (
            camera.light_range.max >= light_hi
        )
        covered |= dist_ok[:, np.newaxis] & light_ok[np.newaxis, :]

    return covered


def _cells_on_axis(boundaries: int) -> int:
    # One boundary still forms a single zero-width cell
    if boundaries == 0:
        return 0
    return max(1, boundaries - 1)


def grid_cell_count(distance_boundaries: int, light_boundaries: int) -> int:
    """Return the number of grid cells formed by the given boundary counts."""
    return _cells_on_axis(distance_boundaries) * _cells_on_axis(light_boundaries)


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------
def calculate_statistics(
    total_cameras: int,
    distance_boundaries: int,
    light_boundaries: int,
    uncovered_cells: int,
) -> CoverageStatistics:
    """Calculate coverage statistics for one check.

    coverage_percentage is rounded half-up to the nearest integer and is 0
    when there are no cells.
    """
    total_cells = grid_cell_count(distance_boundaries, light_boundaries)
    covered = total_cells - uncovered_cells
    if total_cells > 0:
        # Integer half-up rounding of 100 * covered / total
        coverage_percentage = (200 * covered + total_cells) // (2 * total_cells)
    else:
        coverage_percentage = 0

    return CoverageStatistics(
        total_cameras=total_cameras,
        distance_boundaries=distance_boundaries,
        light_boundaries=light_boundaries,
        grid_cells_checked=total_cells,
        uncovered_cells=uncovered_cells,
        coverage_percentage=coverage_percentage,
    )


# ---------------------------------------------------------------------------
# Main Service: check_coverage
# ---------------------------------------------------------------------------
def _check_grid_budget(
    distance_boundaries: int, light_boundaries: int, config: CoverageConfig
) -> None:
    if config.max_grid_cells is None:
        return
    cells = grid_cell_count(distance_boundaries, light_boundaries)
    if cells > config.max_grid_cells:
        raise GridTooLargeError(cells, config.max_grid_cells)


def check_coverage(
    target: TargetSpec | Mapping[str, Any],
    cameras: Sequence[Camera | Mapping[str, Any]],
    config: CoverageConfig | None = None,
) -> CoverageResult:
    """Decide whether the cameras fully cover the target rectangle.

    Malformed input never raises: it yields a result with
    ``is_sufficient=False`` and a message starting with "Validation error".

    Args:
        target: Distances and light levels that must be supported
        cameras: Candidate hardware cameras (models or plain mappings)
        config: Optional tuning; defaults to an unbounded grid

    Returns:
        CoverageResult with uncovered regions and statistics

    Example:
        >>> result = check_coverage(
        ...     {"distanceRange": {"min": 1, "max": 20},
        ...      "lightRange": {"min": 100, "max": 1000}},
        ...     [{"id": "close", "distanceRange": {"min": 0, "max": 10},
        ...       "lightRange": {"min": 0, "max": 2000}},
        ...      {"id": "far", "distanceRange": {"min": 10, "max": 30},
        ...       "lightRange": {"min": 0, "max": 2000}}],
        ... )
        >>> result.is_sufficient
        True
        >>> result.statistics.coverage_percentage
        100
    """
    if config is None:
        config = CoverageConfig()

    try:
        spec = validate_target(target)
        validated = validate_cameras(cameras)
    except CoverageValidationError as e:
        return CoverageResult(is_sufficient=False, message=f"Validation error: {e}")

    # Edge case: nothing to scan, the whole target is uncovered
    if not validated:
        return CoverageResult(
            is_sufficient=False,
            message="No cameras provided",
            uncovered_regions=(
                UncoveredRegion(
                    distance_range=spec.distance_range, light_range=spec.light_range
                ),
            ),
            statistics=calculate_statistics(0, _EMPTY_BOUNDARIES, _EMPTY_BOUNDARIES, 1),
        )

    distance_boundaries = collect_boundaries(
        spec.distance_range, (camera.distance_range for camera in validated)
    )
    light_boundaries = collect_boundaries(
        spec.light_range, (camera.light_range for camera in validated)
    )

    try:
        _check_grid_budget(distance_boundaries.size, light_boundaries.size, config)
    except GridTooLargeError as e:
        return CoverageResult(is_sufficient=False, message=f"Grid too large: {e}")

    distance_cells = axis_cells(distance_boundaries)
    light_cells = axis_cells(light_boundaries)
    covered = covered_cells(validated, distance_cells, light_cells)

    # argwhere walks the mask in C order: distance-major, light-minor
    uncovered = tuple(
        UncoveredRegion(
            distance_range=Range(
                min=float(distance_cells[0][i]), max=float(distance_cells[1][i])
            ),
            light_range=Range(
                min=float(light_cells[0][j]), max=float(light_cells[1][j])
            ),
        )
        for i, j in np.argwhere(~covered)
    )

    statistics = calculate_statistics(
        len(validated),
        int(distance_boundaries.size),
        int(light_boundaries.size),
        len(uncovered),
    )

    if not uncovered:
        return CoverageResult(
            is_sufficient=True,
            message=(
                f"Coverage complete: {len(validated)} camera(s) fully cover "
                "the target range"
            ),
            statistics=statistics,
        )

    return CoverageResult(
        is_sufficient=False,
        message=(
            f"Coverage incomplete: {len(uncovered)} region(s) uncovered "
            f"({statistics.coverage_percentage}% covered)"
        ),
        uncovered_regions=uncovered,
        statistics=statistics,
    )
