"""Coverage Bounded Context - Value Objects.

Immutable data structures describing the distance x light-level space.
All validation occurs at construction time via Pydantic.

Scenario documents use camelCase keys
(``distanceRange``, ``lightRange``); snake_case field names are accepted too.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, model_validator
from pydantic.alias_generators import to_camel

# Shared model configuration: frozen value objects, camelCase aliases
_VALUE_OBJECT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class Range(BaseModel):
    """Closed interval [min, max] along one axis (Value Object).

    Invariants:
        R-1: min and max are finite
        R-2: min <= max (zero-width ranges are valid)

    Endpoints are strict: ints and floats only, never bools or numeric strings.
    """

    min: StrictFloat
    max: StrictFloat

    model_config = _VALUE_OBJECT_CONFIG

    @model_validator(mode="after")
    def validate_interval(self) -> "Range":
        # R-1
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise ValueError(
                f"must have finite min and max values, got [{self.min}, {self.max}]"
            )
        # R-2
        if self.min > self.max:
            raise ValueError(f"has min ({self.min}) greater than max ({self.max})")
        return self


class TargetSpec(BaseModel):
    """Rectangle that must be fully covered (Value Object).

    Describes the distances and light levels the software camera has to
    support.
    """

    distance_range: Range
    light_range: Range

    model_config = _VALUE_OBJECT_CONFIG


class Camera(BaseModel):
    """Hardware camera covering one rectangle of the space (Value Object).

    The id is used for diagnostics and duplicate detection only; it never
    takes part in coverage geometry.
    """

    id: str = Field(min_length=1)
    distance_range: Range
    light_range: Range

    model_config = _VALUE_OBJECT_CONFIG


class UncoveredRegion(BaseModel):
    """Grid cell not fully contained by any single camera (Value Object)."""

    distance_range: Range
    light_range: Range

    model_config = _VALUE_OBJECT_CONFIG


class CoverageStatistics(BaseModel):
    """Diagnostic counters of one coverage check (Value Object).

    Invariants:
        CS-1: uncovered_cells <= grid_cells_checked
        CS-2: coverage_percentage in [0, 100]
    """

    total_cameras: int = Field(ge=0)
    distance_boundaries: int = Field(ge=0)
    light_boundaries: int = Field(ge=0)
    grid_cells_checked: int = Field(ge=0)
    uncovered_cells: int = Field(ge=0)
    coverage_percentage: int = Field(ge=0, le=100)

    model_config = _VALUE_OBJECT_CONFIG

    @model_validator(mode="after")
    def validate_counts(self) -> "CoverageStatistics":
        # CS-1
        if self.uncovered_cells > self.grid_cells_checked:
            raise ValueError(
                f"uncovered_cells ({self.uncovered_cells}) exceeds "
                f"grid_cells_checked ({self.grid_cells_checked})"
            )
        return self


class CoverageResult(BaseModel):
    """Outcome of a coverage check (Value Object).

    ``uncovered_regions`` is None when coverage is complete or when the input
    failed validation; ``statistics`` is None when no grid was built.
    """

    is_sufficient: bool
    message: str
    uncovered_regions: tuple[UncoveredRegion, ...] | None = None
    statistics: CoverageStatistics | None = None

    model_config = _VALUE_OBJECT_CONFIG


class CoverageConfig(BaseModel):
    """Tuning for the coverage checker, passed per call.

    Attributes:
        max_grid_cells: Upper bound on the number of grid cells scanned.
            None disables the budget.
    """

    max_grid_cells: int | None = Field(default=None, gt=0)

    model_config = _VALUE_OBJECT_CONFIG


class CoverageScenario(BaseModel):
    """Named coverage problem as read from configuration (Value Object)."""

    name: str = ""
    description: str = ""
    target: TargetSpec
    cameras: tuple[Camera, ...] = ()
    expected_sufficient: bool | None = None

    model_config = _VALUE_OBJECT_CONFIG
