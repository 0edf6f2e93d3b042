"""Coverage Bounded Context - Error Hierarchy.

Custom exceptions for coverage checks and scenario loading.

Validation errors never cross the public ``check_coverage`` boundary; they are
converted into a negative CoverageResult there. Scenario errors come from the
I/O layer and propagate to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence


class CoverageError(Exception):
    """Base error for coverage operations."""


class CoverageValidationError(CoverageError):
    """Input to a coverage check is malformed."""


class InvalidRangeError(CoverageValidationError):
    """A range is non-finite, has min > max, or is missing.

    Attributes:
        subject: Human-readable name of the range (e.g. "Target distance range")
        detail: What is wrong with it
    """

    def __init__(self, subject: str, detail: str) -> None:
        self.subject = subject
        self.detail = detail
        super().__init__(f"{subject} {detail}")


class InvalidCameraError(CoverageValidationError):
    """A camera entry is not a camera or has an invalid id.

    Attributes:
        index: Position of the camera in the input sequence
        detail: What is wrong with it
    """

    def __init__(self, index: int, detail: str) -> None:
        self.index = index
        self.detail = detail
        super().__init__(f"Camera at index {index} {detail}")


class DuplicateCameraIdError(CoverageValidationError):
    """Two or more cameras share an id.

    Attributes:
        ids: Every duplicated id, in order of first repetition
    """

    def __init__(self, ids: Sequence[str]) -> None:
        self.ids = tuple(ids)
        super().__init__(f"Duplicate camera IDs found: {', '.join(self.ids)}")


class GridTooLargeError(CoverageError):
    """Coordinate-compressed grid exceeds the configured cell budget."""

    def __init__(self, cells: int, budget: int) -> None:
        self.cells = cells
        self.budget = budget
        super().__init__(f"{cells} cells exceeds budget of {budget}")


# ---------------------------------------------------------------------------
# Scenario loading errors
# ---------------------------------------------------------------------------
class ScenarioError(CoverageError):
    """Base error for scenario loading."""


class InvalidScenarioError(ScenarioError):
    """File is not a valid scenario: wrong format, bad JSON, or bad content."""


class ScenarioTooLargeError(ScenarioError):
    """Scenario file exceeds the configured size budget."""

    pass
