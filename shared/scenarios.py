"""Single source of truth for the demonstration coverage scenarios.

This module defines the scenarios used by both:
- scripts/run_scenarios.py (console walkthrough)
- tests/test_scenarios_sanity.py (expectation verification)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

When adding/removing scenarios, update ONLY this list.
"""

from __future__ import annotations

from domain.coverage.value_objects import Camera, CoverageScenario, Range, TargetSpec


def _target(distance: tuple[float, float], light: tuple[float, float]) -> TargetSpec:
    return TargetSpec(
        distance_range=Range(min=distance[0], max=distance[1]),
        light_range=Range(min=light[0], max=light[1]),
    )


def _camera(
    camera_id: str, distance: tuple[float, float], light: tuple[float, float]
) -> Camera:
    return Camera(
        id=camera_id,
        distance_range=Range(min=distance[0], max=distance[1]),
        light_range=Range(min=light[0], max=light[1]),
    )


# Ordered as a walkthrough: easy passes, gaps, then harder arrangements
DEMO_SCENARIOS: tuple[CoverageScenario, ...] = (
    CoverageScenario(
        name="single-camera",
        description="Single camera covers entire range",
        target=_target((1, 10), (100, 1000)),
        cameras=(_camera("camera-1", (0, 15), (50, 1500)),),
        expected_sufficient=True,
    ),
    CoverageScenario(
        name="two-cameras",
        description="Two cameras together cover the range",
        target=_target((1, 20), (100, 1000)),
        cameras=(
            _camera("close-range", (0, 10), (0, 2000)),
            _camera("far-range", (10, 30), (0, 2000)),
        ),
        expected_sufficient=True,
    ),
    CoverageScenario(
        name="distance-gap",
        description="Gap in distance coverage",
        target=_target((1, 20), (100, 1000)),
        cameras=(
            _camera("close-range", (0, 8), (0, 2000)),
            _camera("far-range", (12, 30), (0, 2000)),
        ),
        expected_sufficient=False,
    ),
    CoverageScenario(
        name="light-gap",
        description="Gap in light level coverage",
        target=_target((1, 10), (100, 1000)),
        cameras=(
            _camera("bright-light", (0, 15), (500, 2000)),
            _camera("dim-light", (0, 15), (0, 300)),
        ),
        expected_sufficient=False,
    ),
    CoverageScenario(
        name="quadrants",
        description="Four cameras covering quadrants",
        target=_target((0, 100), (0, 100)),
        cameras=(
            _camera("q1", (0, 50), (50, 100)),
            _camera("q2", (50, 100), (50, 100)),
            _camera("q3", (0, 50), (0, 50)),
            _camera("q4", (50, 100), (0, 50)),
        ),
        expected_sufficient=True,
    ),
    CoverageScenario(
        name="no-cameras",
        description="No cameras provided",
        target=_target((1, 10), (100, 1000)),
        cameras=(),
        expected_sufficient=False,
    ),
    CoverageScenario(
        name="three-overlapping",
        description="Three overlapping cameras with full coverage",
        target=_target((5, 15), (200, 800)),
        cameras=(
            _camera("cam-a", (0, 12), (100, 600)),
            _camera("cam-b", (8, 20), (100, 600)),
            _camera("cam-c", (3, 18), (500, 1000)),
        ),
        expected_sufficient=True,
    ),
)

# Names derived from the tuple for lookup and verification
DEMO_SCENARIO_NAMES: tuple[str, ...] = tuple(s.name for s in DEMO_SCENARIOS)
