"""Sanity tests for the shared demonstration scenarios.

These tests validate that each scenario in shared/scenarios.py:
1. Has a unique, non-empty name and an expected outcome
2. Produces the expected outcome when checked

They double as end-to-end checks of check_coverage over the walkthrough
used by scripts/run_scenarios.py.
"""

from __future__ import annotations

import pytest

from domain.coverage.services import check_coverage
from shared.scenarios import DEMO_SCENARIO_NAMES, DEMO_SCENARIOS


def test_scenario_names_unique():
    assert len(set(DEMO_SCENARIO_NAMES)) == len(DEMO_SCENARIOS)
    assert all(DEMO_SCENARIO_NAMES)


def test_every_scenario_has_expectation():
    assert all(s.expected_sufficient is not None for s in DEMO_SCENARIOS)


@pytest.mark.parametrize("scenario", DEMO_SCENARIOS, ids=DEMO_SCENARIO_NAMES)
def test_scenario_outcome(scenario):
    result = check_coverage(scenario.target, scenario.cameras)

    assert result.is_sufficient is scenario.expected_sufficient
    if not result.is_sufficient:
        assert result.uncovered_regions
