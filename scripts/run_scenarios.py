#!/usr/bin/env python3
"""Run coverage scenarios and print a report for each.

Without arguments, runs the built-in demonstration scenarios from
shared/scenarios.py. With arguments, loads scenarios from the given JSON
files or directories of JSON files.

Usage:
    python scripts/run_scenarios.py
    python scripts/run_scenarios.py scenarios/ extra.json -v

Exit status is 1 when any scenario with an expected outcome disagrees with
the computed result, 0 otherwise.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from domain.coverage.reporting import format_report
from domain.coverage.repositories import ScenarioRepository
from domain.coverage.services import check_coverage
from domain.coverage.value_objects import CoverageConfig, CoverageScenario
from infrastructure.coverage.json_adapter import JsonScenarioAdapter
from shared.scenarios import DEMO_SCENARIOS

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def load_from_paths(
    paths: Sequence[Path], repository: ScenarioRepository
) -> list[CoverageScenario]:
    """Load scenarios from files and directories, preserving argument order."""
    scenarios: list[CoverageScenario] = []
    for path in paths:
        if path.is_dir():
            scenarios.extend(repository.load_scenarios(path))
        else:
            scenarios.append(repository.load_scenario(path))
    return scenarios


def run(
    scenarios: Sequence[CoverageScenario], config: CoverageConfig | None = None
) -> tuple[int, int]:
    """Check and print every scenario; return (passed, failed) counts.

    Scenarios without an expected outcome are reported but not counted.
    """
    passed = 0
    failed = 0

    for index, scenario in enumerate(scenarios, start=1):
        print(f"\nScenario {index}: {scenario.description or scenario.name}")
        result = check_coverage(scenario.target, scenario.cameras, config)

        if scenario.expected_sufficient is not None:
            if result.is_sufficient == scenario.expected_sufficient:
                passed += 1
                print("Result: PASS")
            else:
                failed += 1
                print("Result: FAIL")
                logger.warning(
                    "Scenario %s: expected sufficient=%s, got %s",
                    scenario.name,
                    scenario.expected_sufficient,
                    result.is_sufficient,
                )

        print(format_report(result, name=scenario.name))

    return passed, failed


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Scenario JSON files or directories (default: built-in scenarios)",
    )
    parser.add_argument(
        "--max-grid-cells",
        type=_positive_int,
        default=None,
        help="Refuse grids larger than this many cells",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.paths:
        scenarios = load_from_paths(args.paths, JsonScenarioAdapter())
    else:
        scenarios = list(DEMO_SCENARIOS)

    print("=" * 70)
    print("Camera Coverage - Scenario Run")
    print("=" * 70)

    passed, failed = run(scenarios, CoverageConfig(max_grid_cells=args.max_grid_cells))

    print()
    print("=" * 70)
    print(f"Run complete: {passed} passed, {failed} failed")
    print("=" * 70)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
