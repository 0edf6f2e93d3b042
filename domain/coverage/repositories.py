"""Domain Port(s) for Coverage Scenario I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import CoverageScenario


class ScenarioRepository(Protocol):
    """Port for obtaining coverage scenarios from external sources.

    Implementations live in infrastructure (e.g., JSON adapter).
    """

    def load_scenario(self, file_path: Path | str) -> CoverageScenario:
        """Load one scenario and return a validated CoverageScenario."""
        ...

    def load_scenarios(self, directory: Path | str) -> list[CoverageScenario]:
        """Load every scenario stored under a directory, in a stable order."""
        ...
