"""JSON adapter for ScenarioRepository.

Implements loading of coverage scenarios from JSON documents and returns
domain CoverageScenario Value Objects.

Lifecycle:
1) Check existence, extension, symlink, size budget
2) Read bytes and parse with Pydantic (JSON + model validation in one pass)
3) Default the scenario name to the file stem
4) Return CoverageScenario

Expected document shape (camelCase keys, snake_case also accepted):

    {
      "name": "two-cameras",
      "target": {"distanceRange": {"min": 1, "max": 20},
                 "lightRange": {"min": 100, "max": 1000}},
      "cameras": [{"id": "close", "distanceRange": {...}, "lightRange": {...}}],
      "expectedSufficient": true
    }
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from domain.coverage.errors import InvalidScenarioError, ScenarioTooLargeError
from domain.coverage.value_objects import CoverageScenario

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

_ALLOWED_SUFFIXES = (".json",)


class JsonScenarioAdapter:
    """Infrastructure adapter for loading coverage scenarios from JSON files.

    Parameters
    ----------
    max_bytes: int | None
        Optional size budget for a scenario file. Larger files raise
        ScenarioTooLargeError before they are read.
    """

    def __init__(self, max_bytes: int | None = None) -> None:
        if max_bytes is not None and max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        self.max_bytes = max_bytes

    def load_scenario(self, file_path: Path | str) -> CoverageScenario:
        """Load a scenario from a JSON file."""
        path = Path(file_path)

        # Missing files surface as FileNotFoundError
        if not path.exists():
            raise FileNotFoundError(str(path))

        if path.suffix.lower() not in _ALLOWED_SUFFIXES:
            raise InvalidScenarioError(f"Unsupported file extension: {path.suffix}")

        try:
            if path.is_symlink():
                raise InvalidScenarioError("Symlinks are not permitted")
            st = path.stat()
            if st.st_size == 0:
                raise InvalidScenarioError("Empty file")
            if self.max_bytes is not None and st.st_size > self.max_bytes:
                raise ScenarioTooLargeError(
                    f"File size {st.st_size}B exceeds budget {self.max_bytes}B"
                )
            raw = path.read_bytes()
        except PermissionError as e:
            # Re-raise with filename only to avoid leaking full path in logs
            raise PermissionError(path.name) from e
        except OSError as e:
            # Log only filename, errno, and strerror to avoid leaking absolute paths
            logger.error(
                "Failed to read %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise

        try:
            scenario = CoverageScenario.model_validate_json(raw)
        except ValidationError as e:
            raise InvalidScenarioError(
                f"Invalid scenario {path.name}: {e.error_count()} error(s): "
                f"{e.errors()[0]['msg']}"
            ) from e

        if not scenario.name:
            scenario = scenario.model_copy(update={"name": path.stem})

        if scenario.cameras:
            logger.debug(
                "Scenario %s: Loaded %d camera(s)", path.name, len(scenario.cameras)
            )
        else:
            logger.warning("Scenario %s: No cameras defined", path.name)
        return scenario

    def load_scenarios(self, directory: Path | str) -> list[CoverageScenario]:
        """Load every ``.json`` scenario in a directory, sorted by filename.

        The suffix match is case-insensitive, as in ``load_scenario``.
        """
        root = Path(directory)
        if not root.is_dir():
            raise NotADirectoryError(str(root))

        paths = sorted(
            p
            for p in root.iterdir()
            if p.is_file() and p.suffix.lower() in _ALLOWED_SUFFIXES
        )
        scenarios = [self.load_scenario(path) for path in paths]
        logger.info("Loaded %d scenario(s) from %s", len(scenarios), root.name)
        return scenarios
