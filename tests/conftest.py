"""Root pytest configuration for all tests.

Builders live in tests/conftest_utils.py so test modules can import them
directly; this conftest only exposes the shared fixtures.
"""

from __future__ import annotations

import pytest

from domain.coverage.value_objects import TargetSpec
from tests.conftest_utils import make_target


@pytest.fixture
def standard_target() -> TargetSpec:
    """Target used by most tests: distance [1, 20], light [100, 1000]."""
    return make_target((1, 20), (100, 1000))
