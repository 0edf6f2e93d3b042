"""Infrastructure adapters for the coverage bounded context.

This module provides the infrastructure layer implementations for coverage
operations, including loading scenarios from JSON files.
"""

from .json_adapter import JsonScenarioAdapter

__all__ = ["JsonScenarioAdapter"]
