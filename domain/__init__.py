"""Camera Coverage Planner Domain Layer.

This package contains the core business logic organized by bounded contexts:
- coverage: distance x light-level coverage of hardware cameras
"""

from domain import coverage

__all__ = ["coverage"]
