"""Shared data used by both scripts and tests.

This package provides a single location for data that needs to be shared
across packages without creating a scripts->tests dependency.
"""

from __future__ import annotations
