"""Telemetry for CLI runs.

This package logs run phases and summarizes limiter activity.
"""

from .logger import RunLogger
from .stats import RunStats

__all__ = ["RunLogger", "RunStats"]
