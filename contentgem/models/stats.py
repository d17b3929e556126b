#!/usr/bin/env python3
"""
Statistics Models

This module contains data structures for live smoke-check runs against
the API.
"""

from typing import NamedTuple, Optional


class SmokeCheckResult(NamedTuple):
    """
    Outcome of a single smoke check.

    Attributes:
        name: Human-readable check name
        passed: Whether the call succeeded with ``success: true``
        duration: Seconds spent on the call
        error: Error or server message when the check failed
    """

    name: str
    passed: bool
    duration: float
    error: Optional[str] = None


class SmokeStats(NamedTuple):
    """
    Statistics for a smoke-check run.

    Attributes:
        total_checks: Number of checks executed
        passed_checks: Number of checks that passed
        failed_checks: Number of checks that failed
        start_time: Run start timestamp
        end_time: Run end timestamp
        total_duration: Total run duration in seconds
        avg_time_per_check: Average duration per check
    """

    total_checks: int
    passed_checks: int
    failed_checks: int
    start_time: float
    end_time: float
    total_duration: float
    avg_time_per_check: float
