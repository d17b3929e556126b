#!/usr/bin/env python3
"""
Core package for the ContentGem client.

This package provides higher-level workflows built on the client:
live smoke checks and concurrent waits over several generation sessions.
"""

from .smoke import (
    default_smoke_checks,
    run_smoke_check,
    run_smoke_checks,
    calculate_smoke_stats,
    log_smoke_summary,
)

from .waiter import (
    wait_for_generations_concurrent,
)

__all__ = [
    # Smoke checks
    "default_smoke_checks",
    "run_smoke_check",
    "run_smoke_checks",
    "calculate_smoke_stats",
    "log_smoke_summary",
    # Concurrent waits
    "wait_for_generations_concurrent",
]
