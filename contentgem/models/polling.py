#!/usr/bin/env python3
"""
Polling Models

This module contains the job state machine values and the aggregate
counters observed while waiting on asynchronous server-side jobs.
"""

from enum import Enum
from typing import NamedTuple


class JobState(str, Enum):
    """State of an awaited job as seen by the polling loop."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"

    @property
    def is_terminal(self) -> bool:
        return self is not JobState.PENDING


class BulkProgress(NamedTuple):
    """
    Aggregate counters for a set of jobs checked in one round-trip.

    Attributes:
        completed: Jobs that finished successfully
        failed: Jobs that finished with an error
        total: Jobs being tracked
    """

    completed: int
    failed: int
    total: int

    @property
    def resolved(self) -> int:
        return self.completed + self.failed

    @property
    def pending(self) -> int:
        return max(0, self.total - self.resolved)

    @property
    def is_resolved(self) -> bool:
        """True once no job remains pending."""
        return self.resolved >= self.total
