"""
Polling coordinator module.

This module drives bounded fixed-delay polling of asynchronous server-side
jobs. Each loop issues one status check per iteration, strictly in
sequence, and ends on a completed snapshot, a failed snapshot, or an
exhausted iteration budget. Transport errors are never treated as
"still pending"; they propagate and abort the loop.
"""

import logging
import time
from typing import Any, Callable, Optional, Sequence, TypeVar

from ..constants import STATUS_COMPLETED, STATUS_FAILED
from ..models import BulkProgress, JobState, is_success
from ..utils.helpers import format_bulk_progress
from ..utils.logging import log_poll_event
from .errors import JobFailedError, JobTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def poll_with_fixed_delay(
    check: Callable[[], T],
    classify: Callable[[T], JobState],
    *,
    max_attempts: int,
    delay: float,
    label: str,
    job_id: Optional[str] = None,
    sleep: Optional[Callable[[float], None]] = None,
) -> T:
    """
    Poll ``check`` until ``classify`` reports a terminal state.

    Args:
        check: Issues one status request and returns the snapshot
        classify: Maps a snapshot to a JobState
        max_attempts: Maximum number of status checks
        delay: Constant seconds to wait between checks
        label: Job description used in error messages ("Generation", ...)
        job_id: Job handle attached to logs and errors
        sleep: Sleep function (defaults to ``time.sleep``)

    Returns:
        The snapshot that reported completion

    Raises:
        JobFailedError: The job reached a failure state
        JobTimeoutError: ``max_attempts`` checks ran without a terminal state
        ValueError: ``max_attempts`` is lower than 1
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    if sleep is None:
        sleep = time.sleep

    snapshot = None
    for attempt in range(max_attempts):
        snapshot = check()
        state = classify(snapshot)
        log_poll_event(
            "POLL_ATTEMPT", label, job_id, attempt + 1, max_attempts, state, logger=logger
        )

        if state.is_terminal:
            if state is JobState.COMPLETED:
                log_poll_event(
                    "POLL_COMPLETE", label, job_id, attempt + 1, max_attempts, state, logger=logger
                )
                return snapshot
            log_poll_event(
                "POLL_FAILED", label, job_id, attempt + 1, max_attempts, state, logger=logger
            )
            raise JobFailedError(f"{label} failed", job_id=job_id, snapshot=snapshot)

        if attempt < max_attempts - 1:
            sleep(delay)

    log_poll_event(
        "POLL_TIMEOUT", label, job_id, max_attempts, max_attempts, JobState.TIMED_OUT, logger=logger
    )
    raise JobTimeoutError(f"{label} timeout", job_id=job_id, snapshot=snapshot)


def _reported_status(snapshot: Any) -> Optional[str]:
    data = snapshot.get("data") if isinstance(snapshot, dict) else None
    if isinstance(data, dict):
        return data.get("status")
    return None


def classify_job_status(snapshot: Any) -> JobState:
    """
    Classify a single-job status envelope.

    Only ``success: true`` envelopes can be terminal; anything else,
    including unknown status values, keeps the job pending.
    """
    if not is_success(snapshot):
        return JobState.PENDING
    status = _reported_status(snapshot)
    if status == STATUS_COMPLETED:
        return JobState.COMPLETED
    if status == STATUS_FAILED:
        return JobState.FAILED
    return JobState.PENDING


def _count(value: Any) -> int:
    """Read a counter field; missing or non-numeric values count as 0."""
    try:
        return max(0, int(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def bulk_progress(snapshot: Any, tracked: int) -> BulkProgress:
    """Extract aggregate counters from a bulk status envelope."""
    data = snapshot.get("data") if isinstance(snapshot, dict) else None
    if not isinstance(data, dict):
        data = {}
    return BulkProgress(
        completed=_count(data.get("completedCount")),
        failed=_count(data.get("failedCount")),
        total=tracked,
    )


def make_bulk_classifier(publication_ids: Sequence[str]) -> Callable[[Any], JobState]:
    """
    Build a classifier for a bulk status check over ``publication_ids``.

    The set resolves once completed + failed covers every tracked id;
    partial completion keeps it pending.
    """
    tracked = len(publication_ids)

    def classify(snapshot: Any) -> JobState:
        if not is_success(snapshot):
            return JobState.PENDING
        if _reported_status(snapshot) == STATUS_FAILED:
            return JobState.FAILED
        progress = bulk_progress(snapshot, tracked)
        logger.info(
            f"Bulk progress {format_bulk_progress(progress)} "
            f"{progress.completed} completed, {progress.failed} failed, {progress.pending} pending"
        )
        if progress.is_resolved:
            return JobState.COMPLETED
        return JobState.PENDING

    return classify
