"""
Logging utilities for the ContentGem client.

This module provides centralized logging configuration and structured
event helpers to ensure consistent logging behavior across the client.
"""

import json
import logging
import time
from typing import Any, Optional


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Set specific logger levels
    logging.getLogger("httpx").setLevel(logging.WARNING)  # Reduce HTTP client noise
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def mask_api_key(api_key: Optional[str]) -> str:
    """Mask an API key for logs, keeping only the last four characters."""
    if not api_key:
        return "<unset>"
    if len(api_key) <= 4:
        return "***"
    return f"***{api_key[-4:]}"


def log_poll_event(
    event_type: str,
    label: str,
    job_id: Optional[str],
    attempt: int,
    max_attempts: int,
    state: Any,
    logger: Optional[logging.Logger] = None,
):
    """
    Log a structured polling event.

    Attempts are logged at DEBUG, completion at INFO, failures and timeouts
    at WARNING. The record is a single machine-readable JSON line.

    Args:
        event_type: POLL_ATTEMPT, POLL_COMPLETE, POLL_FAILED or POLL_TIMEOUT
        label: Job description ("Generation", "Bulk generation", ...)
        job_id: Job handle being polled
        attempt: 1-based attempt number
        max_attempts: Iteration budget of the loop
        state: JobState observed on this attempt
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    poll_record = {
        "event_type": event_type.lower(),
        "timestamp": time.time(),
        "job": label,
        "job_id": job_id,
        "attempt": attempt,
        "max_attempts": max_attempts,
        "state": getattr(state, "value", state),
    }
    message = f"{event_type}: {json.dumps(poll_record, ensure_ascii=False)}"

    if event_type in ("POLL_FAILED", "POLL_TIMEOUT"):
        logger.warning(message)
    elif event_type == "POLL_COMPLETE":
        logger.info(message)
    else:
        logger.debug(message)
