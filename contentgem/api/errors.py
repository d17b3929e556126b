"""
API error types.

This module defines the exceptions raised by the ContentGem client. The
transport layer exposes a single coarse failure channel; polling failures
carry the job handle and the last snapshot observed.
"""

from typing import Any, Optional


class ContentGemError(Exception):
    """Base class for all client errors."""
    pass


class TransportError(ContentGemError):
    """Raised when a request fails: non-2xx status, network error or timeout."""
    pass


class PollingError(ContentGemError):
    """Raised when an awaited job does not finish successfully."""

    def __init__(self, message: str, job_id: Optional[str] = None, snapshot: Any = None):
        super().__init__(message)
        self.job_id = job_id
        self.snapshot = snapshot


class JobFailedError(PollingError):
    """The server reported the job as failed."""
    pass


class JobTimeoutError(PollingError):
    """The iteration budget ran out before the job reached a terminal state."""
    pass
