#!/usr/bin/env python3
"""
API package for the ContentGem client.

This package provides the HTTP transport, one operation per API endpoint,
and the polling coordinator that awaits asynchronous generation jobs.
"""

from .client import (
    ContentGemClient,
    create_client,
)

from .errors import (
    ContentGemError,
    TransportError,
    PollingError,
    JobFailedError,
    JobTimeoutError,
)

from .transport import (
    Transport,
)

from .polling import (
    poll_with_fixed_delay,
    classify_job_status,
    make_bulk_classifier,
    bulk_progress,
)

from .utils import (
    build_list_params,
    compact_params,
)

__all__ = [
    # Client management
    "ContentGemClient",
    "create_client",
    # Errors
    "ContentGemError",
    "TransportError",
    "PollingError",
    "JobFailedError",
    "JobTimeoutError",
    # Transport
    "Transport",
    # Polling
    "poll_with_fixed_delay",
    "classify_job_status",
    "make_bulk_classifier",
    "bulk_progress",
    # Utilities
    "build_list_params",
    "compact_params",
]
