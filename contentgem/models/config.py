#!/usr/bin/env python3
"""
Client Configuration Models

This module contains the immutable configuration tuple shared by every
request a client issues.
"""

from typing import NamedTuple, Optional

from ..constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class ClientConfig(NamedTuple):
    """
    Immutable client configuration.

    Attributes:
        api_key: Credential sent in the ``X-API-Key`` header
        base_url: Versioned API root every endpoint path is appended to
        timeout: Per-request deadline in seconds
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def create(
        cls,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "ClientConfig":
        """Build a config, falling back to defaults for empty values."""
        return cls(
            api_key=api_key,
            base_url=(base_url or DEFAULT_BASE_URL).rstrip("/"),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )
