"""
Validation utilities for the ContentGem client.

This module provides validation functions for configuration values.
"""

from typing import Any, Optional, Tuple
from urllib.parse import urlparse


def validate_base_url(value: Any) -> Tuple[bool, Optional[str]]:
    """Check that ``value`` is an absolute http(s) URL."""
    if not isinstance(value, str) or not value.strip():
        return False, "Base URL must be a non-empty string"
    parsed = urlparse(value.strip())
    if parsed.scheme not in ("http", "https"):
        return False, f"Base URL must use http or https: {value}"
    if not parsed.netloc:
        return False, f"Base URL has no host: {value}"
    return True, None
