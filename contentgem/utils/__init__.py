"""
Utilities module for the ContentGem client.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup and structured events
- General helper functions for progress rendering
- Validation utilities for configuration values
"""

# Logging utilities
from .logging import setup_logging, mask_api_key, log_poll_event

# General helper utilities
from .helpers import create_progress_bar, format_bulk_progress

# Validation utilities
from .validation import validate_base_url

__all__ = [
    "setup_logging",
    "mask_api_key",
    "log_poll_event",
    "create_progress_bar",
    "format_bulk_progress",
    "validate_base_url",
]
