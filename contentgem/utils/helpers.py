"""
General helper utilities for the ContentGem client.

This module provides common utility functions that are used
across multiple modules in the client.
"""

from typing import Any


def create_progress_bar(current: int, total: int, width: int = 30) -> str:
    """
    Create a text-based progress bar.

    Args:
        current: Current progress
        total: Total items
        width: Width of the progress bar

    Returns:
        Progress bar string
    """
    if total <= 0:
        return "[" + " " * width + "]"

    percentage = min(1.0, current / total)
    filled = int(width * percentage)
    bar = "█" * filled + "░" * (width - filled)
    return f"[{bar}]"


def format_bulk_progress(progress: Any, width: int = 20) -> str:
    """Render a BulkProgress as ``[bar] resolved/total``."""
    bar = create_progress_bar(progress.resolved, progress.total, width=width)
    return f"{bar} {progress.resolved}/{progress.total}"
