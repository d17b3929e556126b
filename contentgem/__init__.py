#!/usr/bin/env python3
"""
ContentGem Client Package

A typed Python client for the ContentGem content-generation API:
publications, images, company profile parsing, subscriptions and usage
statistics, with helpers that poll asynchronous generation jobs until
they finish.

This package provides both a programmatic API and a command-line interface.
"""

__version__ = "1.0.0"
__author__ = "ContentGem"
__description__ = "Python client for the ContentGem content generation API"
__license__ = "MIT"
__maintainer__ = "ContentGem"
__email__ = "support@example.com"
__url__ = "https://github.com/example/contentgem-python"
__status__ = "Production"

# Import models for public API
from .models import (
    ClientConfig,
    CompanyInfo,
    GenerationRequest,
    GenerationStatus,
    BulkGenerationRequest,
    BulkStatusResponse,
    JobState,
    BulkProgress,
    is_success,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_INPUT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_API_FAILURES,
    EXIT_JOB_FAILED,
    EXIT_JOB_TIMEOUT,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
)

# Import API client and errors for public API
from .api import (
    ContentGemClient,
    create_client,
    ContentGemError,
    TransportError,
    PollingError,
    JobFailedError,
    JobTimeoutError,
)

# Import core workflows for public API
from .core import (
    run_smoke_checks,
    wait_for_generations_concurrent,
)

# Import configuration for public API
from .config import Env, ConfigError

# Import CLI functionality for public API
from .cli import (
    main,
    create_argument_parser,
)

# Import utilities for public API
from .utils import (
    setup_logging,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "ClientConfig",
    "CompanyInfo",
    "GenerationRequest",
    "GenerationStatus",
    "BulkGenerationRequest",
    "BulkStatusResponse",
    "JobState",
    "BulkProgress",
    "is_success",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_INPUT_ERROR",
    "EXIT_CONFIG_ERROR",
    "EXIT_API_FAILURES",
    "EXIT_JOB_FAILED",
    "EXIT_JOB_TIMEOUT",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    # Client and errors
    "ContentGemClient",
    "create_client",
    "ContentGemError",
    "TransportError",
    "PollingError",
    "JobFailedError",
    "JobTimeoutError",
    # Core workflows
    "run_smoke_checks",
    "wait_for_generations_concurrent",
    # Configuration
    "Env",
    "ConfigError",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
]
