#!/usr/bin/env python3
"""
Application Constants

This module contains all configuration constants and exit codes used
throughout the ContentGem client.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_API_FAILURES = 4
EXIT_JOB_FAILED = 5
EXIT_JOB_TIMEOUT = 6
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Transport constants
DEFAULT_BASE_URL = "https://gemcontent.com/api/v1"
DEFAULT_TIMEOUT = 30.0  # seconds
API_KEY_HEADER = "X-API-Key"
JSON_CONTENT_TYPE = "application/json"

# Pagination defaults
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# Polling budgets (attempts x delay in seconds)
GENERATION_MAX_ATTEMPTS = 60
GENERATION_POLL_DELAY = 5.0
BULK_MAX_ATTEMPTS = 120
BULK_POLL_DELAY = 10.0
COMPANY_PARSING_MAX_ATTEMPTS = 30
COMPANY_PARSING_POLL_DELAY = 2.0

# Job status values reported by the server
STATUS_COMPLETED = "completed"
STATUS_FAILED = "failed"

DOWNLOAD_FORMATS = ("pdf", "docx", "html", "markdown")
