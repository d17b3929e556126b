"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all client configuration.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    GENERATION_MAX_ATTEMPTS,
    GENERATION_POLL_DELAY,
)
from ..utils.validation import validate_base_url


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set via environment variables or CLI arguments.
    """

    api_key: str = Field(
        ...,
        min_length=1,
        description="ContentGem API key sent in the X-API-Key header",
        json_schema_extra={
            "env_var": "CONTENTGEM_API_KEY",
            "cli_arg": "api_key",
            "sensitive": True,
        }
    )

    base_url: str = Field(
        DEFAULT_BASE_URL,
        description=f"API base URL (default: {DEFAULT_BASE_URL})",
        json_schema_extra={
            "env_var": "CONTENTGEM_BASE_URL",
            "cli_arg": "base_url",
        }
    )

    timeout: float = Field(
        DEFAULT_TIMEOUT,
        gt=0,
        description=f"Per-request timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
        json_schema_extra={
            "env_var": "CONTENTGEM_TIMEOUT",
            "cli_arg": "timeout",
        }
    )

    poll_interval: float = Field(
        GENERATION_POLL_DELAY,
        gt=0,
        description=f"Seconds between generation status checks (default: {GENERATION_POLL_DELAY:g})",
        json_schema_extra={
            "env_var": "CONTENTGEM_POLL_INTERVAL",
            "cli_arg": "poll_interval",
        }
    )

    poll_max_attempts: int = Field(
        GENERATION_MAX_ATTEMPTS,
        ge=1,
        description=f"Maximum generation status checks before timing out (default: {GENERATION_MAX_ATTEMPTS})",
        json_schema_extra={
            "env_var": "CONTENTGEM_POLL_MAX_ATTEMPTS",
            "cli_arg": "poll_max_attempts",
        }
    )

    @field_validator('base_url')
    @classmethod
    def check_base_url(cls, v: Any) -> str:
        """Require an absolute http(s) URL and drop any trailing slash."""
        ok, reason = validate_base_url(v)
        if not ok:
            raise ValueError(reason)
        return v.rstrip("/")

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }
