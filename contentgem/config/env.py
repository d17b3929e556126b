"""
Environment configuration management module.

This module provides a centralized Environment manager class that loads,
validates, and serves all configuration values for the client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    GENERATION_MAX_ATTEMPTS,
    GENERATION_POLL_DELAY,
)
from .loader import DOTENV_FILE, ConfigLoader
from .schema import ConfigSchema

logger = logging.getLogger(__name__)

# Module-level singleton instance
_ENV: Optional["Env"] = None


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass(frozen=True)
class Env:
    """Immutable configuration container for environment variables."""

    CONTENTGEM_API_KEY: str
    CONTENTGEM_BASE_URL: str = DEFAULT_BASE_URL
    CONTENTGEM_TIMEOUT: float = DEFAULT_TIMEOUT
    CONTENTGEM_POLL_INTERVAL: float = GENERATION_POLL_DELAY
    CONTENTGEM_POLL_MAX_ATTEMPTS: int = GENERATION_MAX_ATTEMPTS

    @staticmethod
    def load(
        cli_args: Optional[Any] = None,
        cli_overrides: Optional[Mapping[str, Any]] = None,
        dotenv_path: Optional[str] = DOTENV_FILE,
    ) -> "Env":
        """
        Load configuration from all sources and install it as the current Env.

        Args:
            cli_args: Parsed CLI namespace (optional)
            cli_overrides: Overrides keyed by environment variable name
            dotenv_path: Dotenv file to read, or None to skip it

        Returns:
            Configured Env instance

        Raises:
            ConfigError: If required fields are missing or invalid
        """
        global _ENV

        try:
            config = ConfigLoader.load(
                schema=ConfigSchema,
                cli_args=cli_args,
                cli_overrides=cli_overrides,
                dotenv_path=dotenv_path,
            )
        except ValueError as e:
            raise ConfigError(str(e)) from e

        _ENV = Env.from_schema(config)
        logger.debug(f"Environment configuration loaded: {_ENV.mask()}")
        return _ENV

    @staticmethod
    def current() -> "Env":
        """
        Return the globally-initialized Env instance.

        Raises:
            ConfigError: If Env.load() has not been called yet
        """
        if _ENV is None:
            raise ConfigError("Environment not initialized. Call Env.load() first.")
        return _ENV

    @classmethod
    def from_schema(cls, config: ConfigSchema) -> "Env":
        return cls(
            CONTENTGEM_API_KEY=config.api_key,
            CONTENTGEM_BASE_URL=config.base_url,
            CONTENTGEM_TIMEOUT=config.timeout,
            CONTENTGEM_POLL_INTERVAL=config.poll_interval,
            CONTENTGEM_POLL_MAX_ATTEMPTS=config.poll_max_attempts,
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Env":
        """
        Create Env instance from mapping (useful for testing).

        Values go through the same schema validation as ``load``.

        Raises:
            ConfigError: If required fields are missing or invalid
        """
        values = {}
        for field_name, field_info in ConfigSchema.model_fields.items():
            env_var = field_info.json_schema_extra.get("env_var")
            value = mapping.get(env_var)
            if isinstance(value, str):
                value = value.strip() or None
            if value is not None:
                values[field_name] = value

        if not values.get("api_key"):
            raise ConfigError("Missing required configuration: CONTENTGEM_API_KEY")

        try:
            return cls.from_schema(ConfigSchema(**values))
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def to_dict(self) -> dict:
        """Convert environment to dictionary representation."""
        return {
            "CONTENTGEM_API_KEY": self.CONTENTGEM_API_KEY,
            "CONTENTGEM_BASE_URL": self.CONTENTGEM_BASE_URL,
            "CONTENTGEM_TIMEOUT": self.CONTENTGEM_TIMEOUT,
            "CONTENTGEM_POLL_INTERVAL": self.CONTENTGEM_POLL_INTERVAL,
            "CONTENTGEM_POLL_MAX_ATTEMPTS": self.CONTENTGEM_POLL_MAX_ATTEMPTS,
        }

    def mask(self) -> dict:
        """Return masked version for safe logging (hides the API key)."""
        masked = self.to_dict()
        masked["CONTENTGEM_API_KEY"] = "***" if self.CONTENTGEM_API_KEY else None
        return masked
