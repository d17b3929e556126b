"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to automatically load, validate, and merge configuration from multiple sources.
"""

import logging
import os
import typing
from argparse import ArgumentParser, Namespace
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import ConfigSchema

logger = logging.getLogger(__name__)

DOTENV_FILE = ".env"


def _env_var(field_info) -> Optional[str]:
    extra = field_info.json_schema_extra
    return extra.get("env_var") if extra else None


def _cli_arg(field_info) -> Optional[str]:
    extra = field_info.json_schema_extra
    return extra.get("cli_arg") if extra else None


def _clean(value: Any) -> Any:
    """Strip strings; blank strings count as unset."""
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        cli_overrides: Optional[Mapping[str, Any]] = None,
        dotenv_path: Optional[str] = DOTENV_FILE,
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env file (never overrides variables already set)
        3. OS environment variables
        4. CLI arguments / overrides keyed by env var name

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)
            cli_overrides: Overrides keyed by environment variable name
            dotenv_path: Path of the dotenv file to read, or None to skip it

        Returns:
            Validated configuration instance

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        if dotenv_path:
            _load_from_dotenv_file(dotenv_path)

        for field_name, field_info in schema.model_fields.items():
            env_var = _env_var(field_info)
            if env_var:
                value = _clean(os.getenv(env_var))
                if value is not None:
                    config_dict[field_name] = value

        if cli_args is not None:
            for field_name, field_info in schema.model_fields.items():
                cli_arg = _cli_arg(field_info)
                if cli_arg and getattr(cli_args, cli_arg, None) is not None:
                    value = _clean(getattr(cli_args, cli_arg))
                    if value is not None:
                        config_dict[field_name] = value

        if cli_overrides:
            for field_name, field_info in schema.model_fields.items():
                env_var = _env_var(field_info)
                if env_var in cli_overrides:
                    value = _clean(cli_overrides[env_var])
                    if value is not None:
                        config_dict[field_name] = value

        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            # Report errors by env var name, which is what users set
            errors = []
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else "config"
                field_info = schema.model_fields.get(field)
                env_var = (_env_var(field_info) if field_info else None) or str(field).upper()
                errors.append(f"{env_var}: {error['msg']}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ValueError(error_msg) from e

    @staticmethod
    def add_schema_arguments(parser: ArgumentParser, schema: type = ConfigSchema) -> ArgumentParser:
        """
        Add one ``--option`` per schema field that declares a ``cli_arg``.

        Defaults are left as None so the loader can apply precedence.
        """
        for field_name, field_info in schema.model_fields.items():
            cli_arg = _cli_arg(field_info)
            if not cli_arg:
                continue

            arg_name = f"--{cli_arg.replace('_', '-')}"
            kwargs: Dict[str, Any] = {
                "dest": cli_arg,
                "default": None,
                "help": field_info.description or f"Override {_env_var(field_info) or field_name.upper()} env var",
            }

            field_type = field_info.annotation
            if typing.get_origin(field_type) is typing.Union:
                non_none_args = [arg for arg in typing.get_args(field_type) if arg is not type(None)]
                if len(non_none_args) == 1:
                    field_type = non_none_args[0]

            if field_type is int:
                kwargs["type"] = int
            elif field_type is float:
                kwargs["type"] = float

            parser.add_argument(arg_name, **kwargs)

        return parser


def _load_from_dotenv_file(path: str = DOTENV_FILE) -> None:
    """Load values from a dotenv file if it exists."""
    if os.path.exists(path):
        load_dotenv(path, override=False)
        logger.debug(f"Loaded configuration from {path} file")
    else:
        logger.debug(f"{path} file not found, skipping")
