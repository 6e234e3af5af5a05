# SPDX-License-Identifier: MIT
"""Centralised application configuration management.

This module exposes :class:`Settings`, a ``pydantic-settings`` model that
combines values sourced from the YAML configuration file and environment
variables. Environment variables take precedence over file-based values and
the merged configuration is validated before use.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from io_utils.loader import load_app_config


class Settings(BaseSettings):
    """Application settings combining file-based and environment configuration."""

    log_level: str = Field("INFO", description="Logging verbosity level.")
    logfire_token: str | None = Field(
        None, description="Logfire authentication token, if available.", repr=False
    )
    json_indent: int = Field(
        2, ge=0, description="Indentation used when writing JSON output."
    )

    model_config = SettingsConfigDict(env_prefix="IGN_", extra="ignore")


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load and validate application settings.

    Configuration values are read from the application configuration file and
    then merged with environment variables using ``pydantic-settings``. When a
    value is provided in both sources the environment variable wins. A ``.env``
    file in the working directory is loaded automatically when present. The
    optional ``config_path`` parameter overrides the default
    ``config/app.yaml`` location.

    Args:
        config_path: Optional path to a YAML configuration file.

    Returns:
        Settings: Fully validated application configuration.

    Raises:
        RuntimeError: If configuration values are invalid.
    """
    if config_path:
        cfg_path = Path(config_path)
        config = load_app_config(cfg_path.parent, cfg_path.name)
    else:
        config = load_app_config()
    env_file_path = Path(".env")
    env_file = env_file_path if env_file_path.exists() else None
    file_values = config.model_dump()
    try:
        # Init kwargs outrank the environment in pydantic-settings, so pass
        # only file values the environment does not override.
        from_env = Settings(_env_file=env_file)
        overrides = {
            key: value
            for key, value in file_values.items()
            if key not in from_env.model_fields_set
        }
        return Settings(_env_file=env_file, **overrides)
    except ValidationError as exc:
        # Summarise validation issues so the caller receives clear feedback.
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise RuntimeError(f"Invalid configuration: {details}") from exc
