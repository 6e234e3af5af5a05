# SPDX-License-Identifier: MIT
"""Utilities for loading configuration documents and application settings.

The helpers in this module centralise file-system access for legacy configs
and the YAML application configuration. Failures are reported through an
:class:`~utils.ErrorHandler` and re-raised with concise messages so callers
see one exception type per failure class.
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

import logfire
import yaml
from pydantic import TypeAdapter, ValidationError

from constants import DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE
from models import AppConfig, v1
from utils import ErrorHandler, LoggingErrorHandler

T = TypeVar("T")


def _read_file(path: Path, error_handler: ErrorHandler | None = None) -> str:
    """Return the contents of ``path``.

    Args:
        path: File location.
        error_handler: Processor for any errors encountered.

    Returns:
        The file contents.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read.
    """
    handler = error_handler or LoggingErrorHandler()
    with logfire.span("fs.read_text", attributes={"path": str(path)}):
        try:
            with path.open("r", encoding="utf-8") as file:
                text = file.read()
                logfire.debug("Read text file", path=str(path), bytes=len(text))
                return text
        except FileNotFoundError as exc:
            handler.handle(f"File not found: {path}", exc)
            raise
        except (OSError, UnicodeDecodeError) as exc:
            handler.handle(f"Error reading file {path}", exc)
            raise RuntimeError(
                f"An error occurred while reading the file: {exc}"
            ) from exc


def _summarise(exc: ValidationError) -> str:
    """Return ``exc`` as a single ``loc: msg`` line per error."""

    return "; ".join(
        f"{'.'.join(map(str, error['loc'])) or '<root>'}: {error['msg']}"
        for error in exc.errors()
    )


def _read_yaml_file(
    path: Path,
    schema: type[T],
    error_handler: ErrorHandler | None = None,
) -> T:
    """Return YAML data loaded from ``path`` validated against ``schema``.

    Args:
        path: File location.
        schema: Pydantic-compatible schema to validate against.
        error_handler: Processor for any errors encountered.
    """
    handler = error_handler or LoggingErrorHandler()
    with logfire.span("fs.read_yaml", attributes={"path": str(path)}):
        try:
            adapter = TypeAdapter(schema)
            return adapter.validate_python(
                yaml.safe_load(_read_file(path, handler)) or {}
            )
        except FileNotFoundError:
            raise
        except (RuntimeError, ValidationError, yaml.YAMLError, ValueError) as exc:
            handler.handle(f"Error reading YAML file {path}", exc)
            raise RuntimeError(
                f"An error occurred while reading the YAML file: {exc}"
            ) from exc


def parse_legacy_config(
    text: str, error_handler: ErrorHandler | None = None
) -> v1.Config:
    """Return the legacy config encoded as JSON in ``text``.

    Raises:
        RuntimeError: If ``text`` is not a valid legacy config.
    """
    handler = error_handler or LoggingErrorHandler()
    try:
        return v1.Config.model_validate_json(text)
    except ValidationError as exc:
        handler.handle("Invalid legacy config", exc)
        raise RuntimeError(f"Invalid legacy config: {_summarise(exc)}") from exc


def load_legacy_config(
    path: Path | str, error_handler: ErrorHandler | None = None
) -> v1.Config:
    """Return the legacy config stored as JSON at ``path``.

    Args:
        path: Location of the config file.
        error_handler: Processor for any errors encountered.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read or is not a legacy config.
    """
    handler = error_handler or LoggingErrorHandler()
    path = Path(path)
    with logfire.span("loader.load_legacy_config", attributes={"path": str(path)}):
        return parse_legacy_config(_read_file(path, handler), handler)


def load_app_config(
    base_dir: Path | str = DEFAULT_CONFIG_DIR,
    filename: Path | str = DEFAULT_CONFIG_FILE,
) -> AppConfig:
    """Return application configuration from ``base_dir``.

    The default location is optional and falls back to built-in defaults when
    absent; an explicitly requested file must exist.

    Raises:
        FileNotFoundError: If a non-default configuration file is missing.
        RuntimeError: If the file cannot be read or validated.
    """
    path = Path(base_dir) / Path(filename)
    is_default = path == DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE
    if is_default and not path.exists():
        logfire.debug("No application config found, using defaults", path=str(path))
        return AppConfig()
    return _read_yaml_file(path, AppConfig)


__all__ = ["load_app_config", "load_legacy_config", "parse_legacy_config"]
