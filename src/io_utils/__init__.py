"""Input and output helpers for configuration documents.

Exports:
    load_app_config: Read the YAML application configuration.
    load_legacy_config: Read and validate a legacy config file.
    parse_legacy_config: Validate a legacy config from JSON text.
    render_config: Serialise a config to JSON.
    write_config: Write a config to disk atomically.
    atomic_write: Write files atomically.
"""

from __future__ import annotations

from .loader import load_app_config, load_legacy_config, parse_legacy_config
from .persistence import atomic_write, render_config, write_config

__all__ = [
    "atomic_write",
    "load_app_config",
    "load_legacy_config",
    "parse_legacy_config",
    "render_config",
    "write_config",
]
