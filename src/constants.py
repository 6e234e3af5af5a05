"""Project-wide constants shared by the translator and its collaborators.

This module centralises small constants that are imported across the
application. Keep this file minimal and free of side effects.
"""

from __future__ import annotations

from pathlib import Path

# Prefix of the names generated for filesystems lifted out of legacy configs.
FILESYSTEM_NAME_PREFIX = "_translate-filesystem-"

# Inline literal content references take the form ``data:,<raw contents>``.
DATA_URL_PREFIX = "data:,"

DEFAULT_CONFIG_DIR = Path("config")
DEFAULT_CONFIG_FILE = Path("app.yaml")

__all__ = [
    "DATA_URL_PREFIX",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_CONFIG_FILE",
    "FILESYSTEM_NAME_PREFIX",
]
