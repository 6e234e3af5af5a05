# SPDX-License-Identifier: MIT
"""Application configuration read from ``config/app.yaml``."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from .base import StrictModel


class AppConfig(StrictModel):
    """Top-level application configuration controlling translation output."""

    log_level: Annotated[
        str, Field(min_length=1, description="Logging verbosity level.")
    ] = "INFO"
    json_indent: Annotated[
        int, Field(ge=0, description="Indentation used when writing JSON.")
    ] = 2


__all__ = ["AppConfig"]
