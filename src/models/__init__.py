# SPDX-License-Identifier: MIT
"""Pydantic models describing both provisioning schemas and app configuration.

These definitions act as the contract between the loaders, the translator and
any downstream tooling that consumes translated documents. The legacy schema
lives in :mod:`models.v1` and the current schema in :mod:`models.v2_0`; both
are imported as modules because they share entity names.
"""

from . import v1, v2_0
from .app import AppConfig
from .base import SchemaModel, StrictModel
from .version import LEGACY_VERSION, TARGET_VERSION, SchemaVersion

__all__ = [
    "AppConfig",
    "LEGACY_VERSION",
    "SchemaModel",
    "SchemaVersion",
    "StrictModel",
    "TARGET_VERSION",
    "v1",
    "v2_0",
]
