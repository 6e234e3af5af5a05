"""Telemetry and monitoring helpers for the translator.

Exports:
    init_logfire: Configure Pydantic Logfire instrumentation.
"""

from .monitoring import LogLevel, init_logfire

__all__ = ["LogLevel", "init_logfire"]
