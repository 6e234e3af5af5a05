"""Error handling abstractions shared by the loaders and CLI."""

from __future__ import annotations

from abc import ABC, abstractmethod

import logfire


class ErrorHandler(ABC):
    """Interface for reporting errors before they are re-raised.

    Implementations should avoid raising further exceptions and should emit
    concise diagnostics suitable for production logs.
    """

    @abstractmethod
    def handle(self, message: str, exc: Exception | None = None) -> None:
        """Record ``message`` with optional ``exc`` context."""


class LoggingErrorHandler(ErrorHandler):
    """Error handler that logs via ``logfire``."""

    def handle(self, message: str, exc: Exception | None = None) -> None:
        """Log ``message``, tagging it with the type and text of ``exc``."""
        if exc is None:
            logfire.error("{message}", message=message)
            return
        logfire.error(
            "{message}: {error}",
            message=message,
            error=str(exc),
            error_type=type(exc).__name__,
        )


__all__ = ["ErrorHandler", "LoggingErrorHandler"]
