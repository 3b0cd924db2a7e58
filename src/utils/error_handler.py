# SPDX-License-Identifier: MIT
"""Error handling abstractions."""

from __future__ import annotations

from abc import ABC, abstractmethod

import logfire

from errors import ShareCodeError


class ErrorHandler(ABC):
    """Interface for reporting errors.

    Implementations should avoid raising further exceptions and should emit
    concise diagnostics suitable for production logs.
    """

    @abstractmethod
    def handle(self, message: str, exc: Exception | None = None) -> None:
        """Record ``message`` with optional ``exc`` context."""


class LoggingErrorHandler(ErrorHandler):
    """Error handler that logs via ``logfire``."""

    def handle(self, message: str, exc: Exception | None = None) -> None:
        """Log an error message with optional exception context.

        Share-code failures are tagged with their stable error code so log
        consumers can group them without parsing messages.

        Args:
            message: Description of the error to record.
            exc: Exception instance providing additional context.

        Returns:
            None.
        """
        if isinstance(exc, ShareCodeError):
            logfire.error(f"{message}: {exc}", error_code=exc.code)
        elif exc:
            logfire.error(f"{message}: {exc}")
        else:
            logfire.error(message)
