# SPDX-License-Identifier: MIT
"""Utility interfaces and implementations."""

from .error_handler import ErrorHandler, LoggingErrorHandler

__all__ = [
    "ErrorHandler",
    "LoggingErrorHandler",
]
