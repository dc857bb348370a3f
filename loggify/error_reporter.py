# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Reporting of sink failures that must not abort the logging caller."""

import sys
import traceback
from abc import ABC, abstractmethod
from typing import Any, TextIO


class ErrorReporter(ABC):
    """Abstract base class for error reporters."""

    @abstractmethod
    def report(self, error: Exception, context: dict[str, Any] | None = None) -> None:
        """Report an exception with optional context.

        Args:
            error: The exception to report
            context: Optional dictionary with additional context
        """
        pass


class ConsoleErrorReporter(ErrorReporter):
    """Error reporter that writes to standard error.

    Reports are written straight to the stream and never pass through the
    logging facade, so they are not mirrored to the remote stream.
    """

    def __init__(self, stream: TextIO | None = None, include_traceback: bool = False):
        """Initialize console error reporter.

        Args:
            stream: Output stream (defaults to sys.stderr at report time)
            include_traceback: Also write the formatted stack trace
        """
        self._stream = stream
        self.include_traceback = include_traceback

    def report(self, error: Exception, context: dict[str, Any] | None = None) -> None:
        stream = self._stream or sys.stderr
        log_message = f"[loggify] {type(error).__name__}: {error}"

        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            log_message += f" | Context: {context_str}"

        print(log_message, file=stream, flush=True)
        if self.include_traceback:
            stack_trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
            print(stack_trace, file=stream, end="", flush=True)


class SilentErrorReporter(ErrorReporter):
    """Error reporter that stores errors in memory for testing."""

    def __init__(self):
        self.reported_errors: list[dict[str, Any]] = []

    def report(self, error: Exception, context: dict[str, Any] | None = None) -> None:
        self.reported_errors.append({
            "error": error,
            "error_type": type(error).__name__,
            "error_message": str(error),
            "context": context or {},
        })

    def get_errors(self, error_type: str | None = None) -> list[dict[str, Any]]:
        """Get all reported errors, optionally filtered by type.

        Args:
            error_type: Optional error type name to filter by

        Returns:
            List of reported error dictionaries
        """
        if error_type:
            return [e for e in self.reported_errors if e["error_type"] == error_type]
        return self.reported_errors

    def has_errors(self) -> bool:
        """Check if any errors have been reported."""
        return len(self.reported_errors) > 0

    def clear(self) -> None:
        """Clear all stored errors."""
        self.reported_errors.clear()
