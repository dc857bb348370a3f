# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Closed severity enum and its mapping onto stdlib logging levels."""

import logging
from enum import IntEnum

TRACE = 5

logging.addLevelName(TRACE, "TRACE")


class Severity(IntEnum):
    """Severity of a log record.

    The integer value is the rank: a lower rank is more severe, so
    ``Severity.ERROR < Severity.TRACE``.
    """

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @property
    def stdlib_level(self) -> int:
        """Numeric stdlib logging level for this severity."""
        return _STDLIB_LEVELS[self]

    def admits(self, other: "Severity") -> bool:
        """Return True if ``other`` is at least as severe as this threshold."""
        return other.value <= self.value

    @classmethod
    def from_stdlib_level(cls, levelno: int) -> "Severity":
        """Classify a stdlib numeric level onto the closed enum.

        CRITICAL and anything above ERROR collapse to ERROR; anything
        below DEBUG is TRACE.
        """
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE

    @classmethod
    def parse(cls, value: "str | Severity") -> "Severity":
        """Parse a severity from its name (case-insensitive).

        Args:
            value: Severity instance or one of error, warn, warning, info,
                debug, trace

        Returns:
            Matching Severity

        Raises:
            ValueError: If the name is not recognized
        """
        if isinstance(value, Severity):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(
                f"Invalid log level: {value}. Must be one of {[s.name for s in cls]}"
            ) from None


_STDLIB_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARN: logging.WARNING,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
    Severity.TRACE: TRACE,
}


def trace(logger: logging.Logger, msg: str, *args, **kwargs) -> None:
    """Log ``msg`` at TRACE level on ``logger``."""
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, msg, *args, **kwargs)
