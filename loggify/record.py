# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Immutable view of a log record."""

import logging
import time
from dataclasses import dataclass, field

from .severity import Severity


@dataclass(frozen=True)
class Record:
    """A single log record as seen by the sink.

    Attributes:
        severity: Severity of the record
        target: Hierarchical name of the code location that issued it
        message: Fully formatted message text
        created: Emission time as seconds since the epoch
    """

    severity: Severity
    target: str
    message: str
    created: float = field(default_factory=time.time)

    @classmethod
    def from_log_record(cls, record: logging.LogRecord) -> "Record":
        """Build a Record from a stdlib LogRecord."""
        return cls(
            severity=Severity.from_stdlib_level(record.levelno),
            target=record.name,
            message=record.getMessage(),
            created=record.created,
        )


def as_record(record: "Record | logging.LogRecord") -> Record:
    """Return ``record`` as a Record, converting stdlib records."""
    if isinstance(record, Record):
        return record
    return Record.from_log_record(record)
