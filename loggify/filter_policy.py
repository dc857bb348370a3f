# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Severity and target filtering for the console sink."""

import logging
import sys
from dataclasses import dataclass

from .record import Record
from .severity import Severity


@dataclass(frozen=True)
class FilterPolicy:
    """Decides whether a record is emitted.

    A record passes when its severity is at least as severe as
    ``min_severity`` and none of the ``exclude`` strings occurs anywhere in
    its target. Exclusion is plain substring containment: ``"db"`` excludes
    ``"app.db.pool"`` as well as ``"dbus"``.

    Attributes:
        min_severity: Least severe level that is still emitted
        exclude: Target substrings to suppress
        debug_target_printing: Echo every checked target to stderr
    """

    min_severity: Severity = Severity.INFO
    exclude: tuple[str, ...] = ()
    debug_target_printing: bool = False

    def accepts(self, record: "Record | logging.LogRecord") -> bool:
        """Return True if ``record`` should be emitted, without side effects."""
        if isinstance(record, logging.LogRecord):
            target = record.name
            severity = Severity.from_stdlib_level(record.levelno)
        else:
            target = record.target
            severity = record.severity

        if any(name in target for name in self.exclude):
            return False

        return self.min_severity.admits(severity)

    def enabled(self, record: "Record | logging.LogRecord") -> bool:
        """Return True if ``record`` should be emitted, echoing its target when enabled."""
        if self.debug_target_printing:
            target = record.name if isinstance(record, logging.LogRecord) else record.target
            print(f"[loggify] target = {target!r}", file=sys.stderr, flush=True)

        return self.accepts(record)
