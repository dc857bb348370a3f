# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Single-line console rendering, colored or plain."""

import logging
from datetime import datetime, timezone

from .record import Record, as_record
from .severity import Severity

DEFAULT_TIME_FORMAT = "%d.%m.%Y %H:%M:%S"

# ANSI escape codes
RESET = "\x1b[0m"
BOLD = "\x1b[1m"
MUTED = "\x1b[90m"

# Fixed-width label and color per severity
LEVEL_STYLES: dict[Severity, tuple[str, str]] = {
    Severity.ERROR: ("Error", "\x1b[31m"),
    Severity.WARN: ("Warn ", "\x1b[33m"),
    Severity.INFO: ("Info ", "\x1b[36m"),
    Severity.DEBUG: ("Debug", "\x1b[35m"),
    Severity.TRACE: ("Trace", "\x1b[34m"),
}


def format_timestamp(created: float, time_format: str) -> str:
    """Format an epoch timestamp in UTC with a strftime pattern."""
    return datetime.fromtimestamp(created, tz=timezone.utc).strftime(time_format)


def render(
    record: "Record | logging.LogRecord",
    time_format: str = DEFAULT_TIME_FORMAT,
    color_enabled: bool = True,
) -> str:
    """Render a record as ``[<timestamp>] > <label> > <message>``.

    Args:
        record: Record to render
        time_format: strftime pattern for the timestamp
        color_enabled: Wrap segments in ANSI escapes when True

    Returns:
        The rendered line without a trailing newline; line breaks inside
        the message are escaped as ``\\n`` and ``\\r``
    """
    record = as_record(record)
    timestamp = format_timestamp(record.created, time_format)
    label, color = LEVEL_STYLES[record.severity]
    message = escape_line_breaks(record.message)

    if not color_enabled:
        return f"[{timestamp}] > {label} > {message}"

    return (
        f"[{MUTED}{timestamp}{RESET}] > "
        f"{color}{BOLD}{label}{RESET} > "
        f"{BOLD}{message}{RESET}"
    )


def escape_line_breaks(message: str) -> str:
    """Replace CR and LF with their backslash escapes so a record stays on one line."""
    return message.replace("\r", "\\r").replace("\n", "\\n")


class LineFormatter(logging.Formatter):
    """stdlib Formatter producing the loggify line format."""

    def __init__(self, time_format: str = DEFAULT_TIME_FORMAT, color_enabled: bool = True):
        super().__init__()
        self.time_format = time_format
        self.color_enabled = color_enabled

    def format(self, record: logging.LogRecord) -> str:
        return render(record, self.time_format, self.color_enabled)
