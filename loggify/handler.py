# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""stdlib logging handler composing the filter, formatter and remote mirror."""

import logging
import sys
import threading
from typing import TextIO

from .config import LoggerConfig
from .error_reporter import ConsoleErrorReporter, ErrorReporter
from .exceptions import RemoteAppendError
from .formatter import render
from .record import Record, as_record


class LoggifyHandler(logging.Handler):
    """Handler registered on the root logger.

    Accepted records are written to the output stream as one line each.
    When a CloudWatch mirror is configured, the bare message text is
    forwarded to it after the console write.

    Remote failures are reported through the error reporter and dropped,
    unless the configuration asks for them to be raised. Records emitted
    by the handler's own thread while it is talking to CloudWatch are
    printed but not mirrored.
    """

    def __init__(
        self,
        config: LoggerConfig | None = None,
        stream: TextIO | None = None,
        error_reporter: ErrorReporter | None = None,
    ):
        """Initialize the handler.

        Args:
            config: Logger configuration (defaults if None)
            stream: Output stream (defaults to sys.stdout at write time)
            error_reporter: Destination for remote failures (console by default)
        """
        super().__init__(level=logging.NOTSET)
        self.config = config or LoggerConfig()
        self.policy = self.config.filter_policy
        self.stream = stream
        self.error_reporter = error_reporter or ConsoleErrorReporter()
        self._forwarding = threading.local()

    def enabled(self, record: "Record | logging.LogRecord") -> bool:
        """Return True if the record passes the filter policy."""
        return self.policy.enabled(record)

    def filter(self, record: logging.LogRecord) -> bool:
        return bool(super().filter(record)) and self.policy.accepts(record)

    def handle(self, record: logging.LogRecord) -> bool:
        """Filter and emit ``record`` without holding the handler lock.

        Only the console write is locked, so a slow CloudWatch append on one
        thread never delays console output from another.
        """
        rv = self.filter(record)
        if rv:
            self.emit(record)
        return rv

    def log(self, record: "Record | logging.LogRecord") -> None:
        """Write an accepted record and mirror its message.

        Raises:
            RemoteAppendError: If the mirror fails and raise_on_remote_error is set
        """
        record = as_record(record)
        if not self.enabled(record):
            return

        line = render(record, self.config.time_format, self.config.color_enabled)
        self._write(line)

        if self.config.remote is not None:
            self._forward(record.message)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.log(record)
        except RemoteAppendError:
            raise
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        pass

    def _write(self, line: str) -> None:
        stream = self.stream or sys.stdout
        self.acquire()
        try:
            stream.write(line + "\n")
            stream.flush()
        finally:
            self.release()

    def _forward(self, message: str) -> None:
        if getattr(self._forwarding, "active", False):
            return

        self._forwarding.active = True
        try:
            self.config.remote.put_log(message)
        except RemoteAppendError as e:
            if self.config.raise_on_remote_error:
                raise
            self.error_reporter.report(e, context={
                "log_group": self.config.remote.log_group_name,
                "log_stream": self.config.remote.log_stream_name,
            })
        finally:
            self._forwarding.active = False
