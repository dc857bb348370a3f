# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Loggify: colorized console sink for stdlib logging.

Filters records by severity and by target substring, prints each accepted
record as one line, and can mirror messages to an AWS CloudWatch Logs
stream.

Example:
    >>> import logging
    >>> import loggify
    >>>
    >>> loggify.init()
    >>> log = logging.getLogger("app")
    >>> log.error("My error message")
    >>> log.info("My info message")
    >>> log.debug("Will not be shown")
    >>>
    >>> # Or with the builder
    >>> from loggify import LogBuilder
    >>> LogBuilder().set_level("trace").add_exclude("botocore").build()
    >>> loggify.trace(log, "My trace message")
"""

__version__ = "0.1.0"

from .builder import LogBuilder, init, init_with_level
from .cloudwatch import CloudWatchConfig, CloudWatchSink
from .config import LoggerConfig
from .error_reporter import ConsoleErrorReporter, ErrorReporter, SilentErrorReporter
from .exceptions import LoggifyError, RegistrationError, RemoteAppendError, RemoteProvisionError
from .filter_policy import FilterPolicy
from .formatter import LineFormatter, render
from .handler import LoggifyHandler
from .record import Record
from .retry_policy import RetryConfig
from .severity import TRACE, Severity, trace

__all__ = [
    "__version__",
    "CloudWatchConfig",
    "CloudWatchSink",
    "ConsoleErrorReporter",
    "ErrorReporter",
    "FilterPolicy",
    "LineFormatter",
    "LogBuilder",
    "LoggerConfig",
    "LoggifyError",
    "LoggifyHandler",
    "Record",
    "RegistrationError",
    "RemoteAppendError",
    "RemoteProvisionError",
    "RetryConfig",
    "Severity",
    "SilentErrorReporter",
    "TRACE",
    "init",
    "init_with_level",
    "render",
    "trace",
]
