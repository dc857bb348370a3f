# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Fluent assembly and one-shot registration of the console sink."""

import logging
import os
from typing import Any, TextIO

from . import registry
from .cloudwatch import CloudWatchConfig, CloudWatchSink
from .config import LoggerConfig
from .error_reporter import ErrorReporter
from .formatter import DEFAULT_TIME_FORMAT
from .handler import LoggifyHandler
from .severity import Severity

logger = logging.getLogger(__name__)


class LogBuilder:
    """Builder for the process's loggify sink.

    Mutation is confined to the construction phase; ``build()`` freezes the
    settings into a ``LoggerConfig`` and registers the handler.

    Defaults:
    - level: INFO, so debug and trace records are suppressed
    - exclude: no targets are excluded
    - time format: ``%d.%m.%Y %H:%M:%S``
    - color: enabled

    Example:
        >>> import logging
        >>> from loggify import LogBuilder
        >>> LogBuilder() \\
        ...     .add_exclude("urllib3") \\
        ...     .set_level("trace") \\
        ...     .set_time_format("%H:%M:%S") \\
        ...     .build()
        >>> logging.getLogger("app").info("Service started")
    """

    def __init__(self):
        self.level = Severity.INFO
        self.exclude: list[str] = []
        self.time_format = DEFAULT_TIME_FORMAT
        self.log_target = False
        self.color_enabled = True
        self.aws: CloudWatchConfig | None = None
        self.error_reporter: ErrorReporter | None = None
        self.stream: TextIO | None = None

    @classmethod
    def from_env(cls) -> "LogBuilder":
        """Create a builder seeded from environment variables.

        - LOG_LEVEL: minimum severity (error, warn, info, debug, trace)
        - LOGGIFY_TIME_FORMAT: strftime pattern
        - LOGGIFY_EXCLUDE: comma separated target substrings
        - NO_COLOR: any non-empty value disables color

        Raises:
            ValueError: If LOG_LEVEL is not a known severity
        """
        builder = cls()

        level = os.getenv("LOG_LEVEL")
        if level:
            builder.set_level(level)

        time_format = os.getenv("LOGGIFY_TIME_FORMAT")
        if time_format:
            builder.set_time_format(time_format)

        for name in os.getenv("LOGGIFY_EXCLUDE", "").split(","):
            if name.strip():
                builder.add_exclude(name.strip())

        if os.getenv("NO_COLOR"):
            builder.disable_color()

        return builder

    def set_level(self, level: Severity | str) -> "LogBuilder":
        """Set the minimum severity."""
        self.level = Severity.parse(level)
        return self

    def add_exclude(self, name: str) -> "LogBuilder":
        """Exclude every target containing ``name``."""
        self.exclude.append(name)
        return self

    def set_time_format(self, time_format: str) -> "LogBuilder":
        """Set the strftime pattern for timestamps."""
        self.time_format = time_format
        return self

    def set_log_target(self, enabled: bool = True) -> "LogBuilder":
        """Echo each checked target to stderr, for finding exclude names."""
        self.log_target = enabled
        return self

    def disable_color(self) -> "LogBuilder":
        self.color_enabled = False
        return self

    def add_aws(self, config: CloudWatchConfig | None = None) -> "LogBuilder":
        """Mirror every emitted message to a CloudWatch Logs stream."""
        self.aws = config or CloudWatchConfig()
        return self

    def set_error_reporter(self, reporter: ErrorReporter) -> "LogBuilder":
        self.error_reporter = reporter
        return self

    def set_stream(self, stream: TextIO) -> "LogBuilder":
        """Write to ``stream`` instead of standard output."""
        self.stream = stream
        return self

    def build(self, client: Any = None) -> LoggifyHandler:
        """Provision the mirror, create the handler and register it.

        Args:
            client: Pre-built CloudWatch Logs client used instead of boto3

        Returns:
            The registered handler

        Raises:
            RegistrationError: If a sink is already registered in this process
            RemoteProvisionError: If the CloudWatch stream cannot be created
        """
        registry.ensure_unregistered()

        remote = None
        if self.aws is not None:
            remote = CloudWatchSink.create(self.aws, client=client)

        config = LoggerConfig(
            min_severity=self.level,
            exclude=tuple(self.exclude),
            time_format=self.time_format,
            color_enabled=self.color_enabled,
            debug_target_printing=self.log_target,
            remote=remote,
            raise_on_remote_error=self.aws.raise_on_error if self.aws is not None else False,
        )
        handler = LoggifyHandler(config, stream=self.stream, error_reporter=self.error_reporter)
        registry.register(handler, self.level)
        logger.debug("loggify registered at level %s", self.level.name)
        return handler


def init() -> LoggifyHandler:
    """Register the sink with default settings."""
    return LogBuilder().build()


def init_with_level(level: Severity | str) -> LoggifyHandler:
    """Register the sink with default settings and the given level."""
    return LogBuilder().set_level(level).build()
