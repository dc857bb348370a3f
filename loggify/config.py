# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Immutable logger configuration assembled by the builder."""

from dataclasses import dataclass

from .cloudwatch import CloudWatchSink
from .filter_policy import FilterPolicy
from .formatter import DEFAULT_TIME_FORMAT
from .severity import Severity


@dataclass(frozen=True)
class LoggerConfig:
    """Configuration owned by the registered handler.

    Attributes:
        min_severity: Least severe level that is emitted
        exclude: Target substrings to suppress
        time_format: strftime pattern for the timestamp
        color_enabled: Render with ANSI colors
        debug_target_printing: Echo every checked target to stderr
        remote: Provisioned CloudWatch mirror, if any
        raise_on_remote_error: Propagate remote append failures to the caller
    """

    min_severity: Severity = Severity.INFO
    exclude: tuple[str, ...] = ()
    time_format: str = DEFAULT_TIME_FORMAT
    color_enabled: bool = True
    debug_target_printing: bool = False
    remote: CloudWatchSink | None = None
    raise_on_remote_error: bool = False

    @property
    def filter_policy(self) -> FilterPolicy:
        return FilterPolicy(
            min_severity=self.min_severity,
            exclude=self.exclude,
            debug_target_printing=self.debug_target_printing,
        )
