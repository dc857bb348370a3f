# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Exceptions for the loggify console sink."""


class LoggifyError(Exception):
    """Base exception for loggify errors."""
    pass


class RegistrationError(LoggifyError):
    """Raised when a sink is registered more than once per process."""
    pass


class RemoteProvisionError(LoggifyError):
    """Raised when the remote log stream cannot be created at startup."""
    pass


class RemoteAppendError(LoggifyError):
    """Raised when a mirrored write to the remote log stream fails."""
    pass
