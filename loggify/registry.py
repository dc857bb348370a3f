# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Process-wide one-shot registration of the sink with stdlib logging."""

import logging
import threading

from .exceptions import RegistrationError
from .severity import Severity

_lock = threading.Lock()
_active_handler: logging.Handler | None = None


def register(handler: logging.Handler, threshold: Severity) -> None:
    """Attach ``handler`` to the root logger and set the global threshold.

    Args:
        handler: Handler to install as the process's loggify sink
        threshold: Root logger level, a fast-path filter above the handler's own

    Raises:
        RegistrationError: If a handler was already registered in this process
    """
    global _active_handler
    with _lock:
        if _active_handler is not None:
            raise RegistrationError("already initialized")
        root = logging.getLogger()
        root.addHandler(handler)
        root.setLevel(threshold.stdlib_level)
        _active_handler = handler


def ensure_unregistered() -> None:
    """Raise RegistrationError if a handler is already registered."""
    with _lock:
        if _active_handler is not None:
            raise RegistrationError("already initialized")


def is_registered() -> bool:
    return _active_handler is not None


def active_handler() -> logging.Handler | None:
    """Return the registered handler, or None."""
    return _active_handler


def _reset() -> None:
    """Detach the registered handler and clear the flag (tests only)."""
    global _active_handler
    with _lock:
        if _active_handler is not None:
            logging.getLogger().removeHandler(_active_handler)
        _active_handler = None
