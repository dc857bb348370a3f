# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Test fixtures for the loggify package."""

from __future__ import annotations

import logging

import pytest

from fakes import FakeLogsClient
from loggify import registry


@pytest.fixture
def logs_client() -> FakeLogsClient:
    return FakeLogsClient()


@pytest.fixture(autouse=True)
def reset_registration():
    """Reset process-global registration and root logger level around each test."""
    root = logging.getLogger()
    saved_level = root.level
    registry._reset()
    yield
    registry._reset()
    root.setLevel(saved_level)
