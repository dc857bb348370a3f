#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Exclude a logger by a substring of its name."""

import logging

from loggify import LogBuilder


def main():
    LogBuilder() \
        .set_log_target(True) \
        .add_exclude("exclude.example") \
        .set_level("debug") \
        .build()
    # set_log_target echoes each logger name to stderr, which shows what to exclude

    logging.getLogger("exclude.example.inner").error("Will not be shown")
    logging.getLogger("exclude.other").error("Shown: other targets are untouched")
    logging.getLogger(__name__).info("My info message")


if __name__ == "__main__":
    main()
