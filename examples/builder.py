#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Use the builder to log everything with a time-only timestamp."""

import logging

import loggify
from loggify import LogBuilder


def main():
    LogBuilder() \
        .set_level("trace") \
        .set_time_format("%H:%M:%S") \
        .build()
    log = logging.getLogger(__name__)

    log.error("My error message")
    log.warning("My warn message")
    log.info("My info message")
    log.debug("My debug message")
    loggify.trace(log, "My trace message")


if __name__ == "__main__":
    main()
