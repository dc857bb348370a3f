#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Plain output without ANSI escapes, e.g. for log files or CI."""

import logging

from loggify import LogBuilder


def main():
    LogBuilder().disable_color().build()
    log = logging.getLogger(__name__)

    log.error("My error message")
    log.warning("My warn message")
    log.info("My info message")


if __name__ == "__main__":
    main()
