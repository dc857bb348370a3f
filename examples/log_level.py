#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Initialize the sink with the debug level."""

import logging

import loggify
from loggify import Severity


def main():
    loggify.init_with_level(Severity.DEBUG)
    log = logging.getLogger(__name__)

    log.error("My error message")
    log.warning("My warn message")
    log.info("My info message")
    log.debug("My debug message")
    loggify.trace(log, "Will not be shown")


if __name__ == "__main__":
    main()
