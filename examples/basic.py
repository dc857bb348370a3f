#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Basic usage: the default level is INFO, so debug and trace are suppressed."""

import logging

import loggify


def main():
    loggify.init()
    log = logging.getLogger(__name__)

    log.error("My error message")
    log.warning("My warn message")
    log.info("My info message")
    log.debug("Will not be shown")
    loggify.trace(log, "Will not be shown")


if __name__ == "__main__":
    main()
