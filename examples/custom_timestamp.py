#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Custom strftime pattern for the timestamp column."""

import logging

from loggify import LogBuilder


def main():
    LogBuilder().set_time_format("%Y-%m-%d %H:%M:%S").build()
    logging.getLogger(__name__).info("ISO-like timestamp")


if __name__ == "__main__":
    main()
