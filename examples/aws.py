#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Mirror messages to CloudWatch Logs.

Requires AWS credentials and an existing log group (default: ``loggify``
in eu-central-1). Install with: pip install -e ".[aws]"
"""

import logging

import loggify
from loggify import CloudWatchConfig, LogBuilder


def main():
    LogBuilder() \
        .add_aws(CloudWatchConfig(log_group_name="loggify", log_stream_name="example")) \
        .add_exclude("botocore") \
        .add_exclude("boto3") \
        .add_exclude("urllib3") \
        .set_level("trace") \
        .set_time_format("%H:%M:%S") \
        .set_log_target(False) \
        .build()
    log = logging.getLogger(__name__)

    log.error("My error message")
    log.warning("My warn message")
    log.info("My info message")
    log.debug("My debug message")
    loggify.trace(log, "My trace message")


if __name__ == "__main__":
    main()
