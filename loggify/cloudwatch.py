# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Mirror of log messages to an AWS CloudWatch Logs stream.

CloudWatch Logs orders appends to a stream with a sequence token: every
``PutLogEvents`` call carries the current token and receives the next one.
Two writers holding the same token race, and the loser is rejected with
``InvalidSequenceTokenException``.

``CloudWatchSink`` serializes all appends through one lock and caches the
token returned by each put, describing the stream only on first use or
after a conflict. Conflicts are retried with bounded exponential backoff.
``legacy_token_mode`` restores the describe-before-every-put protocol.
"""

import logging
import os
import threading
import time
from dataclasses import dataclass, field
from typing import Any

from .exceptions import RemoteAppendError, RemoteProvisionError
from .retry_policy import RetryConfig, RetryPolicy

logger = logging.getLogger(__name__)

DEFAULT_REGION = "eu-central-1"
DEFAULT_LOG_GROUP = "loggify"

INVALID_TOKEN_CODE = "InvalidSequenceTokenException"
ALREADY_ACCEPTED_CODE = "DataAlreadyAcceptedException"


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


def _now_millis() -> int:
    return int(time.time() * 1000)


def _error_code(error: Exception) -> str | None:
    """Extract the AWS error code from a botocore ClientError, if any."""
    response = getattr(error, "response", None)
    if not isinstance(response, dict):
        return None
    return response.get("Error", {}).get("Code")


def _expected_token(error: Exception) -> str | None:
    response = getattr(error, "response", None)
    if not isinstance(response, dict):
        return None
    return response.get("expectedSequenceToken")


@dataclass(frozen=True)
class CloudWatchConfig:
    """Configuration for the CloudWatch Logs mirror.

    Unset names fall back to environment variables, then to built-in
    defaults:

    - region: ``LOGGIFY_AWS_REGION``, then ``eu-central-1``
    - log_group_name: ``LOGGIFY_LOG_GROUP``, then ``loggify``
    - log_stream_name: ``LOGGIFY_LOG_STREAM``, then empty

    A fresh stream is created on every start. The stream name is the
    current time in milliseconds, or ``<log_stream_name>_<millis>`` when a
    name is configured.

    Attributes:
        region: AWS region of the log group
        log_group_name: Existing log group to create the stream in
        log_stream_name: Prefix for the stream name
        legacy_token_mode: Describe the stream before every put and never reuse tokens
        raise_on_error: Propagate append failures to the logging caller
        retry: Backoff settings for token conflicts
    """

    region: str | None = None
    log_group_name: str | None = None
    log_stream_name: str | None = None
    legacy_token_mode: bool = False
    raise_on_error: bool = False
    retry: RetryConfig = field(default_factory=RetryConfig)

    def resolved_region(self) -> str:
        return _default(self.region, "LOGGIFY_AWS_REGION", DEFAULT_REGION)

    def resolved_log_group_name(self) -> str:
        return _default(self.log_group_name, "LOGGIFY_LOG_GROUP", DEFAULT_LOG_GROUP)

    def resolved_log_stream_name(self, millis: int | None = None) -> str:
        """Return the stream name for a stream created at ``millis``."""
        millis = _now_millis() if millis is None else millis
        prefix = self.log_stream_name or os.getenv("LOGGIFY_LOG_STREAM")
        if prefix:
            return f"{prefix}_{millis}"
        return str(millis)


def create_logs_client(region: str) -> Any:
    """Create a boto3 CloudWatch Logs client.

    Raises:
        RemoteProvisionError: If boto3 is missing or the client cannot be built
    """
    try:
        import boto3
    except ImportError as e:
        raise RemoteProvisionError(
            "boto3 is required for the CloudWatch mirror. "
            "Install with: pip install loggify[aws]"
        ) from e

    try:
        return boto3.client("logs", region_name=region)
    except Exception as e:
        raise RemoteProvisionError(f"Failed to create CloudWatch Logs client for {region}: {e}") from e


class CloudWatchSink:
    """Appends messages to one CloudWatch Logs stream.

    Attributes:
        client: boto3 ``logs`` client (or anything with the same methods)
        log_group_name: Log group holding the stream
        log_stream_name: Target stream
        legacy_token_mode: Describe before every put, no token reuse, no retries
    """

    def __init__(
        self,
        client: Any,
        log_group_name: str,
        log_stream_name: str,
        legacy_token_mode: bool = False,
        retry: RetryConfig | None = None,
    ):
        self.client = client
        self.log_group_name = log_group_name
        self.log_stream_name = log_stream_name
        self.legacy_token_mode = legacy_token_mode
        self._retry_policy = RetryPolicy(retry)
        self._lock = threading.Lock()
        self._sequence_token: str | None = None
        self._token_known = False

    @classmethod
    def create(cls, config: CloudWatchConfig | None = None, client: Any = None) -> "CloudWatchSink":
        """Create a sink and provision its log stream.

        Args:
            config: Mirror configuration (defaults if None)
            client: Pre-built logs client; a boto3 client is created if None

        Returns:
            Sink bound to the newly created stream

        Raises:
            RemoteProvisionError: If the client or the stream cannot be created
        """
        config = config or CloudWatchConfig()
        if client is None:
            client = create_logs_client(config.resolved_region())

        sink = cls(
            client=client,
            log_group_name=config.resolved_log_group_name(),
            log_stream_name=config.resolved_log_stream_name(),
            legacy_token_mode=config.legacy_token_mode,
            retry=config.retry,
        )
        sink.create_log_stream()
        return sink

    @property
    def last_sequence_token(self) -> str | None:
        """Token returned by the most recent successful put."""
        return self._sequence_token

    def create_log_stream(self) -> None:
        """Create the target stream in the log group.

        Raises:
            RemoteProvisionError: If CloudWatch rejects the request
        """
        try:
            self.client.create_log_stream(
                logGroupName=self.log_group_name,
                logStreamName=self.log_stream_name,
            )
        except Exception as e:
            raise RemoteProvisionError(
                f"Failed to create log stream {self.log_group_name}/{self.log_stream_name}: {e}"
            ) from e
        logger.debug("Created log stream %s/%s", self.log_group_name, self.log_stream_name)

    def describe_sequence_token(self) -> str | None:
        """Fetch the stream's current upload sequence token.

        Returns:
            The token, or None for a stream that has never been written to

        Raises:
            RemoteAppendError: If the describe call fails or the stream is not listed
        """
        try:
            response = self.client.describe_log_streams(
                logGroupName=self.log_group_name,
                logStreamNamePrefix=self.log_stream_name,
            )
        except Exception as e:
            raise RemoteAppendError(f"Failed to describe log streams in {self.log_group_name}: {e}") from e

        for stream in response.get("logStreams", []):
            if stream.get("logStreamName") == self.log_stream_name:
                return stream.get("uploadSequenceToken")

        raise RemoteAppendError(
            f"Log stream {self.log_stream_name} not found in group {self.log_group_name}"
        )

    def put_log(self, message: str) -> str | None:
        """Append one event carrying ``message`` to the stream.

        Args:
            message: Message text

        Returns:
            The next sequence token reported by CloudWatch

        Raises:
            RemoteAppendError: If the append fails after all attempts
        """
        with self._lock:
            if self.legacy_token_mode:
                return self._put_legacy(message)
            return self._put_with_retry(message)

    def _put_events(self, message: str, token: str | None) -> str | None:
        request: dict[str, Any] = {
            "logGroupName": self.log_group_name,
            "logStreamName": self.log_stream_name,
            "logEvents": [{"timestamp": _now_millis(), "message": message}],
        }
        if token is not None:
            request["sequenceToken"] = token
        response = self.client.put_log_events(**request)
        return response.get("nextSequenceToken")

    def _put_legacy(self, message: str) -> str | None:
        token = self.describe_sequence_token()
        try:
            next_token = self._put_events(message, token)
        except Exception as e:
            raise RemoteAppendError(f"Failed to put log event to {self.log_stream_name}: {e}") from e
        self._sequence_token = next_token
        return next_token

    def _put_with_retry(self, message: str) -> str | None:
        attempt = 1
        while True:
            if not self._token_known:
                self._sequence_token = self.describe_sequence_token()
                self._token_known = True

            try:
                next_token = self._put_events(message, self._sequence_token)
            except Exception as e:
                code = _error_code(e)
                if code == ALREADY_ACCEPTED_CODE:
                    self._sequence_token = _expected_token(e)
                    self._token_known = self._sequence_token is not None
                    return self._sequence_token

                if code != INVALID_TOKEN_CODE:
                    self._token_known = False
                    raise RemoteAppendError(
                        f"Failed to put log event to {self.log_stream_name}: {e}"
                    ) from e

                expected = _expected_token(e)
                if expected is not None:
                    self._sequence_token = expected
                else:
                    self._token_known = False

                if not self._retry_policy.should_retry(attempt):
                    raise RemoteAppendError(
                        f"Sequence token conflict on {self.log_stream_name} "
                        f"persisted after {attempt} attempts: {e}"
                    ) from e

                attempt += 1
                logger.debug("Sequence token conflict on %s, attempt %d", self.log_stream_name, attempt)
                self._retry_policy.sleep(self._retry_policy.calculate_delay_ms(attempt))
                continue

            self._sequence_token = next_token
            self._token_known = True
            return next_token
