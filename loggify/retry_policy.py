# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Bounded retry with exponential backoff and full jitter for token conflicts."""

import random
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for sequence-token conflict retries.

    Attributes:
        max_attempts: Total put attempts per message, first one included (default: 4)
        base_delay_ms: Base delay in milliseconds (default: 50)
        backoff_factor: Exponential backoff multiplier (default: 2.0)
        max_delay_ms: Maximum delay cap in milliseconds (default: 2000)
        use_jitter: Whether to apply full jitter to delays (default: True)
    """
    max_attempts: int = 4
    base_delay_ms: int = 50
    backoff_factor: float = 2.0
    max_delay_ms: int = 2000
    use_jitter: bool = True


class RetryPolicy:
    """Exponential backoff with full jitter."""

    def __init__(self, config: RetryConfig | None = None):
        """Initialize retry policy.

        Args:
            config: Retry configuration (uses defaults if None)
        """
        self.config = config or RetryConfig()

    def calculate_delay_ms(self, attempt_number: int) -> int:
        """Calculate the delay before the given attempt.

        Args:
            attempt_number: Attempt about to be made (1-indexed)

        Returns:
            Delay in milliseconds (with jitter if enabled)
        """
        if attempt_number <= 1:
            return 0

        exponent = attempt_number - 2
        delay_ms = int(self.config.base_delay_ms * (self.config.backoff_factor ** exponent))
        delay_ms = min(delay_ms, self.config.max_delay_ms)

        if self.config.use_jitter:
            delay_ms = random.randint(0, delay_ms)

        return delay_ms

    def should_retry(self, attempt_number: int) -> bool:
        """Return True if another attempt is allowed after ``attempt_number``."""
        return attempt_number < self.config.max_attempts

    def sleep(self, delay_ms: int) -> None:
        """Sleep for the specified delay.

        Args:
            delay_ms: Delay in milliseconds
        """
        if delay_ms > 0:
            time.sleep(delay_ms / 1000.0)
