"""
Error Handler - Retry with Backoff for Directory Calls.

Provides:
    - Async retry with exponential backoff
    - Retry predicate so only transient errors are retried

Design Notes:
    - Used by directory sources, never by the listing pipeline itself
    - Non-retryable errors propagate unchanged on first failure
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryExhausted(Exception):
    """Raised when all retry attempts are exhausted."""
    pass


@dataclass
class RetryConfig:
    """Configuration for retry logic."""
    max_attempts: int = 3
    base_delay_seconds: float = 0.5
    max_delay_seconds: float = 10.0
    exponential_base: float = 2.0


def _always_retry(exc: BaseException) -> bool:
    return True


class ErrorHandler:
    """Retries awaitable operations that fail with transient errors."""

    def __init__(
        self,
        retry_config: Optional[RetryConfig] = None,
        is_retryable: Callable[[BaseException], bool] = _always_retry,
    ) -> None:
        """
        Initialize error handler.

        Args:
            retry_config: Configuration for retry logic
            is_retryable: Predicate deciding whether an error is transient
        """
        self.retry_config = retry_config or RetryConfig()
        self.is_retryable = is_retryable

    async def retry(
        self,
        func: Callable[[], Awaitable[T]],
        operation_name: str = "operation",
    ) -> T:
        """
        Await ``func()`` with retry and exponential backoff.

        Args:
            func: Zero-argument coroutine factory
            operation_name: Name for logging

        Returns:
            Result of the first successful attempt

        Raises:
            RetryExhausted: When every attempt failed with a retryable error
            Exception: Any non-retryable error, unchanged
        """
        last_exception: Optional[Exception] = None

        for attempt in range(1, self.retry_config.max_attempts + 1):
            try:
                result = await func()
                if attempt > 1:
                    logger.info(f"{operation_name} succeeded on attempt {attempt}")
                return result

            except Exception as e:
                if not self.is_retryable(e):
                    raise
                last_exception = e
                if attempt < self.retry_config.max_attempts:
                    delay = self._calculate_delay(attempt)
                    logger.warning(
                        f"{operation_name} failed (attempt {attempt}/{self.retry_config.max_attempts}), "
                        f"retrying in {delay:.2f}s: {e}"
                    )
                    await asyncio.sleep(delay)
                else:
                    logger.error(f"{operation_name} failed after {attempt} attempts: {e}")

        raise RetryExhausted(
            f"{operation_name} failed after {self.retry_config.max_attempts} attempts"
        ) from last_exception

    def _calculate_delay(self, attempt: int) -> float:
        """Calculate delay with exponential backoff."""
        delay = self.retry_config.base_delay_seconds * (
            self.retry_config.exponential_base ** (attempt - 1)
        )
        return min(delay, self.retry_config.max_delay_seconds)
