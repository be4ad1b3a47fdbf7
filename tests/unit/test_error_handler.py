"""
Unit Tests for ErrorHandler.

Test Aspects Covered:
    ✅ Business Logic: Async retry with backoff
    ✅ Edge Cases: Immediate success, non-retryable errors, exhaustion
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from directory_pager.resilience.error_handler import (
    ErrorHandler,
    RetryConfig,
    RetryExhausted,
)


def no_delay(max_attempts: int = 3) -> RetryConfig:
    return RetryConfig(max_attempts=max_attempts, base_delay_seconds=0.0)


class TestRetry:
    """Test cases for retry logic."""

    @pytest.mark.asyncio
    async def test_succeeds_on_first_attempt(self) -> None:
        """
        SCENARIO: Operation succeeds on first attempt
        EXPECTED: Result returned, no retries
        """
        # Arrange
        handler = ErrorHandler()
        func = AsyncMock(return_value="success")

        # Act
        result = await handler.retry(func, "test_op")

        # Assert
        assert result == "success"
        assert func.await_count == 1

    @pytest.mark.asyncio
    async def test_succeeds_after_retries(self) -> None:
        """
        SCENARIO: Operation fails twice, succeeds on third attempt
        EXPECTED: Result returned after retries
        """
        # Arrange
        handler = ErrorHandler(retry_config=no_delay())
        func = AsyncMock(side_effect=[ConnectionError("1"), ConnectionError("2"), "ok"])

        # Act
        result = await handler.retry(func, "flaky_op")

        # Assert
        assert result == "ok"
        assert func.await_count == 3

    @pytest.mark.asyncio
    async def test_raises_after_max_attempts(self) -> None:
        """
        SCENARIO: Operation always fails
        EXPECTED: RetryExhausted chained to the last error
        """
        # Arrange
        handler = ErrorHandler(retry_config=no_delay(2))
        last_error = ConnectionError("second")
        func = AsyncMock(side_effect=[ConnectionError("first"), last_error])

        # Act & Assert
        with pytest.raises(RetryExhausted) as exc_info:
            await handler.retry(func, "failing_op")
        assert exc_info.value.__cause__ is last_error
        assert "failing_op" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_retryable_error_is_not_retried(self) -> None:
        """
        SCENARIO: Predicate rejects the error type
        EXPECTED: Original error raised after one attempt
        """
        # Arrange
        handler = ErrorHandler(
            retry_config=no_delay(),
            is_retryable=lambda exc: isinstance(exc, ConnectionError),
        )
        func = AsyncMock(side_effect=PermissionError("denied"))

        # Act & Assert
        with pytest.raises(PermissionError):
            await handler.retry(func, "guarded_op")
        assert func.await_count == 1


class TestBackoff:
    """Delay calculation."""

    def test_exponential_delay_capped(self) -> None:
        # Arrange
        handler = ErrorHandler(
            retry_config=RetryConfig(
                base_delay_seconds=1.0,
                exponential_base=2.0,
                max_delay_seconds=5.0,
            )
        )

        # Act & Assert
        assert handler._calculate_delay(1) == 1.0
        assert handler._calculate_delay(2) == 2.0
        assert handler._calculate_delay(3) == 4.0
        assert handler._calculate_delay(4) == 5.0
