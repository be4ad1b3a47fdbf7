"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class RetrySettings(BaseModel):
    """Backoff settings for throttled directory calls."""

    max_attempts: int = Field(default=3, ge=1, le=10)
    base_delay_seconds: float = Field(default=0.5, ge=0)
    max_delay_seconds: float = Field(default=10.0, ge=0)
    exponential_base: float = Field(default=2.0, ge=1)


class DirectoryConfig(BaseModel):
    """Identity directory (Cognito user pool) settings."""

    user_pool_id: Optional[str] = Field(default=None)
    region: Optional[str] = Field(default=None)
    # ListUsers accepts at most 60 users per call
    page_limit: Optional[int] = Field(default=None, ge=1, le=60)
    retry: RetrySettings = Field(default_factory=RetrySettings)


class LoggingConfig(BaseModel):
    """Logging settings applied by configure_logging_from."""

    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    )


class ServiceConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    directory: DirectoryConfig = Field(default_factory=DirectoryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"populate_by_name": True}
