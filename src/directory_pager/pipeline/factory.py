"""
Pipeline Factory.

Wires a UserListPipeline to a Cognito user pool from a ServiceConfig.
"""

from __future__ import annotations

from typing import Any, Optional

from directory_pager.adapters.cognito_source import (
    CognitoDirectorySource,
    is_throttling_error,
)
from directory_pager.config.logging_setup import configure_logging_from
from directory_pager.config.models import ServiceConfig
from directory_pager.interfaces.audit_logger import AuditLogger
from directory_pager.interfaces.metrics_collector import MetricsCollector
from directory_pager.pipeline.list_pipeline import UserListPipeline
from directory_pager.resilience.error_handler import ErrorHandler, RetryConfig


def create_pipeline(
    config: ServiceConfig,
    session: Optional[Any] = None,
    audit_logger: Optional[AuditLogger] = None,
    metrics_collector: Optional[MetricsCollector] = None,
) -> UserListPipeline:
    """
    Build a pipeline listing the configured user pool.

    Also applies the logging section of the config.

    Args:
        config: Validated service configuration
        session: aioboto3.Session to use (a default one if omitted)
        audit_logger: Optional audit logger
        metrics_collector: Optional metrics collector

    Returns:
        Ready-to-use UserListPipeline

    Raises:
        ValueError: If no user pool id is configured
    """
    configure_logging_from(config)

    directory = config.directory
    retry = directory.retry
    error_handler = ErrorHandler(
        retry_config=RetryConfig(
            max_attempts=retry.max_attempts,
            base_delay_seconds=retry.base_delay_seconds,
            max_delay_seconds=retry.max_delay_seconds,
            exponential_base=retry.exponential_base,
        ),
        is_retryable=is_throttling_error,
    )
    source = CognitoDirectorySource(
        user_pool_id=directory.user_pool_id or "",
        region=directory.region,
        page_limit=directory.page_limit,
        session=session,
        error_handler=error_handler,
    )
    return UserListPipeline(
        source=source,
        audit_logger=audit_logger,
        metrics_collector=metrics_collector,
    )
