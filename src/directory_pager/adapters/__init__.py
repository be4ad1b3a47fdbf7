"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the protocols in the interfaces package
(Ports & Adapters).

Directory sources:
    - CognitoDirectorySource: AWS Cognito user pool via aioboto3
    - InMemoryDirectorySource: Fixed batches for development/testing

Loggers:
    - ConsoleAuditLogger: Simple console output

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection
"""

from directory_pager.adapters.cognito_source import (
    CognitoDirectorySource,
    is_throttling_error,
    record_from_cognito,
)
from directory_pager.adapters.console_logger import ConsoleAuditLogger
from directory_pager.adapters.memory_source import (
    InMemoryDirectorySource,
    sample_records,
)
from directory_pager.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "CognitoDirectorySource",
    "is_throttling_error",
    "record_from_cognito",
    "ConsoleAuditLogger",
    "InMemoryDirectorySource",
    "sample_records",
    "InMemoryMetricsCollector",
]
