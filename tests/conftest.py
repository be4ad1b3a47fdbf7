"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import pytest

from directory_pager.adapters.console_logger import ConsoleAuditLogger
from directory_pager.adapters.memory_source import (
    InMemoryDirectorySource,
    sample_records,
)
from directory_pager.adapters.metrics_collector import InMemoryMetricsCollector
from directory_pager.config.models import ServiceConfig
from directory_pager.domain.entities import UserAttribute, UserRecord


@pytest.fixture(autouse=True)
def restore_package_log_level():
    """Undo log level changes made by create_pipeline or configure_logging."""
    package_logger = logging.getLogger("directory_pager")
    level = package_logger.level
    yield
    package_logger.setLevel(level)


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def users() -> List[UserRecord]:
    """ichiro, jiro, saburo, shiro in directory order."""
    return sample_records()


@pytest.fixture
def irregular_users() -> List[UserRecord]:
    """Records with missing fields, as malformed upstream data produces."""
    return [
        UserRecord(
            username="taro",
            attributes=[UserAttribute(name="email", value="taro@test.com")],
            enabled=True,
            status="CONFIRMED",
        ),
        # No attributes, no flags, no status
        UserRecord(username="ghost"),
        # No username, phone attribute before the email
        UserRecord(
            attributes=[
                UserAttribute(name="phone_number", value="+81000000000"),
                UserAttribute(name="email", value="anon@test.com"),
            ],
            enabled=False,
            status="RESET_REQUIRED",
        ),
    ]


@pytest.fixture
def memory_source(users: List[UserRecord]) -> InMemoryDirectorySource:
    """Sample users served two per batch."""
    return InMemoryDirectorySource.from_records(users, batch_size=2)


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> ServiceConfig:
    """Create default service configuration."""
    return ServiceConfig()
