"""
Unit Tests for the in-memory adapters.

Test Aspects Covered:
    ✅ Business Logic: Batch/cursor behaviour of InMemoryDirectorySource
    ✅ Business Logic: Metrics summaries, audit trail lines
"""

from __future__ import annotations

import logging

import pytest

from directory_pager.adapters.console_logger import (
    AUDIT_LOGGER_NAME,
    ConsoleAuditLogger,
    describe_record,
)
from directory_pager.adapters.memory_source import (
    InMemoryDirectorySource,
    sample_records,
)
from directory_pager.adapters.metrics_collector import InMemoryMetricsCollector
from directory_pager.domain.entities import UserAttribute, UserRecord
from directory_pager.interfaces import AuditLogger, DirectorySource, MetricsCollector


class TestInMemoryDirectorySource:
    """Test cases for InMemoryDirectorySource."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryDirectorySource([]), DirectorySource)

    @pytest.mark.asyncio
    async def test_walks_batches_with_cursors(self) -> None:
        """
        SCENARIO: Four records in batches of three
        EXPECTED: Two pages, cursor only on the first
        """
        # Arrange
        source = InMemoryDirectorySource.from_records(sample_records(), batch_size=3)

        # Act
        first = await source.fetch_users_page()
        second = await source.fetch_users_page(first.next_cursor)

        # Assert
        assert len(first.records) == 3
        assert first.next_cursor is not None
        assert len(second.records) == 1
        assert second.next_cursor is None
        assert source.cursors_seen == [None, first.next_cursor]

    @pytest.mark.asyncio
    async def test_unknown_cursor_rejected(self) -> None:
        # Arrange
        source = InMemoryDirectorySource.from_records(sample_records(), batch_size=2)

        # Act & Assert
        with pytest.raises(ValueError):
            await source.fetch_users_page("bogus")

    def test_rejects_zero_batch_size(self) -> None:
        with pytest.raises(ValueError):
            InMemoryDirectorySource.from_records(sample_records(), batch_size=0)


class TestInMemoryMetricsCollector:
    """Test cases for InMemoryMetricsCollector."""

    def test_summarises_samples(self) -> None:
        # Arrange
        collector = InMemoryMetricsCollector()

        # Act
        collector.record_count("records", 4, {"stage": "a"})
        collector.record_count("records", 2)
        collector.record_timing("seconds", 0.5)
        summary = collector.get_metrics()

        # Assert
        assert isinstance(collector, MetricsCollector)
        assert summary["records"] == {"count": 2, "total": 6, "min": 2, "max": 4, "last": 2}
        assert summary["seconds"]["count"] == 1
        assert collector.samples("records")[0] == (4, {"stage": "a"})

    def test_clear(self) -> None:
        # Arrange
        collector = InMemoryMetricsCollector()
        collector.record_count("records", 1)

        # Act
        collector.clear()

        # Assert
        assert collector.get_metrics() == {}


class TestConsoleAuditLogger:
    """Test cases for ConsoleAuditLogger."""

    def test_prefixes_correlation_id(self, caplog: pytest.LogCaptureFixture) -> None:
        # Arrange
        caplog.set_level(logging.DEBUG, logger=AUDIT_LOGGER_NAME)
        audit = ConsoleAuditLogger(verbose=True)
        audit.set_correlation_id("abcdef12-3456")

        # Act
        audit.log_stage_end("paginator", 2, 0.01, {"page": 1})

        # Assert
        assert isinstance(audit, AuditLogger)
        [entry] = caplog.records
        assert entry.name == AUDIT_LOGGER_NAME
        assert entry.levelno == logging.INFO
        assert entry.getMessage().startswith("[abcdef12] paginator kept 2 users")
        assert "page=1" in entry.getMessage()
        assert entry.correlation_id == "abcdef12-3456"

    def test_filtered_line_describes_user(self, caplog: pytest.LogCaptureFixture) -> None:
        """
        SCENARIO: A record without a username is filtered
        EXPECTED: Line shows email, status and enabled flag
        """
        # Arrange
        caplog.set_level(logging.DEBUG, logger=AUDIT_LOGGER_NAME)
        audit = ConsoleAuditLogger(verbose=True)
        record = UserRecord(
            attributes=[UserAttribute(name="email", value="anon@test.com")],
            enabled=False,
            status="RESET_REQUIRED",
        )

        # Act
        audit.log_record_filtered(record, "record_filter", "enabled=False != True")

        # Assert
        [entry] = caplog.records
        assert entry.levelno == logging.DEBUG
        assert entry.getMessage() == (
            "[--------] record_filter dropped <no username> <anon@test.com> "
            "status=RESET_REQUIRED enabled=false: enabled=False != True"
        )

    def test_anomaly_uses_severity(self, caplog: pytest.LogCaptureFixture) -> None:
        # Arrange
        caplog.set_level(logging.DEBUG, logger=AUDIT_LOGGER_NAME)
        audit = ConsoleAuditLogger()

        # Act
        audit.log_anomaly("page 9 is outside 1..2", severity="INFO")
        audit.log_anomaly("odd", severity="bogus")

        # Assert
        assert [r.levelno for r in caplog.records] == [logging.INFO, logging.WARNING]

    def test_quiet_mode_skips_details(self, caplog: pytest.LogCaptureFixture) -> None:
        # Arrange
        caplog.set_level(logging.DEBUG, logger=AUDIT_LOGGER_NAME)
        audit = ConsoleAuditLogger(verbose=False)

        # Act
        audit.log_stage_start("record_filter", 4)
        audit.log_record_filtered(sample_records()[0], "record_filter", "reason")

        # Assert
        assert caplog.records == []


def test_describe_record_for_sample_user() -> None:
    assert describe_record(sample_records()[1]) == (
        "jiro <jiro@test.com> status=CONFIRMED enabled=false"
    )
