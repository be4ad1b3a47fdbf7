"""
User List Pipeline - Main Orchestrator.

The UserListPipeline answers one listing request by running, in a fixed
order:

    1. Aggregation: drain the whole directory source
    2. Filtering: only when the query carries a filter spec
    3. Sorting: only when the query carries a sort spec
    4. Pagination: always

Sorting runs after filtering so its cost is bounded by the filtered set.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import TYPE_CHECKING, List, Optional

from directory_pager.aggregation.aggregator import DirectoryAggregator
from directory_pager.domain.entities import UserRecord
from directory_pager.domain.value_objects import ListQuery, PaginationResult
from directory_pager.filters.record_filter import RecordFilter
from directory_pager.pagination.paginator import Paginator
from directory_pager.sorting.record_sorter import RecordSorter

if TYPE_CHECKING:
    from directory_pager.interfaces.audit_logger import AuditLogger
    from directory_pager.interfaces.directory_source import DirectorySource
    from directory_pager.interfaces.metrics_collector import MetricsCollector

logger = logging.getLogger(__name__)


class UserListPipeline:
    """Paginated, filterable, sortable view over a directory source."""

    def __init__(
        self,
        source: "DirectorySource",
        audit_logger: Optional["AuditLogger"] = None,
        metrics_collector: Optional["MetricsCollector"] = None,
    ) -> None:
        """
        Initialize pipeline with its dependencies.

        Args:
            source: Directory source to drain on every call
            audit_logger: For the per-stage audit trail (optional)
            metrics_collector: For stage timings and counts (optional)
        """
        self.source = source
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.aggregator = DirectoryAggregator(source)
        self.record_filter = RecordFilter()
        self.record_sorter = RecordSorter()
        self.paginator = Paginator()

    async def list(self, query: ListQuery) -> PaginationResult:
        """
        Execute one listing request.

        Args:
            query: Optional filter and sort specs plus the pagination spec

        Returns:
            PaginationResult for the requested page

        Raises:
            Exception: Any directory source failure, unchanged
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        if self.audit_logger:
            self.audit_logger.set_correlation_id(correlation_id)

        # 1. Drain the directory
        stage_start = time.perf_counter()
        self._log_stage_start(self.aggregator.name, 0)
        records = await self.aggregator.drain_all()
        self._finish_stage(self.aggregator.name, len(records), stage_start)

        # 2. Filter
        if query.filter is not None:
            records = self._run_filter(records, query)

        # 3. Sort
        if query.sort is not None:
            stage_start = time.perf_counter()
            self._log_stage_start(self.record_sorter.name, len(records))
            records = self.record_sorter.apply(records, query.sort)
            self._finish_stage(self.record_sorter.name, len(records), stage_start)

        # 4. Paginate
        stage_start = time.perf_counter()
        self._log_stage_start(self.paginator.name, len(records))
        result = self.paginator.paginate(records, query.pagination)
        self._finish_stage(
            self.paginator.name,
            len(result.data),
            stage_start,
            {"page": result.page_index, "total_pages": result.total_pages},
        )

        if not result.data and result.total_items > 0:
            self._log_anomaly(
                f"Page {result.page_index} is outside 1..{result.total_pages}",
                severity="INFO",
            )

        total_duration = time.perf_counter() - start_time
        if self.metrics_collector:
            self.metrics_collector.record_timing("list_total_seconds", total_duration)
            self.metrics_collector.record_count("list_total_items", result.total_items)

        logger.debug(
            f"[{correlation_id[:8]}] listed page {result.page_index}/{result.total_pages} "
            f"({len(result.data)} of {result.total_items} users) in {total_duration:.3f}s"
        )
        return result

    def _run_filter(self, records: List[UserRecord], query: ListQuery) -> List[UserRecord]:
        """Run the filter stage and report rejected records."""
        stage_start = time.perf_counter()
        self._log_stage_start(self.record_filter.name, len(records))

        filter_result = self.record_filter.apply(records, query.filter)

        if self.audit_logger:
            for record, reason in filter_result.rejected_records:
                self.audit_logger.log_record_filtered(
                    record, self.record_filter.name, reason
                )

        if self.metrics_collector:
            self.metrics_collector.record_count(
                "records_filtered_total",
                filter_result.rejected_count,
                {"stage": self.record_filter.name},
            )

        self._finish_stage(self.record_filter.name, filter_result.passed_count, stage_start)
        return filter_result.passed_records

    def _log_stage_start(self, stage_name: str, input_count: int) -> None:
        if self.audit_logger:
            self.audit_logger.log_stage_start(stage_name, input_count)

    def _finish_stage(
        self,
        stage_name: str,
        output_count: int,
        stage_start: float,
        metadata: Optional[dict] = None,
    ) -> None:
        """Record duration and log the end of a stage."""
        duration = time.perf_counter() - stage_start
        if self.audit_logger:
            self.audit_logger.log_stage_end(stage_name, output_count, duration, metadata)
        if self.metrics_collector:
            self.metrics_collector.record_timing(
                "stage_duration_seconds", duration, {"stage": stage_name}
            )

    def _log_anomaly(self, message: str, severity: str) -> None:
        if self.audit_logger:
            self.audit_logger.log_anomaly(message, severity=severity)
