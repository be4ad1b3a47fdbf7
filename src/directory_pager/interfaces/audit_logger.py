"""
Audit Logger Protocol.

Defines the abstract interface for audit logging. The audit logger
tracks what each pipeline stage did to the record set, for debugging
and support.

Design Notes:
    - Correlation ID propagation for tracing one listing call
    - No side effects on filtering, sorting or pagination
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any, Dict, Optional

    from directory_pager.domain.entities import UserRecord


@runtime_checkable
class AuditLogger(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        ...

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log the start of a pipeline stage.

        Args:
            stage_name: Name of the stage
            input_count: Number of records entering the stage
            metadata: Optional additional context
        """
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log the end of a pipeline stage.

        Args:
            stage_name: Name of the stage
            output_count: Number of records leaving the stage
            duration_seconds: Time taken for the stage
            metadata: Optional additional context
        """
        ...

    def log_record_filtered(
        self,
        record: UserRecord,
        stage_name: str,
        reason: str,
    ) -> None:
        """Log that a record was filtered out."""
        ...

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly or warning (INFO, WARNING or CRITICAL)."""
        ...
