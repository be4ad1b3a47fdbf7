"""
Console Audit Logger.

Writes the audit trail of listing calls to the ``directory_pager.audit``
logger, so it follows whatever handlers configure_logging installed.
Each line is prefixed with the first eight characters of the call's
correlation id; the full id is attached as ``extra["correlation_id"]``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from directory_pager.domain.entities import (
    UserRecord,
    normalized_email,
    normalized_status,
)

AUDIT_LOGGER_NAME = "directory_pager.audit"


def describe_record(record: UserRecord) -> str:
    """Identify a user in audit lines, including records without a username."""
    username = record.username if record.username is not None else "<no username>"
    email = normalized_email(record) or "-"
    status = normalized_status(record) or "-"
    enabled = "-" if record.enabled is None else str(record.enabled).lower()
    return f"{username} <{email}> status={status} enabled={enabled}"


class ConsoleAuditLogger:
    """Audit logger backed by the standard logging module."""

    def __init__(
        self,
        verbose: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Args:
            verbose: Also log stage starts and every filtered user
            logger: Target logger (``directory_pager.audit`` by default)
        """
        self._verbose = verbose
        self._logger = logger or logging.getLogger(AUDIT_LOGGER_NAME)
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        self._correlation_id = correlation_id

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self._verbose:
            self._emit(logging.INFO, f"{stage_name} started on {input_count} users")

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = ""
        if metadata:
            details = " " + " ".join(f"{k}={v}" for k, v in metadata.items())
        self._emit(
            logging.INFO,
            f"{stage_name} kept {output_count} users in {duration_seconds:.3f}s{details}",
        )

    def log_record_filtered(
        self,
        record: UserRecord,
        stage_name: str,
        reason: str,
    ) -> None:
        if self._verbose:
            self._emit(
                logging.DEBUG,
                f"{stage_name} dropped {describe_record(record)}: {reason}",
            )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        level = logging.getLevelName(severity.upper())
        if not isinstance(level, int):
            level = logging.WARNING
        self._emit(level, f"anomaly: {message}")

    def _emit(self, level: int, message: str) -> None:
        short_id = self._correlation_id[:8] if self._correlation_id else "--------"
        self._logger.log(
            level,
            f"[{short_id}] {message}",
            extra={"correlation_id": self._correlation_id},
        )
