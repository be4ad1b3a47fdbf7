"""
Record Filter Implementation.

Keeps the records that satisfy every condition of a FilterSpec:
    - email: derived email contains the substring (case sensitive)
    - username: username contains the substring (case sensitive)
    - enabled: enabled flag equals the value (absent counts as False)
    - status: status equals the value exactly

Conditions left unset (None, or an empty string for the text conditions)
impose nothing. Creation/update date bounds are accepted on FilterSpec but
not applied.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from directory_pager.domain.entities import (
    UserRecord,
    normalized_email,
    normalized_enabled,
    normalized_status,
    normalized_username,
)
from directory_pager.domain.value_objects import (
    FilterResult,
    FilterSpec,
    RejectedRecord,
)


class RecordFilter:
    """Filter records by a conjunction of optional predicates."""

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "record_filter"

    def apply(self, records: Sequence[UserRecord], spec: FilterSpec) -> FilterResult:
        """
        Apply filtering.

        Args:
            records: Records to filter
            spec: Conditions, all of which must hold

        Returns:
            FilterResult with retained records (input order) and the
            rejection reason for every dropped record
        """
        passed: List[UserRecord] = []
        rejected: List[RejectedRecord] = []

        for record in records:
            is_valid, reason = self._check_record(record, spec)
            if is_valid:
                passed.append(record)
            else:
                rejected.append((record, reason))

        return FilterResult(
            passed_records=passed,
            rejected_records=rejected,
        )

    def _check_record(self, record: UserRecord, spec: FilterSpec) -> Tuple[bool, str]:
        """Check if a single record satisfies every set condition."""
        if spec.email:
            email = normalized_email(record)
            if spec.email not in email:
                return False, f"email={email!r} does not contain {spec.email!r}"

        if spec.enabled is not None:
            enabled = normalized_enabled(record)
            if enabled != spec.enabled:
                return False, f"enabled={enabled} != {spec.enabled}"

        if spec.status:
            status = normalized_status(record)
            if status != spec.status:
                return False, f"status={status!r} != {spec.status!r}"

        if spec.username:
            username = normalized_username(record)
            if spec.username not in username:
                return False, f"username does not contain {spec.username!r}"

        return True, ""


def filter_records(records: Sequence[UserRecord], spec: FilterSpec) -> List[UserRecord]:
    """Shortcut returning only the retained records."""
    return RecordFilter().apply(records, spec).passed_records
