"""
Filters Package - Record Filtering.

Filters:
    - RecordFilter: Email/username substring, enabled and status equality

Design Principles:
    - Stateless filtering, spec passed per call
    - Input order preserved
    - Clear rejection reasons for audit trail
"""

from directory_pager.filters.record_filter import RecordFilter, filter_records

__all__ = ["RecordFilter", "filter_records"]
