"""
Interfaces Layer - Abstract Protocols for Dependencies.

High-level modules depend on these abstractions, not on concrete
implementations.

Protocols:
    - DirectorySource: Cursor-paginated access to the identity directory
    - AuditLogger: Audit trail of pipeline stages
    - MetricsCollector: Stage timings and counts
"""

from directory_pager.interfaces.audit_logger import AuditLogger
from directory_pager.interfaces.directory_source import DirectorySource
from directory_pager.interfaces.metrics_collector import MetricsCollector

__all__ = ["AuditLogger", "DirectorySource", "MetricsCollector"]
