"""
Domain Layer - User Records and Query Value Objects.

Entities:
    - UserRecord: One identity directory entry
    - UserAttribute: Name/value pair on a record
    - UserStatus: Known account statuses

Value Objects:
    - FilterSpec, SortSpec, PaginationSpec, ListQuery: Per-call parameters
    - PaginationResult: One page plus page metadata
    - DirectoryPage: One upstream batch with its continuation cursor
    - FilterResult: Filter outcome with rejection reasons

Design Principles:
    - Immutable (frozen pydantic models)
    - Missing fields normalized in one place (entities module)
    - No infrastructure dependencies
"""

from directory_pager.domain.entities import (
    UserAttribute,
    UserRecord,
    UserStatus,
    derive_email,
    normalized_email,
    normalized_enabled,
    normalized_status,
    normalized_username,
)
from directory_pager.domain.value_objects import (
    DirectoryPage,
    FilterResult,
    FilterSpec,
    ListQuery,
    PaginationResult,
    PaginationSpec,
    SortDirection,
    SortKey,
    SortSpec,
)

__all__ = [
    "UserAttribute",
    "UserRecord",
    "UserStatus",
    "derive_email",
    "normalized_email",
    "normalized_enabled",
    "normalized_status",
    "normalized_username",
    "DirectoryPage",
    "FilterResult",
    "FilterSpec",
    "ListQuery",
    "PaginationResult",
    "PaginationSpec",
    "SortDirection",
    "SortKey",
    "SortSpec",
]
