"""
Value Objects for Domain Layer.

Per-call query parameters and results. None of these are persisted; a
``ListQuery`` lives for one call and its ``PaginationResult`` is handed back
to the caller.

Every model accepts both snake_case field names and the camelCase names of
the client-facing contract (``sortBy``, ``totalItems`` ...).
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from directory_pager.domain.entities import UserRecord


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Dropped record paired with the reason it was dropped
RejectedRecord = Tuple[UserRecord, str]


class SortKey(str, Enum):
    """Fields a listing can be ordered by."""

    EMAIL = "email"
    USERNAME = "username"
    ENABLED = "enabled"
    STATUS = "status"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class FilterSpec(BaseModel):
    """Conjunction of optional record predicates."""

    email: Optional[str] = Field(default=None, description="Email substring")
    username: Optional[str] = Field(default=None, description="Username substring")
    enabled: Optional[bool] = Field(default=None, description="Exact enabled flag")
    status: Optional[str] = Field(default=None, description="Exact status value")

    # Accepted for compatibility with callers, not applied.
    created_date_start: Optional[str] = Field(default=None, alias="createdDateStart")
    created_date_end: Optional[str] = Field(default=None, alias="createdDateEnd")
    updated_date_start: Optional[str] = Field(default=None, alias="updatedDateStart")
    updated_date_end: Optional[str] = Field(default=None, alias="updatedDateEnd")

    model_config = {"frozen": True, "populate_by_name": True}


class SortSpec(BaseModel):
    """Single-key ordering with direction."""

    sort_by: Optional[SortKey] = Field(default=None, alias="sortBy")
    sort_type: Optional[SortDirection] = Field(default=None, alias="sortType")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def direction(self) -> SortDirection:
        """Requested direction, ascending when unspecified."""
        return self.sort_type or SortDirection.ASC


class PaginationSpec(BaseModel):
    """Page size and 1-based page index."""

    take: Optional[int] = Field(default=None, description="Page size")
    page: Optional[int] = Field(default=None, description="1-based page index")

    model_config = {"frozen": True}


class ListQuery(BaseModel):
    """Input for one listing operation."""

    filter: Optional[FilterSpec] = None
    sort: Optional[SortSpec] = None
    pagination: PaginationSpec = Field(..., description="Mandatory, may be empty")

    model_config = {"frozen": True}


class PaginationResult(BaseModel):
    """One page of the filtered, sorted directory."""

    data: List[UserRecord] = Field(default_factory=list)
    total_items: int = Field(..., alias="totalItems")
    total_pages: int = Field(..., alias="totalPages")
    page_index: int = Field(..., alias="pageIndex")

    model_config = {"frozen": True, "populate_by_name": True}


class DirectoryPage(BaseModel):
    """One batch returned by a directory source."""

    records: List[UserRecord] = Field(default_factory=list)
    next_cursor: Optional[str] = Field(
        default=None, description="Continuation token; absent at end of data"
    )

    model_config = {"frozen": True}

    @property
    def has_more(self) -> bool:
        return bool(self.next_cursor)


class FilterResult(BaseModel):
    """Result of applying the filter stage."""

    passed_records: List[UserRecord] = Field(default_factory=list)
    rejected_records: List[RejectedRecord] = Field(
        default_factory=list,
        description="(record, reason) for every dropped record, input order",
    )

    model_config = {"frozen": True}

    @property
    def passed_count(self) -> int:
        return len(self.passed_records)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected_records)

    @property
    def rejected_usernames(self) -> List[str]:
        """Usernames of dropped records (empty string when absent)."""
        return [record.username or "" for record, _ in self.rejected_records]
