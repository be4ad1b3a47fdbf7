"""
Directory Pager - Paginated Views over a Cursor-Only Identity Directory.

Identity directories such as AWS Cognito user pools can only be walked
forward with opaque continuation tokens. Directory Pager drains the whole
directory and offers filtering, sorting and random page access on top.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Strategy Pattern for per-field sort keys
    - Configuration-driven wiring via YAML

Main Components:
    - domain: UserRecord and query/result value objects
    - interfaces: Protocols for directory sources, audit logs, metrics
    - aggregation, filters, sorting, pagination: Pipeline stages
    - pipeline: UserListPipeline orchestration and factory
    - adapters: Cognito and in-memory sources, logger, metrics
    - config: Configuration models and loaders

Example:
    >>> from directory_pager import create_pipeline, load_config, ListQuery
    >>> pipeline = create_pipeline(load_config("config/default.yaml"))
    >>> query = ListQuery.model_validate({
    ...     "sort": {"sortBy": "email", "sortType": "DESC"},
    ...     "pagination": {"take": 20, "page": 1},
    ... })
    >>> result = await pipeline.list(query)
"""

from directory_pager.config.loader import load_config
from directory_pager.config.logging_setup import (
    configure_logging,
    configure_logging_from,
)
from directory_pager.domain.value_objects import (
    FilterSpec,
    ListQuery,
    PaginationResult,
    PaginationSpec,
    SortSpec,
)
from directory_pager.pipeline.factory import create_pipeline
from directory_pager.pipeline.list_pipeline import UserListPipeline

__version__ = "0.1.0"

__all__ = [
    "FilterSpec",
    "ListQuery",
    "PaginationResult",
    "PaginationSpec",
    "SortSpec",
    "UserListPipeline",
    "configure_logging",
    "configure_logging_from",
    "create_pipeline",
    "load_config",
]
