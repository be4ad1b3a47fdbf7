"""
Sorting Package - Single-Key Record Ordering.

    - RecordSorter / sort_records: Stable sort driven by a SortSpec
    - compare_by: Three-way comparator for one key and direction
    - *SortStrategy: Per-field key extraction
"""

from directory_pager.sorting.record_sorter import RecordSorter, sort_records
from directory_pager.sorting.strategies import (
    EmailSortStrategy,
    EnabledSortStrategy,
    SortStrategy,
    StatusSortStrategy,
    UsernameSortStrategy,
    compare_by,
    create_sort_strategies,
)

__all__ = [
    "RecordSorter",
    "sort_records",
    "EmailSortStrategy",
    "EnabledSortStrategy",
    "SortStrategy",
    "StatusSortStrategy",
    "UsernameSortStrategy",
    "compare_by",
    "create_sort_strategies",
]
