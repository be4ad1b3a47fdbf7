"""
Sort Key Strategies - Field-Specific Ordering Keys.

Strategy Pattern implementations, one per sortable field:
    - EmailSortStrategy: Derived email, lexicographic
    - UsernameSortStrategy: Username, lexicographic
    - EnabledSortStrategy: Enabled users first (True -> 0, False/absent -> 1)
    - StatusSortStrategy: Raw status string, lexicographic

Design Notes:
    - Keys are built from the shared normalization accessors, so a
      missing field is never compared as None
    - compare_by returns a three-way comparator; equal keys compare as 0
    - Strings compare by Unicode code point, so characters outside the
      Basic Multilingual Plane sort after U+FFFF (UTF-16 code unit order
      would put them before U+E000..U+FFFF)
"""

from __future__ import annotations

from typing import Callable, Dict, Protocol, Union

from directory_pager.domain.entities import (
    UserRecord,
    normalized_email,
    normalized_enabled,
    normalized_status,
    normalized_username,
)
from directory_pager.domain.value_objects import SortDirection, SortKey

SortValue = Union[str, int]
Comparator = Callable[[UserRecord, UserRecord], int]


class SortStrategy(Protocol):
    """Strategy protocol producing a comparable key for a record."""

    def key(self, record: UserRecord) -> SortValue:
        ...


class EmailSortStrategy:
    def key(self, record: UserRecord) -> SortValue:
        return normalized_email(record)


class UsernameSortStrategy:
    def key(self, record: UserRecord) -> SortValue:
        return normalized_username(record)


class EnabledSortStrategy:
    """Ascending order lists enabled users before disabled ones."""

    def key(self, record: UserRecord) -> SortValue:
        return 0 if normalized_enabled(record) else 1


class StatusSortStrategy:
    def key(self, record: UserRecord) -> SortValue:
        return normalized_status(record)


def create_sort_strategies() -> Dict[SortKey, SortStrategy]:
    """Factory for the full strategy map."""
    return {
        SortKey.EMAIL: EmailSortStrategy(),
        SortKey.USERNAME: UsernameSortStrategy(),
        SortKey.ENABLED: EnabledSortStrategy(),
        SortKey.STATUS: StatusSortStrategy(),
    }


_STRATEGIES = create_sort_strategies()


def compare_by(key: SortKey, direction: SortDirection = SortDirection.ASC) -> Comparator:
    """
    Build a three-way comparator for one sort key.

    Args:
        key: Field to compare on
        direction: ASC or DESC

    Returns:
        Function returning -1, 0 or 1 for two records
    """
    strategy = _STRATEGIES[SortKey(key)]
    sign = -1 if direction == SortDirection.DESC else 1

    def compare(a: UserRecord, b: UserRecord) -> int:
        key_a = strategy.key(a)
        key_b = strategy.key(b)
        if key_a == key_b:
            return 0
        return sign if key_a > key_b else -sign

    return compare
