"""
Record Sorter.

Applies a single-key ordering to a record list. Sorting is stable: records
with equal keys keep their relative input order in both directions.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import List, Sequence

from directory_pager.domain.entities import UserRecord
from directory_pager.domain.value_objects import SortSpec
from directory_pager.sorting.strategies import compare_by

logger = logging.getLogger(__name__)


class RecordSorter:
    """Order records by one field."""

    @property
    def name(self) -> str:
        return "record_sorter"

    def apply(self, records: Sequence[UserRecord], spec: SortSpec) -> List[UserRecord]:
        """
        Sort records.

        Args:
            records: Records to order (not modified)
            spec: Field and direction; no field means keep input order

        Returns:
            New list holding a permutation of ``records``
        """
        if spec.sort_by is None:
            return list(records)

        logger.debug(f"Sorting {len(records)} records by {spec.sort_by.value} {spec.direction.value}")
        comparator = compare_by(spec.sort_by, spec.direction)
        return sorted(records, key=cmp_to_key(comparator))


def sort_records(records: Sequence[UserRecord], spec: SortSpec) -> List[UserRecord]:
    return RecordSorter().apply(records, spec)
