"""
Paginator - Fixed-Size, 1-Indexed Pages.

Partitions an ordered record list into consecutive chunks and returns the
requested one together with page metadata.

Rules:
    - Page size is ``take`` when positive, otherwise the whole list
    - Page index defaults to 1
    - An out-of-range index yields empty data, never an error
    - An empty list still reports one (empty) page
"""

from __future__ import annotations

import math
from typing import List, Sequence

from directory_pager.domain.entities import UserRecord
from directory_pager.domain.value_objects import PaginationResult, PaginationSpec


class Paginator:
    """Slice ordered records into pages."""

    @property
    def name(self) -> str:
        return "paginator"

    def paginate(
        self,
        records: Sequence[UserRecord],
        spec: PaginationSpec,
    ) -> PaginationResult:
        """
        Return one page.

        Args:
            records: Filtered, ordered records
            spec: Page size and index

        Returns:
            PaginationResult for the requested page
        """
        total_items = len(records)
        page_size = self._page_size(spec, total_items)
        page_index = spec.page if spec.page is not None else 1

        if total_items == 0:
            total_pages = 1
        else:
            total_pages = math.ceil(total_items / page_size)

        data: List[UserRecord] = []
        if 1 <= page_index <= total_pages:
            start = (page_index - 1) * page_size
            data = list(records[start:start + page_size])

        return PaginationResult(
            data=data,
            total_items=total_items,
            total_pages=total_pages,
            page_index=page_index,
        )

    def _page_size(self, spec: PaginationSpec, total_items: int) -> int:
        """Effective chunk size; at least 1 so the arithmetic stays defined."""
        if spec.take is not None and spec.take > 0:
            return spec.take
        return max(total_items, 1)


def paginate(records: Sequence[UserRecord], spec: PaginationSpec) -> PaginationResult:
    return Paginator().paginate(records, spec)
