"""
Directory Aggregator.

Drains a cursor-paginated directory source into one list, preserving the
order in which the source emitted records.
"""

from __future__ import annotations

import logging
from contextlib import AbstractAsyncContextManager, AsyncExitStack
from typing import TYPE_CHECKING, List, Optional

from directory_pager.domain.entities import UserRecord

if TYPE_CHECKING:
    from directory_pager.interfaces.directory_source import DirectorySource

logger = logging.getLogger(__name__)


class DirectoryAggregator:
    """Collects every record of a directory source."""

    def __init__(self, source: "DirectorySource") -> None:
        self.source = source

    @property
    def name(self) -> str:
        return "aggregation"

    async def drain_all(self) -> List[UserRecord]:
        """
        Fetch batches until the source stops returning a cursor.

        Fetches are awaited one after another: each request needs the
        cursor returned by the previous one. Nothing is cached, so every
        call reflects the directory as it is now. Sources that are async
        context managers are entered for the duration of the drain.

        Returns:
            All records in emission order

        Raises:
            Exception: Whatever the source raises, unchanged
        """
        records: List[UserRecord] = []
        cursor: Optional[str] = None
        batches = 0

        async with AsyncExitStack() as stack:
            if isinstance(self.source, AbstractAsyncContextManager):
                await stack.enter_async_context(self.source)

            while True:
                page = await self.source.fetch_users_page(cursor)
                batches += 1
                records.extend(page.records)
                logger.debug(
                    f"Batch {batches}: {len(page.records)} records "
                    f"(total {len(records)})"
                )
                if not page.next_cursor:
                    break
                cursor = page.next_cursor

        logger.info(f"Drained {len(records)} records in {batches} batches")
        return records
