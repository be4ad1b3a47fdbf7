"""
Directory Source Protocol.

Defines the only capability the listing pipeline needs from an identity
directory: fetch the next batch of users given an optional continuation
cursor.

The source is responsible for:
    - Authentication and transport
    - Request/response marshaling into UserRecord
    - Rate limits and retries against the upstream service

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - A missing or empty ``next_cursor`` signals end of data
    - Cursors are opaque; the pipeline never inspects them
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from directory_pager.domain.value_objects import DirectoryPage


@runtime_checkable
class DirectorySource(Protocol):
    """Abstract interface for cursor-paginated user access."""

    async def fetch_users_page(self, cursor: Optional[str] = None) -> DirectoryPage:
        """
        Fetch one batch of users.

        Args:
            cursor: Continuation token from the previous batch, or None
                    for the first batch

        Returns:
            DirectoryPage with the batch and the next cursor (if any)
        """
        ...
