"""
In-Memory Directory Source.

A fake directory for development and testing. Serves a fixed list of
records as cursor-linked batches, counts fetch calls and can be told to
fail on a given call.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from directory_pager.domain.entities import UserAttribute, UserRecord
from directory_pager.domain.value_objects import DirectoryPage

# (username, email, enabled, status)
SAMPLE_USERS = [
    ("ichiro", "ichiro@test.com", True, "CONFIRMED"),
    ("jiro", "jiro@test.com", False, "CONFIRMED"),
    ("saburo", "saburo@test.com", True, "UNCONFIRMED"),
    ("shiro", "shiro@test.com", False, "UNCONFIRMED"),
]


def sample_records() -> List[UserRecord]:
    """The four sample users, in directory order."""
    return [
        UserRecord(
            username=username,
            attributes=[UserAttribute(name="email", value=email)],
            enabled=enabled,
            status=status,
        )
        for username, email, enabled, status in SAMPLE_USERS
    ]


class InMemoryDirectorySource:
    """Fake directory source for development and testing."""

    def __init__(
        self,
        batches: Sequence[Sequence[UserRecord]],
        fail_on_call: Optional[int] = None,
        error: Optional[Exception] = None,
    ) -> None:
        """
        Initialize with pre-built batches.

        Args:
            batches: Batches returned in order, one per fetch
            fail_on_call: 1-based fetch number that raises instead
            error: Exception raised on that fetch (RuntimeError by default)
        """
        self._batches = [list(batch) for batch in batches]
        self._fail_on_call = fail_on_call
        self._error = error
        # Opaque cursor -> index of the batch it points to
        self._cursors: Dict[str, int] = {
            f"cursor-{index}": index for index in range(1, len(self._batches))
        }
        self.fetch_calls = 0
        self.cursors_seen: List[Optional[str]] = []

    @classmethod
    def from_records(
        cls,
        records: Sequence[UserRecord],
        batch_size: int = 60,
        **kwargs,
    ) -> "InMemoryDirectorySource":
        """Split a flat record list into batches of ``batch_size``."""
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1")
        batches = [
            records[start:start + batch_size]
            for start in range(0, len(records), batch_size)
        ]
        return cls(batches, **kwargs)

    async def fetch_users_page(self, cursor: Optional[str] = None) -> DirectoryPage:
        """Return the batch the cursor points to."""
        self.fetch_calls += 1
        self.cursors_seen.append(cursor)

        if self._fail_on_call == self.fetch_calls:
            raise self._error or RuntimeError(
                f"directory unavailable on fetch {self.fetch_calls}"
            )

        if cursor is None:
            index = 0
        elif cursor in self._cursors:
            index = self._cursors[cursor]
        else:
            raise ValueError(f"Unknown cursor: {cursor}")

        if index >= len(self._batches):
            return DirectoryPage(records=[], next_cursor=None)

        next_index = index + 1
        next_cursor = f"cursor-{next_index}" if next_index < len(self._batches) else None
        return DirectoryPage(records=self._batches[index], next_cursor=next_cursor)
