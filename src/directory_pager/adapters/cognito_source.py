"""
Cognito Directory Source.

Reads users from an AWS Cognito user pool through the ``ListUsers`` API,
which only supports forward pagination with opaque ``PaginationToken``
values. Uses an async boto3 session (aioboto3).

Usage:
    source = CognitoDirectorySource(user_pool_id="eu-west-1_AbCdEf")
    async with source:  # one client for every call inside the block
        page = await source.fetch_users_page()
        while page.has_more:
            page = await source.fetch_users_page(page.next_cursor)

Outside an ``async with`` block each call opens its own client.
"""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack
from typing import Any, Dict, Optional

import aioboto3

from directory_pager.domain.entities import UserAttribute, UserRecord
from directory_pager.domain.value_objects import DirectoryPage
from directory_pager.resilience.error_handler import ErrorHandler

logger = logging.getLogger(__name__)

THROTTLING_ERROR_CODES = frozenset(
    {"TooManyRequestsException", "LimitExceededException"}
)


def is_throttling_error(exc: BaseException) -> bool:
    """True for botocore ClientErrors raised by Cognito rate limiting."""
    response = getattr(exc, "response", None)
    if not isinstance(response, dict):
        return False
    return response.get("Error", {}).get("Code") in THROTTLING_ERROR_CODES


def record_from_cognito(user: Dict[str, Any]) -> UserRecord:
    """Map a Cognito ``UserType`` dict to a UserRecord."""
    attributes = user.get("Attributes")
    if attributes is None:
        # GetUser names the list differently
        attributes = user.get("UserAttributes") or []
    return UserRecord(
        username=user.get("Username"),
        attributes=[
            UserAttribute(name=attr["Name"], value=attr.get("Value"))
            for attr in attributes
        ],
        enabled=user.get("Enabled"),
        status=user.get("UserStatus"),
        created_at=user.get("UserCreateDate"),
        updated_at=user.get("UserLastModifiedDate"),
    )


class CognitoDirectorySource:
    """Directory source backed by a Cognito user pool."""

    SERVICE_NAME = "cognito-idp"

    def __init__(
        self,
        user_pool_id: str,
        region: Optional[str] = None,
        page_limit: Optional[int] = None,
        session: Optional[Any] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """
        Initialize the Cognito source.

        Args:
            user_pool_id: Cognito user pool to list
            region: AWS region (defaults to the session's region)
            page_limit: Users per ListUsers call (1-60, Cognito default 60)
            session: aioboto3.Session; a default session is created if omitted
            error_handler: Retry policy for throttled calls

        Raises:
            ValueError: If user_pool_id is empty
        """
        if not user_pool_id:
            raise ValueError("Cognito directory source requires a user_pool_id")

        self._user_pool_id = user_pool_id
        self._region = region
        self._page_limit = page_limit
        self._session = session or aioboto3.Session(region_name=region)
        self._error_handler = error_handler or ErrorHandler(
            is_retryable=is_throttling_error
        )
        self._client: Optional[Any] = None
        self._exit_stack: Optional[AsyncExitStack] = None
        self._depth = 0

        logger.info(
            "Cognito directory source initialized",
            extra={"user_pool_id": user_pool_id, "region": region},
        )

    @property
    def user_pool_id(self) -> str:
        return self._user_pool_id

    async def __aenter__(self) -> "CognitoDirectorySource":
        """Open one cognito-idp client shared by calls until exit (re-entrant)."""
        if self._depth == 0:
            stack = AsyncExitStack()
            self._client = await stack.enter_async_context(
                self._session.client(self.SERVICE_NAME, region_name=self._region)
            )
            self._exit_stack = stack
        self._depth += 1
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self._depth -= 1
        if self._depth == 0 and self._exit_stack is not None:
            stack, self._exit_stack, self._client = self._exit_stack, None, None
            await stack.aclose()

    async def fetch_users_page(self, cursor: Optional[str] = None) -> DirectoryPage:
        """Fetch one ListUsers batch."""
        params: Dict[str, Any] = {"UserPoolId": self._user_pool_id}
        if self._page_limit:
            params["Limit"] = self._page_limit
        if cursor:
            params["PaginationToken"] = cursor

        response = await self._error_handler.retry(
            lambda: self._call("list_users", **params),
            operation_name="cognito.list_users",
        )

        records = [record_from_cognito(user) for user in response.get("Users") or []]
        next_cursor = response.get("PaginationToken") or None
        logger.debug(
            f"ListUsers returned {len(records)} users "
            f"(more={'yes' if next_cursor else 'no'})"
        )
        return DirectoryPage(records=records, next_cursor=next_cursor)

    async def get_user(self, access_token: str) -> UserRecord:
        """
        Resolve the user owning an access token (Cognito ``GetUser``).

        Args:
            access_token: A valid user-pool access token

        Returns:
            UserRecord with username and attributes (GetUser reports
            neither enabled flag nor status)
        """
        response = await self._error_handler.retry(
            lambda: self._call("get_user", AccessToken=access_token),
            operation_name="cognito.get_user",
        )
        return record_from_cognito(response)

    async def _call(self, operation: str, **params: Any) -> Dict[str, Any]:
        """Invoke one Cognito operation on the shared or a short-lived client."""
        if self._client is not None:
            return await getattr(self._client, operation)(**params)
        async with self._session.client(
            self.SERVICE_NAME, region_name=self._region
        ) as client:
            return await getattr(client, operation)(**params)
