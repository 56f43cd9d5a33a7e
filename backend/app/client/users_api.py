"""Users API Client — httpx wrapper for GET /api/users with error mapping.

Invariants:
    - Network errors, timeouts, invalid URLs, non-2xx statuses, and malformed bodies all
      surface as UsersApiError (nothing else escapes get_users)
    - Returned users are validated against the wire contract

Design Decisions:
    - Wrapper over raw httpx.AsyncClient: callers see one error type
    - No retry: a failed load is reported and the caller decides whether to reload
"""

import logging

import httpx
from pydantic import ValidationError

from app.schemas.user import UserList, UserResponse

logger = logging.getLogger(__name__)

USERS_PATH = "/api/users"


class UsersApiError(Exception):
    """Loading users from the API failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UsersApiClient:
    """Fetches the user directory from the backend."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def get_users(self) -> list[UserResponse]:
        try:
            response = await self.client.get(USERS_PATH)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise UsersApiError(f"Request to {USERS_PATH} failed: {e}") from e

        if not response.is_success:
            raise UsersApiError(
                f"GET {USERS_PATH} returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return UserList.validate_json(response.content)
        except ValidationError as e:
            raise UsersApiError(
                f"Malformed response body: {e.error_count()} error(s)",
                status_code=response.status_code,
            ) from e

    async def close(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "UsersApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
