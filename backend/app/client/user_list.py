"""User List View — holds the loaded users or a fixed error message.

Invariants:
    - After a successful load: users is the returned list, error_message is None
    - After a failed load: users is [], error_message is LOAD_ERROR_MESSAGE
    - load_users never raises and never leaves a previous list on display
    - The raw error is logged, never rendered
"""

import logging

from app.client.users_api import UsersApiClient, UsersApiError
from app.schemas.user import UserResponse

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = (
    "An error occurred while loading users. Please try again later."
)
EMPTY_MESSAGE = "No users found."
DISPLAYED_COLUMNS = ("username", "email")


class UserListView:
    """Two-state result holder for the user directory."""

    def __init__(self, api: UsersApiClient):
        self._api = api
        self.users: list[UserResponse] = []
        self.error_message: str | None = None
        self.loaded = False

    async def load_users(self) -> None:
        try:
            users = await self._api.get_users()
        except UsersApiError as e:
            self._on_error(e)
            return
        self.users = users
        self.error_message = None
        self.loaded = True

    def _on_error(self, error: UsersApiError) -> None:
        logger.error(f"Error loading users: {error.message}")
        self.users = []
        self.error_message = LOAD_ERROR_MESSAGE
        self.loaded = False

    def render(self) -> str:
        """Render the current state as a plain-text table."""
        if self.error_message:
            return self.error_message
        if not self.users:
            return EMPTY_MESSAGE if self.loaded else ""

        rows = [
            (user.username or "-", user.email) for user in self.users
        ]
        widths = [
            max(len(col), *(len(row[i]) for row in rows))
            for i, col in enumerate(DISPLAYED_COLUMNS)
        ]
        lines = [
            "  ".join(col.ljust(w) for col, w in zip(DISPLAYED_COLUMNS, widths)),
            "  ".join("-" * w for w in widths),
        ]
        for row in rows:
            lines.append("  ".join(v.ljust(w) for v, w in zip(row, widths)))
        return "\n".join(line.rstrip() for line in lines)
