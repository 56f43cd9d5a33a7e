"""User Service — the single call site the API layer depends on for user reads.

Invariants:
    - get_users returns the repository result unchanged
    - Errors propagate unchanged (no retry, no fallback, no swallowing)
"""

import logging

from app.core.domain_types import User
from app.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user reads over a UserRepository."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_users(self) -> list[User]:
        users = await self._repository.list_users()
        logger.debug("Listed users", extra={"user_count": len(users)})
        return users
