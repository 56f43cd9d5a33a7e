"""SQL User Repository — reads `users` rows and returns domain User entities.

Invariants:
    - list_users returns every row or raises StoreError; never a partial list
    - No ORDER BY: order is whatever the store yields
    - Holds only the injected session; nothing is cached between calls
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import User, UserId
from app.core.errors import StoreError
from app.models.user import User as UserModel

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """UserRepository backed by an SQLAlchemy AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_users(self) -> list[User]:
        try:
            result = await self._db.execute(select(UserModel))
            rows = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                f"Failed to list users: {e}",
                extra={"error_code": "STORE_ERROR", "operation": "list_users"},
            )
            raise StoreError(str(e), "list_users", cause=e) from e
        return [_to_entity(row) for row in rows]


def _to_entity(row: UserModel) -> User:
    return User(id=UserId(row.id), email=row.email, username=row.username)
