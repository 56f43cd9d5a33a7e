"""Users Route — GET /api/users, the read-only user directory endpoint.

Invariants:
    - 200 with a JSON array of {id, email, username} on success
    - Failures are not caught here; the global handlers (api/error_handlers.py)
      turn them into 500 {"message": ...}
    - No field inspection beyond serialization
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.infrastructure.user_repository import SqlUserRepository
from app.schemas.user import ErrorResponse, UserResponse
from app.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """FastAPI dependency — one service/repository pair per request."""
    return UserService(SqlUserRepository(db))


@router.get(
    "",
    response_model=list[UserResponse],
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def list_users(service: UserService = Depends(get_user_service)):
    """Return every registered user."""
    users = await service.get_users()
    return [UserResponse.model_validate(user) for user in users]
