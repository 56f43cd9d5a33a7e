"""User Schemas — Pydantic models for the /api/users wire contract.

Invariants:
    - UserResponse always serializes all three keys; username may be null
    - UserResponse checks types and key presence only; value rules live in
      the store schema
    - ErrorResponse is the only error body: {"message": str}
"""

from pydantic import BaseModel, ConfigDict, TypeAdapter


class UserResponse(BaseModel):
    """User as returned by GET /api/users."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    username: str | None


class ErrorResponse(BaseModel):
    """Error body for 500 responses."""
    message: str


UserList = TypeAdapter(list[UserResponse])
