"""Domain Types — the User entity as seen by the service and API layers.

Invariants:
    - User is immutable once built (frozen dataclass)
    - Field invariants (positive id, non-empty email, length limits) are
      enforced by the store schema; the entity carries rows as read

Design Decisions:
    - Dataclass separate from the ORM row: callers never hold a live
      SQLAlchemy instance, so nothing lazy-loads after the session closes
"""

from dataclasses import dataclass
from typing import NewType

UserId = NewType("UserId", int)

EMAIL_MAX_LENGTH = 255
USERNAME_MAX_LENGTH = 255


@dataclass(frozen=True)
class User:
    """A directory record."""
    id: UserId
    email: str
    username: str | None = None
