"""User ORM — the `users` table and its schema-level invariants.

Invariants:
    - id is an autoincrement integer primary key, checked positive
    - email is non-null, non-empty, at most 255 chars, unique
    - username is nullable, at most 255 chars, unique among non-null values
      (partial unique index, so any number of NULL usernames may coexist)

Design Decisions:
    - Partial index declared for both PostgreSQL and SQLite so the same
      metadata works in production and in the test suite
    - Length limits are CHECK constraints as well as String(255): SQLite
      does not enforce VARCHAR lengths
"""

from sqlalchemy import CheckConstraint, Index, Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import EMAIL_MAX_LENGTH, USERNAME_MAX_LENGTH
from app.db.base import Base


class User(Base):
    """User row — the sole persisted entity."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH), nullable=False,
    )
    username: Mapped[str | None] = mapped_column(
        String(USERNAME_MAX_LENGTH), nullable=True,
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
        CheckConstraint("id > 0", name="ck_users_id_positive"),
        CheckConstraint("email <> ''", name="ck_users_email_not_empty"),
        CheckConstraint(
            f"length(email) <= {EMAIL_MAX_LENGTH}", name="ck_users_email_length",
        ),
        CheckConstraint(
            f"username IS NULL OR length(username) <= {USERNAME_MAX_LENGTH}",
            name="ck_users_username_length",
        ),
        Index(
            "ix_users_username", "username", unique=True,
            postgresql_where=text("username IS NOT NULL"),
            sqlite_where=text("username IS NOT NULL"),
        ),
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
