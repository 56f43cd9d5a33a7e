"""Create users table with unique email and partial unique username.

Revision ID: 001_create_users
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_users"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=True),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint("id > 0", name="ck_users_id_positive"),
        sa.CheckConstraint("email <> ''", name="ck_users_email_not_empty"),
        sa.CheckConstraint("length(email) <= 255", name="ck_users_email_length"),
        sa.CheckConstraint(
            "username IS NULL OR length(username) <= 255",
            name="ck_users_username_length",
        ),
    )
    op.create_index(
        "ix_users_username", "users", ["username"], unique=True,
        postgresql_where=sa.text("username IS NOT NULL"),
        sqlite_where=sa.text("username IS NOT NULL"),
    )


def downgrade() -> None:
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
