"""Alembic migration 001 — the migrated schema enforces the same invariants as the models.

Design Decisions:
    - Config built without an ini file so fileConfig does not reset test logging
    - Sync pysqlite engine for inspection; the migration itself runs through
      the async env.py
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

ALEMBIC_DIR = Path(__file__).resolve().parents[2] / "alembic"


@pytest.fixture
def migrated_db(tmp_path, monkeypatch):
    db_path = tmp_path / "migrated.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    command.upgrade(config, "head")
    engine = create_engine(f"sqlite:///{db_path}")
    yield engine
    engine.dispose()


def _insert(engine, email, username=None):
    with engine.begin() as conn:
        conn.execute(
            text("INSERT INTO users (email, username) VALUES (:e, :u)"),
            {"e": email, "u": username},
        )


def test_users_table_columns(migrated_db):
    columns = {c["name"]: c for c in inspect(migrated_db).get_columns("users")}
    assert set(columns) == {"id", "email", "username"}
    assert columns["email"]["nullable"] is False
    assert columns["username"]["nullable"] is True


def test_username_index_is_unique(migrated_db):
    indexes = inspect(migrated_db).get_indexes("users")
    username_index = next(i for i in indexes if i["name"] == "ix_users_username")
    assert username_index["unique"]


def test_migrated_schema_enforces_uniqueness(migrated_db):
    _insert(migrated_db, "dup@example.com", "dup")
    with pytest.raises(IntegrityError):
        _insert(migrated_db, "dup@example.com")
    with pytest.raises(IntegrityError):
        _insert(migrated_db, "other@example.com", "dup")


def test_migrated_schema_allows_many_null_usernames(migrated_db):
    _insert(migrated_db, "a@example.com")
    _insert(migrated_db, "b@example.com")
    with migrated_db.connect() as conn:
        count = conn.execute(
            text("SELECT COUNT(*) FROM users WHERE username IS NULL"),
        ).scalar_one()
    assert count == 2


@pytest.mark.parametrize("email, username", [
    ("e" * 244 + "@example.com", None),
    ("long@example.com", "u" * 256),
])
def test_migrated_schema_enforces_length_limits(migrated_db, email, username):
    with pytest.raises(IntegrityError):
        _insert(migrated_db, email, username)


def test_migrated_schema_rejects_non_positive_id(migrated_db):
    with pytest.raises(IntegrityError):
        with migrated_db.begin() as conn:
            conn.execute(
                text("INSERT INTO users (id, email) VALUES (0, 'zero@example.com')"),
            )
