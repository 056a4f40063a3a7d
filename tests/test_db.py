import sqlite3

import pytest

from board.config import settings
from board.db import (
    EMAIL_LOOKUP_SQL,
    LookupRequest,
    QueryFailure,
    build_email_lookup,
    execute,
    get_connection,
)


@pytest.fixture
def users_db(tmp_path, monkeypatch):
    path = tmp_path / "users.db"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, email TEXT NOT NULL)")
    conn.executemany(
        "INSERT INTO users (email) VALUES (?)",
        [("alice@example.com",), ("bob@example.com",)],
    )
    conn.commit()
    conn.close()
    monkeypatch.setattr(settings, "users_db_path", str(path))
    return path


def test_build_email_lookup():
    lookup = build_email_lookup("test@example.com")
    assert lookup == LookupRequest(template=EMAIL_LOOKUP_SQL, params=("test@example.com",))


def test_build_email_lookup_keeps_template_fixed():
    payload = "x' OR '1'='1"
    lookup = build_email_lookup(payload)
    assert lookup.template == "SELECT id, email FROM users WHERE email = ?"
    assert lookup.template == build_email_lookup("").template
    assert payload not in lookup.template
    assert lookup.params == (payload,)


def test_lookup_request_is_immutable():
    lookup = build_email_lookup("a@b.c")
    with pytest.raises(AttributeError):
        lookup.template = "DROP TABLE users"


def test_execute_without_connection():
    with pytest.raises(QueryFailure):
        execute(build_email_lookup("a@b.c"), None)


def test_get_connection_unconfigured(monkeypatch):
    monkeypatch.setattr(settings, "users_db_path", "")
    with get_connection() as conn:
        assert conn is None


def test_execute_finds_user(users_db):
    with get_connection() as conn:
        rows = execute(build_email_lookup("alice@example.com"), conn)
    assert len(rows) == 1
    assert rows[0]["email"] == "alice@example.com"


def test_execute_binds_injection_payload_as_data(users_db):
    with get_connection() as conn:
        rows = execute(build_email_lookup("x' OR '1'='1"), conn)
    assert rows == []


def test_execute_wraps_driver_errors(tmp_path, monkeypatch):
    # Empty database file, no users table
    monkeypatch.setattr(settings, "users_db_path", str(tmp_path / "empty.db"))
    with get_connection() as conn:
        with pytest.raises(QueryFailure):
            execute(build_email_lookup("a@b.c"), conn)


def test_lookup_users_uses_configured_database(users_db):
    from board.assignment.router import lookup_users

    rows = lookup_users(build_email_lookup("bob@example.com"))
    assert [row["email"] for row in rows] == ["bob@example.com"]
