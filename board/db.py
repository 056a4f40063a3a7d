"""Parameterized user lookups.

A lookup keeps its SQL template and its bound values apart until
``execute`` hands both to the driver. Nothing here formats user input into
SQL text.
"""

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass

from board.config import settings

logger = logging.getLogger(__name__)

EMAIL_LOOKUP_SQL = "SELECT id, email FROM users WHERE email = ?"


class QueryFailure(Exception):
    """The data layer is missing or rejected the query."""


@dataclass(frozen=True)
class LookupRequest:
    template: str
    params: tuple[str, ...]


def build_email_lookup(email: str) -> LookupRequest:
    return LookupRequest(template=EMAIL_LOOKUP_SQL, params=(email,))


@contextmanager
def get_connection():
    """Yield a connection to the users database, or None if none is configured."""
    if not settings.users_db_path:
        yield None
        return
    try:
        conn = sqlite3.connect(settings.users_db_path)
    except sqlite3.Error as e:
        raise QueryFailure(f"Cannot open users database: {e}") from e
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


def execute(lookup: LookupRequest, connection: sqlite3.Connection | None) -> list[sqlite3.Row]:
    if connection is None:
        raise QueryFailure("No database configured")
    try:
        return connection.execute(lookup.template, lookup.params).fetchall()
    except sqlite3.Error as e:
        raise QueryFailure(f"Lookup failed: {e}") from e
