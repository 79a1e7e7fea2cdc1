"""
Schema bootstrap and pragmas for the problem database.
"""

from __future__ import annotations

import logging
import sqlite3

from .utils import set_pragmas

log = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_PRAGMAS",
    "apply_default_pragmas",
    "ensure_schema",
    "table_exists",
]

DEFAULT_PRAGMAS: dict[str, object] = {
    "journal_mode": "delete",
    "synchronous": "full",
    "busy_timeout_ms": 5000,
}

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS problems (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    description TEXT NOT NULL,
    link TEXT,
    category TEXT,
    pattern TEXT,
    difficulty TEXT,
    time_to_solve_1st INTEGER,
    time_to_solve_2nd INTEGER,
    time_to_solve_3rd INTEGER,
    comments TEXT,
    should_solve_again INTEGER NOT NULL DEFAULT 0
);
"""


def apply_default_pragmas(conn: sqlite3.Connection) -> None:
    """
    Apply pragmas for a short-lived single-writer process.

    DELETE journal keeps the database a single file; the busy timeout lets a
    second invocation wait for the first one's write lock instead of failing.
    """
    set_pragmas(conn, DEFAULT_PRAGMAS)


def ensure_schema(conn: sqlite3.Connection) -> None:
    """
    Create the ``problems`` table if it is missing.

    An existing table and its rows are left untouched.
    """

    created = not table_exists(conn, "problems")
    conn.executescript(SCHEMA_SQL)
    conn.commit()
    if created:
        log.info("Created problems table")


def table_exists(conn: sqlite3.Connection, name: str) -> bool:
    row = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?", (name,)
    ).fetchone()
    return row is not None
