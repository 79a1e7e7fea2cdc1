"""Low-level sqlite3 helpers used by the problem store."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

__all__ = ["open_db", "set_pragmas", "transaction"]

_JOURNAL_MODES = {"DELETE", "TRUNCATE", "PERSIST", "MEMORY", "WAL", "OFF"}
_SYNCHRONOUS_LEVELS = {"OFF", "NORMAL", "FULL", "EXTRA"}


def open_db(path: str) -> sqlite3.Connection:
    """Connect to the database file at ``path`` (or ``":memory:"``).

    The path is handed to sqlite3 as a plain filename, never as a URI, so
    ``#``, ``?`` and ``%`` in it name the file literally.
    """
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    return conn


def set_pragmas(conn: sqlite3.Connection, opts: Mapping[str, object]) -> None:
    """Apply ``journal_mode``, ``synchronous`` and ``busy_timeout_ms`` from ``opts``.

    Values are checked against the keywords SQLite accepts before they are
    formatted into the PRAGMA statement.
    """
    if "journal_mode" in opts:
        mode = str(opts["journal_mode"]).upper()
        if mode not in _JOURNAL_MODES:
            raise ValueError(f"unsupported journal_mode {mode!r}")
        conn.execute(f"PRAGMA journal_mode = {mode}")
    if "synchronous" in opts:
        level = str(opts["synchronous"]).upper()
        if level not in _SYNCHRONOUS_LEVELS:
            raise ValueError(f"unsupported synchronous level {level!r}")
        conn.execute(f"PRAGMA synchronous = {level}")
    if "busy_timeout_ms" in opts:
        conn.execute(f"PRAGMA busy_timeout = {int(opts['busy_timeout_ms'])}")


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Run the block as one write transaction; roll back if it raises.

    ``BEGIN IMMEDIATE`` takes the write lock up front, so a concurrent
    invocation waits out the busy timeout instead of failing mid-write.
    """
    conn.execute("BEGIN IMMEDIATE")
    try:
        yield conn
    except BaseException:
        if conn.in_transaction:
            conn.execute("ROLLBACK")
        raise
    conn.execute("COMMIT")
