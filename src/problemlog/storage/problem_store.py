"""
SQLite-backed problem storage.

A :class:`ProblemStore` owns one open connection to a single database file and
exposes create/read/update/delete plus the filtered and keyword queries the
command line needs. Every engine failure leaves this module as
:class:`~problemlog.errors.StorageError`.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from problemlog.errors import InvalidArgumentError, NotFoundError, StorageError
from problemlog.models import PROBLEM_COLUMNS, Attempt, Problem

from . import schema as _schema
from .utils import open_db, transaction

log = logging.getLogger(__name__)

__all__ = ["ProblemStore", "open_store"]

_SELECT = f"SELECT {', '.join(PROBLEM_COLUMNS)} FROM problems"
_INSERT_COLUMNS = PROBLEM_COLUMNS[1:]
_INSERT = (
    f"INSERT INTO problems ({', '.join(_INSERT_COLUMNS)}) "
    f"VALUES ({', '.join('?' for _ in _INSERT_COLUMNS)})"
)
_SEARCH_FIELDS = ("description", "category", "pattern", "comments")
_LIKE_ESCAPE = "\\"


def _row_to_problem(row: sqlite3.Row) -> Problem:
    data = {key: row[key] for key in row.keys()}
    data["should_solve_again"] = bool(data["should_solve_again"])
    return Problem.model_validate(data)


def _like_pattern(keyword: str) -> str:
    escaped = (
        keyword.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


@dataclass
class ProblemStore:
    """Open handle on a problems database."""

    path: Path
    conn: sqlite3.Connection

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> ProblemStore:
        return open_store(path)

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> ProblemStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Writes

    def add(self, problem: Problem) -> int:
        """Insert ``problem`` (ignoring its ``id``) and return the new id."""

        if not problem.description:
            raise StorageError("Problem description must not be empty", self.path)
        values = tuple(getattr(problem, column) for column in _INSERT_COLUMNS)
        with self._translate_errors("add problem"):
            with transaction(self.conn):
                cur = self.conn.execute(_INSERT, values)
                new_id = int(cur.lastrowid)
        log.info("Added problem #%d", new_id)
        return new_id

    def update_solve_time(self, problem_id: int, attempt: Attempt | int, minutes: int) -> bool:
        """Set one attempt slot. Returns ``False`` when no row has ``problem_id``."""

        column = Attempt.parse(attempt).column
        if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes < 0:
            raise InvalidArgumentError("Minutes must be a non-negative integer")
        return self._execute_write(
            f"UPDATE problems SET {column} = ? WHERE id = ?",
            (minutes, problem_id),
            f"update {column} of problem #{problem_id}",
        )

    def toggle_review_flag(self, problem_id: int) -> bool:
        return self._execute_write(
            "UPDATE problems SET should_solve_again = NOT should_solve_again WHERE id = ?",
            (problem_id,),
            f"toggle review flag of problem #{problem_id}",
        )

    def delete(self, problem_id: int) -> bool:
        return self._execute_write(
            "DELETE FROM problems WHERE id = ?",
            (problem_id,),
            f"delete problem #{problem_id}",
        )

    # ------------------------------------------------------------------
    # Reads

    def get(self, problem_id: int) -> Problem:
        rows = self._query(f"{_SELECT} WHERE id = ?", (problem_id,))
        if not rows:
            raise NotFoundError(problem_id)
        return rows[0]

    def exists(self, problem_id: int) -> bool:
        with self._translate_errors("look up problem"):
            row = self.conn.execute(
                "SELECT 1 FROM problems WHERE id = ?", (problem_id,)
            ).fetchone()
        return row is not None

    def count(self) -> int:
        with self._translate_errors("count problems"):
            row = self.conn.execute("SELECT COUNT(*) FROM problems").fetchone()
        return int(row[0])

    def list_all(self) -> list[Problem]:
        return self._query(f"{_SELECT} ORDER BY id")

    def list_for_review(self) -> list[Problem]:
        return self._query(f"{_SELECT} WHERE should_solve_again = 1 ORDER BY id")

    def list_by_category(self, category: str) -> list[Problem]:
        return self._query(f"{_SELECT} WHERE category = ? ORDER BY id", (category,))

    def list_by_pattern(self, pattern: str) -> list[Problem]:
        return self._query(f"{_SELECT} WHERE pattern = ? ORDER BY id", (pattern,))

    def list_by_difficulty(self, difficulty: str) -> list[Problem]:
        return self._query(f"{_SELECT} WHERE difficulty = ? ORDER BY id", (difficulty,))

    def search(self, keyword: str) -> list[Problem]:
        """Return problems whose description, category, pattern or comments contain ``keyword``.

        Matching is a substring test that ignores ASCII case; ``%`` and ``_``
        in ``keyword`` match literally.
        """

        clause = " OR ".join(f"{field} LIKE ? ESCAPE '{_LIKE_ESCAPE}'" for field in _SEARCH_FIELDS)
        pattern = _like_pattern(keyword)
        return self._query(
            f"{_SELECT} WHERE {clause} ORDER BY id",
            (pattern,) * len(_SEARCH_FIELDS),
        )

    # ------------------------------------------------------------------
    # Internals

    def _query(self, sql: str, params: Sequence[object] = ()) -> list[Problem]:
        with self._translate_errors("query problems"):
            rows = self.conn.execute(sql, tuple(params)).fetchall()
        return [_row_to_problem(row) for row in rows]

    def _execute_write(self, sql: str, params: Sequence[object], action: str) -> bool:
        with self._translate_errors(action):
            with transaction(self.conn):
                cur = self.conn.execute(sql, tuple(params))
                affected = cur.rowcount
        if affected:
            log.info("Done: %s", action)
        else:
            log.debug("No rows affected: %s", action)
        return affected > 0

    @contextmanager
    def _translate_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except sqlite3.Error as exc:
            log.error("Failed to %s in %s: %s", action, self.path, exc)
            raise StorageError(f"Failed to {action}: {exc}", self.path) from exc


def open_store(path: str | os.PathLike[str]) -> ProblemStore:
    """Open (creating if needed) the problems database at ``path``."""

    db_path = Path(path)
    raw = os.fspath(path)
    if raw != ":memory:":
        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(
                f"Could not create directory for database {db_path}: {exc}", db_path
            ) from exc
    try:
        conn = open_db(raw)
    except sqlite3.Error as exc:
        raise StorageError(f"Could not open database {db_path}: {exc}", db_path) from exc
    try:
        _schema.apply_default_pragmas(conn)
        _schema.ensure_schema(conn)
    except sqlite3.Error as exc:
        conn.close()
        raise StorageError(f"Could not initialise database {db_path}: {exc}", db_path) from exc
    log.debug("Opened problem store at %s", db_path)
    return ProblemStore(path=db_path, conn=conn)
