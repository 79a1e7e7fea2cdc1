"""Error types raised by the problem store and surfaced by the CLI."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = [
    "ProblemLogError",
    "NotFoundError",
    "InvalidArgumentError",
    "StorageError",
]


class ProblemLogError(RuntimeError):
    """Base class for every error raised by ``problemlog``."""


class NotFoundError(ProblemLogError, LookupError):
    """Raised when a problem id does not exist in the store."""

    def __init__(self, problem_id: int):
        self.problem_id = problem_id
        super().__init__(f"Problem with ID {problem_id} not found")


class InvalidArgumentError(ProblemLogError, ValueError):
    """Raised for arguments rejected before any query is built."""


class StorageError(ProblemLogError):
    """Raised when the underlying database rejects or fails an operation."""

    def __init__(self, message: str, path: str | os.PathLike[str] | None = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)
