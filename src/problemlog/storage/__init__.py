"""SQLite persistence for practice problems."""

from __future__ import annotations

from .problem_store import ProblemStore, open_store

__all__ = ["ProblemStore", "open_store"]
