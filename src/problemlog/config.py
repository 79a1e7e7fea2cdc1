"""Runtime settings read from ``PROBLEMLOG_*`` environment variables."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, field_validator

__all__ = ["DEFAULT_DB_PATH", "Settings", "load_settings", "reload"]

DEFAULT_DB_PATH = "problems.db"

_FALSE_VALUES = {"0", "false", "off", "no", "disable", "disabled"}
_TRUE_VALUES = {"1", "true", "on", "yes", "enable", "enabled"}


def _parse_bool(value: str) -> bool | None:
    normalised = value.strip().lower()
    if normalised in _TRUE_VALUES:
        return True
    if normalised in _FALSE_VALUES:
        return False
    return None


class Settings(BaseModel):
    db_path: Path = Path(DEFAULT_DB_PATH)
    log_dir: Path | None = None
    file_logging: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}")
        return name

    @property
    def console_level(self) -> int:
        return logging.getLevelName(self.log_level)


def _from_environ(environ: dict[str, str]) -> Settings:
    values: dict[str, object] = {}
    if environ.get("PROBLEMLOG_DB"):
        values["db_path"] = environ["PROBLEMLOG_DB"]
    if environ.get("PROBLEMLOG_LOG_DIR"):
        values["log_dir"] = environ["PROBLEMLOG_LOG_DIR"]
    if "PROBLEMLOG_FILE_LOGGING" in environ:
        parsed = _parse_bool(environ["PROBLEMLOG_FILE_LOGGING"])
        if parsed is not None:
            values["file_logging"] = parsed
    if environ.get("PROBLEMLOG_LOG_LEVEL"):
        values["log_level"] = environ["PROBLEMLOG_LOG_LEVEL"]
    return Settings(**values)


@lru_cache(maxsize=1)
def _cached_settings() -> Settings:
    return _from_environ(dict(os.environ))


def load_settings() -> Settings:
    """Return the settings for this process (read once, then cached)."""

    return _cached_settings()


def reload() -> None:
    """Clear the cached settings (useful for tests)."""

    _cached_settings.cache_clear()
