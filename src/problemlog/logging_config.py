# ProblemLog
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Logging configuration with file rotation for the command line."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

__all__ = ["setup_logging", "get_log_directory"]


def setup_logging(
    app_name: str = "ProblemLog",
    console_level: int = logging.WARNING,
    *,
    log_dir: Path | None = None,
    file_logging: bool = True,
) -> Path | None:
    """
    Configure the ``problemlog`` logger.

    Creates two log files when ``file_logging`` is on:
    - problemlog.log: DEBUG+ messages (1 MB per file, 3 rotations)
    - errors.log: ERROR+ messages only (1 MB per file, 3 rotations)

    Console output goes to stderr so command output on stdout stays clean.

    Args:
        app_name: Application name for the default log directory
        console_level: Minimum level for console output (default: WARNING)
        log_dir: Override for the log directory
        file_logging: Whether to write rotating log files at all

    Returns:
        Path to the log directory, or None when file logging is off
    """
    app_logger = logging.getLogger("problemlog")
    app_logger.setLevel(logging.DEBUG)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    detailed_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    simple_formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(simple_formatter)
    app_logger.addHandler(console_handler)

    if not file_logging:
        return None

    directory = Path(log_dir) if log_dir is not None else _get_log_directory(app_name)
    directory.mkdir(parents=True, exist_ok=True)

    app_handler = RotatingFileHandler(
        directory / "problemlog.log",
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    app_handler.setLevel(logging.DEBUG)
    app_handler.setFormatter(detailed_formatter)
    app_logger.addHandler(app_handler)

    # Error-only log (easier to scan for problems)
    error_handler = RotatingFileHandler(
        directory / "errors.log",
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)
    app_logger.addHandler(error_handler)

    logging.getLogger(__name__).debug("%s logging initialized in %s", app_name, directory)
    return directory


def _get_log_directory(app_name: str) -> Path:
    """
    Get platform-specific log directory.

    - Windows: %LOCALAPPDATA%\\AppName\\logs
    - macOS: ~/Library/Logs/AppName
    - Linux: ~/.local/share/AppName/logs
    """
    home = Path.home()

    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", home / "AppData" / "Local"))
        return base / app_name / "logs"

    elif sys.platform == "darwin":
        return home / "Library" / "Logs" / app_name

    else:
        xdg_data_home = os.environ.get("XDG_DATA_HOME", home / ".local" / "share")
        return Path(xdg_data_home) / app_name / "logs"


def get_log_directory(app_name: str = "ProblemLog") -> Path:
    """Get the log directory path without setting up logging."""
    return _get_log_directory(app_name)
