# ProblemLog
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Public package interface for the ProblemLog practice tracker."""

from problemlog.errors import (
    InvalidArgumentError,
    NotFoundError,
    ProblemLogError,
    StorageError,
)
from problemlog.formatting import format_listing, format_problem
from problemlog.models import Attempt, Problem
from problemlog.storage import ProblemStore, open_store

__version__ = "0.1.0"

__all__ = [
    "Attempt",
    "Problem",
    "ProblemStore",
    "open_store",
    "format_problem",
    "format_listing",
    "ProblemLogError",
    "NotFoundError",
    "InvalidArgumentError",
    "StorageError",
]
