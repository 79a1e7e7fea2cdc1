"""Confirmation providers for destructive commands."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO, runtime_checkable

__all__ = ["Confirm", "StreamConfirm", "always_confirm", "is_affirmative"]


@runtime_checkable
class Confirm(Protocol):
    """Capability to ask the user a yes/no question."""

    def __call__(self, question: str) -> bool: ...


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() == "y"


class StreamConfirm:
    """Print ``question`` and read one line; only ``y`` (any case) confirms."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._stdin = stdin
        self._stdout = stdout

    def __call__(self, question: str) -> bool:
        stdin = self._stdin or sys.stdin
        stdout = self._stdout or sys.stdout
        print(question, file=stdout, flush=True)
        return is_affirmative(stdin.readline())


def always_confirm(question: str) -> bool:
    return True
