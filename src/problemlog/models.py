from __future__ import annotations

from enum import IntEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import InvalidArgumentError

__all__ = ["Attempt", "Problem", "PROBLEM_COLUMNS"]


class Attempt(IntEnum):
    """Ordinal of a timed solve attempt."""

    FIRST = 1
    SECOND = 2
    THIRD = 3

    @classmethod
    def parse(cls, value: object) -> Attempt:
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError("Attempt must be 1, 2, or 3")
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError("Attempt must be 1, 2, or 3") from None

    @property
    def column(self) -> str:
        return _ATTEMPT_COLUMNS[self]


_ATTEMPT_COLUMNS: Final[dict[Attempt, str]] = {
    Attempt.FIRST: "time_to_solve_1st",
    Attempt.SECOND: "time_to_solve_2nd",
    Attempt.THIRD: "time_to_solve_3rd",
}

PROBLEM_COLUMNS: Final[tuple[str, ...]] = (
    "id",
    "description",
    "link",
    "category",
    "pattern",
    "difficulty",
    "time_to_solve_1st",
    "time_to_solve_2nd",
    "time_to_solve_3rd",
    "comments",
    "should_solve_again",
)


class Problem(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: int | None = None
    description: str
    link: str | None = None
    category: str | None = None
    pattern: str | None = None
    difficulty: str | None = None
    time_to_solve_1st: int | None = None
    time_to_solve_2nd: int | None = None
    time_to_solve_3rd: int | None = None
    comments: str | None = None
    should_solve_again: bool = False

    @field_validator("time_to_solve_1st", "time_to_solve_2nd", "time_to_solve_3rd")
    def _minutes_non_negative(cls, value: int | None) -> int | None:
        if value is not None and value < 0:
            raise ValueError("solve time must be >= 0 minutes")
        return value

    @property
    def solve_times(self) -> tuple[int | None, int | None, int | None]:
        return (self.time_to_solve_1st, self.time_to_solve_2nd, self.time_to_solve_3rd)

    def solve_time(self, attempt: Attempt | int) -> int | None:
        return getattr(self, Attempt.parse(attempt).column)
