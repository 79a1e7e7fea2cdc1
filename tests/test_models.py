import pytest
from pydantic import ValidationError

from problemlog.errors import InvalidArgumentError
from problemlog.models import Attempt, Problem


def test_new_problem_defaults():
    problem = Problem(description="Valid Parentheses")
    assert problem.id is None
    assert problem.link is None
    assert problem.comments is None
    assert problem.solve_times == (None, None, None)
    assert problem.should_solve_again is False


def test_empty_string_is_kept_distinct_from_absent():
    problem = Problem(description="x", link="", comments=None)
    assert problem.link == ""
    assert problem.comments is None


@pytest.mark.parametrize(
    "value, column",
    [
        (1, "time_to_solve_1st"),
        (2, "time_to_solve_2nd"),
        (3, "time_to_solve_3rd"),
        (Attempt.SECOND, "time_to_solve_2nd"),
    ],
)
def test_attempt_maps_to_fixed_column(value, column):
    assert Attempt.parse(value).column == column


@pytest.mark.parametrize("value", [0, 4, -1, "1", 1.0, True, None])
def test_attempt_rejects_anything_outside_one_to_three(value):
    with pytest.raises(InvalidArgumentError):
        Attempt.parse(value)


def test_invalid_attempt_is_also_a_value_error():
    with pytest.raises(ValueError, match="Attempt must be 1, 2, or 3"):
        Attempt.parse(7)


def test_negative_minutes_rejected():
    with pytest.raises(ValidationError):
        Problem(description="x", time_to_solve_2nd=-3)


def test_solve_time_by_attempt():
    problem = Problem(description="x", time_to_solve_1st=12, time_to_solve_3rd=7)
    assert problem.solve_time(1) == 12
    assert problem.solve_time(Attempt.SECOND) is None
    assert problem.solve_time(3) == 7
