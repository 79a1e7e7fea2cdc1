from problemlog.formatting import format_listing, format_problem, format_solve_times
from problemlog.models import Problem


def _two_sum(**overrides) -> Problem:
    fields = {"id": 1, "description": "Two Sum", "category": "Arrays", "difficulty": "Easy"}
    fields.update(overrides)
    return Problem(**fields)


def test_minimal_problem_block():
    assert format_problem(_two_sum()) == (
        "Problem #1: Two Sum (Easy) - Category: Arrays\n"
        "  Solve times: Not attempted"
    )


def test_full_problem_block_keeps_line_order():
    problem = _two_sum(
        pattern="Hash Map",
        link="https://leetcode.com/problems/two-sum/",
        time_to_solve_1st=15,
        time_to_solve_2nd=10,
        time_to_solve_3rd=6,
        comments="Use a dict of complements",
        should_solve_again=True,
    )
    assert format_problem(problem).splitlines() == [
        "Problem #1: Two Sum (Easy) - Category: Arrays - Pattern: Hash Map",
        "  Link: https://leetcode.com/problems/two-sum/",
        "  Solve times: 15min, 10min, 6min",
        "  Comments: Use a dict of complements",
        "  [REVIEW NEEDED]",
    ]


def test_unknown_difficulty_and_no_category():
    problem = Problem(id=4, description="LRU Cache")
    assert format_problem(problem).splitlines()[0] == "Problem #4: LRU Cache (Unknown)"


def test_empty_difficulty_is_not_unknown():
    problem = Problem(id=4, description="LRU Cache", difficulty="")
    assert format_problem(problem).splitlines()[0] == "Problem #4: LRU Cache ()"


def test_empty_link_still_renders_a_link_line():
    lines = format_problem(_two_sum(link="")).splitlines()
    assert lines[1] == "  Link: "


def test_unsaved_problem_renders_as_zero():
    assert format_problem(Problem(description="Draft")).startswith("Problem #0: Draft")


def test_solve_time_slots():
    assert format_solve_times((15, 10, 5)) == "15min, 10min, 5min"
    assert format_solve_times((15, 10, None)) == "15min, 10min, -"
    assert format_solve_times((15, None, None)) == "15min, -, -"
    assert format_solve_times((None, None, None)) == "Not attempted"


def test_slots_after_a_gap_are_placeholders():
    assert format_solve_times((15, None, 8)) == "15min, -, -"
    assert format_solve_times((None, 9, 8)) == "Not attempted"


def test_listing_has_count_and_blank_line_between_problems():
    text = format_listing("All Problems", [_two_sum(), _two_sum(id=2, description="3Sum")])
    assert text == (
        "All Problems (2)\n"
        "\n"
        "Problem #1: Two Sum (Easy) - Category: Arrays\n"
        "  Solve times: Not attempted\n"
        "\n"
        "Problem #2: 3Sum (Easy) - Category: Arrays\n"
        "  Solve times: Not attempted"
    )
