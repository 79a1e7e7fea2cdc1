"""Plain-text rendering of problems for the terminal."""

from __future__ import annotations

from collections.abc import Sequence

from .models import Problem

__all__ = ["format_problem", "format_solve_times", "format_listing"]

UNKNOWN_DIFFICULTY = "Unknown"
NOT_ATTEMPTED = "Not attempted"
MISSING_SLOT = "-"
REVIEW_MARKER = "[REVIEW NEEDED]"
INDENT = "  "


def format_solve_times(times: Sequence[int | None]) -> str:
    """Render attempt slots left to right.

    The leading run of recorded attempts is shown in minutes; every slot after
    the first gap is shown as ``-``. With no first attempt the whole line is
    ``Not attempted``.
    """
    rendered: list[str] = []
    for minutes in times:
        if minutes is None:
            break
        rendered.append(f"{minutes}min")
    if not rendered:
        return NOT_ATTEMPTED
    rendered.extend(MISSING_SLOT for _ in range(len(times) - len(rendered)))
    return ", ".join(rendered)


def format_problem(problem: Problem) -> str:
    difficulty = problem.difficulty if problem.difficulty is not None else UNKNOWN_DIFFICULTY
    header = f"Problem #{problem.id or 0}: {problem.description} ({difficulty})"
    if problem.category is not None:
        header += f" - Category: {problem.category}"
    if problem.pattern is not None:
        header += f" - Pattern: {problem.pattern}"

    lines = [header]
    if problem.link is not None:
        lines.append(f"{INDENT}Link: {problem.link}")
    lines.append(f"{INDENT}Solve times: {format_solve_times(problem.solve_times)}")
    if problem.comments is not None:
        lines.append(f"{INDENT}Comments: {problem.comments}")
    if problem.should_solve_again:
        lines.append(f"{INDENT}{REVIEW_MARKER}")
    return "\n".join(lines)


def format_listing(title: str, problems: Sequence[Problem]) -> str:
    """Title line with a count, then each problem separated by a blank line."""

    blocks = [f"{title} ({len(problems)})"]
    blocks.extend(f"\n{format_problem(problem)}" for problem in problems)
    return "\n".join(blocks)
