from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from pydantic import ValidationError

from .config import load_settings
from .errors import InvalidArgumentError, NotFoundError, ProblemLogError
from .formatting import format_listing, format_problem
from .logging_config import setup_logging
from .models import Attempt, Problem
from .prompts import Confirm, StreamConfirm
from .storage import ProblemStore, open_store

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_STORAGE_ERROR = 1
EXIT_INVALID_ARGUMENT = 2


@dataclass
class CommandContext:
    store: ProblemStore
    confirm: Confirm


def _not_found(problem_id: int) -> int:
    print(f"Problem with ID {problem_id} not found")
    return EXIT_OK


def _print_listing(problems: list[Problem], title: str, empty_message: str) -> int:
    if not problems:
        print(empty_message)
    else:
        print(format_listing(title, problems))
    return EXIT_OK


def cmd_add(ctx: CommandContext, args: argparse.Namespace) -> int:
    try:
        problem = Problem(
            description=args.description,
            link=args.link,
            category=args.category,
            pattern=args.pattern,
            difficulty=args.difficulty,
            time_to_solve_1st=args.time,
            comments=args.comments,
            should_solve_again=args.review,
        )
    except ValidationError as exc:
        raise InvalidArgumentError(exc.errors()[0]["msg"]) from exc
    problem_id = ctx.store.add(problem)
    print(f"Added problem with ID: {problem_id}")
    return EXIT_OK


def cmd_show(ctx: CommandContext, args: argparse.Namespace) -> int:
    try:
        problem = ctx.store.get(args.id)
    except NotFoundError:
        return _not_found(args.id)
    print(format_problem(problem))
    return EXIT_OK


def cmd_list(ctx: CommandContext, args: argparse.Namespace) -> int:
    return _print_listing(ctx.store.list_all(), "All Problems", "No problems found")


def cmd_review(ctx: CommandContext, args: argparse.Namespace) -> int:
    return _print_listing(
        ctx.store.list_for_review(), "Problems to Review", "No problems to review"
    )


def cmd_by_category(ctx: CommandContext, args: argparse.Namespace) -> int:
    return _print_listing(
        ctx.store.list_by_category(args.category),
        f"Problems in Category '{args.category}'",
        f"No problems found in category '{args.category}'",
    )


def cmd_by_pattern(ctx: CommandContext, args: argparse.Namespace) -> int:
    return _print_listing(
        ctx.store.list_by_pattern(args.pattern),
        f"Problems with Pattern '{args.pattern}'",
        f"No problems found with pattern '{args.pattern}'",
    )


def cmd_by_difficulty(ctx: CommandContext, args: argparse.Namespace) -> int:
    return _print_listing(
        ctx.store.list_by_difficulty(args.difficulty),
        f"Problems with Difficulty '{args.difficulty}'",
        f"No problems found with difficulty '{args.difficulty}'",
    )


def cmd_search(ctx: CommandContext, args: argparse.Namespace) -> int:
    return _print_listing(
        ctx.store.search(args.keyword),
        f"Problems matching '{args.keyword}'",
        f"No problems found matching '{args.keyword}'",
    )


def cmd_update_time(ctx: CommandContext, args: argparse.Namespace) -> int:
    attempt = Attempt.parse(args.attempt)
    if not ctx.store.exists(args.id):
        return _not_found(args.id)
    ctx.store.update_solve_time(args.id, attempt, args.minutes)
    print(
        f"Updated problem #{args.id} with attempt {int(attempt)} time: {args.minutes} minutes"
    )
    return EXIT_OK


def cmd_toggle_review(ctx: CommandContext, args: argparse.Namespace) -> int:
    if not ctx.store.toggle_review_flag(args.id):
        return _not_found(args.id)
    problem = ctx.store.get(args.id)
    flag = "Yes" if problem.should_solve_again else "No"
    print(f"Problem #{args.id} review flag set to: {flag}")
    return EXIT_OK


def cmd_delete(ctx: CommandContext, args: argparse.Namespace) -> int:
    if not ctx.store.exists(args.id):
        return _not_found(args.id)
    if not args.force:
        if not ctx.confirm(f"Are you sure you want to delete problem #{args.id}? [y/N]"):
            print("Deletion cancelled")
            return EXIT_OK
    ctx.store.delete(args.id)
    print(f"Deleted problem #{args.id}")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "problemlog", description="Track practice problems and timed solve attempts."
    )
    parser.add_argument(
        "-d",
        "--database",
        default=None,
        help="Path to the SQLite database file (default: $PROBLEMLOG_DB or problems.db)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging on stderr"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("add", help="Add a new problem")
    sp.add_argument("description")
    sp.add_argument("-l", "--link")
    sp.add_argument("-C", "--category")
    sp.add_argument("-p", "--pattern")
    sp.add_argument("-D", "--difficulty")
    sp.add_argument("-t", "--time", type=int, help="First attempt time in minutes")
    sp.add_argument("-c", "--comments")
    sp.add_argument("-r", "--review", action="store_true", help="Mark for review")
    sp.set_defaults(func=cmd_add)

    sp = sub.add_parser("show", help="Show a problem by ID")
    sp.add_argument("id", type=int)
    sp.set_defaults(func=cmd_show)

    sp = sub.add_parser("list", help="List all problems")
    sp.set_defaults(func=cmd_list)

    sp = sub.add_parser("review", help="List problems that need review")
    sp.set_defaults(func=cmd_review)

    sp = sub.add_parser("by-category", help="List problems in a category")
    sp.add_argument("category")
    sp.set_defaults(func=cmd_by_category)

    sp = sub.add_parser("by-pattern", help="List problems with a pattern")
    sp.add_argument("pattern")
    sp.set_defaults(func=cmd_by_pattern)

    sp = sub.add_parser("by-difficulty", help="List problems with a difficulty")
    sp.add_argument("difficulty")
    sp.set_defaults(func=cmd_by_difficulty)

    sp = sub.add_parser("search", help="Search problems by keyword")
    sp.add_argument("keyword")
    sp.set_defaults(func=cmd_search)

    sp = sub.add_parser("update-time", help="Record a solve time for an attempt")
    sp.add_argument("id", type=int)
    sp.add_argument("attempt", type=int, help="Attempt number (1, 2, or 3)")
    sp.add_argument("minutes", type=int)
    sp.set_defaults(func=cmd_update_time)

    sp = sub.add_parser("toggle-review", help="Flip a problem's review flag")
    sp.add_argument("id", type=int)
    sp.set_defaults(func=cmd_toggle_review)

    sp = sub.add_parser("delete", help="Delete a problem")
    sp.add_argument("id", type=int)
    sp.add_argument("-f", "--force", action="store_true", help="Skip confirmation")
    sp.set_defaults(func=cmd_delete)

    return parser


def _configure_logging(verbose: bool) -> None:
    settings = load_settings()
    level = logging.DEBUG if verbose else settings.console_level
    try:
        setup_logging(
            console_level=level,
            log_dir=settings.log_dir,
            file_logging=settings.file_logging,
        )
    except OSError as exc:
        # Fall back to console-only logging if the log directory is unusable
        setup_logging(console_level=level, file_logging=False)
        log.warning("File logging disabled: %s", exc)


def main(argv: Sequence[str] | None = None, confirm: Confirm | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    db_path = args.database or load_settings().db_path
    log.debug("Running %s against %s", args.cmd, db_path)
    handler: Callable[[CommandContext, argparse.Namespace], int] = args.func
    try:
        with open_store(db_path) as store:
            return handler(CommandContext(store=store, confirm=confirm or StreamConfirm()), args)
    except InvalidArgumentError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID_ARGUMENT
    except ProblemLogError as exc:
        log.error("%s failed: %s", args.cmd, exc)
        log.debug("Traceback for failed %s", args.cmd, exc_info=True)
        return EXIT_STORAGE_ERROR


__all__ = ["CommandContext", "main"]


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
