"""CLI entrypoint for curriculum progress tracking."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path

from .logging_config import configure_logging, get_logger
from .models import CourseStatus
from .service import CourseState, TrackerService

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
MENU_QUIT_COMMANDS = {"q"}
MENU_RESET_COMMANDS = {"r"}
DEFAULT_STATE_PATH = Path(".mallatrack") / "progress.json"

logger = get_logger(__name__)


def _service(state_path: Path | str = DEFAULT_STATE_PATH, curriculum_path: Path | str | None = None) -> TrackerService:
    """Create app service with local progress file."""
    return TrackerService(state_path=state_path, curriculum_path=curriculum_path)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    parser = argparse.ArgumentParser(prog="mallatrack", description="Curriculum progress tracker")
    parser.add_argument("command", nargs="?", default="play", choices=["play", "status"])
    parser.add_argument("--state-file", type=Path, default=DEFAULT_STATE_PATH, help="progress JSON file")
    parser.add_argument("--curriculum", type=Path, default=None, help="curriculum JSON file (default: bundled)")
    parser.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING or ERROR")
    args = parser.parse_args(argv)
    configure_logging(log_level=args.log_level)

    try:
        service = _service(args.state_file, args.curriculum)
    except (OSError, ValueError) as exc:
        logger.error("Could not load curriculum: %s", exc)
        print(f"Could not load curriculum: {exc}")
        return 1

    if args.command == "status":
        _status_flow(service, print)
        return 0
    return play_shell(service)


def play_shell(service: TrackerService, input_fn: InputFn = input, print_fn: PrintFn = print) -> int:
    """Run menu-driven toggle shell."""
    while True:
        _status_flow(service, print_fn)
        print_fn("")
        print_fn("#) Toggle course completion")
        print_fn("r) Reset progress")
        print_fn("q) Quit")
        choice = input_fn("Choose: ").strip().lower()

        if choice in MENU_QUIT_COMMANDS:
            return 0
        if choice in MENU_RESET_COMMANDS:
            _reset_flow(service, input_fn, print_fn)
            continue
        if not choice.isdigit():
            print_fn("Invalid choice.")
            continue

        states = service.list_course_states()
        index = int(choice) - 1
        if not (0 <= index < len(states)):
            print_fn("Invalid choice.")
            continue
        _toggle_flow(service, states[index], print_fn)


def _toggle_flow(service: TrackerService, state: CourseState, print_fn: PrintFn) -> None:
    """Toggle one course, or explain why it is locked."""
    result = service.toggle(state.course.id)
    if not result.changed:
        print_fn(result.message)
        return
    if result.status is CourseStatus.COMPLETED:
        print_fn(f"Completed: {state.course.name or state.course.id}")
    else:
        print_fn(f"Marked as not completed: {state.course.name or state.course.id}")
    if not result.saved:
        print_fn(f"WARNING: {result.message}")


def _reset_flow(service: TrackerService, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Clear all progress after explicit confirmation."""
    print_fn("WARNING: This permanently clears every completed course.")
    confirm = input_fn("Type YES to confirm reset: ").strip()
    if confirm != "YES":
        print_fn("Reset cancelled.")
        return
    error = service.reset_progress()
    if error:
        print_fn(f"WARNING: {error}")
    print_fn("Progress cleared.")


def _status_flow(service: TrackerService, print_fn: PrintFn) -> None:
    """Print course status table grouped by semester."""
    states = service.list_course_states()
    print_fn("\n=== Curriculum Status ===")
    if not states:
        print_fn("No courses defined.")
        return

    id_width = max(len("Course"), max(len(state.course.id) for state in states))
    status_width = max(len("Status"), max(len(state.status.value) for state in states))
    header = f"{'#':>3} {'Course':<{id_width}} {'Status':<{status_width}} Name"
    print_fn(header)
    print_fn("-" * len(header))

    semester: int | None = None
    for idx, state in enumerate(states, start=1):
        if state.course.semester != semester:
            semester = state.course.semester
            if semester:
                print_fn(f"-- Semester {semester} --")
        print_fn(
            f"{idx:>3} "
            f"{state.course.id:<{id_width}} "
            f"{state.status.value:<{status_width}} "
            f"{state.course.name}"
        )
        if state.status is CourseStatus.LOCKED:
            print_fn(f"{'':>3} {'':<{id_width}} missing: {_format_missing(state.missing)}")

    counts = service.status_counts()
    print_fn(
        f"\nCompleted {counts[CourseStatus.COMPLETED]}, "
        f"available {counts[CourseStatus.AVAILABLE]}, "
        f"locked {counts[CourseStatus.LOCKED]} of {len(states)} courses"
    )


def _format_missing(missing: tuple[str, ...], limit: int = 4) -> str:
    """Join missing ids, abbreviating long milestone lists."""
    if len(missing) <= limit:
        return ", ".join(missing)
    return ", ".join(missing[:limit]) + f" (+{len(missing) - limit} more)"


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
