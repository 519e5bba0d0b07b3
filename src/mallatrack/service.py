"""Application service coordinating the curriculum, engine, and persistence."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .content_loader import load_curriculum, load_curriculum_from_file
from .engine import ProgressEngine
from .logging_config import get_logger
from .models import Course, CourseStatus
from .progress import CompletionStore

logger = get_logger(__name__)

BLOCKING_HEADER = "To take this course you must first complete:"


@dataclass(frozen=True)
class CourseState:
    """Derived state for one course."""

    course: Course
    status: CourseStatus
    missing: tuple[str, ...]


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of one toggle request."""

    course_id: str
    changed: bool
    saved: bool
    status: CourseStatus
    missing: tuple[str, ...]
    message: str


class TrackerService:
    """Coordinates curriculum state, toggling, and saving."""

    def __init__(self, state_path: Path | str, curriculum_path: Path | str | None = None) -> None:
        """Load the curriculum and restore saved completions."""
        if curriculum_path is None:
            self.graph = load_curriculum()
        else:
            self.graph = load_curriculum_from_file(curriculum_path)
        self.store = CompletionStore(state_path)
        self.engine = ProgressEngine(self.graph, self._restore())

    def _restore(self) -> set[str]:
        try:
            return self.store.load()
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable progress file %s: %s", self.store.path, exc)
            return set()

    def _save(self) -> str:
        """Persist the completion set; return an error message when the write fails."""
        try:
            self.store.save(self.engine.completed())
        except OSError as exc:
            logger.error("Could not save progress to %s: %s", self.store.path, exc)
            return f"Could not save progress to {self.store.path}: {exc}"
        return ""

    def list_course_states(self) -> list[CourseState]:
        """Return state for every course in curriculum order."""
        return [
            CourseState(
                course=course,
                status=self.engine.status_of(course.id),
                missing=tuple(self.engine.missing_prerequisites_of(course.id)),
            )
            for course in self.graph
        ]

    def toggle(self, course_id: str) -> ToggleResult:
        """Toggle completion for a course and persist when it changes."""
        changed = self.engine.toggle(course_id)
        saved = True
        if changed:
            message = self._save()
            saved = not message
        else:
            message = self.blocking_message(course_id)
        return ToggleResult(
            course_id=course_id,
            changed=changed,
            saved=saved,
            status=self.engine.status_of(course_id),
            missing=tuple(self.engine.missing_prerequisites_of(course_id)),
            message=message,
        )

    def blocking_message(self, course_id: str) -> str:
        """Describe the prerequisites still blocking a course."""
        missing = self.engine.missing_prerequisites_of(course_id)
        if not missing:
            return ""
        names = [self.graph.display_name_of(dep) for dep in missing]
        return BLOCKING_HEADER + "\n- " + "\n- ".join(names)

    def status_counts(self) -> dict[CourseStatus, int]:
        """Return how many courses are in each status."""
        counts = {status: 0 for status in CourseStatus}
        for status in self.engine.statuses().values():
            counts[status] += 1
        return counts

    def reset_progress(self) -> str:
        """Forget every completion, in memory and on disk.

        Returns an error message when the saved file could not be removed.
        """
        self.engine.reset()
        try:
            self.store.clear()
        except OSError as exc:
            logger.error("Could not remove progress file %s: %s", self.store.path, exc)
            return f"Could not remove progress file {self.store.path}: {exc}"
        logger.info("Progress reset")
        return ""
