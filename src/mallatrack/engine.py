"""Prerequisite resolution and completion toggling."""

from __future__ import annotations

from collections.abc import Iterable

from .graph import CurriculumGraph
from .logging_config import get_logger
from .models import CourseStatus, ExplicitPrerequisites, MilestonePrerequisites, PrerequisiteSpec

logger = get_logger(__name__)


class ProgressEngine:
    """Owns the completion set and derives course status from it.

    Status is never stored: every query evaluates the graph against the current
    completion set. Completion is sticky, so un-completing a course never
    revokes courses that were completed on top of it.
    """

    def __init__(self, graph: CurriculumGraph, completed: Iterable[str] | None = None) -> None:
        """Initialize engine with an optional restored completion set."""
        self.graph = graph
        self._completed: set[str] = set(completed or ())

    def completed(self) -> frozenset[str]:
        """Return a snapshot of completed course ids."""
        return frozenset(self._completed)

    def is_completed(self, course_id: str) -> bool:
        return course_id in self._completed

    def status_of(self, course_id: str) -> CourseStatus:
        """Return completed, available, or locked for one course."""
        spec = self.graph.prerequisites_of(course_id)
        if course_id in self._completed:
            return CourseStatus.COMPLETED
        if self._missing(spec):
            return CourseStatus.LOCKED
        return CourseStatus.AVAILABLE

    def missing_prerequisites_of(self, course_id: str) -> list[str]:
        """Return uncompleted requirements in milestone or list order."""
        spec = self.graph.prerequisites_of(course_id)
        if course_id in self._completed:
            return []
        return self._missing(spec)

    def statuses(self) -> dict[str, CourseStatus]:
        """Return status for every course in graph order."""
        return {course.id: self.status_of(course.id) for course in self.graph}

    def toggle(self, course_id: str) -> bool:
        """Flip completion for an unlocked course.

        Returns False without touching the completion set when the course is
        locked.
        """
        if self.status_of(course_id) is CourseStatus.LOCKED:
            logger.debug("Rejected toggle of locked course %s", course_id)
            return False
        if course_id in self._completed:
            self._completed.remove(course_id)
            logger.debug("Marked %s as not completed", course_id)
        else:
            self._completed.add(course_id)
            logger.debug("Marked %s as completed", course_id)
        return True

    def reset(self) -> None:
        """Clear every completion."""
        self._completed.clear()

    def _missing(self, spec: PrerequisiteSpec) -> list[str]:
        if isinstance(spec, MilestonePrerequisites):
            required = self.graph.milestone_set()
        elif isinstance(spec, ExplicitPrerequisites):
            required = spec.course_ids
        else:
            raise TypeError(f"Unsupported prerequisite specification: {spec!r}")
        return [dep for dep in required if dep and dep not in self._completed]
