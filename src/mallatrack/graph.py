"""Read-only curriculum graph of courses and prerequisites."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import Course, PrerequisiteSpec, UnknownCourseError


class CurriculumGraph:
    """Static course graph plus the milestone set used by aggregate requirements."""

    def __init__(self, courses: Iterable[Course], milestone_set: Iterable[str] = ()) -> None:
        """Build lookup tables; the graph is never mutated afterwards."""
        self._courses: dict[str, Course] = {}
        for course in courses:
            if course.id in self._courses:
                raise ValueError(f"Duplicate course id: {course.id}")
            self._courses[course.id] = course
        self._milestone_set = tuple(milestone_set)

    def course(self, course_id: str) -> Course:
        """Return one course by id."""
        try:
            return self._courses[course_id]
        except KeyError:
            raise UnknownCourseError(course_id) from None

    def courses(self) -> list[Course]:
        """Return courses in definition order."""
        return list(self._courses.values())

    def course_ids(self) -> list[str]:
        return list(self._courses)

    def prerequisites_of(self, course_id: str) -> PrerequisiteSpec:
        """Return the prerequisite specification for a course."""
        return self.course(course_id).prerequisites

    def milestone_set(self) -> tuple[str, ...]:
        """Return the authored milestone course ids in order."""
        return self._milestone_set

    def display_name_of(self, course_id: str) -> str:
        """Return a course display name, or an empty string when unresolvable."""
        course = self._courses.get(course_id)
        if course is None:
            return ""
        return course.name

    def __contains__(self, course_id: object) -> bool:
        return course_id in self._courses

    def __iter__(self) -> Iterator[Course]:
        return iter(self._courses.values())

    def __len__(self) -> int:
        return len(self._courses)
