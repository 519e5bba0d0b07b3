"""Core domain models for curriculum progress tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class UnknownCourseError(KeyError):
    """Raised when a course id is not part of the curriculum graph."""


class CourseStatus(Enum):
    """Derived per-course state."""

    COMPLETED = "completed"
    AVAILABLE = "available"
    LOCKED = "locked"


@dataclass(frozen=True)
class ExplicitPrerequisites:
    """Ordered list of required course ids."""

    course_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class MilestonePrerequisites:
    """Requires every course of the curriculum milestone set."""


PrerequisiteSpec = ExplicitPrerequisites | MilestonePrerequisites


@dataclass(frozen=True)
class Course:
    """One course of the curriculum."""

    id: str
    name: str
    semester: int = 0
    prerequisites: PrerequisiteSpec = field(default_factory=ExplicitPrerequisites)
