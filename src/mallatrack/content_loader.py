"""Load curriculum definitions from bundled JSON resources or files."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, cast

from .graph import CurriculumGraph
from .models import Course, ExplicitPrerequisites, MilestonePrerequisites, PrerequisiteSpec

CONTENT_PACKAGE = "mallatrack.content"
CURRICULUM_RESOURCE = "curriculum.json"
DEFAULT_MILESTONE_MARKER = "hasta-octavo"


def _string_items(items: list[object], where: str) -> list[str]:
    """Return string entries, dropping nulls and rejecting other JSON types."""
    values: list[str] = []
    for item in items:
        if item is None:
            continue
        if not isinstance(item, str):
            raise ValueError(f"{where} must contain strings, got {item!r}")
        values.append(item)
    return values


def _prerequisites_from_raw(course_id: str, raw: object, marker: str) -> PrerequisiteSpec:
    """Build a prerequisite spec from a list or a comma-separated string."""
    if raw is None:
        tokens: list[str] = []
    elif isinstance(raw, str):
        tokens = raw.split(",")
    elif isinstance(raw, list):
        tokens = _string_items(cast(list[object], raw), f"Course '{course_id}' prerequisites")
    else:
        raise ValueError(f"Course '{course_id}' has invalid prerequisites: {raw!r}")

    # Only the first raw token can carry the milestone marker.
    if tokens and tokens[0].strip() == marker:
        return MilestonePrerequisites()
    cleaned = [token.strip() for token in tokens if token.strip()]
    return ExplicitPrerequisites(tuple(cleaned))


def _course_from_dict(raw: dict[str, Any], marker: str) -> Course:
    """Build a course from raw JSON content."""
    course_id = str(raw.get("id") or "").strip()
    if not course_id:
        raise ValueError(f"Course entry has no id: {raw!r}")
    return Course(
        id=course_id,
        name=str(raw.get("name") or ""),
        semester=int(raw.get("semester") or 0),
        prerequisites=_prerequisites_from_raw(course_id, raw.get("prerequisites"), marker),
    )


def parse_curriculum(raw_obj: object) -> CurriculumGraph:
    """Build a curriculum graph from a decoded JSON document."""
    if not isinstance(raw_obj, dict):
        raise ValueError("Curriculum root must be a JSON object.")
    raw = cast(dict[str, Any], raw_obj)

    marker = str(raw.get("milestone_marker") or DEFAULT_MILESTONE_MARKER)
    raw_milestones = raw.get("milestone_set", [])
    if not isinstance(raw_milestones, list):
        raise ValueError("Curriculum milestone_set must be a list.")
    raw_courses = raw.get("courses")
    if not isinstance(raw_courses, list):
        raise ValueError("Curriculum courses must be a list.")

    courses = []
    for item in cast(list[object], raw_courses):
        if not isinstance(item, dict):
            raise ValueError(f"Course entry must be an object: {item!r}")
        courses.append(_course_from_dict(cast(dict[str, Any], item), marker))
    milestones = [
        item.strip() for item in _string_items(cast(list[object], raw_milestones), "milestone_set") if item.strip()
    ]
    return CurriculumGraph(courses, milestones)


def load_curriculum() -> CurriculumGraph:
    """Load the bundled curriculum."""
    entry = resources.files(CONTENT_PACKAGE).joinpath(CURRICULUM_RESOURCE)
    return parse_curriculum(json.loads(entry.read_text(encoding="utf-8-sig")))


def load_curriculum_from_file(path: Path | str) -> CurriculumGraph:
    """Load a curriculum definition from a JSON file."""
    return parse_curriculum(json.loads(Path(path).read_text(encoding="utf-8-sig")))
