from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mallatrack.graph import CurriculumGraph  # noqa: E402
from mallatrack.models import Course, ExplicitPrerequisites, MilestonePrerequisites  # noqa: E402


@pytest.fixture
def chain_graph() -> CurriculumGraph:
    """A has no prerequisites, B requires A."""
    return CurriculumGraph(
        [
            Course(id="A", name="Course A"),
            Course(id="B", name="Course B", prerequisites=ExplicitPrerequisites(("A",))),
        ]
    )


@pytest.fixture
def milestone_graph() -> CurriculumGraph:
    """Milestone set A, B, C; D requires the whole milestone set."""
    return CurriculumGraph(
        [
            Course(id="A", name="Course A", semester=1),
            Course(id="B", name="Course B", semester=1),
            Course(id="C", name="Course C", semester=2, prerequisites=ExplicitPrerequisites(("A", "B"))),
            Course(id="D", name="Course D", semester=3, prerequisites=MilestonePrerequisites()),
        ],
        ["A", "B", "C"],
    )
