import pytest

from mallatrack.engine import ProgressEngine
from mallatrack.graph import CurriculumGraph
from mallatrack.models import Course, CourseStatus, ExplicitPrerequisites, UnknownCourseError


def test_chain_scenario_keeps_completion_sticky(chain_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(chain_graph)
    assert engine.status_of("A") is CourseStatus.AVAILABLE
    assert engine.status_of("B") is CourseStatus.LOCKED
    assert engine.missing_prerequisites_of("B") == ["A"]

    assert engine.toggle("A") is True
    assert engine.status_of("A") is CourseStatus.COMPLETED
    assert engine.status_of("B") is CourseStatus.AVAILABLE

    assert engine.toggle("B") is True
    assert engine.status_of("B") is CourseStatus.COMPLETED

    assert engine.toggle("A") is True
    assert engine.status_of("A") is CourseStatus.AVAILABLE
    assert engine.status_of("B") is CourseStatus.COMPLETED
    assert engine.completed() == frozenset({"B"})


def test_milestone_scenario(milestone_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(milestone_graph, {"A", "B"})
    assert engine.status_of("D") is CourseStatus.LOCKED
    assert engine.missing_prerequisites_of("D") == ["C"]

    assert engine.toggle("C") is True
    assert engine.status_of("D") is CourseStatus.AVAILABLE
    assert engine.missing_prerequisites_of("D") == []


def test_milestone_missing_preserves_milestone_order(milestone_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(milestone_graph, {"B"})
    assert engine.missing_prerequisites_of("D") == ["A", "C"]


def test_explicit_missing_preserves_list_order() -> None:
    graph = CurriculumGraph(
        [
            Course(id="x", name="X"),
            Course(id="y", name="Y"),
            Course(id="z", name="Z"),
            Course(id="target", name="T", prerequisites=ExplicitPrerequisites(("z", "x", "y"))),
        ]
    )
    engine = ProgressEngine(graph, {"x"})
    assert engine.status_of("target") is CourseStatus.LOCKED
    assert engine.missing_prerequisites_of("target") == ["z", "y"]


def test_empty_prerequisite_entries_are_ignored() -> None:
    graph = CurriculumGraph(
        [Course(id="a", name="A"), Course(id="b", name="B", prerequisites=ExplicitPrerequisites(("", "a", "")))]
    )
    engine = ProgressEngine(graph, {"a"})
    assert engine.status_of("b") is CourseStatus.AVAILABLE
    assert engine.missing_prerequisites_of("b") == []


def test_completed_wins_over_unmet_prerequisites(chain_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(chain_graph, {"B"})
    assert engine.status_of("B") is CourseStatus.COMPLETED
    assert engine.missing_prerequisites_of("B") == []


def test_courses_without_prerequisites_are_available(milestone_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(milestone_graph)
    for course in milestone_graph:
        if course.prerequisites == ExplicitPrerequisites(()):
            assert engine.status_of(course.id) is CourseStatus.AVAILABLE


def test_missing_is_non_empty_iff_locked(milestone_graph: CurriculumGraph) -> None:
    for completed in [set(), {"A"}, {"A", "B"}, {"A", "B", "C"}, {"D"}, {"C"}]:
        engine = ProgressEngine(milestone_graph, completed)
        for course_id in milestone_graph.course_ids():
            locked = engine.status_of(course_id) is CourseStatus.LOCKED
            assert bool(engine.missing_prerequisites_of(course_id)) == locked


def test_queries_are_idempotent(milestone_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(milestone_graph, {"A"})
    assert engine.statuses() == engine.statuses()
    assert engine.missing_prerequisites_of("D") == engine.missing_prerequisites_of("D")


def test_toggle_twice_restores_completion_set(milestone_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(milestone_graph, {"A", "B"})
    before = engine.completed()
    for course_id in ["A", "C"]:
        engine.toggle(course_id)
        engine.toggle(course_id)
        assert engine.completed() == before


def test_toggle_locked_course_is_rejected(milestone_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(milestone_graph, {"A"})
    assert engine.toggle("D") is False
    assert engine.toggle("C") is False
    assert engine.completed() == frozenset({"A"})


def test_unknown_course_raises(chain_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(chain_graph, {"ghost"})
    with pytest.raises(UnknownCourseError):
        engine.status_of("ghost")
    with pytest.raises(UnknownCourseError):
        engine.missing_prerequisites_of("ghost")
    with pytest.raises(UnknownCourseError):
        engine.toggle("ghost")
    assert engine.completed() == frozenset({"ghost"})


def test_seed_collection_is_copied(chain_graph: CurriculumGraph) -> None:
    seed = {"A"}
    engine = ProgressEngine(chain_graph, seed)
    engine.toggle("A")
    assert seed == {"A"}
    assert engine.is_completed("A") is False


def test_statuses_cover_every_course_in_order(milestone_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(milestone_graph, {"A", "B"})
    assert engine.statuses() == {
        "A": CourseStatus.COMPLETED,
        "B": CourseStatus.COMPLETED,
        "C": CourseStatus.AVAILABLE,
        "D": CourseStatus.LOCKED,
    }


def test_reset_clears_completions(milestone_graph: CurriculumGraph) -> None:
    engine = ProgressEngine(milestone_graph, {"A", "B"})
    engine.reset()
    assert engine.completed() == frozenset()
    assert engine.status_of("C") is CourseStatus.LOCKED
