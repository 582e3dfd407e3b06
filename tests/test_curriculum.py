from builders import curriculum, school, subject, teacher
from timetabler.config import SolverSettings
from timetabler.data.curriculum import Demand, resolve_curriculum
from timetabler.data.index import EntityIndex
from timetabler.models import SchoolClass


def _resolve(constraints, cls):
    index = EntityIndex(constraints)
    return resolve_curriculum(
        cls, constraints.subjects, constraints.grade_curriculum, index, SolverSettings()
    )


def test_grade_curriculum_is_used_verbatim() -> None:
    cls = SchoolClass("c1", "7A", 30, "g7")
    c = school(
        classes=[cls],
        teachers=[teacher("t1", ["math", "ar"])],
        subjects=[subject("math", "MATH"), subject("ar"), subject("hist", "HUMANITIES")],
        rooms=[],
        periods=[],
        days=[0],
        grade_curriculum=curriculum(g7={"math": 6, "ar": 1}),
    )
    assert _resolve(c, cls) == [Demand("math", 6), Demand("ar", 1)]


def test_empty_grade_curriculum_means_no_demands() -> None:
    cls = SchoolClass("c1", "7A", 30, "g7")
    c = school(
        classes=[cls],
        teachers=[teacher("t1", ["math"])],
        subjects=[subject("math", "MATH")],
        rooms=[],
        periods=[],
        days=[0],
        grade_curriculum={"g7": []},
    )
    assert _resolve(c, cls) == []


def test_fallback_hours_by_name_then_category_then_default() -> None:
    cls = SchoolClass("c1", "7A", 30, "g-unknown")
    subjects = [
        subject("s-ar", "LANGUAGE", "Arabic"),
        subject("s-lat", "LANGUAGE", "Latin"),
        subject("s-art", "ARTS", "Drawing"),
    ]
    c = school(
        classes=[cls],
        teachers=[teacher("t1", ["s-ar", "s-lat", "s-art"])],
        subjects=subjects,
        rooms=[],
        periods=[],
        days=[0],
        grade_curriculum=curriculum(g7={"s-ar": 1}),
    )
    assert _resolve(c, cls) == [Demand("s-ar", 4), Demand("s-lat", 3), Demand("s-art", 2)]


def test_scarcest_subject_first_with_stable_ties() -> None:
    cls = SchoolClass("c1", "7A", 30, "g7")
    c = school(
        classes=[cls],
        teachers=[
            teacher("t1", ["a", "b", "d"]),
            teacher("t2", ["a", "d"]),
            teacher("t3", ["a"], grades=["g8"]),
        ],
        subjects=[subject("a"), subject("b"), subject("c"), subject("d")],
        rooms=[],
        periods=[],
        days=[0],
        grade_curriculum=curriculum(g7={"a": 1, "b": 1, "c": 1, "d": 1}),
    )
    # a: 2 eligible (t3 is restricted to g8), b: 1, c: 0, d: 2
    assert [d.subject_id for d in _resolve(c, cls)] == ["c", "b", "a", "d"]


def test_classes_without_grade_count_every_qualified_teacher() -> None:
    cls = SchoolClass("c1", "7A")
    c = school(
        classes=[cls],
        teachers=[teacher("t1", ["a"], grades=["g8"]), teacher("t2", ["a"]), teacher("t3", ["b"])],
        subjects=[subject("a"), subject("b")],
        rooms=[],
        periods=[],
        days=[0],
    )
    index = EntityIndex(c)
    assert index.eligible_count("a", cls) == 2
    assert [d.subject_id for d in _resolve(c, cls)] == ["b", "a"]
