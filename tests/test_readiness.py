from builders import classroom, curriculum, periods, school, subject, teacher
from timetabler.models import SchoolClass
from timetabler.validate.readiness import readiness_report


def _types(issues):
    return [i.type for i in issues]


def test_sample_school_is_ready(sample_constraints) -> None:
    report = readiness_report(sample_constraints)
    assert report.ready
    assert report.critical == []
    # 8A has no curriculum for its grade
    assert _types(report.warnings) == ["NO_CURRICULUM"]
    assert report.warnings[0].details == ["8A: will use fallback subject hours"]
    assert report.summary["total_classes"] == 3
    assert report.summary["total_rooms"] == 5


def test_curriculum_subject_without_teacher_is_critical() -> None:
    c = school(
        classes=[SchoolClass("c1", "1A", 30, "g1")],
        teachers=[teacher("t1", ["s1"])],
        subjects=[subject("s1", name="Arabic"), subject("s2", name="Music")],
        rooms=[classroom("r1")],
        periods=periods(4),
        days=[0, 1],
        grade_curriculum=curriculum(g1={"s1": 3, "s2": 1}),
    )
    report = readiness_report(c)
    assert not report.ready
    assert _types(report.critical) == ["MISSING_TEACHERS"]
    assert report.critical[0].details == ["g1: Music"]


def test_fallback_mode_checks_every_subject() -> None:
    c = school(
        classes=[SchoolClass("c1", "1A")],
        teachers=[teacher("t1", ["s1"])],
        subjects=[subject("s1"), subject("s2", name="Music")],
        rooms=[classroom("r1")],
        periods=periods(4),
        days=[0, 1],
    )
    report = readiness_report(c)
    assert not report.ready
    assert report.critical[0].message == "1 subject(s) have no assigned teachers"
    assert report.critical[0].details == ["Music: no teacher assigned"]


def test_room_and_capacity_warnings() -> None:
    c = school(
        classes=[SchoolClass("c1", "1A"), SchoolClass("c2", "1B")],
        teachers=[teacher("t1", ["s1"], per_week=2)],
        subjects=[subject("s1", "SCIENCE", name="Physics")],
        rooms=[classroom("r1")],
        periods=periods(4),
        days=[0, 1],
    )
    report = readiness_report(c)
    assert report.ready
    assert _types(report.warnings) == [
        "MISSING_ROOMS",
        "INSUFFICIENT_ROOMS",
        "CAPACITY_SHORTAGE",
        "NO_CURRICULUM",
    ]
    assert report.warnings[0].details == ["Science Lab (needed for science subjects)"]
    assert report.summary["teacher_capacity"] == "2h available / 4h needed"
    est = report.estimates[0]
    assert (est.hours_needed, est.teachers_needed, est.deficit) == (4, 1, 0)
    assert report.to_dict()["warnings"][1]["type"] == "INSUFFICIENT_ROOMS"
