from builders import teacher
from timetabler.data.registry import ResourceTracker
from timetabler.models import Lesson


def test_assign_updates_busy_sets_and_counters() -> None:
    tracker = ResourceTracker([teacher("t1", ["s1"], per_day=2, per_week=3)])
    lesson = Lesson("c1", "s1", "t1", "r1", "p0", 2)
    assert tracker.is_teacher_free("t1", 2, "p0")
    tracker.assign(lesson)

    assert not tracker.is_teacher_free("t1", 2, "p0")
    assert not tracker.is_room_free("r1", 2, "p0")
    assert not tracker.is_class_free("c1", 2, "p0")
    assert tracker.is_teacher_free("t1", 2, "p1")
    assert tracker.is_room_free("r1", 3, "p0")
    assert tracker.class_subject_day_count("c1", 2, "s1") == 1
    assert tracker.class_subject_day_count("c1", 3, "s1") == 0
    assert tracker.class_subject_week_count("c1", "s1") == 1
    assert tracker.last_subject("c1", 2) == "s1"
    assert tracker.last_subject("c1", 3) is None
    assert tracker.week_usage("t1") == 1


def test_teacher_caps() -> None:
    tracker = ResourceTracker([teacher("t1", ["s1"], per_day=2, per_week=3)])
    tracker.assign(Lesson("c1", "s1", "t1", None, "p0", 0))
    assert tracker.can_teacher_work("t1", 0)
    tracker.assign(Lesson("c2", "s1", "t1", None, "p1", 0))
    assert not tracker.can_teacher_work("t1", 0), "daily cap reached"
    assert tracker.can_teacher_work("t1", 1)
    tracker.assign(Lesson("c1", "s1", "t1", None, "p0", 1))
    assert not tracker.can_teacher_work("t1", 1), "weekly cap reached"


def test_roomless_lesson_leaves_rooms_untouched() -> None:
    tracker = ResourceTracker([teacher("t1", ["s1"])])
    tracker.assign(Lesson("c1", "s1", "t1", None, "p0", 0))
    assert not tracker.room_busy.get((0, "p0"))
