from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List

from timetabler.models import (
    CurriculumEntry,
    Lesson,
    Period,
    Room,
    ScheduleConstraints,
    SchoolClass,
    Subject,
    Teacher,
)


def periods(n: int, **applicable: Iterable[int]) -> List[Period]:
    # periods(4, p3=[1]) -> p0..p3, p3 only on Tuesday
    return [
        Period(f"p{i}", f"P{i + 1}", i, False, tuple(applicable.get(f"p{i}", ())))
        for i in range(n)
    ]


def teacher(tid: str, subjects: Iterable[str], per_day: int = 4, per_week: int = 18, grades=()) -> Teacher:
    return Teacher(tid, tid.upper(), per_day, per_week, tuple(subjects), tuple(grades))


def subject(sid: str, category: str = "LANGUAGE", name: str | None = None) -> Subject:
    return Subject(sid, name or sid, category)


def classroom(rid: str, rtype: str = "CLASSROOM") -> Room:
    return Room(rid, rid, rtype, 30)


def curriculum(**grades: Dict[str, int]) -> Dict[str, List[CurriculumEntry]]:
    return {g: [CurriculumEntry(s, h) for s, h in entries.items()] for g, entries in grades.items()}


def school(
    *,
    classes: List[SchoolClass],
    teachers: List[Teacher],
    subjects: List[Subject],
    rooms: List[Room],
    periods: List[Period],
    days: List[int],
    grade_curriculum=None,
) -> ScheduleConstraints:
    return ScheduleConstraints(
        classes=classes,
        teachers=teachers,
        subjects=subjects,
        rooms=rooms,
        periods=periods,
        days=days,
        grade_curriculum=grade_curriculum,
    )


def assert_no_double_booking(lessons: List[Lesson]) -> None:
    for attr in ("teacher_id", "room_id", "class_id"):
        keys = Counter(
            (l.day_of_week, l.period_id, getattr(l, attr))
            for l in lessons
            if getattr(l, attr) is not None
        )
        dupes = [k for k, c in keys.items() if c > 1]
        assert not dupes, f"{attr} double-booked: {dupes}"
