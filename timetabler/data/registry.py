from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Set, Tuple

from ..models import BusyKey, Lesson, Teacher


class ResourceTracker:
    """Occupancy and usage state for a single solver run.

    Every read reflects all lessons committed so far, so classes handled later
    in the same slot see the teachers and rooms taken by earlier ones.
    """

    def __init__(self, teachers: Iterable[Teacher]):
        self.teachers: Dict[str, Teacher] = {t.id: t for t in teachers}
        # (day, period_id) -> occupants
        self.teacher_busy: Dict[BusyKey, Set[str]] = defaultdict(set)
        self.room_busy: Dict[BusyKey, Set[str]] = defaultdict(set)
        self.class_busy: Dict[BusyKey, Set[str]] = defaultdict(set)
        # teacher -> per-day counts (index = day) and weekly total
        self.teacher_day_usage: Dict[str, List[int]] = {tid: [0] * 7 for tid in self.teachers}
        self.teacher_week_usage: Counter = Counter({tid: 0 for tid in self.teachers})
        # class -> subject -> count; (class, day) -> subject -> count
        self.class_subject_week: Dict[str, Counter] = defaultdict(Counter)
        self.class_subject_day: Dict[Tuple[str, int], Counter] = defaultdict(Counter)
        self.class_last_subject: Dict[Tuple[str, int], str] = {}

    def is_teacher_free(self, teacher_id: str, day: int, period_id: str) -> bool:
        return teacher_id not in self.teacher_busy.get((day, period_id), ())

    def is_room_free(self, room_id: str, day: int, period_id: str) -> bool:
        return room_id not in self.room_busy.get((day, period_id), ())

    def is_class_free(self, class_id: str, day: int, period_id: str) -> bool:
        return class_id not in self.class_busy.get((day, period_id), ())

    def can_teacher_work(self, teacher_id: str, day: int) -> bool:
        t = self.teachers[teacher_id]
        day_use = self.teacher_day_usage[teacher_id][day]
        return day_use < t.max_periods_per_day and self.teacher_week_usage[teacher_id] < t.max_periods_per_week

    def week_usage(self, teacher_id: str) -> int:
        return self.teacher_week_usage[teacher_id]

    def class_subject_day_count(self, class_id: str, day: int, subject_id: str) -> int:
        return self.class_subject_day.get((class_id, day), Counter())[subject_id]

    def class_subject_week_count(self, class_id: str, subject_id: str) -> int:
        return self.class_subject_week.get(class_id, Counter())[subject_id]

    def last_subject(self, class_id: str, day: int) -> str | None:
        return self.class_last_subject.get((class_id, day))

    def assign(self, lesson: Lesson) -> None:
        key = lesson.busy_key
        day = lesson.day_of_week
        self.teacher_busy[key].add(lesson.teacher_id)
        if lesson.room_id is not None:
            self.room_busy[key].add(lesson.room_id)
        self.class_busy[key].add(lesson.class_id)

        self.teacher_day_usage[lesson.teacher_id][day] += 1
        self.teacher_week_usage[lesson.teacher_id] += 1

        self.class_subject_week[lesson.class_id][lesson.subject_id] += 1
        self.class_subject_day[(lesson.class_id, day)][lesson.subject_id] += 1
        self.class_last_subject[(lesson.class_id, day)] = lesson.subject_id
