from __future__ import annotations

from typing import Dict, List

from ..models import Period, Room, ScheduleConstraints, SchoolClass, Subject, Teacher


class EntityIndex:
    def __init__(self, constraints: ScheduleConstraints):
        self.classes: Dict[str, SchoolClass] = {c.id: c for c in constraints.classes}
        self.teachers: Dict[str, Teacher] = {t.id: t for t in constraints.teachers}
        self.subjects: Dict[str, Subject] = {s.id: s for s in constraints.subjects}
        self.rooms: Dict[str, Room] = {r.id: r for r in constraints.rooms}
        self.periods: Dict[str, Period] = {p.id: p for p in constraints.periods}
        self.room_list: List[Room] = list(constraints.rooms)

        # Subject -> qualified teachers, input order; grade and availability are
        # slot/class dependent and checked at assignment time.
        self.teachers_by_subject: Dict[str, List[Teacher]] = {}
        for sub in constraints.subjects:
            self.teachers_by_subject[sub.id] = [
                t for t in constraints.teachers if sub.id in t.subjects
            ]

    def candidates_for(self, subject_id: str) -> List[Teacher]:
        return self.teachers_by_subject.get(subject_id, [])

    def eligible_count(self, subject_id: str, cls: SchoolClass) -> int:
        qualified = self.candidates_for(subject_id)
        if not cls.grade_id:
            return len(qualified)
        return sum(1 for t in qualified if t.can_teach_grade(cls.grade_id))

    def has_rooms(self) -> bool:
        return bool(self.room_list)
