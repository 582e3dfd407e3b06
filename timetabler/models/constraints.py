from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .grade import CurriculumEntry, SchoolClass
from .period import Period
from .room import Room
from .subject import Subject
from .teacher import Teacher


@dataclass
class ScheduleConstraints:
    classes: List[SchoolClass] = field(default_factory=list)
    teachers: List[Teacher] = field(default_factory=list)
    subjects: List[Subject] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)
    periods: List[Period] = field(default_factory=list)
    days: List[int] = field(default_factory=list)
    # gradeId -> curriculum; None when the school defines no curriculum at all
    grade_curriculum: Dict[str, List[CurriculumEntry]] | None = None

    def teaching_periods(self) -> List[Period]:
        return sorted((p for p in self.periods if not p.is_break), key=lambda p: p.order)

    def is_empty(self) -> bool:
        return not (self.classes and self.teachers and self.subjects and self.periods and self.days)
