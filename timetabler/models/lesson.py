from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

BusyKey = Tuple[int, str]  # (day, period_id)


@dataclass(frozen=True)
class Lesson:
    class_id: str
    subject_id: str
    teacher_id: str
    room_id: str | None
    period_id: str
    day_of_week: int

    @property
    def busy_key(self) -> BusyKey:
        return (self.day_of_week, self.period_id)

    def to_dict(self) -> Dict[str, object]:
        return {
            "classId": self.class_id,
            "subjectId": self.subject_id,
            "teacherId": self.teacher_id,
            "roomId": self.room_id,
            "periodId": self.period_id,
            "dayOfWeek": self.day_of_week,
        }
