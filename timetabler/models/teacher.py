from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Teacher:
    id: str
    name: str
    max_periods_per_day: int
    max_periods_per_week: int
    subjects: Tuple[str, ...]
    grades: Tuple[str, ...] = ()  # empty -> may teach any grade

    def can_teach_grade(self, grade_id: str | None) -> bool:
        if not grade_id or not self.grades:
            return True
        return grade_id in self.grades
