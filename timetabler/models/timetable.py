from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from .lesson import Lesson


Key = Tuple[str, int, str]  # (class_id, day, period_id)


@dataclass
class Timetable:
    """Lessons indexed by class cell, for grid-shaped rendering."""

    cells: Dict[Key, Lesson] = field(default_factory=dict)

    @classmethod
    def from_lessons(cls, lessons: Iterable[Lesson]) -> "Timetable":
        tt = cls()
        for lesson in lessons:
            tt.place(lesson)
        return tt

    def place(self, lesson: Lesson) -> None:
        self.cells[(lesson.class_id, lesson.day_of_week, lesson.period_id)] = lesson

    def get(self, class_id: str, day: int, period_id: str) -> Lesson | None:
        return self.cells.get((class_id, day, period_id))
