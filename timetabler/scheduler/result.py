from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..data.registry import ResourceTracker
from ..models import Lesson, ScheduleConstraints


@dataclass
class SolverStats:
    total_slots: int = 0
    filled_slots: int = 0
    empty_slots: int = 0
    conflicts_avoided: int = 0
    teacher_utilization: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {
            "totalSlots": self.total_slots,
            "filledSlots": self.filled_slots,
            "emptySlots": self.empty_slots,
            "conflictsAvoided": self.conflicts_avoided,
            "teacherUtilization": dict(self.teacher_utilization),
        }


@dataclass
class SolverResult:
    lessons: List[Lesson] = field(default_factory=list)
    stats: SolverStats = field(default_factory=SolverStats)

    def to_dict(self) -> Dict[str, object]:
        return {
            "lessons": [lesson.to_dict() for lesson in self.lessons],
            "stats": self.stats.to_dict(),
        }


def slots_per_class(constraints: ScheduleConstraints) -> int:
    # Teaching slots a class can actually use across the week
    return sum(
        1 for day in constraints.days for p in constraints.teaching_periods() if p.applies_on(day)
    )


def assemble_result(
    constraints: ScheduleConstraints,
    lessons: List[Lesson],
    tracker: ResourceTracker,
    conflicts_avoided: int,
) -> SolverResult:
    total = len(constraints.classes) * slots_per_class(constraints)
    # Keyed by name: teachers sharing a name collapse to the last one listed
    utilization = {t.name: tracker.week_usage(t.id) for t in constraints.teachers}
    return SolverResult(
        lessons=list(lessons),
        stats=SolverStats(
            total_slots=total,
            filled_slots=len(lessons),
            empty_slots=total - len(lessons),
            conflicts_avoided=conflicts_avoided,
            teacher_utilization=utilization,
        ),
    )
