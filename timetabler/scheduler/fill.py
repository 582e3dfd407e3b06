from __future__ import annotations

import logging
from typing import List

from ..config import SolverSettings
from ..data.curriculum import build_need_lists
from ..data.index import EntityIndex
from ..data.registry import ResourceTracker
from ..models import Lesson, ScheduleConstraints
from .result import SolverResult, assemble_result
from .score import best_candidate
from .shuffle import shuffle_det, slot_seed

logger = logging.getLogger(__name__)


def solve_timetable(
    constraints: ScheduleConstraints, settings: SolverSettings | None = None
) -> SolverResult:
    """Greedy slot-first timetable construction.

    Walks days ascending, then teaching periods in order, then classes in a
    seeded shuffle, committing the best-scoring feasible lesson for each class
    that is still free in the slot. A slot with no feasible candidate stays
    empty; nothing is revisited.
    """
    settings = settings or SolverSettings()
    if constraints.is_empty():
        logger.info("Nothing to schedule: classes, teachers, subjects, periods or days missing")
        return SolverResult()

    index = EntityIndex(constraints)
    tracker = ResourceTracker(constraints.teachers)
    needs = build_need_lists(
        constraints.classes, constraints.subjects, constraints.grade_curriculum, index, settings
    )
    teaching_periods = constraints.teaching_periods()

    lessons: List[Lesson] = []
    conflicts_avoided = 0
    for day in sorted(constraints.days):
        for p_idx, period in enumerate(teaching_periods):
            if not period.applies_on(day):
                continue
            for cls in shuffle_det(constraints.classes, slot_seed(day, p_idx)):
                if not tracker.is_class_free(cls.id, day, period.id):
                    continue
                best, rejected = best_candidate(
                    cls, needs[cls.id], day, period, p_idx, index, tracker, settings
                )
                conflicts_avoided += rejected
                if best is None:
                    logger.debug(f"Empty {cls.id} day={day} {period.id}")
                    continue
                lessons.append(best.lesson)
                tracker.assign(best.lesson)
                logger.debug(
                    f"Fill {cls.id} day={day} {period.id} -> {best.lesson.subject_id}"
                    f" by {best.lesson.teacher_id} in {best.lesson.room_id} (score {best.score})"
                )

    result = assemble_result(constraints, lessons, tracker, conflicts_avoided)
    logger.info(
        f"Solved: {result.stats.filled_slots}/{result.stats.total_slots} slots filled, "
        f"{result.stats.conflicts_avoided} conflicts avoided"
    )
    return result
