from __future__ import annotations

import logging
from typing import Any, Iterable, List, Set, Tuple

from ..models import Lesson, ScheduleConstraints

logger = logging.getLogger(__name__)


def _known(value: Any, ids: Set[str]) -> bool:
    return isinstance(value, str) and value in ids


def validate_lessons(
    candidates: Iterable[Any], constraints: ScheduleConstraints
) -> Tuple[List[Lesson], int]:
    """Referential checks for externally proposed lessons.

    Every id must name an existing entity (period ids must be teaching
    periods), roomId must be present but may be null, and dayOfWeek must be a
    configured school day. This does not look for double-bookings or cap
    violations; run ``validate.checks.detect_conflicts`` on the accepted
    lessons for that.
    """
    class_ids = {c.id for c in constraints.classes}
    subject_ids = {s.id for s in constraints.subjects}
    teacher_ids = {t.id for t in constraints.teachers}
    room_ids = {r.id for r in constraints.rooms}
    period_ids = {p.id for p in constraints.periods if not p.is_break}
    days = set(constraints.days)

    valid: List[Lesson] = []
    skipped = 0
    for raw in candidates:
        if not isinstance(raw, dict):
            skipped += 1
            continue
        room_id = raw.get("roomId")
        day = raw.get("dayOfWeek")
        if (
            _known(raw.get("classId"), class_ids)
            and _known(raw.get("subjectId"), subject_ids)
            and _known(raw.get("teacherId"), teacher_ids)
            and "roomId" in raw
            and (room_id is None or _known(room_id, room_ids))
            and _known(raw.get("periodId"), period_ids)
            and isinstance(day, int)
            and not isinstance(day, bool)
            and day in days
        ):
            valid.append(
                Lesson(
                    class_id=raw["classId"],
                    subject_id=raw["subjectId"],
                    teacher_id=raw["teacherId"],
                    room_id=room_id,
                    period_id=raw["periodId"],
                    day_of_week=day,
                )
            )
        else:
            skipped += 1
    if skipped:
        logger.warning(f"Dropped {skipped} proposed lesson(s) with unknown references")
    return valid, skipped
