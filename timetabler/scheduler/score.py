from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

from ..config import SolverSettings
from ..data.curriculum import Demand
from ..data.index import EntityIndex
from ..data.registry import ResourceTracker
from ..models import Lesson, Period, Room, SchoolClass, Teacher

MORNING_CATEGORIES = {"MATH", "SCIENCE"}
MORNING_PERIODS = 3  # period indices 0..2
MORNING_BONUS = 3
CONSECUTIVE_PENALTY = 20


class Candidate(NamedTuple):
    score: int
    lesson: Lesson


def score_candidate(
    *,
    eligible_count: int,
    target_hours: int,
    week_count: int,
    category: str,
    period_index: int,
    consecutive: bool,
    teacher_load: int,
) -> int:
    s = 0
    # Scarce subjects first: fewer free teachers -> higher priority
    s += (10 - eligible_count) * 10
    # More remaining hours -> higher priority
    s += (target_hours - week_count) * 5
    if category in MORNING_CATEGORIES and period_index < MORNING_PERIODS:
        s += MORNING_BONUS
    if consecutive:
        s -= CONSECUTIVE_PENALTY
    # Prefer less loaded teachers
    s -= teacher_load
    return s


def eligible_teachers(
    index: EntityIndex,
    tracker: ResourceTracker,
    cls: SchoolClass,
    subject_id: str,
    day: int,
    period_id: str,
) -> List[Teacher]:
    return [
        t
        for t in index.candidates_for(subject_id)
        if tracker.is_teacher_free(t.id, day, period_id)
        and tracker.can_teacher_work(t.id, day)
        and t.can_teach_grade(cls.grade_id)
    ]


def least_loaded(teachers: Sequence[Teacher], tracker: ResourceTracker) -> Teacher:
    # min() keeps the first of equally loaded teachers
    return min(teachers, key=lambda t: tracker.week_usage(t.id))


def choose_room(
    rooms: Sequence[Room],
    preferred_types: Sequence[str],
    tracker: ResourceTracker,
    day: int,
    period_id: str,
) -> Room | None:
    for room_type in preferred_types:
        for r in rooms:
            if r.type == room_type and tracker.is_room_free(r.id, day, period_id):
                return r
    # Any free room of any type, even a gym for a non-PE subject.
    for r in rooms:
        if tracker.is_room_free(r.id, day, period_id):
            return r
    return None


def best_candidate(
    cls: SchoolClass,
    demands: Sequence[Demand],
    day: int,
    period: Period,
    period_index: int,
    index: EntityIndex,
    tracker: ResourceTracker,
    settings: SolverSettings,
) -> Tuple[Candidate | None, int]:
    """Best (subject, teacher, room) for a class in one slot.

    Returns the winning candidate (or None) and the number of subjects rejected
    for want of a teacher or a room.
    """
    best: Candidate | None = None
    rejected = 0
    for subject_id, target in demands:
        sub = index.subjects.get(subject_id)
        if sub is None:
            continue
        week_count = tracker.class_subject_week_count(cls.id, subject_id)
        if week_count >= target:
            continue
        if tracker.class_subject_day_count(cls.id, day, subject_id) >= 1:
            continue
        if sub.category == "PE" and period_index == 0:
            continue

        teachers = eligible_teachers(index, tracker, cls, subject_id, day, period.id)
        if not teachers:
            rejected += 1
            continue
        teacher = least_loaded(teachers, tracker)

        room_id: str | None = None
        if index.has_rooms():
            room = choose_room(
                index.room_list, settings.room_types_for(sub.category), tracker, day, period.id
            )
            if room is None:
                rejected += 1
                continue
            room_id = room.id

        sc = score_candidate(
            eligible_count=len(teachers),
            target_hours=target,
            week_count=week_count,
            category=sub.category,
            period_index=period_index,
            consecutive=tracker.last_subject(cls.id, day) == subject_id,
            teacher_load=tracker.week_usage(teacher.id),
        )
        if best is None or sc > best.score:
            best = Candidate(
                sc,
                Lesson(
                    class_id=cls.id,
                    subject_id=subject_id,
                    teacher_id=teacher.id,
                    room_id=room_id,
                    period_id=period.id,
                    day_of_week=day,
                ),
            )
    return best, rejected
