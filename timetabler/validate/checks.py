from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Tuple, TypeVar

from ..config import SolverSettings
from ..data.curriculum import resolve_curriculum
from ..data.index import EntityIndex
from ..models import Lesson, ScheduleConstraints, Teacher

T = TypeVar("T")

# Caps assumed for lessons whose teacher is not in the school data
DEFAULT_MAX_DAILY = 6
DEFAULT_MAX_WEEKLY = 24


@dataclass(frozen=True)
class Conflict:
    type: str  # TEACHER_DOUBLE_BOOKED, ROOM_DOUBLE_BOOKED, CLASS_DOUBLE_BOOKED, TEACHER_MAX_DAILY, TEACHER_MAX_WEEKLY
    lesson_ids: Tuple[int, ...]  # indices into the checked lesson list
    description: str
    severity: str  # ERROR or WARNING

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": self.type,
            "lessonIds": list(self.lesson_ids),
            "description": self.description,
            "severity": self.severity,
        }


def _group(items: Iterable[Tuple[int, Lesson]], key: Callable[[Lesson], T]) -> Dict[T, List[int]]:
    out: Dict[T, List[int]] = defaultdict(list)
    for i, lesson in items:
        out[key(lesson)].append(i)
    return out


def detect_conflicts(
    lessons: List[Lesson], teachers: Mapping[str, Teacher] | None = None
) -> List[Conflict]:
    """Double-bookings (errors) and teacher cap overruns (warnings)."""
    teachers = teachers or {}
    conflicts: List[Conflict] = []
    indexed = list(enumerate(lessons))

    by_slot = _group(indexed, lambda l: l.busy_key)
    for (day, period_id), ids in by_slot.items():
        slot = f"{day}-{period_id}"
        in_slot = [(i, lessons[i]) for i in ids]
        checks = [
            ("TEACHER_DOUBLE_BOOKED", "Teacher", _group(in_slot, lambda l: l.teacher_id)),
            (
                "ROOM_DOUBLE_BOOKED",
                "Room",
                _group([(i, l) for i, l in in_slot if l.room_id], lambda l: l.room_id),
            ),
            ("CLASS_DOUBLE_BOOKED", "Class", _group(in_slot, lambda l: l.class_id)),
        ]
        for kind, label, groups in checks:
            for group in groups.values():
                if len(group) > 1:
                    conflicts.append(
                        Conflict(kind, tuple(group), f"{label} double-booked at slot {slot}", "ERROR")
                    )

    for (teacher_id, _), ids in _group(indexed, lambda l: (l.teacher_id, l.day_of_week)).items():
        t = teachers.get(teacher_id)
        max_daily = t.max_periods_per_day if t else DEFAULT_MAX_DAILY
        if len(ids) > max_daily:
            conflicts.append(
                Conflict(
                    "TEACHER_MAX_DAILY",
                    tuple(ids),
                    f"Teacher exceeds daily max ({len(ids)}/{max_daily})",
                    "WARNING",
                )
            )

    for teacher_id, ids in _group(indexed, lambda l: l.teacher_id).items():
        t = teachers.get(teacher_id)
        max_weekly = t.max_periods_per_week if t else DEFAULT_MAX_WEEKLY
        if len(ids) > max_weekly:
            conflicts.append(
                Conflict(
                    "TEACHER_MAX_WEEKLY",
                    tuple(ids),
                    f"Teacher exceeds weekly max ({len(ids)}/{max_weekly})",
                    "WARNING",
                )
            )
    return conflicts


def validate_all(
    lessons: List[Lesson],
    constraints: ScheduleConstraints,
    settings: SolverSettings | None = None,
) -> Dict[str, object]:
    """Check a lesson set against every hard scheduling rule.

    Works on solver output as well as on accepted external proposals.
    """
    settings = settings or SolverSettings()
    index = EntityIndex(constraints)
    report: Dict[str, object] = {}
    violations: Dict[str, List[str]] = defaultdict(list)

    # Collisions
    teacher_slots: Counter = Counter()
    room_slots: Counter = Counter()
    class_slots: Counter = Counter()
    for l in lessons:
        teacher_slots[(l.teacher_id, l.day_of_week, l.period_id)] += 1
        class_slots[(l.class_id, l.day_of_week, l.period_id)] += 1
        if l.room_id is not None:
            room_slots[(l.room_id, l.day_of_week, l.period_id)] += 1
    for rule, counter in (
        ("teacher_double_booked", teacher_slots),
        ("room_double_booked", room_slots),
        ("class_double_booked", class_slots),
    ):
        for (who, day, pid), c in counter.items():
            if c > 1:
                violations[rule].append(f"{who} day={day} {pid} x{c}")
    report["clash_count"] = sum(
        1 for counter in (teacher_slots, room_slots, class_slots) for c in counter.values() if c > 1
    )

    # Per-lesson eligibility and period rules
    for l in lessons:
        where = f"{l.class_id} day={l.day_of_week} {l.period_id}"
        cls = index.classes.get(l.class_id)
        teacher = index.teachers.get(l.teacher_id)
        period = index.periods.get(l.period_id)
        if cls is None or teacher is None or period is None or l.subject_id not in index.subjects:
            violations["unknown_reference"].append(where)
            continue
        if l.subject_id not in teacher.subjects:
            violations["unqualified_teacher"].append(f"{where} {l.teacher_id}/{l.subject_id}")
        if not teacher.can_teach_grade(cls.grade_id):
            violations["grade_ineligible"].append(f"{where} {l.teacher_id} grade={cls.grade_id}")
        if period.is_break:
            violations["break_period"].append(where)
        elif not period.applies_on(l.day_of_week):
            violations["inapplicable_day"].append(where)

    # One lesson of a subject per class per day
    per_day = Counter((l.class_id, l.day_of_week, l.subject_id) for l in lessons)
    for (cid, day, sid), c in per_day.items():
        if c > 1:
            violations["repeat_in_day"].append(f"{cid} day={day} {sid} x{c}")

    # Teacher caps
    per_teacher_day = Counter((l.teacher_id, l.day_of_week) for l in lessons)
    per_teacher_week = Counter(l.teacher_id for l in lessons)
    for (tid, day), c in per_teacher_day.items():
        t = index.teachers.get(tid)
        if t is not None and c > t.max_periods_per_day:
            violations["teacher_daily_cap"].append(f"{tid} day={day} {c}/{t.max_periods_per_day}")
    for tid, c in per_teacher_week.items():
        t = index.teachers.get(tid)
        if t is not None and c > t.max_periods_per_week:
            violations["teacher_weekly_cap"].append(f"{tid} {c}/{t.max_periods_per_week}")

    # Weekly targets: overruns are violations, shortfalls are unmet loads
    placed = Counter((l.class_id, l.subject_id) for l in lessons)
    unmet: Dict[str, int] = {}
    for cls in constraints.classes:
        for subject_id, target in resolve_curriculum(
            cls, constraints.subjects, constraints.grade_curriculum, index, settings
        ):
            have = placed.get((cls.id, subject_id), 0)
            if have > target:
                violations["weekly_cap_exceeded"].append(f"{cls.id}:{subject_id} {have}/{target}")
            elif have < target:
                unmet[f"{cls.id}:{subject_id}"] = target - have

    report["violations_by_rule"] = dict(violations)
    report["unmet_weekly_loads"] = unmet
    report["teacher_load"] = {t.id: per_teacher_week.get(t.id, 0) for t in constraints.teachers}
    return report
