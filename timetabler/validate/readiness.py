from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Set

from ..models import ScheduleConstraints

# Assumed weekly load of one teacher when estimating staffing needs
DEFAULT_MAX_PER_WEEK = 18
# Room types that satisfy each specialised category
SPECIALISED_ROOMS = {
    "SCIENCE": (
        {"LAB_SCIENCE", "LAB", "LAB_PHYSICS", "LAB_BIOLOGY", "LAB_CHEMISTRY"},
        "Science Lab (needed for science subjects)",
    ),
    "PE": ({"GYM", "GYMNASIUM"}, "Gymnasium / Sports facility (needed for PE)"),
    "TECH": ({"LAB_COMPUTER"}, "Computer Lab (needed for technology/computer subjects)"),
}


@dataclass
class ReadinessIssue:
    type: str
    message: str
    details: List[str] = field(default_factory=list)


@dataclass
class SubjectEstimate:
    subject: str
    hours_needed: int
    teachers_needed: int
    teachers_available: int
    deficit: int


@dataclass
class ReadinessReport:
    ready: bool
    critical: List[ReadinessIssue]
    warnings: List[ReadinessIssue]
    estimates: List[SubjectEstimate]
    summary: Dict[str, object]

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def readiness_report(constraints: ScheduleConstraints) -> ReadinessReport:
    """Pre-flight staffing and room review of a school's data.

    ``ready`` is False only when some required subject has no qualified
    teacher at all; everything else is a warning the solver can live with.
    """
    classes = constraints.classes
    subjects = constraints.subjects
    rooms = constraints.rooms
    curriculum = constraints.grade_curriculum or {}
    critical: List[ReadinessIssue] = []
    warnings: List[ReadinessIssue] = []

    teachers_by_subject: Dict[str, Set[str]] = {}
    for t in constraints.teachers:
        for sid in t.subjects:
            teachers_by_subject.setdefault(sid, set()).add(t.id)
    subject_names = {s.id: s.name for s in subjects}

    # 1. Subject-teacher coverage
    if curriculum:
        uncovered: Dict[str, List[str]] = {}
        for grade_id, entries in curriculum.items():
            for e in entries:
                if not teachers_by_subject.get(e.subject_id):
                    names = uncovered.setdefault(grade_id, [])
                    name = subject_names.get(e.subject_id, e.subject_id)
                    if name not in names:
                        names.append(name)
        if uncovered:
            critical.append(
                ReadinessIssue(
                    "MISSING_TEACHERS",
                    "Some curriculum subjects have no assigned teachers",
                    [f"{g}: {', '.join(names)}" for g, names in uncovered.items()],
                )
            )
    else:
        # Fallback mode: every subject is taught to every class
        missing = [s.name for s in subjects if not teachers_by_subject.get(s.id)]
        if missing:
            critical.append(
                ReadinessIssue(
                    "MISSING_TEACHERS",
                    f"{len(missing)} subject(s) have no assigned teachers",
                    [f"{name}: no teacher assigned" for name in missing],
                )
            )

    # 2. Per-subject staffing estimate
    estimates: List[SubjectEstimate] = []
    for sub in subjects:
        available = len(teachers_by_subject.get(sub.id, ()))
        if curriculum:
            hours = 0
            for grade_id, entries in curriculum.items():
                entry = next((e for e in entries if e.subject_id == sub.id), None)
                if entry is not None:
                    hours += entry.hours_per_week * sum(1 for c in classes if c.grade_id == grade_id)
        else:
            hours = len(classes) * 2
        if hours == 0:
            continue
        needed = math.ceil(hours / DEFAULT_MAX_PER_WEEK)
        estimates.append(SubjectEstimate(sub.name, hours, needed, available, max(0, needed - available)))
    # Biggest deficit first; sort is stable
    estimates.sort(key=lambda e: -e.deficit)

    short = [
        f"{e.subject}: needs {e.teachers_needed} teacher(s) ({e.hours_needed}h/week), "
        f"has {e.teachers_available}, need {e.deficit} more"
        for e in estimates
        if e.deficit > 0
    ]
    if short:
        warnings.append(ReadinessIssue("SUBJECT_CAPACITY", "Some subjects need more teachers", short))

    # 3. Rooms
    room_types = {r.type for r in rooms}
    categories = {s.category for s in subjects}
    missing_rooms = [
        label
        for category, (types, label) in SPECIALISED_ROOMS.items()
        if category in categories and not room_types & types
    ]
    if missing_rooms:
        warnings.append(
            ReadinessIssue("MISSING_ROOMS", "Some specialized room types are missing", missing_rooms)
        )
    if len(rooms) < len(classes):
        warnings.append(
            ReadinessIssue(
                "INSUFFICIENT_ROOMS",
                f"Not enough rooms: {len(rooms)} available, {len(classes)} needed (1 per class)",
                [f"Need {len(classes) - len(rooms)} more room(s) to avoid scheduling gaps"],
            )
        )

    # 4. Overall teacher capacity
    capacity = sum(t.max_periods_per_week or DEFAULT_MAX_PER_WEEK for t in constraints.teachers)
    demand = sum(e.hours_needed for e in estimates)
    if demand > 0 and capacity < demand:
        warnings.append(
            ReadinessIssue(
                "CAPACITY_SHORTAGE",
                "Overall teacher capacity insufficient",
                [f"Available: {capacity}h/week, required: {demand}h/week (deficit: {demand - capacity}h)"],
            )
        )

    # 5. Classes falling back to default hours
    fallback = [c for c in classes if not c.grade_id or c.grade_id not in curriculum]
    if fallback:
        warnings.append(
            ReadinessIssue(
                "NO_CURRICULUM",
                f"{len(fallback)} class(es) have no grade curriculum defined",
                [f"{c.name}: will use fallback subject hours" for c in fallback],
            )
        )

    return ReadinessReport(
        ready=not critical,
        critical=critical,
        warnings=warnings,
        estimates=estimates,
        summary={
            "total_classes": len(classes),
            "total_teachers": len(constraints.teachers),
            "total_teachers_needed": sum(e.teachers_needed for e in estimates),
            "total_subjects": len(subjects),
            "total_rooms": len(rooms),
            "classrooms_needed": len(classes),
            "teacher_capacity": (
                f"{capacity}h available / {demand}h needed" if demand > 0 else f"{capacity}h available"
            ),
        },
    )
