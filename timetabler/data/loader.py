from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..config import SolverSettings
from ..errors import ConstraintsError
from ..models import (
    CurriculumEntry,
    Period,
    Room,
    ScheduleConstraints,
    SchoolClass,
    Subject,
    Teacher,
)

logger = logging.getLogger(__name__)


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def parse_applicable_days(value: Any) -> List[int]:
    """Periods store applicableDays either as a list or as a JSON string like "[0,1,2]".

    Missing, empty or unparseable values mean "all days" and come back as [].
    """
    if not value:
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return []
    if not isinstance(value, list):
        return []
    return [d for d in value if isinstance(d, int) and not isinstance(d, bool)]


def _records(doc: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    raw = doc.get(key) or []
    if not isinstance(raw, list):
        raise ConstraintsError(key, "expected a list")
    for i, rec in enumerate(raw):
        if not isinstance(rec, dict):
            raise ConstraintsError(f"{key}[{i}]", "expected an object")
    return raw


def _id(rec: Dict[str, Any], where: str) -> str:
    v = rec.get("id")
    if v is None or v == "":
        raise ConstraintsError(where, "missing id")
    return str(v)


def _int(rec: Dict[str, Any], key: str, default: int, where: str) -> int:
    v = rec.get(key)
    if v is None:
        return default
    if isinstance(v, bool):
        raise ConstraintsError(f"{where}.{key}", f"expected an integer, got {v!r}")
    try:
        return int(v)
    except (TypeError, ValueError):
        raise ConstraintsError(f"{where}.{key}", f"expected an integer, got {v!r}") from None


def _bool(rec: Dict[str, Any], key: str, where: str) -> bool:
    v = rec.get(key)
    if v is None:
        return False
    if not isinstance(v, bool):
        raise ConstraintsError(f"{where}.{key}", f"expected true or false, got {v!r}")
    return v


def _str_list(rec: Dict[str, Any], key: str, where: str) -> tuple:
    v = rec.get(key) or []
    if not isinstance(v, list):
        raise ConstraintsError(f"{where}.{key}", "expected a list")
    return tuple(str(x) for x in v)


def constraints_from_dict(
    doc: Dict[str, Any], settings: SolverSettings | None = None
) -> ScheduleConstraints:
    if not isinstance(doc, dict):
        raise ConstraintsError("$", "expected a JSON object")
    s = settings or SolverSettings()

    classes = []
    for i, c in enumerate(_records(doc, "classes")):
        where = f"classes[{i}]"
        grade = c.get("gradeId")
        classes.append(
            SchoolClass(
                id=_id(c, where),
                name=str(c.get("name", "")),
                capacity=_int(c, "capacity", s.capacity, where),
                grade_id=str(grade) if grade else None,
            )
        )

    teachers = []
    for i, t in enumerate(_records(doc, "teachers")):
        where = f"teachers[{i}]"
        teachers.append(
            Teacher(
                id=_id(t, where),
                name=str(t.get("name", "")),
                max_periods_per_day=_int(t, "maxPeriodsPerDay", s.max_periods_per_day, where),
                max_periods_per_week=_int(t, "maxPeriodsPerWeek", s.max_periods_per_week, where),
                subjects=_str_list(t, "subjects", where),
                grades=_str_list(t, "grades", where),
            )
        )

    subjects = []
    for i, sub in enumerate(_records(doc, "subjects")):
        where = f"subjects[{i}]"
        pday = sub.get("pedagogicDay")
        subjects.append(
            Subject(
                id=_id(sub, where),
                name=str(sub.get("name", "")),
                category=str(sub.get("category", "")),
                pedagogic_day=_int(sub, "pedagogicDay", 0, where) if pday is not None else None,
            )
        )

    rooms = []
    for i, r in enumerate(_records(doc, "rooms")):
        where = f"rooms[{i}]"
        rooms.append(
            Room(
                id=_id(r, where),
                name=str(r.get("name", "")),
                type=str(r.get("type") or s.default_room_type),
                capacity=_int(r, "capacity", s.capacity, where),
            )
        )

    periods = []
    for i, p in enumerate(_records(doc, "periods")):
        where = f"periods[{i}]"
        periods.append(
            Period(
                id=_id(p, where),
                name=str(p.get("name", "")),
                order=_int(p, "order", i, where),
                is_break=_bool(p, "isBreak", where),
                applicable_days=tuple(parse_applicable_days(p.get("applicableDays"))),
            )
        )

    raw_days = doc.get("days")
    if raw_days is None:
        days = list(s.school_days)
    elif isinstance(raw_days, str):
        # schools persist their day set as a JSON string
        try:
            days = json.loads(raw_days)
        except json.JSONDecodeError:
            raise ConstraintsError("days", f"unparseable day list {raw_days!r}") from None
    else:
        days = raw_days
    if not isinstance(days, list) or not all(
        isinstance(d, int) and not isinstance(d, bool) and 0 <= d <= 6 for d in days
    ):
        raise ConstraintsError("days", "expected a list of day indices 0..6")

    curriculum = None
    raw_curr = doc.get("gradeCurriculum")
    if raw_curr:
        if not isinstance(raw_curr, dict):
            raise ConstraintsError("gradeCurriculum", "expected an object keyed by gradeId")
        curriculum = {}
        for grade_id, entries in raw_curr.items():
            where = f"gradeCurriculum.{grade_id}"
            if not isinstance(entries, list):
                raise ConstraintsError(where, "expected a list")
            rows = []
            for j, e in enumerate(entries):
                if not isinstance(e, dict) or not e.get("subjectId"):
                    raise ConstraintsError(f"{where}[{j}]", "expected {subjectId, hoursPerWeek}")
                rows.append(
                    CurriculumEntry(
                        subject_id=str(e["subjectId"]),
                        hours_per_week=_int(e, "hoursPerWeek", 0, f"{where}[{j}]"),
                    )
                )
            curriculum[str(grade_id)] = rows

    return ScheduleConstraints(
        classes=classes,
        teachers=teachers,
        subjects=subjects,
        rooms=rooms,
        periods=periods,
        days=list(days),
        grade_curriculum=curriculum,
    )


def load_constraints(path: Path, settings: SolverSettings | None = None) -> ScheduleConstraints:
    try:
        doc = load_json(path)
    except json.JSONDecodeError as exc:
        raise ConstraintsError(str(path), f"invalid JSON: {exc}") from exc
    constraints = constraints_from_dict(doc, settings)
    logger.info(
        f"Loaded {path.name}: {len(constraints.classes)} classes, {len(constraints.teachers)} teachers, "
        f"{len(constraints.subjects)} subjects, {len(constraints.rooms)} rooms, "
        f"{len(constraints.periods)} periods, days={constraints.days}"
    )
    return constraints
