from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import List

from ..models import Lesson, ScheduleConstraints, Timetable

HEADER = ["Class", "Day", "Period", "Subject", "Teacher", "Room"]
DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def csv_blocks(lessons: List[Lesson], constraints: ScheduleConstraints) -> str:
    """One block per class, a header row each, blank line between blocks.

    Unfilled teaching slots are written with empty subject/teacher/room;
    breaks are written as ``Break``. Periods that do not run on a day are
    left out.
    """
    tt = Timetable.from_lessons(lessons)
    subjects = {s.id: s.name for s in constraints.subjects}
    teachers = {t.id: t.name for t in constraints.teachers}
    rooms = {r.id: r.name for r in constraints.rooms}
    periods = sorted(constraints.periods, key=lambda p: p.order)

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    for cls in constraints.classes:
        writer.writerow(HEADER)
        for day in sorted(constraints.days):
            day_name = DAY_NAMES[day]
            for p in periods:
                if not p.applies_on(day):
                    continue
                if p.is_break:
                    writer.writerow([cls.name, day_name, p.name, "Break", "", ""])
                    continue
                a = tt.get(cls.id, day, p.id)
                if a is None:
                    # Leave empty if not placed
                    writer.writerow([cls.name, day_name, p.name, "", "", ""])
                else:
                    writer.writerow(
                        [
                            cls.name,
                            day_name,
                            p.name,
                            subjects.get(a.subject_id, a.subject_id),
                            teachers.get(a.teacher_id, a.teacher_id),
                            rooms.get(a.room_id, a.room_id) if a.room_id else "",
                        ]
                    )
        buf.write("\n")  # blank line
    return buf.getvalue()


def write_csv_blocks(text: str, outputs_dir: Path) -> None:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    with (outputs_dir / "timetable.csv").open("w", encoding="utf-8") as f:
        f.write(text)
