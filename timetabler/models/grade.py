from dataclasses import dataclass


@dataclass(frozen=True)
class SchoolClass:
    id: str
    name: str
    capacity: int = 30
    grade_id: str | None = None


@dataclass(frozen=True)
class CurriculumEntry:
    subject_id: str
    hours_per_week: int
