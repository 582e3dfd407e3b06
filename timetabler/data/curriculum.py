from __future__ import annotations

from typing import Dict, List, NamedTuple

from ..config import SolverSettings
from ..models import CurriculumEntry, SchoolClass, Subject
from .index import EntityIndex


class Demand(NamedTuple):
    subject_id: str
    hours: int


def resolve_curriculum(
    cls: SchoolClass,
    subjects: List[Subject],
    grade_curriculum: Dict[str, List[CurriculumEntry]] | None,
    index: EntityIndex,
    settings: SolverSettings,
) -> List[Demand]:
    """Weekly demands for one class, scarcest subject first.

    A grade curriculum (even an empty one) wins over the fallback tables. The
    sort is stable, so equally scarce subjects keep curriculum/input order.
    """
    if cls.grade_id and grade_curriculum and cls.grade_id in grade_curriculum:
        demands = [Demand(e.subject_id, e.hours_per_week) for e in grade_curriculum[cls.grade_id]]
    else:
        demands = [Demand(s.id, settings.fallback_hours(s.name, s.category)) for s in subjects]
    return sorted(demands, key=lambda d: index.eligible_count(d.subject_id, cls))


def build_need_lists(
    classes: List[SchoolClass],
    subjects: List[Subject],
    grade_curriculum: Dict[str, List[CurriculumEntry]] | None,
    index: EntityIndex,
    settings: SolverSettings,
) -> Dict[str, List[Demand]]:
    return {
        c.id: resolve_curriculum(c, subjects, grade_curriculum, index, settings) for c in classes
    }
