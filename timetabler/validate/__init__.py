from .checks import Conflict, detect_conflicts, validate_all
from .integrity import validate_lessons
from .readiness import ReadinessReport, readiness_report

__all__ = [
    "Conflict",
    "ReadinessReport",
    "detect_conflicts",
    "readiness_report",
    "validate_all",
    "validate_lessons",
]
