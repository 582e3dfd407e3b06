from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .errors import ConfigError

logger = logging.getLogger(__name__)


# Weekly hours per subject name when a class has no grade curriculum
SUBJECT_HOURS: Dict[str, int] = {
    "Mathematics": 5,
    "Arabic": 4,
    "French": 3,
    "English": 3,
    "Physics": 2,
    "Chemistry": 2,
    "Biology": 2,
    "History": 2,
    "Geography": 2,
    "Islamic Studies": 2,
    "Physical Education": 2,
    "Technology": 2,
}

# Used when the subject name is not in SUBJECT_HOURS
CATEGORY_HOURS: Dict[str, int] = {
    "MATH": 5,
    "SCIENCE": 2,
    "LANGUAGE": 3,
    "HUMANITIES": 2,
    "RELIGION": 2,
    "PE": 2,
    "TECH": 2,
}

ROOM_PREFERENCES: Dict[str, List[str]] = {
    "SCIENCE": ["LAB_SCIENCE", "CLASSROOM"],
    "PE": ["GYM", "CLASSROOM"],
    "TECH": ["LAB_COMPUTER", "CLASSROOM"],
}

INT_DEFAULTS = {"default_hours", "max_periods_per_day", "max_periods_per_week", "capacity"}


@dataclass
class SolverSettings:
    subject_hours: Dict[str, int] = field(default_factory=lambda: dict(SUBJECT_HOURS))
    category_hours: Dict[str, int] = field(default_factory=lambda: dict(CATEGORY_HOURS))
    default_hours: int = 2
    room_preferences: Dict[str, List[str]] = field(
        default_factory=lambda: {k: list(v) for k, v in ROOM_PREFERENCES.items()}
    )
    default_room_type: str = "CLASSROOM"

    # Loader defaults for records that omit a field
    max_periods_per_day: int = 4
    max_periods_per_week: int = 18
    capacity: int = 30
    school_days: List[int] = field(default_factory=lambda: [0, 1, 2, 3, 4, 5])

    def fallback_hours(self, subject_name: str, category: str) -> int:
        if subject_name in self.subject_hours:
            return self.subject_hours[subject_name]
        return self.category_hours.get(category, self.default_hours)

    def room_types_for(self, category: str) -> List[str]:
        return self.room_preferences.get(category, [self.default_room_type])


def _project_root() -> Path:
    # timetabler/config.py -> project root is parents[1]
    return Path(__file__).resolve().parents[1]


def _int_table(raw: Any, name: str) -> Dict[str, int]:
    if not isinstance(raw, dict):
        raise ConfigError(f"[{name}] must be a table")
    out: Dict[str, int] = {}
    for k, v in raw.items():
        if isinstance(v, bool) or not isinstance(v, int):
            raise ConfigError(f"[{name}] {k!r} must be an integer, got {v!r}")
        out[str(k)] = v
    return out


def load_settings(path: Path | str | None = None) -> SolverSettings:
    """Load solver settings from configs/solver.toml if present, else defaults.

    ``path`` may be a project root (``configs/solver.toml`` beneath it is used)
    or the TOML file itself. Recognised tables:

      [hours.subjects]     subject name -> weekly hours
      [hours.categories]   category -> weekly hours
      [rooms.preferences]  category -> ordered list of room types
      [defaults]           default_hours, default_room_type, max_periods_per_day,
                           max_periods_per_week, capacity, school_days

    Tables present in the file replace the corresponding built-in table.
    """
    base = SolverSettings()
    p = _project_root() if path is None else Path(path)
    cfg = p / "configs" / "solver.toml" if p.is_dir() else p
    if not cfg.exists():
        return base
    try:
        data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{cfg}: {exc}") from exc
    logger.info(f"Loaded solver settings from {cfg}")

    hours = data.get("hours", {})
    if "subjects" in hours:
        base.subject_hours = _int_table(hours["subjects"], "hours.subjects")
    if "categories" in hours:
        base.category_hours = _int_table(hours["categories"], "hours.categories")

    prefs = data.get("rooms", {}).get("preferences")
    if prefs is not None:
        if not isinstance(prefs, dict) or not all(isinstance(v, list) for v in prefs.values()):
            raise ConfigError("[rooms.preferences] must map categories to lists of room types")
        base.room_preferences = {str(k): [str(t) for t in v] for k, v in prefs.items()}

    defaults = data.get("defaults", {})
    ints = _int_table(
        {k: v for k, v in defaults.items() if k not in {"default_room_type", "school_days"}},
        "defaults",
    )
    for name, value in ints.items():
        if name not in INT_DEFAULTS:
            raise ConfigError(f"[defaults] unknown key {name!r}")
        setattr(base, name, value)
    if "default_room_type" in defaults:
        base.default_room_type = str(defaults["default_room_type"])
    if "school_days" in defaults:
        days = defaults["school_days"]
        if not isinstance(days, list) or not all(isinstance(d, int) and 0 <= d <= 6 for d in days):
            raise ConfigError("[defaults] school_days must be a list of day indices 0..6")
        base.school_days = list(days)
    return base
