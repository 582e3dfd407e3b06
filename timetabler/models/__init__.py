# Re-export common types
from .constraints import ScheduleConstraints
from .grade import CurriculumEntry, SchoolClass
from .lesson import BusyKey, Lesson
from .period import Period
from .room import Room
from .subject import Subject
from .teacher import Teacher
from .timetable import Timetable

__all__ = [
    "SchoolClass",
    "CurriculumEntry",
    "Teacher",
    "Subject",
    "Room",
    "Period",
    "Lesson",
    "BusyKey",
    "ScheduleConstraints",
    "Timetable",
]
