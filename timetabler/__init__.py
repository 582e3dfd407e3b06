"""Deterministic school timetable solver.

Modules:
- models: plain records for classes, teachers, subjects, rooms, periods, lessons
- data: constraints loading, entity index, curriculum resolution, resource tracking
- scheduler: slot-first greedy solver, candidate scoring, result assembly
- validate: conflict detection, readiness report, proposal integrity checks
- render: CSV export
- cli: Typer entrypoints
"""

from .scheduler import solve_timetable

__all__ = ["solve_timetable"]
