from .fill import solve_timetable
from .result import SolverResult, SolverStats
from .score import score_candidate

__all__ = ["solve_timetable", "SolverResult", "SolverStats", "score_candidate"]
