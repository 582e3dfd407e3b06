from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from ..config import load_settings
from ..data.loader import load_constraints
from ..data.proposals import parse_proposals
from ..errors import ConstraintsError, TimetablerError
from ..models import Lesson
from ..render.csv_out import csv_blocks, write_csv_blocks
from ..scheduler import SolverResult, solve_timetable
from ..validate.checks import detect_conflicts, validate_all
from ..validate.integrity import validate_lessons
from ..validate.readiness import readiness_report
from ..validate.report import (
    format_conflicts,
    format_readiness,
    format_validation_report,
    write_validation_report,
)

logger = logging.getLogger(__name__)


def _setup_logging(outputs_dir: Path) -> None:
    logs_dir = outputs_dir / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "solver.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def run_pipeline(
    input_path: Path,
    outputs_dir: Path,
    *,
    config: Path | None = None,
    log_level: int | None = None,
) -> tuple[str, str, SolverResult]:
    """Load, pre-check, solve, check and write outputs for one school.

    Writes ``result.json``, ``timetable.csv``, ``validation.json`` and
    ``readiness.json`` under ``outputs_dir`` and returns the CSV text, the
    formatted validation summary and the solver result.
    """
    _setup_logging(outputs_dir)
    if log_level is not None:
        logging.getLogger().setLevel(log_level)
    settings = load_settings(config)
    constraints = load_constraints(input_path, settings)

    readiness = readiness_report(constraints)
    if not readiness.ready:
        for issue in readiness.critical:
            logger.warning(f"Readiness: {issue.message}: {'; '.join(issue.details)}")
    for issue in readiness.warnings:
        logger.info(f"Readiness: {issue.message}")

    result = solve_timetable(constraints, settings)
    report = validate_all(result.lessons, constraints, settings)
    conflicts = detect_conflicts(result.lessons, {t.id: t for t in constraints.teachers})
    report["conflicts"] = [c.to_dict() for c in conflicts]
    report["stats"] = result.stats.to_dict()

    outputs_dir.mkdir(parents=True, exist_ok=True)
    with (outputs_dir / "result.json").open("w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, indent=2)
    with (outputs_dir / "readiness.json").open("w", encoding="utf-8") as f:
        json.dump(readiness.to_dict(), f, indent=2)
    write_validation_report(report, outputs_dir)
    csv = csv_blocks(result.lessons, constraints)
    write_csv_blocks(csv, outputs_dir)
    return csv, format_validation_report(report), result


LESSON_FIELDS = ("classId", "subjectId", "teacherId", "periodId")


def _read_lessons(path: Path) -> list[Lesson]:
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConstraintsError(str(path), f"invalid JSON: {exc}") from exc
    raw = doc.get("lessons", []) if isinstance(doc, dict) else doc
    if not isinstance(raw, list):
        raise ConstraintsError("lessons", "expected a list")
    lessons = []
    for i, r in enumerate(raw):
        where = f"lessons[{i}]"
        if not isinstance(r, dict):
            raise ConstraintsError(where, "expected an object")
        for key in LESSON_FIELDS:
            if not isinstance(r.get(key), str):
                raise ConstraintsError(f"{where}.{key}", f"expected a string id, got {r.get(key)!r}")
        room_id = r.get("roomId")
        if room_id is not None and not isinstance(room_id, str):
            raise ConstraintsError(f"{where}.roomId", f"expected a string id or null, got {room_id!r}")
        day = r.get("dayOfWeek")
        if isinstance(day, bool) or not isinstance(day, int):
            raise ConstraintsError(f"{where}.dayOfWeek", f"expected an integer, got {day!r}")
        lessons.append(
            Lesson(
                class_id=r["classId"],
                subject_id=r["subjectId"],
                teacher_id=r["teacherId"],
                room_id=room_id,
                period_id=r["periodId"],
                day_of_week=day,
            )
        )
    return lessons


app = typer.Typer(add_completion=False, help="School timetable solver")


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


@app.command("solve")
def cli_solve(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="School constraints JSON"),
    outputs: Path = typer.Option(Path("outputs"), help="Directory for result, CSV and reports"),
    config: Optional[Path] = typer.Option(None, help="solver.toml (default: configs/solver.toml)"),
    log_level: str = typer.Option("INFO", help="Log level"),
) -> None:
    try:
        csv, validation, result = run_pipeline(
            input_path, outputs, config=config, log_level=_level(log_level)
        )
    except TimetablerError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)
    print(csv)
    print(validation)
    s = result.stats
    print(
        f"filled {s.filled_slots}/{s.total_slots} slots, {s.empty_slots} empty, "
        f"{s.conflicts_avoided} conflicts avoided"
    )


@app.command("check")
def cli_check(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="School constraints JSON"),
    lessons_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Lessons JSON"),
    config: Optional[Path] = typer.Option(None, help="solver.toml"),
) -> None:
    try:
        settings = load_settings(config)
        constraints = load_constraints(input_path, settings)
        lessons = _read_lessons(lessons_path)
    except TimetablerError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)
    report = validate_all(lessons, constraints, settings)
    print(format_validation_report(report))
    print(format_conflicts(detect_conflicts(lessons, {t.id: t for t in constraints.teachers})))
    if report.get("clash_count") or report.get("violations_by_rule"):
        raise typer.Exit(code=1)


@app.command("readiness")
def cli_readiness(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="School constraints JSON"),
    config: Optional[Path] = typer.Option(None, help="solver.toml"),
) -> None:
    try:
        constraints = load_constraints(input_path, load_settings(config))
    except TimetablerError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)
    report = readiness_report(constraints)
    print(format_readiness(report))
    if not report.ready:
        raise typer.Exit(code=1)


@app.command("intake")
def cli_intake(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="School constraints JSON"),
    proposals_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Generator reply text"),
    config: Optional[Path] = typer.Option(None, help="solver.toml"),
) -> None:
    try:
        constraints = load_constraints(input_path, load_settings(config))
    except TimetablerError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)
    raw = parse_proposals(proposals_path.read_text(encoding="utf-8"))
    valid, skipped = validate_lessons(raw, constraints)
    print(f"accepted: {len(valid)}, skipped: {skipped}")
    print(format_conflicts(detect_conflicts(valid, {t.id: t for t in constraints.teachers})))


if __name__ == "__main__":
    app()
