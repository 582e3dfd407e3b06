from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from .checks import Conflict
from .readiness import ReadinessReport


def write_validation_report(report: Dict[str, object], outputs_dir: Path) -> None:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    with (outputs_dir / "validation.json").open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)


def format_validation_report(report: Dict[str, object]) -> str:
    lines: list[str] = []
    lines.append(f"clash_count: {report.get('clash_count')}")
    violations = report.get("violations_by_rule", {})
    lines.append("violations_by_rule:")
    if isinstance(violations, dict):
        for k, v in violations.items():
            lines.append(f"  - {k}: {len(v)}")
    unmet = report.get("unmet_weekly_loads", {})
    lines.append(f"unmet_weekly_loads: {len(unmet)} entries")
    load = report.get("teacher_load", {})
    if isinstance(load, dict) and load:
        lines.append("teacher_load:")
        for k, v in load.items():
            lines.append(f"  - {k}: {v}")
    return "\n".join(lines)


def format_conflicts(conflicts: List[Conflict]) -> str:
    if not conflicts:
        return "conflicts: none"
    lines = [f"conflicts: {len(conflicts)}"]
    for c in conflicts:
        lines.append(f"  - [{c.severity}] {c.type}: {c.description} (lessons {list(c.lesson_ids)})")
    return "\n".join(lines)


def format_readiness(report: ReadinessReport) -> str:
    lines = [f"ready: {report.ready}"]
    for title, issues in (("critical", report.critical), ("warnings", report.warnings)):
        lines.append(f"{title}: {len(issues)}")
        for issue in issues:
            lines.append(f"  - {issue.type}: {issue.message}")
            for d in issue.details:
                lines.append(f"      {d}")
    lines.append(f"teacher capacity: {report.summary.get('teacher_capacity')}")
    return "\n".join(lines)
