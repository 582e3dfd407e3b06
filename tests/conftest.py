"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from timetabler.data.loader import load_constraints

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def sample_path() -> Path:
    return ROOT / "data" / "sample_school.json"


@pytest.fixture
def sample_constraints(sample_path: Path):
    return load_constraints(sample_path)
