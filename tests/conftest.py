"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def people() -> list[dict[str, object]]:
    """Small heterogeneous record collection shared by query tests."""
    return [
        {"id": 1, "name": "Ada", "age": 36, "city": "London", "active": True},
        {"id": 2, "name": "Grace", "age": 45, "city": "New York", "active": False},
        {"id": 3, "name": "Alan", "age": 41, "city": "London", "active": True},
        {"id": 4, "name": "Edsger", "age": 36, "city": "Austin"},
        {"id": 5, "name": "Barbara", "age": 29, "city": "Boston", "active": True},
    ]
