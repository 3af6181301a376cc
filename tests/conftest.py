from __future__ import annotations

import pytest

from src.attendance_dashboard.attendance_dashboard.attendance.seed import build_demo_store
from src.attendance_dashboard.attendance_dashboard.attendance.store import AttendanceStore


@pytest.fixture
def store() -> AttendanceStore:
    return build_demo_store()


@pytest.fixture
def fixed_today(monkeypatch) -> str:
    """Pin "today" to the latest demo date for modules that read it."""
    today = "2025-04-07"
    from src.attendance_dashboard.attendance_dashboard.uploads import parser

    monkeypatch.setattr(parser, "today_iso", lambda: today)
    return today
