from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    present: int
    absent: int
    late: int
    present_percentage: float
    absent_percentage: float
    late_percentage: float


def _percentage(count: int, total: int) -> float:
    return count / total * 100 if total > 0 else 0.0


def summarize(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    """Aggregate present/absent/late counts and their share of ``total``."""
    records = list(records)
    total = len(records)
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    absent = sum(1 for r in records if r.status == AttendanceStatus.ABSENT)
    late = sum(1 for r in records if r.status == AttendanceStatus.LATE)

    return AttendanceSummary(
        total=total,
        present=present,
        absent=absent,
        late=late,
        present_percentage=_percentage(present, total),
        absent_percentage=_percentage(absent, total),
        late_percentage=_percentage(late, total),
    )
