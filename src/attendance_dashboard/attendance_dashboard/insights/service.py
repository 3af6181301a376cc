from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_iso_date, to_iso, week_days
from ..core.constants import NO_DATA, WEEKDAY_NAMES
from ..core.enums import AttendanceStatus

logger = logging.getLogger(__name__)


@dataclass
class WeekdayPattern:
    weekday: str
    total: int = 0
    present: int = 0
    absent: int = 0
    late: int = 0

    @property
    def attendance_rate(self) -> float:
        return self.present / self.total * 100 if self.total else 0.0

    @property
    def late_rate(self) -> float:
        return self.late / self.total * 100 if self.total else 0.0


@dataclass(frozen=True)
class Recommendation:
    kind: str
    title: str
    description: str


@dataclass(frozen=True)
class WeeklyRow:
    student_id: str
    name: str
    statuses: dict[str, str]


def weekday_patterns(records: Iterable[AttendanceRecord]) -> list[WeekdayPattern]:
    """Counts per weekday, in the order weekdays first appear in ``records``."""
    patterns: dict[str, WeekdayPattern] = {}
    for r in records:
        try:
            day = WEEKDAY_NAMES[parse_iso_date(r.date).weekday()]
        except (TypeError, ValueError):
            logger.debug("Skipping record %r with unparseable date %r", r.id, r.date)
            continue
        p = patterns.setdefault(day, WeekdayPattern(weekday=day))
        p.total += 1
        if r.status == AttendanceStatus.PRESENT:
            p.present += 1
        elif r.status == AttendanceStatus.ABSENT:
            p.absent += 1
        elif r.status == AttendanceStatus.LATE:
            p.late += 1
    return list(patterns.values())


def recommendations(records: Iterable[AttendanceRecord]) -> list[Recommendation]:
    patterns = weekday_patterns(records)
    if not patterns:
        return []

    # ties keep the first weekday seen
    best = max(patterns, key=lambda p: p.attendance_rate)
    worst = min(patterns, key=lambda p: p.attendance_rate)
    return [
        Recommendation(
            kind="scheduling",
            title="Optimal Scheduling",
            description=(
                f"Schedule important classes on {best.weekday}s when attendance is highest "
                f"({best.attendance_rate:.1f}% attendance rate)"
            ),
        ),
        Recommendation(
            kind="warning",
            title="Attendance Concern",
            description=(
                f"Consider adjusting {worst.weekday} classes which show lower attendance "
                f"({worst.attendance_rate:.1f}% attendance rate)"
            ),
        ),
    ]


class InsightsService:
    def __init__(self, store: AttendanceRepository):
        self._store = store

    def weekday_patterns(self) -> list[WeekdayPattern]:
        return weekday_patterns(self._store.attendance_records)

    def recommendations(self) -> list[Recommendation]:
        return recommendations(self._store.attendance_records)

    def weekly_grid(self, week_of: date, *, class_name: Optional[str] = None) -> tuple[list[str], list[WeeklyRow]]:
        """Monday-Friday status per student; days without a record show ``no-data``."""
        days = [to_iso(d) for d in week_days(week_of)]
        students = [s for s in self._store.students if not class_name or s.class_name == class_name]
        by_key = {r.key: r.status.value for r in self._store.attendance_records}

        rows = [
            WeeklyRow(
                student_id=s.id,
                name=s.name,
                statuses={d: by_key.get(f"{s.id}-{d}", NO_DATA) for d in days},
            )
            for s in students
        ]
        return days, rows
