from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..attendance.summary import AttendanceSummary, summarize
from ..common.datetime_utils import days_before, today_iso
from ..core.constants import DEFAULT_RECENT_RECORDS, DEFAULT_TOP_ABSENTEES


@dataclass(frozen=True)
class ClassSummary:
    class_name: str
    student_count: int
    summary: AttendanceSummary


@dataclass(frozen=True)
class DateSummary:
    date: str
    summary: AttendanceSummary


@dataclass(frozen=True)
class AbsenteeRow:
    name: str
    email: str
    class_name: str
    absent_percentage: float


@dataclass(frozen=True)
class ClassOverview:
    summary: AttendanceSummary
    top_absentees: list[AbsenteeRow]


class DashboardService:
    """Read-only aggregates shown on the teacher dashboard."""

    def __init__(self, store: AttendanceRepository, *, top_absentees: int = DEFAULT_TOP_ABSENTEES):
        self._store = store
        self._top_absentees = int(top_absentees)

    def date_summary(self, date: str) -> DateSummary:
        return DateSummary(date=date, summary=summarize(self._store.get_attendance_by_date(date)))

    def today_summary(self, *, today: Optional[str] = None) -> DateSummary:
        return self.date_summary(today or today_iso())

    def recent_summaries(self, *, today: Optional[str] = None, days: int = 2) -> list[DateSummary]:
        """Today first, then each previous day."""
        today = today or today_iso()
        return [self.date_summary(days_before(today, n)) for n in range(days)]

    def class_summaries(self) -> list[ClassSummary]:
        out = []
        for c in self._store.classes:
            records = self._store.get_class_attendance(c.name).records
            out.append(ClassSummary(class_name=c.name, student_count=c.student_count, summary=summarize(records)))
        return out

    def class_overview(self, class_name: Optional[str] = None) -> ClassOverview:
        if class_name:
            scoped = self._store.get_class_attendance(class_name)
            records, students = scoped.records, scoped.students
        else:
            records, students = list(self._store.attendance_records), list(self._store.students)

        rows = []
        for s in students:
            pct = summarize(r for r in records if r.student_id == s.id).absent_percentage
            if pct > 0:
                rows.append(AbsenteeRow(name=s.name, email=s.email, class_name=s.class_name, absent_percentage=pct))
        rows.sort(key=lambda x: x.absent_percentage, reverse=True)

        return ClassOverview(summary=summarize(records), top_absentees=rows[: self._top_absentees])

    def student_attendance_rate(self, student_id: str) -> float:
        return summarize(self._store.get_student_attendance(student_id)).present_percentage

    def recent_attendance(self, student_id: str, *, limit: int = DEFAULT_RECENT_RECORDS) -> list[AttendanceRecord]:
        records = sorted(self._store.get_student_attendance(student_id), key=lambda r: r.date, reverse=True)
        return records[:limit]
