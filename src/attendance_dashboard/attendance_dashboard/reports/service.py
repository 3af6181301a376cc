from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.summary import summarize
from ..common.datetime_utils import days_before, today_iso
from ..common.validators import require_iso_date
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import ValidationError
from ..students.model import Student

REPORT_COLUMNS = (
    "Student Name",
    "Email",
    "Class",
    "Total Sessions",
    "Present",
    "Absent",
    "Late",
    "Attendance %",
)


@dataclass(frozen=True)
class ReportData:
    start: str
    end: str
    rows: list[dict]

    @property
    def filename(self) -> str:
        return f"attendance_report_{self.start}_to_{self.end}.xlsx"


def records_in_range(records: Iterable[AttendanceRecord], start: str, end: str) -> list[AttendanceRecord]:
    """Records dated within ``[start, end]``; ISO dates compare as strings."""
    return [r for r in records if start <= r.date <= end]


class AttendanceReportService:
    """Per-student attendance report over a date range.

    Date filtering lives here, not in the store: store queries are never
    range-limited.
    """

    def __init__(self, *, default_days: int = DEFAULT_REPORT_DAYS):
        self._default_days = int(default_days)

    def default_range(self, *, today: Optional[str] = None) -> tuple[str, str]:
        end = require_iso_date(today, "end date") if today else today_iso()
        return days_before(end, self._default_days), end

    def build_attendance_report(
        self,
        students: Sequence[Student],
        records: Sequence[AttendanceRecord],
        *,
        start: str,
        end: str,
        class_name: Optional[str] = None,
    ) -> ReportData:
        require_iso_date(start, "start date")
        require_iso_date(end, "end date")
        if start > end:
            raise ValidationError("start date must not be after end date")

        if class_name:
            students = [s for s in students if s.class_name == class_name]

        by_student: dict[str, list[AttendanceRecord]] = {}
        for r in records_in_range(records, start, end):
            by_student.setdefault(r.student_id, []).append(r)

        rows = []
        for student in students:
            summary = summarize(by_student.get(student.id, []))
            rows.append(
                {
                    "Student Name": student.name,
                    "Email": student.email,
                    "Class": student.class_name,
                    "Total Sessions": summary.total,
                    "Present": summary.present,
                    "Absent": summary.absent,
                    "Late": summary.late,
                    "Attendance %": f"{summary.present_percentage:.2f}%",
                }
            )

        return ReportData(start=start, end=end, rows=rows)
