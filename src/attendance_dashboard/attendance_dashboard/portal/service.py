from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..attendance.summary import AttendanceSummary, summarize
from ..common.validators import require_iso_date, require_non_empty
from ..core.exceptions import ValidationError
from ..students.model import Student


@dataclass(frozen=True)
class MyAttendance:
    student: Student
    records: list[AttendanceRecord]
    summary: AttendanceSummary


class StudentPortalService:
    """Use cases for a signed-in student, identified by an opaque user id."""

    def __init__(self, store: AttendanceRepository):
        self._store = store

    def _require_student(self, user_id: str) -> Student:
        student = self._store.get_student_by_user_id(user_id)
        if not student:
            raise ValidationError("Student record not found")
        return student

    def my_attendance(self, user_id: str) -> MyAttendance:
        student = self._require_student(user_id)
        records = self._store.get_student_attendance(student.id)
        return MyAttendance(student=student, records=records, summary=summarize(records))

    def submit_absence_explanation(self, user_id: str, date: str, explanation: str) -> AttendanceRecord:
        """Store ``explanation`` as the notes of the student's record on ``date``.

        The record keeps its status; only notes change.
        """
        explanation = require_non_empty(explanation, "Explanation")
        require_iso_date(date, "Date")
        student = self._require_student(user_id)

        record = next((r for r in self._store.get_student_attendance(student.id) if r.date == date), None)
        if not record:
            raise ValidationError("No attendance record found for the selected date")

        self._store.update_attendance_record(record.id, record.status, explanation)
        return next(r for r in self._store.get_student_attendance(student.id) if r.id == record.id)
