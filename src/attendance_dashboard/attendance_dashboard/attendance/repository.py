from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from ..students.model import ClassInfo, Student
from .model import AttendanceRecord, ClassAttendance


class AttendanceRepository(Protocol):
    """Interface the services depend on (DIP); ``AttendanceStore`` implements it."""

    @property
    def students(self) -> Sequence[Student]:
        raise NotImplementedError

    @property
    def classes(self) -> Sequence[ClassInfo]:
        raise NotImplementedError

    @property
    def attendance_records(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def add_students(self, new_students: Sequence[Student]) -> None:
        raise NotImplementedError

    def add_attendance_records(self, records: Sequence[AttendanceRecord]) -> None:
        raise NotImplementedError

    def update_attendance_record(
        self,
        record_id: str,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> None:
        raise NotImplementedError

    def get_student(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def get_student_attendance(self, student_id: str) -> list[AttendanceRecord]:
        raise NotImplementedError

    def get_class_attendance(self, class_name: str) -> ClassAttendance:
        raise NotImplementedError

    def get_attendance_by_date(self, date: str) -> list[AttendanceRecord]:
        raise NotImplementedError

    def get_absentees(self, date: str) -> list[Student]:
        raise NotImplementedError

    def link_student_to_user(self, student_id: str, user_id: str) -> None:
        raise NotImplementedError

    def get_student_by_user_id(self, user_id: str) -> Optional[Student]:
        raise NotImplementedError
