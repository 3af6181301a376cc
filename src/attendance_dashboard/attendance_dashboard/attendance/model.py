from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance mark on one ISO date."""

    id: str
    student_id: str
    date: str
    status: AttendanceStatus
    notes: Optional[str] = None

    @property
    def key(self) -> str:
        """Composite key; at most one record per student per day."""
        return f"{self.student_id}-{self.date}"


@dataclass(frozen=True)
class ClassAttendance:
    records: list[AttendanceRecord]
    students: list[Student]
