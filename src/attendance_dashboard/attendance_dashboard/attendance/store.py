from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..students.model import ClassInfo, Student
from .model import AttendanceRecord, ClassAttendance

logger = logging.getLogger(__name__)


class AttendanceStore:
    """In-memory owner of students, classes and attendance records.

    Collections are exposed as tuples so consumers only ever see snapshots;
    every change goes through the methods below. Lookups that miss return
    ``None``/empty and never raise.
    """

    def __init__(
        self,
        *,
        students: Iterable[Student] = (),
        classes: Iterable[ClassInfo] = (),
        records: Iterable[AttendanceRecord] = (),
    ):
        self._students: list[Student] = list(students)
        self._classes: list[ClassInfo] = list(classes)
        self._records: dict[str, AttendanceRecord] = {r.key: r for r in records}

    @property
    def students(self) -> tuple[Student, ...]:
        return tuple(self._students)

    @property
    def classes(self) -> tuple[ClassInfo, ...]:
        return tuple(self._classes)

    @property
    def attendance_records(self) -> tuple[AttendanceRecord, ...]:
        return tuple(self._records.values())

    # --- mutations -----------------------------------------------------

    def add_students(self, new_students: Sequence[Student]) -> None:
        known_ids = {s.id for s in self._students}
        added: list[Student] = []
        for student in new_students:
            if student.id in known_ids:
                logger.warning("Skipping student %r: id already exists", student.id)
                continue
            known_ids.add(student.id)
            added.append(student)

        if not added:
            return

        self._students.extend(added)
        self._sync_class_counts({s.class_name for s in added})

    def _sync_class_counts(self, class_names: set[str]) -> None:
        counts: dict[str, int] = {}
        for student in self._students:
            if student.class_name in class_names:
                counts[student.class_name] = counts.get(student.class_name, 0) + 1

        existing = {c.name for c in self._classes}
        self._classes = [
            replace(c, student_count=counts[c.name]) if c.name in counts else c
            for c in self._classes
        ]
        for name in sorted(class_names - existing):
            class_id = f"class-{uuid.uuid4().hex[:8]}"
            logger.info("Created class %r (%s)", name, class_id)
            self._classes.append(ClassInfo(id=class_id, name=name, student_count=counts[name]))

    def add_attendance_records(self, records: Sequence[AttendanceRecord]) -> None:
        for record in records:
            if record.key in self._records:
                logger.debug("Replacing attendance record for %s", record.key)
            self._records[record.key] = record

    def update_attendance_record(
        self,
        record_id: str,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> None:
        key = next((k for k, r in self._records.items() if r.id == record_id), None)
        if key is None:
            logger.debug("No attendance record with id %r; nothing updated", record_id)
            return

        try:
            status = AttendanceStatus(status)
        except ValueError:
            logger.warning("Unknown status %r for record %r; record left unchanged", status, record_id)
            return

        self._records[key] = replace(self._records[key], status=status, notes=notes)

    def link_student_to_user(self, student_id: str, user_id: str) -> None:
        if not any(s.id == student_id for s in self._students):
            logger.debug("No student with id %r; user %r not linked", student_id, user_id)
            return

        linked: list[Student] = []
        for student in self._students:
            if student.id == student_id:
                student = replace(student, user_id=user_id)
            elif student.user_id == user_id:
                logger.warning("User %r moved from student %r to %r", user_id, student.id, student_id)
                student = replace(student, user_id=None)
            linked.append(student)
        self._students = linked

    # --- queries -------------------------------------------------------

    def get_student(self, student_id: str) -> Optional[Student]:
        return next((s for s in self._students if s.id == student_id), None)

    def get_student_attendance(self, student_id: str) -> list[AttendanceRecord]:
        return [r for r in self._records.values() if r.student_id == student_id]

    def get_class_attendance(self, class_name: str) -> ClassAttendance:
        class_students = [s for s in self._students if s.class_name == class_name]
        student_ids = {s.id for s in class_students}
        records = [r for r in self._records.values() if r.student_id in student_ids]
        return ClassAttendance(records=records, students=class_students)

    def get_attendance_by_date(self, date: str) -> list[AttendanceRecord]:
        return [r for r in self._records.values() if r.date == date]

    def get_absentees(self, date: str) -> list[Student]:
        by_id = {s.id: s for s in self._students}
        return [
            by_id[r.student_id]
            for r in self._records.values()
            if r.date == date and r.status == AttendanceStatus.ABSENT and r.student_id in by_id
        ]

    def get_student_by_user_id(self, user_id: str) -> Optional[Student]:
        return next((s for s in self._students if s.user_id == user_id), None)
