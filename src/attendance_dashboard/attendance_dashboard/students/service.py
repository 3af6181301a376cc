from __future__ import annotations

import uuid
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_non_empty
from .model import Student

ALL_CLASSES = "all"


class StudentService:
    """Use case: manage and look up students (teacher)."""

    def __init__(self, store: AttendanceRepository):
        self._store = store

    def add_student(self, *, name: str, email: str, class_name: str) -> Student:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        class_name = require_non_empty(class_name, "Class")

        student = Student(id=f"student-{uuid.uuid4().hex[:12]}", name=name, email=email, class_name=class_name)
        self._store.add_students([student])
        return student

    def search(self, query: str = "", *, class_name: Optional[str] = None) -> list[Student]:
        """Case-insensitive match on name or email, optionally within one class.

        ``class_name`` of ``None`` or ``"all"`` means every class.
        """
        needle = (query or "").lower()
        return [
            s
            for s in self._store.students
            if (needle in s.name.lower() or needle in s.email.lower())
            and (class_name in (None, ALL_CLASSES) or s.class_name == class_name)
        ]
