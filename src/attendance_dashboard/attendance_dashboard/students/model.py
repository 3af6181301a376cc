from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student enrolled in a class (matched by class name)."""

    id: str
    name: str
    email: str
    class_name: str
    user_id: Optional[str] = None


@dataclass(frozen=True)
class ClassInfo:
    """A class and its cached enrolment count.

    ``name`` is the natural key students and records are related by;
    ``student_count`` is kept equal to the number of students in that class.
    """

    id: str
    name: str
    student_count: int
