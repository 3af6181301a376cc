"""Fixed demo data the store is seeded with at startup."""
from __future__ import annotations

from ..core.enums import AttendanceStatus
from ..students.model import ClassInfo, Student
from .model import AttendanceRecord
from .store import AttendanceStore

P, A, L = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE


def demo_students() -> list[Student]:
    return [
        Student(id="1", name="John Doe", email="john.doe@example.com", class_name="Mathematics 101"),
        Student(id="2", name="Jane Smith", email="jane.smith@example.com", class_name="Mathematics 101"),
        Student(id="3", name="Michael Johnson", email="michael.j@example.com", class_name="Physics 202"),
        Student(id="4", name="Emily Davis", email="emily.d@example.com", class_name="Physics 202"),
        Student(id="5", name="Robert Wilson", email="robert.w@example.com", class_name="Chemistry 303"),
    ]


def demo_classes() -> list[ClassInfo]:
    return [
        ClassInfo(id="101", name="Mathematics 101", student_count=2),
        ClassInfo(id="202", name="Physics 202", student_count=2),
        ClassInfo(id="303", name="Chemistry 303", student_count=1),
    ]


def demo_records() -> list[AttendanceRecord]:
    rows = [
        ("a1", "1", "2025-04-07", P, None),
        ("a2", "2", "2025-04-07", A, "Sick"),
        ("a3", "3", "2025-04-07", L, "Traffic"),
        ("a4", "4", "2025-04-07", P, None),
        ("a5", "5", "2025-04-07", P, None),
        ("a6", "1", "2025-04-06", P, None),
        ("a7", "2", "2025-04-06", P, None),
        ("a8", "3", "2025-04-06", A, "Doctor appointment"),
        ("a9", "4", "2025-04-06", P, None),
        ("a10", "5", "2025-04-06", L, "Bus delay"),
    ]
    return [
        AttendanceRecord(id=rid, student_id=sid, date=day, status=status, notes=notes)
        for rid, sid, day, status, notes in rows
    ]


def build_demo_store() -> AttendanceStore:
    return AttendanceStore(students=demo_students(), classes=demo_classes(), records=demo_records())
