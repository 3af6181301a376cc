from __future__ import annotations

import pytest

from src.attendance_dashboard.attendance_dashboard.core.exceptions import ValidationError
from src.attendance_dashboard.attendance_dashboard.students.service import StudentService


def test_add_student_appends_and_counts(store):
    student = StudentService(store).add_student(name=" Ann Lee ", email="ann@example.com", class_name="Physics 202")

    assert student.id.startswith("student-")
    assert student.name == "Ann Lee"
    assert store.get_student(student.id) == student
    assert {c.name: c.student_count for c in store.classes}["Physics 202"] == 3


@pytest.mark.parametrize(
    "name, email, class_name",
    [("", "a@example.com", "X"), ("Ann", "  ", "X"), ("Ann", "a@example.com", "")],
)
def test_add_student_requires_all_fields(store, name, email, class_name):
    with pytest.raises(ValidationError):
        StudentService(store).add_student(name=name, email=email, class_name=class_name)
    assert len(store.students) == 5


def test_search_matches_name_or_email_case_insensitive(store):
    service = StudentService(store)

    assert [s.id for s in service.search("JOHN")] == ["1", "3"]
    assert [s.id for s in service.search("emily.d@")] == ["4"]
    assert len(service.search("")) == 5


def test_search_class_filter(store):
    service = StudentService(store)

    assert [s.id for s in service.search("", class_name="Physics 202")] == ["3", "4"]
    assert len(service.search("", class_name="all")) == 5
    assert [s.id for s in service.search("j", class_name="Mathematics 101")] == ["1", "2"]
    assert service.search("", class_name="physics 202") == []
