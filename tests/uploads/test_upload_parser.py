from __future__ import annotations

import logging

import pytest

from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus, UnknownStatusPolicy
from src.attendance_dashboard.attendance_dashboard.core.exceptions import UploadError, ValidationError
from src.attendance_dashboard.attendance_dashboard.reports.excel import build_sample_template
from src.attendance_dashboard.attendance_dashboard.uploads.parser import AttendanceFileParser

CSV = (
    "Name,Email,Class,Status,Notes\n"
    "Ann Lee,ann@example.com,Physics 202,Absent,Sick\n"
    "Bo Kim,bo@example.com,Biology 404,,\n"
).encode("utf-8")


def test_parse_csv_rows(fixed_today):
    batch = AttendanceFileParser().parse(CSV, filename="upload.csv")

    assert [s.name for s in batch.students] == ["Ann Lee", "Bo Kim"]
    assert batch.students[0].class_name == "Physics 202"
    assert [r.status for r in batch.records] == [AttendanceStatus.ABSENT, AttendanceStatus.PRESENT]
    assert batch.records[0].notes == "Sick"
    assert all(r.date == fixed_today for r in batch.records)
    assert [r.student_id for r in batch.records] == [s.id for s in batch.students]
    assert len({s.id for s in batch.students}) == 2


def test_parse_lowercase_headers():
    data = b"name,email,class,status,notes\nAnn,ann@example.com,X,late,Bus\n"

    batch = AttendanceFileParser().parse(data, filename="upload.csv", date="2025-05-01")

    assert batch.students[0].email == "ann@example.com"
    assert batch.records[0].status == AttendanceStatus.LATE
    assert batch.records[0].date == "2025-05-01"


def test_parse_xlsx_template():
    batch = AttendanceFileParser().parse(build_sample_template(), filename="template.xlsx", date="2025-05-01")

    assert [s.name for s in batch.students] == ["John Doe", "Jane Smith"]
    assert [r.status for r in batch.records] == [AttendanceStatus.PRESENT, AttendanceStatus.ABSENT]


def test_unknown_status_defaults_with_warning(caplog):
    caplog.set_level(logging.WARNING)
    data = b"Name,Email,Class,Status\nAnn,a@example.com,X,excused\n"

    batch = AttendanceFileParser().parse(data, filename="u.csv", date="2025-05-01")

    assert batch.records[0].status == AttendanceStatus.PRESENT
    assert "unknown status" in caplog.text


def test_unknown_status_rejected_when_configured():
    data = b"Name,Email,Class,Status\nAnn,a@example.com,X,excused\n"
    parser = AttendanceFileParser(unknown_status=UnknownStatusPolicy.REJECT)

    with pytest.raises(UploadError):
        parser.parse(data, filename="u.csv", date="2025-05-01")


def test_unreadable_file_raises_upload_error():
    with pytest.raises(UploadError):
        AttendanceFileParser().parse(b"not a workbook", filename="broken.xlsx")


def test_date_override_must_be_iso():
    with pytest.raises(ValidationError):
        AttendanceFileParser().parse(CSV, filename="upload.csv", date="07/04/2025")


def test_xls_is_rejected_with_clear_message():
    with pytest.raises(UploadError, match=r"\.xlsx or \.csv"):
        AttendanceFileParser().parse(b"\xd0\xcf\x11\xe0", filename="legacy.xls")
