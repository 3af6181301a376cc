from __future__ import annotations

from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus
from src.attendance_dashboard.attendance_dashboard.uploads.service import AttendanceUploadService

CSV = (
    "Name,Email,Class,Status,Notes\n"
    "Ann Lee,ann@example.com,Physics 202,absent,Sick\n"
    "Bo Kim,bo@example.com,Biology 404,late,\n"
).encode("utf-8")


def test_upload_hands_batch_to_store(store):
    result = AttendanceUploadService(store).upload(CSV, filename="upload.csv", date="2025-04-08")

    assert result.students_added == 2
    assert result.records_added == 2
    assert len(store.students) == 7
    assert {c.name: c.student_count for c in store.classes}["Physics 202"] == 3
    assert {c.name: c.student_count for c in store.classes}["Biology 404"] == 1

    absentees = store.get_absentees("2025-04-08")
    assert [s.name for s in absentees] == ["Ann Lee"]
    assert store.get_attendance_by_date("2025-04-08")[1].status == AttendanceStatus.LATE
