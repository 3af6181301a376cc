from __future__ import annotations

import pytest

from scripts import export_report, import_attendance


@pytest.fixture(autouse=True)
def testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")


def test_export_inverted_range_exits_with_message(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        export_report.main(["--start", "2025-04-30", "--end", "2025-04-01", "--out-dir", str(tmp_path)])

    assert excinfo.value.code == "ERROR: start date must not be after end date"
    assert list(tmp_path.iterdir()) == []


def test_export_writes_workbook(tmp_path):
    export_report.main(["--start", "2025-04-01", "--end", "2025-04-30", "--out-dir", str(tmp_path)])

    assert (tmp_path / "attendance_report_2025-04-01_to_2025-04-30.xlsx").exists()


def test_import_bad_date_exits_with_message(tmp_path):
    upload = tmp_path / "upload.csv"
    upload.write_text("Name,Email,Class,Status\nAnn,a@example.com,X,present\n")

    with pytest.raises(SystemExit) as excinfo:
        import_attendance.main([str(upload), "--date", "07/04/2025"])

    assert str(excinfo.value.code).startswith("ERROR:")
