from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.attendance_dashboard.attendance_dashboard.attendance.summary import summarize
from src.attendance_dashboard.attendance_dashboard.core.exceptions import DomainError
from src.attendance_dashboard.attendance_dashboard.main import create_container
from src.attendance_dashboard.attendance_dashboard.reports.excel import build_sample_template


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Import an attendance spreadsheet (Name, Email, Class, Status, Notes).")
    parser.add_argument("path", type=Path, nargs="?")
    parser.add_argument("--date", help="YYYY-MM-DD to stamp records with, defaults to today")
    parser.add_argument("--template", type=Path, help="write an upload template to this path and exit")
    args = parser.parse_args(argv)

    if args.template:
        args.template.write_bytes(build_sample_template())
        print(f"OK: template -> {args.template}")
        return
    if not args.path:
        parser.error("path is required unless --template is given")

    container = create_container()
    try:
        result = container.upload_service.upload(args.path, date=args.date)
    except DomainError as exc:
        sys.exit(f"ERROR: {exc}")

    summary = summarize(container.store.attendance_records)
    print(
        f"OK: +{result.students_added} students, {result.records_added} records; "
        f"overall present {summary.present_percentage:.1f}% of {summary.total}"
    )


if __name__ == "__main__":
    main()
