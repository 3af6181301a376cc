from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.attendance_dashboard.attendance_dashboard.core.exceptions import DomainError
from src.attendance_dashboard.attendance_dashboard.main import create_container
from src.attendance_dashboard.attendance_dashboard.reports.excel import export_attendance_report


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Export a per-student attendance report (xlsx).")
    parser.add_argument("--start", help="YYYY-MM-DD, defaults to REPORT_DEFAULT_DAYS before --end")
    parser.add_argument("--end", help="YYYY-MM-DD, defaults to today")
    parser.add_argument("--class", dest="class_name", help="only students of this class")
    parser.add_argument("--out-dir", default=".", type=Path)
    args = parser.parse_args(argv)

    container = create_container()
    try:
        start, end = container.report_service.default_range(today=args.end)
        report = container.report_service.build_attendance_report(
            container.store.students,
            container.store.attendance_records,
            start=args.start or start,
            end=end,
            class_name=args.class_name,
        )
        content = export_attendance_report(report)
    except DomainError as exc:
        sys.exit(f"ERROR: {exc}")

    out = args.out_dir / report.filename
    out.write_bytes(content)
    print(f"OK: {len(report.rows)} students -> {out}")


if __name__ == "__main__":
    main()
