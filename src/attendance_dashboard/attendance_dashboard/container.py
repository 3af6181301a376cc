from __future__ import annotations

from dataclasses import dataclass

from .attendance.seed import build_demo_store
from .attendance.store import AttendanceStore
from .core.constants import DEFAULT_REPORT_DAYS, DEFAULT_TOP_ABSENTEES
from .core.enums import AttendanceStatus, UnknownStatusPolicy
from .dashboard.service import DashboardService
from .insights.service import InsightsService
from .portal.service import StudentPortalService
from .reports.service import AttendanceReportService
from .students.service import StudentService
from .uploads.parser import AttendanceFileParser
from .uploads.service import AttendanceUploadService


@dataclass(frozen=True)
class Container:
    store: AttendanceStore

    student_service: StudentService
    upload_service: AttendanceUploadService
    report_service: AttendanceReportService
    dashboard_service: DashboardService
    insights_service: InsightsService
    portal_service: StudentPortalService


def build_container(
    *,
    seed_demo_data: bool = True,
    report_default_days: int = DEFAULT_REPORT_DAYS,
    top_absentees: int = DEFAULT_TOP_ABSENTEES,
    upload_default_status: str = AttendanceStatus.PRESENT.value,
    upload_unknown_status: str = UnknownStatusPolicy.DEFAULT.value,
) -> Container:
    store = build_demo_store() if seed_demo_data else AttendanceStore()

    parser = AttendanceFileParser(
        default_status=AttendanceStatus(upload_default_status.lower()),
        unknown_status=UnknownStatusPolicy(upload_unknown_status.lower()),
    )

    return Container(
        store=store,
        student_service=StudentService(store),
        upload_service=AttendanceUploadService(store, parser),
        report_service=AttendanceReportService(default_days=report_default_days),
        dashboard_service=DashboardService(store, top_absentees=top_absentees),
        insights_service=InsightsService(store),
        portal_service=StudentPortalService(store),
    )
