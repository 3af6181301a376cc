from __future__ import annotations

import io
import logging

import pandas as pd

from ..core.constants import REPORT_SHEET_NAME, TEMPLATE_SHEET_NAME
from ..core.exceptions import ReportError
from .service import REPORT_COLUMNS, ReportData

logger = logging.getLogger(__name__)

SAMPLE_ROWS = [
    {"Name": "John Doe", "Email": "john.doe@example.com", "Class": "Mathematics 101", "Status": "present", "Notes": ""},
    {"Name": "Jane Smith", "Email": "jane.smith@example.com", "Class": "Mathematics 101", "Status": "absent", "Notes": "Sick"},
]


def _to_xlsx(df: pd.DataFrame, sheet_name: str) -> bytes:
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()


def export_attendance_report(report: ReportData) -> bytes:
    """Serialize a report as an xlsx workbook."""
    df = pd.DataFrame(report.rows, columns=list(REPORT_COLUMNS))
    try:
        content = _to_xlsx(df, REPORT_SHEET_NAME)
    except Exception as exc:
        raise ReportError("Failed to generate attendance report") from exc

    logger.info("Exported %s (%d students)", report.filename, len(report.rows))
    return content


def build_sample_template() -> bytes:
    """Upload template with the expected headers and two example rows."""
    return _to_xlsx(pd.DataFrame(SAMPLE_ROWS), TEMPLATE_SHEET_NAME)
