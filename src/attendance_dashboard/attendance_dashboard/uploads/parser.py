from __future__ import annotations

import io
import logging
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Optional, Union

import pandas as pd

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import today_iso
from ..common.validators import require_iso_date
from ..core.enums import AttendanceStatus, UnknownStatusPolicy
from ..core.exceptions import UploadError
from ..students.model import Student

logger = logging.getLogger(__name__)

COLUMNS = ("Name", "Email", "Class", "Status", "Notes")

Source = Union[str, Path, bytes, BinaryIO]


@dataclass(frozen=True)
class UploadBatch:
    """Fully parsed upload, handed to the store in one go."""

    students: list[Student] = field(default_factory=list)
    records: list[AttendanceRecord] = field(default_factory=list)


class AttendanceFileParser:
    """Turn an attendance spreadsheet (xlsx/csv) into students and records.

    One row yields one new student and one record for ``date`` (today unless
    given). Headers are matched as ``Name`` first, then ``name``.
    """

    def __init__(
        self,
        *,
        default_status: AttendanceStatus = AttendanceStatus.PRESENT,
        unknown_status: UnknownStatusPolicy = UnknownStatusPolicy.DEFAULT,
    ):
        self._default_status = AttendanceStatus(default_status)
        self._unknown_status = UnknownStatusPolicy(unknown_status)

    def parse(self, source: Source, *, filename: Optional[str] = None, date: Optional[str] = None) -> UploadBatch:
        date = require_iso_date(date, "date") if date else today_iso()
        frame = self._read_frame(source, filename=filename)
        batch_id = uuid.uuid4().hex[:8]

        students: list[Student] = []
        records: list[AttendanceRecord] = []
        for index, row in enumerate(frame.to_dict(orient="records")):
            student = Student(
                id=f"import-{batch_id}-{index}",
                name=_cell(row, "Name"),
                email=_cell(row, "Email"),
                class_name=_cell(row, "Class"),
            )
            students.append(student)
            records.append(
                AttendanceRecord(
                    id=f"record-{batch_id}-{index}",
                    student_id=student.id,
                    date=date,
                    status=self.map_status(_cell(row, "Status"), row_number=index + 1),
                    notes=_cell(row, "Notes"),
                )
            )

        logger.info("Parsed %d attendance rows for %s", len(records), date)
        return UploadBatch(students=students, records=records)

    def map_status(self, raw: str, *, row_number: int = 0) -> AttendanceStatus:
        value = raw.strip().lower()
        if not value:
            return self._default_status
        try:
            return AttendanceStatus(value)
        except ValueError:
            if self._unknown_status == UnknownStatusPolicy.REJECT:
                raise UploadError(f"Row {row_number}: unknown status {raw!r}") from None
            logger.warning(
                "Row %d: unknown status %r, using %r", row_number, raw, self._default_status.value
            )
            return self._default_status

    def _read_frame(self, source: Source, *, filename: Optional[str]) -> pd.DataFrame:
        if isinstance(source, (str, Path)):
            filename = filename or str(source)
        elif isinstance(source, bytes):
            source = io.BytesIO(source)

        suffix = Path(filename or "").suffix.lower()
        if suffix == ".xls":
            raise UploadError("Legacy .xls workbooks are not supported; save the file as .xlsx or .csv")
        try:
            if suffix == ".csv":
                frame = pd.read_csv(source, dtype=str, keep_default_na=False)
            else:
                frame = pd.read_excel(source, sheet_name=0, dtype=str, keep_default_na=False)
        except Exception as exc:
            raise UploadError(f"Could not read attendance file {filename or ''}".strip()) from exc

        return frame.fillna("")


def _cell(row: dict, column: str) -> str:
    value = row.get(column) or row.get(column.lower()) or ""
    return str(value).strip()
