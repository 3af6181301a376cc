from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import AttendanceRepository
from .parser import AttendanceFileParser, Source, UploadBatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadResult:
    students_added: int
    records_added: int


class AttendanceUploadService:
    """Use case: import an attendance spreadsheet into the store."""

    def __init__(self, store: AttendanceRepository, parser: Optional[AttendanceFileParser] = None):
        self._store = store
        self._parser = parser or AttendanceFileParser()

    def upload(self, source: Source, *, filename: Optional[str] = None, date: Optional[str] = None) -> UploadResult:
        batch = self._parser.parse(source, filename=filename, date=date)
        return self.apply(batch)

    def apply(self, batch: UploadBatch) -> UploadResult:
        before = len(self._store.students)
        self._store.add_students(batch.students)
        self._store.add_attendance_records(batch.records)

        result = UploadResult(
            students_added=len(self._store.students) - before,
            records_added=len(batch.records),
        )
        logger.info("Imported %d students, %d records", result.students_added, result.records_added)
        return result
