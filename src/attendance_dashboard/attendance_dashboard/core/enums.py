from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance mark for one student."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class UnknownStatusPolicy(str, Enum):
    """What the upload boundary does with a Status cell it cannot map."""

    DEFAULT = "default"
    REJECT = "reject"
