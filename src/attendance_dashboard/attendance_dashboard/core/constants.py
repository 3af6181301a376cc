"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_REPORT_DAYS = 30
DEFAULT_TOP_ABSENTEES = 5
DEFAULT_RECENT_RECORDS = 3

ISO_DATE_FORMAT = "%Y-%m-%d"
NO_DATA = "no-data"

REPORT_SHEET_NAME = "Attendance Report"
TEMPLATE_SHEET_NAME = "Attendance Template"

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
