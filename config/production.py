import os

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

REPORT_DEFAULT_DAYS = int(os.getenv("REPORT_DEFAULT_DAYS", "30"))
TOP_ABSENTEES_LIMIT = int(os.getenv("TOP_ABSENTEES_LIMIT", "5"))

UPLOAD_DEFAULT_STATUS = os.getenv("UPLOAD_DEFAULT_STATUS", "present")
UPLOAD_UNKNOWN_STATUS = os.getenv("UPLOAD_UNKNOWN_STATUS", "reject")

DEBUG = False
