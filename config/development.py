import os

# Seed the store with the demo students, classes and records on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

REPORT_DEFAULT_DAYS = int(os.getenv("REPORT_DEFAULT_DAYS", "30"))
TOP_ABSENTEES_LIMIT = int(os.getenv("TOP_ABSENTEES_LIMIT", "5"))

# Uploads: status used for empty cells, and what to do with unknown ones ("default" | "reject")
UPLOAD_DEFAULT_STATUS = os.getenv("UPLOAD_DEFAULT_STATUS", "present")
UPLOAD_UNKNOWN_STATUS = os.getenv("UPLOAD_UNKNOWN_STATUS", "default")

DEBUG = True
