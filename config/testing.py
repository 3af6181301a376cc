SEED_DEMO_DATA = True

LOG_LEVEL = "DEBUG"

REPORT_DEFAULT_DAYS = 30
TOP_ABSENTEES_LIMIT = 5

UPLOAD_DEFAULT_STATUS = "present"
UPLOAD_UNKNOWN_STATUS = "default"

DEBUG = False
TESTING = True
