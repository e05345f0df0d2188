import os

SECRET_KEY = "test-secret"

MONGO_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017/"),
    "database": os.getenv("MONGO_DB", "class_checkin_test"),
}

GOOGLE_CLIENT_ID = "test-client-id"

INSTRUCTOR_EMAIL = "prof@yale.edu"

TIMEZONE = "America/New_York"
TERM_START = "2025-09-01"
TERM_END = "2025-12-15"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
