import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

MONGO_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017/"),
    "database": os.getenv("MONGO_DB", "class_checkin"),
}

# OAuth client id the Google ID tokens are issued for
GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID", "")

INSTRUCTOR_EMAIL = os.getenv("INSTRUCTOR_EMAIL", "omer.subasi@yale.edu")

TIMEZONE = os.getenv("TIMEZONE", "America/New_York")
TERM_START = os.getenv("TERM_START", "2025-09-01")
TERM_END = os.getenv("TERM_END", "2025-12-15")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will create indexes on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
