import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

MONGO_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017/"),
    "database": os.getenv("MONGO_DB", "class_checkin"),
}

GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID", "")

INSTRUCTOR_EMAIL = os.getenv("INSTRUCTOR_EMAIL", "omer.subasi@yale.edu")

TIMEZONE = os.getenv("TIMEZONE", "America/New_York")
TERM_START = os.getenv("TERM_START", "2025-09-01")
TERM_END = os.getenv("TERM_END", "2025-12-15")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
