"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_TERM_START = "2025-09-01"
DEFAULT_TERM_END = "2025-12-15"

# datetime.weekday(): Monday=0 ... Sunday=6
CLASS_WEEKDAYS = frozenset({0, 2, 4})

WINDOW_START = time(10, 30)
WINDOW_CUTOFF = time(14, 0)

DATE_KEY_FORMAT = "%Y-%m-%d"

USERS_COLLECTION = "users"
ATTENDANCE_COLLECTION = "attendance"
