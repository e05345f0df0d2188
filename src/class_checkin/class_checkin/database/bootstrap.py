from __future__ import annotations

import logging

from pymongo import ASCENDING

from ..core.constants import ATTENDANCE_COLLECTION, USERS_COLLECTION
from .connection import MongoConnection

logger = logging.getLogger(__name__)


def ensure_indexes(conn: MongoConnection) -> list[str]:
    """Create the secondary indexes used by roster and report scans.

    Idempotent: create_index is a no-op when the index already exists.
    """
    created = [
        conn.collection(USERS_COLLECTION).create_index([("email", ASCENDING)], name="email_1"),
        conn.collection(ATTENDANCE_COLLECTION).create_index([("date", ASCENDING)], name="date_1"),
    ]
    logger.info("Indexes ready: %s", ", ".join(created))
    return created

