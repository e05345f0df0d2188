from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    uri: str
    database: str


class MongoConnection:
    """Owns the MongoClient for the process.

    Note: built once in create_app and passed to repositories through the
    Container; call close() on shutdown.
    """

    def __init__(self, config: DBConfig, *, client: Optional[MongoClient] = None):
        self._config = config
        self._client: Optional[MongoClient] = client

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            # MongoClient connects lazily; tz_aware so $$NOW comes back as aware UTC.
            self._client = MongoClient(self._config.uri, tz_aware=True)
            logger.info("MongoDB client created for database %s", self._config.database)
        return self._client

    @property
    def db(self) -> Database:
        return self.client[self._config.database]

    def collection(self, name: str) -> Collection:
        return self.db[name]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
