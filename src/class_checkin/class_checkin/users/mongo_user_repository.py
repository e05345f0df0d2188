from __future__ import annotations

from typing import Sequence

from ..core.constants import USERS_COLLECTION
from ..database.connection import MongoConnection
from .model import Identity, RosterEntry
from .repository import UserRepository


class MongoUserRepository(UserRepository):
    def __init__(self, conn: MongoConnection):
        self._conn = conn

    @property
    def _users(self):
        return self._conn.collection(USERS_COLLECTION)

    def upsert(self, identity: Identity) -> None:
        self._users.update_one(
            {"_id": identity.uid},
            {
                "$set": {
                    "uid": identity.uid,
                    "email": identity.email,
                    "displayName": identity.display_name or "",
                    "photoURL": identity.photo_url or "",
                },
                "$currentDate": {"updatedAt": True},
            },
            upsert=True,
        )

    def list_all(self) -> Sequence[RosterEntry]:
        out: list[RosterEntry] = []
        for doc in self._users.find({"email": {"$nin": [None, ""]}}):
            out.append(
                RosterEntry(
                    uid=str(doc.get("uid") or doc["_id"]),
                    email=str(doc["email"]),
                    display_name=doc.get("displayName") or "",
                    photo_url=doc.get("photoURL") or "",
                    updated_at=doc.get("updatedAt"),
                )
            )
        return out
