from __future__ import annotations

from typing import Any, Optional, Sequence

from pymongo import ReturnDocument

from ..core.constants import ATTENDANCE_COLLECTION
from ..core.exceptions import ValidationError
from ..database.connection import MongoConnection
from ..users.model import Identity
from .model import AttendanceRecord, MarkResult, PresentEntry
from .repository import AttendanceRepository


def _literal(value: Any) -> dict:
    # Keep user-supplied strings from being read as field paths ("$...").
    return {"$literal": value}


def build_mark_present_pipeline(*, date_key: str, password: str, identity: Identity) -> list[dict]:
    """Single-stage update pipeline that unions ``identity`` into the present set.

    ``$$NOW`` is the server clock, so created/marked/updated stamps never come
    from the web process.
    """

    uid = identity.uid
    if not uid or "." in uid or uid.startswith("$"):
        raise ValidationError("Invalid identity id")

    entry_path = f"present.{uid}"
    return [
        {
            "$set": {
                "date": _literal(date_key),
                "word": {"$ifNull": ["$word", _literal(password)]},
                "createdAt": {"$ifNull": ["$createdAt", "$$NOW"]},
                "updatedAt": "$$NOW",
                "presentUIDs": {
                    "$setUnion": [{"$ifNull": ["$presentUIDs", []]}, [_literal(uid)]],
                },
                entry_path: {
                    "$ifNull": [
                        f"${entry_path}",
                        {
                            "uid": _literal(uid),
                            "email": _literal(identity.email),
                            "displayName": _literal(identity.display_name or ""),
                            "photoURL": _literal(identity.photo_url or ""),
                            "markedAt": "$$NOW",
                        },
                    ]
                },
            }
        }
    ]


def record_from_doc(doc: dict) -> AttendanceRecord:
    present: dict[str, PresentEntry] = {}
    for uid, raw in (doc.get("present") or {}).items():
        raw = raw or {}
        present[str(uid)] = PresentEntry(
            uid=str(raw.get("uid") or uid),
            email=raw.get("email") or "",
            display_name=raw.get("displayName") or "",
            marked_at=raw.get("markedAt"),
        )

    return AttendanceRecord(
        date_key=str(doc.get("date") or doc["_id"]),
        password=doc.get("word"),
        present_uids=frozenset(str(u) for u in (doc.get("presentUIDs") or [])),
        present=present,
        created_at=doc.get("createdAt"),
        updated_at=doc.get("updatedAt"),
    )


def is_newly_marked(record: AttendanceRecord, uid: str) -> bool:
    # markedAt and updatedAt share one $$NOW only on the update that inserted uid.
    entry = record.present.get(uid)
    return bool(entry and entry.marked_at is not None and entry.marked_at == record.updated_at)


class MongoAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: MongoConnection):
        self._conn = conn

    @property
    def _attendance(self):
        return self._conn.collection(ATTENDANCE_COLLECTION)

    def get(self, date_key: str) -> Optional[AttendanceRecord]:
        doc = self._attendance.find_one({"_id": date_key})
        if not doc:
            return None
        return record_from_doc(doc)

    def mark_present(self, *, date_key: str, password: str, identity: Identity) -> MarkResult:
        pipeline = build_mark_present_pipeline(date_key=date_key, password=password, identity=identity)
        after = self._attendance.find_one_and_update(
            {"_id": date_key},
            pipeline,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        record = record_from_doc(after)
        return MarkResult(record=record, newly_marked=is_newly_marked(record, identity.uid))

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [record_from_doc(doc) for doc in self._attendance.find().sort("_id", 1)]
