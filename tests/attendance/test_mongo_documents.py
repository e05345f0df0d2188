from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.class_checkin.class_checkin.attendance.mongo_attendance_repository import (
    build_mark_present_pipeline,
    record_from_doc,
)
from src.class_checkin.class_checkin.core.exceptions import ValidationError
from src.class_checkin.class_checkin.users.model import Identity


def test_pipeline_unions_uid_and_uses_server_clock():
    ident = Identity(uid="123", email="$weird@yale.edu", display_name="A")
    (stage,) = build_mark_present_pipeline(date_key="2025-09-01", password="apple", identity=ident)
    fields = stage["$set"]

    assert fields["presentUIDs"] == {"$setUnion": [{"$ifNull": ["$presentUIDs", []]}, [{"$literal": "123"}]]}
    assert fields["updatedAt"] == "$$NOW"
    assert fields["createdAt"] == {"$ifNull": ["$createdAt", "$$NOW"]}

    existing, new_entry = fields["present.123"]["$ifNull"]
    assert existing == "$present.123"
    assert new_entry["markedAt"] == "$$NOW"
    assert new_entry["email"] == {"$literal": "$weird@yale.edu"}


@pytest.mark.parametrize("uid", ["", "a.b", "$uid"])
def test_pipeline_rejects_unsafe_ids(uid):
    with pytest.raises(ValidationError):
        build_mark_present_pipeline(date_key="2025-09-01", password="apple", identity=Identity(uid=uid, email="x@y"))


def test_record_from_doc_reads_present_entries():
    marked = datetime(2025, 9, 1, 15, 0, tzinfo=timezone.utc)
    doc = {
        "_id": "2025-09-01",
        "date": "2025-09-01",
        "word": "apple",
        "presentUIDs": ["u1"],
        "present": {"u1": {"uid": "u1", "email": "a@yale.edu", "displayName": "A", "markedAt": marked}},
    }

    rec = record_from_doc(doc)

    assert rec.date_key == "2025-09-01"
    assert rec.password == "apple"
    assert rec.present_ids == {"u1"}
    assert rec.present["u1"].marked_at == marked


def test_record_without_uid_list_falls_back_to_present_map():
    rec = record_from_doc({"_id": "2025-09-03", "present": {"u9": {"email": "z@yale.edu"}}})

    assert rec.date_key == "2025-09-03"
    assert rec.password is None
    assert rec.is_present("u9")
