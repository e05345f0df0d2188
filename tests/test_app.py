from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from src.class_checkin.class_checkin.attendance import service as attendance_service
from src.class_checkin.class_checkin.attendance.model import AttendanceRecord, MarkResult, PresentEntry
from src.class_checkin.class_checkin.container import wire_container
from src.class_checkin.class_checkin.core.exceptions import AuthenticationError
from src.class_checkin.class_checkin.main import create_app
from src.class_checkin.class_checkin.schedules.model import TermWindow
from src.class_checkin.class_checkin.schedules.service import ScheduleEngine
from src.class_checkin.class_checkin.users.model import Identity, RosterEntry

NY = ZoneInfo("America/New_York")


@dataclass
class InMemoryUsers:
    by_uid: dict[str, RosterEntry] = field(default_factory=dict)

    def upsert(self, identity: Identity) -> None:
        self.by_uid[identity.uid] = RosterEntry(uid=identity.uid, email=identity.email, display_name=identity.display_name)

    def list_all(self):
        return list(self.by_uid.values())


class InMemoryAttendance:
    def __init__(self):
        self._by_date: dict[str, AttendanceRecord] = {}

    def get(self, date_key: str) -> Optional[AttendanceRecord]:
        return self._by_date.get(date_key)

    def mark_present(self, *, date_key: str, password: str, identity: Identity) -> MarkResult:
        rec = self._by_date.get(date_key) or AttendanceRecord(date_key=date_key, password=password)
        if rec.is_present(identity.uid):
            return MarkResult(record=rec, newly_marked=False)
        present = {**rec.present, identity.uid: PresentEntry(uid=identity.uid, email=identity.email)}
        rec = replace(rec, present_uids=rec.present_uids | {identity.uid}, present=present)
        self._by_date[date_key] = rec
        return MarkResult(record=rec, newly_marked=True)

    def list_all(self):
        return list(self._by_date.values())


class FakeVerifier:
    def verify(self, token: str) -> Identity:
        if token == "alice":
            return Identity(uid="u1", email="alice@yale.edu", display_name="Alice, A.")
        if token == "prof":
            return Identity(uid="p1", email="PROF@yale.edu", display_name="Prof")
        raise AuthenticationError("Invalid token")


@pytest.fixture
def frozen_now(monkeypatch):
    holder = {"now": datetime(2025, 9, 1, 11, 0, tzinfo=NY)}
    monkeypatch.setattr(attendance_service, "now_local", lambda tz: holder["now"])
    return holder


@pytest.fixture
def client(monkeypatch, frozen_now):
    monkeypatch.setenv("APP_ENV", "testing")
    container = wire_container(
        users_repo=InMemoryUsers(),
        attendance_repo=InMemoryAttendance(),
        verifier=FakeVerifier(),
        schedule=ScheduleEngine(TermWindow(start=date(2025, 9, 1), end=date(2025, 9, 7)), NY),
        instructor_email="prof@yale.edu",
    )
    app = create_app(container)
    return app.test_client()


def _sign_in(client, token: str):
    return client.post("/auth/session", json={"id_token": token})


def test_sign_in_sets_role(client):
    resp = _sign_in(client, "prof")
    assert resp.status_code == 200
    assert resp.get_json()["user"]["role"] == "instructor"

    assert client.get("/auth/me").get_json()["user"]["uid"] == "p1"


def test_sign_in_failure_message_is_returned(client):
    resp = _sign_in(client, "nope")
    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Invalid token"}


def test_checkin_requires_sign_in(client):
    resp = client.post("/checkin", json={"password": "apple"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Please sign in first."


def test_checkin_flow(client):
    _sign_in(client, "alice")

    resp = client.post("/checkin", json={"password": " APPLE "})
    assert resp.status_code == 200
    assert resp.get_json()["newly_marked"] is True

    again = client.post("/checkin", json={"password": "apple"})
    assert again.status_code == 200
    assert again.get_json()["newly_marked"] is False

    status = client.get("/checkin/status").get_json()
    assert status["already_present"] is True
    assert status["date"] == "2025-09-01"


def test_checkin_wrong_password(client):
    _sign_in(client, "alice")
    resp = client.post("/checkin", json={"password": "banana"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Incorrect password. Try again."


def test_checkin_after_cutoff(client, frozen_now):
    _sign_in(client, "alice")
    frozen_now["now"] = datetime(2025, 9, 1, 14, 0, tzinfo=NY)
    resp = client.post("/checkin", json={"password": "apple"})
    assert resp.status_code == 400
    assert "window closed" in resp.get_json()["message"]


def test_instructor_routes_forbidden_for_students(client):
    _sign_in(client, "alice")
    assert client.get("/instructor/roster").status_code == 403


def test_instructor_day_report_and_exports(client):
    _sign_in(client, "alice")
    client.post("/checkin", json={"password": "apple"})
    client.post("/auth/logout")
    _sign_in(client, "prof")

    roster = client.get("/instructor/roster").get_json()
    assert roster["count"] == 1

    days = client.get("/instructor/days").get_json()["days"]
    assert [d["date"] for d in days] == ["2025-09-01", "2025-09-03", "2025-09-05"]

    day = client.get("/instructor/days/2025-09-01").get_json()
    assert day["password"] == "apple"
    assert [p["uid"] for p in day["present"]] == ["u1"]

    assert client.get("/instructor/days/not-a-date").status_code == 400

    day_csv = client.get("/instructor/export/2025-09-01.csv")
    assert day_csv.mimetype == "text/csv"
    assert day_csv.get_data(as_text=True) == (
        "date,uid,email,displayName,present\n"
        '2025-09-01,u1,alice@yale.edu,"Alice, A.",TRUE\n'
    )

    term_csv = client.get("/instructor/export.csv").get_data(as_text=True).splitlines()
    assert term_csv[0] == "date,uid,email,displayName,password,present"
    assert len(term_csv) == 1 + 3


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_checkin_with_numeric_password_is_a_handled_failure(client):
    _sign_in(client, "alice")
    resp = client.post("/checkin", json={"password": 12345})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Incorrect password. Try again."}


def test_sign_in_with_numeric_token_is_rejected(client):
    resp = _sign_in(client, 5)
    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Invalid token"}


def test_checkin_with_non_object_body(client):
    _sign_in(client, "alice")
    resp = client.post("/checkin", json=["apple"])
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Incorrect password. Try again."
