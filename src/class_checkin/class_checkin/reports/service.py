from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import DateLike
from ..common.validators import normalize_email
from ..schedules.model import Found
from ..schedules.service import ScheduleEngine
from ..users.model import RosterEntry
from ..users.repository import UserRepository

DAY_EXPORT_FIELDS = ("date", "uid", "email", "displayName", "present")
TERM_EXPORT_FIELDS = ("date", "uid", "email", "displayName", "password", "present")


@dataclass(frozen=True)
class DayReport:
    date_key: str
    password: Optional[str]
    present: list[RosterEntry]
    absent: list[RosterEntry]

    def to_dict(self) -> dict:
        return {
            "date": self.date_key,
            "password": self.password,
            "present": [_entry_dict(r) for r in self.present],
            "absent": [_entry_dict(r) for r in self.absent],
            "present_count": len(self.present),
            "absent_count": len(self.absent),
        }


def _entry_dict(r: RosterEntry) -> dict:
    return {"uid": r.uid, "email": r.email, "displayName": r.display_name}


class RosterReportService:
    """Instructor-side read models: roster, per-day lists and CSV rows."""

    def __init__(
        self,
        users: UserRepository,
        attendance: AttendanceRepository,
        schedule: ScheduleEngine,
        *,
        instructor_email: str,
    ):
        self._users = users
        self._attendance = attendance
        self._schedule = schedule
        self._instructor_email = normalize_email(instructor_email)

    def roster(self) -> list[RosterEntry]:
        """Everyone who has signed in with an email, minus the instructor."""
        entries = [
            u
            for u in self._users.list_all()
            if u.email and normalize_email(u.email) != self._instructor_email
        ]
        entries.sort(key=lambda u: (u.display_name.casefold(), u.email.casefold()))
        return entries

    def _expected_word(self, day: date) -> Optional[str]:
        lookup = self._schedule.password_for_date(day)
        return lookup.word if isinstance(lookup, Found) else None

    def term_overview(self) -> list[dict]:
        return [
            {"date": self._schedule.date_key(d), "weekday": d.strftime("%A"), "password": self._expected_word(d)}
            for d in self._schedule.term_class_dates()
        ]

    def day_report(self, d: DateLike, *, roster: Sequence[RosterEntry] | None = None) -> DayReport:
        day = self._schedule.local_date(d)
        key = self._schedule.date_key(day)
        roster = list(roster) if roster is not None else self.roster()

        record = self._attendance.get(key)
        present_ids = record.present_ids if record else frozenset()
        password = (record.password if record else None) or self._expected_word(day)

        return DayReport(
            date_key=key,
            password=password,
            present=[r for r in roster if r.uid in present_ids],
            absent=[r for r in roster if r.uid not in present_ids],
        )

    def day_export_rows(self, d: DateLike) -> list[dict]:
        roster = self.roster()
        report = self.day_report(d, roster=roster)
        present_ids = {r.uid for r in report.present}
        return [
            {
                "date": report.date_key,
                "uid": r.uid,
                "email": r.email,
                "displayName": r.display_name,
                "present": r.uid in present_ids,
            }
            for r in roster
        ]

    def term_export_rows(self) -> list[dict]:
        roster = self.roster()
        records = {rec.date_key: rec for rec in self._attendance.list_all()}

        rows: list[dict] = []
        for day in self._schedule.term_class_dates():
            key = self._schedule.date_key(day)
            record = records.get(key)
            present_ids = record.present_ids if record else frozenset()
            password = self._expected_word(day)
            for r in roster:
                rows.append(
                    {
                        "date": key,
                        "uid": r.uid,
                        "email": r.email,
                        "displayName": r.display_name,
                        "password": password,
                        "present": r.uid in present_ids,
                    }
                )
        return rows
