from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo

from .attendance.mongo_attendance_repository import MongoAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import CheckInService
from .common.datetime_utils import parse_iso_date
from .database.connection import DBConfig, MongoConnection
from .reports.service import RosterReportService
from .schedules.model import TermWindow
from .schedules.service import ScheduleEngine
from .users.identity import GoogleIdentityVerifier, IdentityVerifier
from .users.mongo_user_repository import MongoUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[MongoConnection]

    users_repo: UserRepository
    attendance_repo: AttendanceRepository

    schedule: ScheduleEngine
    auth_service: AuthService
    checkin_service: CheckInService
    report_service: RosterReportService

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def build_schedule(*, timezone: str, term_start: str, term_end: str) -> ScheduleEngine:
    term = TermWindow(start=parse_iso_date(term_start), end=parse_iso_date(term_end))
    return ScheduleEngine(term, ZoneInfo(timezone))


def wire_container(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    verifier: IdentityVerifier,
    schedule: ScheduleEngine,
    instructor_email: str,
    conn: Optional[MongoConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        schedule=schedule,
        auth_service=AuthService(users_repo, verifier, instructor_email=instructor_email),
        checkin_service=CheckInService(attendance_repo, schedule),
        report_service=RosterReportService(users_repo, attendance_repo, schedule, instructor_email=instructor_email),
    )


def build_container(
    *,
    db_config: dict,
    google_client_id: str,
    instructor_email: str,
    timezone: str,
    term_start: str,
    term_end: str,
) -> Container:
    conn = MongoConnection(DBConfig(uri=str(db_config["uri"]), database=str(db_config["database"])))

    return wire_container(
        conn=conn,
        users_repo=MongoUserRepository(conn),
        attendance_repo=MongoAttendanceRepository(conn),
        verifier=GoogleIdentityVerifier(google_client_id),
        schedule=build_schedule(timezone=timezone, term_start=term_start, term_end=term_end),
        instructor_email=instructor_email,
    )
