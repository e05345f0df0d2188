from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import (
    NoClassToday,
    NoPasswordAssigned,
    NotAuthenticated,
    WindowClosed,
    WrongPassword,
)
from ..schedules.model import Found
from ..schedules.service import ScheduleEngine
from ..users.model import Identity
from .model import MarkResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInStatus:
    """What the student page needs to know about today."""

    date_key: str
    is_class_day: bool
    window_start: str
    window_cutoff: str
    window_open: bool
    already_present: bool

    def to_dict(self) -> dict:
        return {
            "date": self.date_key,
            "is_class_day": self.is_class_day,
            "window_start": self.window_start,
            "window_cutoff": self.window_cutoff,
            "window_open": self.window_open,
            "already_present": self.already_present,
        }


def normalize_word(value: str | None) -> str:
    return (value or "").strip().casefold()


class CheckInService:
    def __init__(self, attendance: AttendanceRepository, schedule: ScheduleEngine):
        self._attendance = attendance
        self._schedule = schedule

    def _now(self, now: Optional[datetime]) -> datetime:
        return now or now_local(self._schedule.tz)

    def check_in(self, identity: Optional[Identity], claimed: str | None, *, now: datetime | None = None) -> MarkResult:
        if identity is None:
            raise NotAuthenticated()

        now = self._now(now)
        today = self._schedule.today(now)

        if not self._schedule.is_term_class_day(today):
            raise NoClassToday()

        if not self._schedule.is_within_window_now(today, now):
            raise WindowClosed()

        lookup = self._schedule.password_for_date(today)
        if not isinstance(lookup, Found):
            raise NoPasswordAssigned()

        if normalize_word(claimed) != normalize_word(lookup.word):
            raise WrongPassword()

        result = self._attendance.mark_present(
            date_key=self._schedule.date_key(today),
            password=lookup.word,
            identity=identity,
        )
        if result.newly_marked:
            logger.info("Marked uid=%s present on %s", identity.uid, result.record.date_key)
        else:
            logger.debug("uid=%s already present on %s", identity.uid, result.record.date_key)
        return result

    def status(self, identity: Optional[Identity], *, now: datetime | None = None) -> CheckInStatus:
        now = self._now(now)
        today = self._schedule.today(now)
        key = self._schedule.date_key(today)
        is_class_day = self._schedule.is_term_class_day(today)
        window = self._schedule.window_for_date(today)

        already = False
        if identity is not None and is_class_day:
            record = self._attendance.get(key)
            already = bool(record and record.is_present(identity.uid))

        return CheckInStatus(
            date_key=key,
            is_class_day=is_class_day,
            window_start=window.start.isoformat(),
            window_cutoff=window.cutoff.isoformat(),
            window_open=is_class_day and self._schedule.is_within_window_now(today, now),
            already_present=already,
        )
