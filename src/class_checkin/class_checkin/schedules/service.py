from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional, Sequence

from ..common.datetime_utils import DateLike, now_local, to_local_date, to_local_datetime
from ..core.constants import CLASS_WEEKDAYS, DATE_KEY_FORMAT, WINDOW_CUTOFF, WINDOW_START
from .model import AttendanceWindow, Found, NotAClassDay, PasswordLookup, TermWindow
from .passwords import PASSWORDS


class ScheduleEngine:
    """Pure date arithmetic for class days, daily words and the check-in window.

    All inputs are normalized to calendar dates in ``tz`` before comparison, so
    a UTC timestamp late in the evening still maps to the local class day.
    """

    def __init__(
        self,
        term: TermWindow,
        tz: tzinfo,
        *,
        passwords: Sequence[str] = PASSWORDS,
        window_start: time = WINDOW_START,
        window_cutoff: time = WINDOW_CUTOFF,
    ):
        if term.end < term.start:
            raise ValueError("term end must not precede term start")
        if not passwords:
            raise ValueError("password table must not be empty")
        self._term = term
        self._tz = tz
        self._passwords = tuple(passwords)
        self._window_start = window_start
        self._window_cutoff = window_cutoff

    @property
    def term(self) -> TermWindow:
        return self._term

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def local_date(self, d: DateLike) -> date:
        return to_local_date(d, self._tz)

    def today(self, now: Optional[datetime] = None) -> date:
        now = now or now_local(self._tz)
        return self.local_date(now)

    def date_key(self, d: DateLike) -> str:
        return self.local_date(d).strftime(DATE_KEY_FORMAT)

    def is_class_day(self, d: DateLike) -> bool:
        return self.local_date(d).weekday() in CLASS_WEEKDAYS

    def is_term_class_day(self, d: DateLike) -> bool:
        day = self.local_date(d)
        return self._term.contains(day) and self.is_class_day(day)

    def class_dates_between(self, start: DateLike, end: DateLike) -> list[date]:
        day = self.local_date(start)
        last = self.local_date(end)
        out: list[date] = []
        while day <= last:
            if self.is_class_day(day):
                out.append(day)
            day += timedelta(days=1)
        return out

    def term_class_dates(self) -> list[date]:
        return self.class_dates_between(self._term.start, self._term.end)

    def lecture_index_for_date(self, d: DateLike) -> int:
        """Zero-based lecture number of ``d``, or -1 when it is not a class day of the term."""
        day = self.local_date(d)
        if not self._term.contains(day):
            return -1
        dates = self.class_dates_between(self._term.start, day)
        if not dates or dates[-1] != day:
            return -1
        return len(dates) - 1

    def password_for_date(self, d: DateLike) -> PasswordLookup:
        day = self.local_date(d)
        idx = self.lecture_index_for_date(day)
        if idx < 0:
            return NotAClassDay(day)
        return Found(word=self._passwords[idx % len(self._passwords)], lecture_index=idx)

    def window_for_date(self, d: DateLike) -> AttendanceWindow:
        day = self.local_date(d)
        # zoneinfo resolves the UTC offset per date, so the window follows DST.
        return AttendanceWindow(
            start=datetime.combine(day, self._window_start, tzinfo=self._tz),
            cutoff=datetime.combine(day, self._window_cutoff, tzinfo=self._tz),
        )

    def is_within_window_now(self, d: DateLike, now: Optional[datetime] = None) -> bool:
        window = self.window_for_date(d)
        now = to_local_datetime(now or now_local(self._tz), self._tz)
        return window.start < now < window.cutoff
