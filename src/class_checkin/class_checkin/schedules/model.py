from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union


@dataclass(frozen=True)
class TermWindow:
    """Inclusive range of calendar dates that make up the term."""

    start: date
    end: date

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end


@dataclass(frozen=True)
class AttendanceWindow:
    start: datetime
    cutoff: datetime


@dataclass(frozen=True)
class Found:
    """The word assigned to a class day."""

    word: str
    lecture_index: int


@dataclass(frozen=True)
class NotAClassDay:
    day: date


PasswordLookup = Union[Found, NotAClassDay]
