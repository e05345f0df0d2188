from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class PresentEntry:
    """One student marked present on one date."""

    uid: str
    email: str
    display_name: str = ""
    marked_at: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: the attendance document of a single class date."""

    date_key: str
    password: Optional[str]
    present_uids: frozenset[str] = frozenset()
    present: dict[str, PresentEntry] = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def present_ids(self) -> frozenset[str]:
        # Older documents may only carry the per-student map.
        if self.present_uids:
            return self.present_uids
        return frozenset(self.present.keys())

    def is_present(self, uid: str) -> bool:
        return uid in self.present_ids


@dataclass(frozen=True)
class MarkResult:
    record: AttendanceRecord
    newly_marked: bool
