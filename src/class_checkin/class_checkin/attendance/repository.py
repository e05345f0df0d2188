from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..users.model import Identity
from .model import AttendanceRecord, MarkResult


class AttendanceRepository(Protocol):
    def get(self, date_key: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def mark_present(self, *, date_key: str, password: str, identity: Identity) -> MarkResult:
        """Merge ``identity`` into the date's present set, creating the record if needed.

        Must be a set union: repeating it for the same identity changes nothing,
        and ``marked_at`` is only assigned on first insertion.
        """

        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
