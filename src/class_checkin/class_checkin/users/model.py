from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Identity:
    """A signed-in person as reported by the identity provider.

    Note: pure data object, no store access here.
    """

    uid: str
    email: str
    display_name: str = ""
    photo_url: str = ""


@dataclass(frozen=True)
class RosterEntry:
    uid: str
    email: str
    display_name: str = ""
    photo_url: str = ""
    updated_at: Optional[datetime] = None
