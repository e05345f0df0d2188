from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role derived from the verified sign-in email."""

    INSTRUCTOR = "instructor"
    STUDENT = "student"
