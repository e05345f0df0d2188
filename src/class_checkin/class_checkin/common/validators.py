from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def normalize_email(value: str | None) -> str:
    return (value or "").strip().lower()
