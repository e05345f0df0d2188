from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, request, session

from ..core.enums import Role
from ..users.model import Identity


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def current_identity() -> Optional[Identity]:
    if "uid" not in session:
        return None
    return Identity(
        uid=str(session["uid"]),
        email=str(session.get("email") or ""),
        display_name=str(session.get("name") or ""),
    )


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "uid" not in session:
            return json_error("Please sign in first.", 401)
        return view(*args, **kwargs)

    return wrapper


def instructor_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "uid" not in session:
            return json_error("Please sign in first.", 401)
        if session.get("role") != Role.INSTRUCTOR.value:
            return json_error("Instructor access only.", 403)
        return view(*args, **kwargs)

    return wrapper


def text_field(data: dict, name: str) -> str:
    """Read ``name`` from a JSON body or the form as text; non-strings are stringified."""
    raw = data.get(name) if isinstance(data, dict) else None
    if raw is None:
        raw = request.form.get(name, "")
    return raw if isinstance(raw, str) else str(raw)
