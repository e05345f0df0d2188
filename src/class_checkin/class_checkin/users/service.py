from __future__ import annotations

import logging
from dataclasses import dataclass

from ..common.validators import normalize_email, require_non_empty
from ..core.enums import Role
from .identity import IdentityVerifier
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after sign-in."""

    uid: str
    email: str
    display_name: str
    role: Role


def is_instructor_email(email: str | None, instructor_email: str) -> bool:
    return bool(email) and normalize_email(email) == normalize_email(instructor_email)


class AuthService:
    """Use case: sign in with the identity provider and join the roster."""

    def __init__(self, users: UserRepository, verifier: IdentityVerifier, *, instructor_email: str):
        self._users = users
        self._verifier = verifier
        self._instructor_email = instructor_email

    def role_for(self, email: str | None) -> Role:
        return Role.INSTRUCTOR if is_instructor_email(email, self._instructor_email) else Role.STUDENT

    def sign_in(self, id_token: str) -> SessionUser:
        token = require_non_empty(id_token, "ID token")
        identity = self._verifier.verify(token)

        # Every sign-in is an upsert; the roster is whoever has signed in at least once.
        self._users.upsert(identity)

        role = self.role_for(identity.email)
        logger.info("Signed in uid=%s role=%s", identity.uid, role.value)
        return SessionUser(
            uid=identity.uid,
            email=identity.email,
            display_name=identity.display_name,
            role=role,
        )
