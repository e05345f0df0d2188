from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import jwt

from ..core.exceptions import AuthenticationError
from .model import Identity

logger = logging.getLogger(__name__)

GOOGLE_JWKS_URL = "https://www.googleapis.com/oauth2/v3/certs"
GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")


class IdentityVerifier(Protocol):
    def verify(self, token: str) -> Identity:
        """Return the identity behind ``token`` or raise AuthenticationError."""

        raise NotImplementedError


class GoogleIdentityVerifier:
    """Verify Google Sign-In ID tokens on the server.

    The role decision downstream trusts only the email claim of a token whose
    signature, audience and issuer check out here.
    """

    def __init__(
        self,
        client_id: str,
        *,
        jwks_client: Optional[jwt.PyJWKClient] = None,
        leeway_seconds: int = 10,
    ):
        self._client_id = client_id
        self._jwks = jwks_client or jwt.PyJWKClient(GOOGLE_JWKS_URL)
        self._leeway = leeway_seconds

    def _decode(self, token: str) -> dict[str, Any]:
        signing_key = self._jwks.get_signing_key_from_jwt(token)
        return jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            audience=self._client_id,
            leeway=self._leeway,
            options={"require": ["exp", "iat", "iss", "sub"]},
        )

    def verify(self, token: str) -> Identity:
        if not token or not token.strip():
            raise AuthenticationError("Missing ID token")

        try:
            claims = self._decode(token.strip())
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Sign-in expired, please sign in again")
        except jwt.PyJWTError as e:
            logger.warning("Rejected ID token: %s", e)
            raise AuthenticationError(str(e))

        if claims.get("iss") not in GOOGLE_ISSUERS:
            raise AuthenticationError("Token was not issued by Google")
        if not claims.get("email") or not claims.get("email_verified"):
            raise AuthenticationError("Google account has no verified email")

        return identity_from_claims(claims)


def identity_from_claims(claims: dict[str, Any]) -> Identity:
    return Identity(
        uid=str(claims["sub"]),
        email=str(claims["email"]),
        display_name=str(claims.get("name") or ""),
        photo_url=str(claims.get("picture") or ""),
    )
