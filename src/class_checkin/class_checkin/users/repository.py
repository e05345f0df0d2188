from __future__ import annotations

from typing import Protocol, Sequence

from .model import Identity, RosterEntry


class UserRepository(Protocol):
    """Repository interface for everyone who has ever signed in.

    Note (DIP): services depend on this interface, never on a concrete store.
    """

    def upsert(self, identity: Identity) -> None:
        """Create or merge the identity's profile fields; stamps ``updated_at``."""

        raise NotImplementedError

    def list_all(self) -> Sequence[RosterEntry]:
        raise NotImplementedError
