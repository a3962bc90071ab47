"""Auth schemas and data structures.

These are simple data classes used for transferring authentication
data between components.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SessionClaims:
    """Decoded session token payload.

    This represents the data extracted from a verified JWT token. It is
    never persisted: the token itself is the session.

    Attributes
    ----------
    user_id
        The opaque identifier of the user (JWT ``sub``)
    role
        The user's role at the time the token was issued
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    email
        The user's email address, if embedded
    neighborhood
        The user's neighborhood, if embedded
    """

    user_id: str
    role: str
    issued_at: datetime
    expires_at: datetime
    email: str | None = None
    neighborhood: str | None = None

    def is_expired(self, now: datetime) -> bool:
        """Check if the token has expired at ``now``."""
        return now > self.expires_at

    def has_role(self, *roles: str) -> bool:
        return self.role in roles
