"""JWT token service.

Provides JWT session token creation and verification for authentication.
"""

from collections.abc import Callable, Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from vecino_auth.exceptions import ExpiredTokenError, InvalidTokenError
from vecino_auth.schemas import SessionClaims

RESERVED_CLAIMS = frozenset({"sub", "role", "iat", "exp"})


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are stateless: everything the server needs to know about the
    session travels inside the signed payload, and a token stops being
    valid only when it expires.

    Examples
    --------
    >>> service = JWTService(secret_key="your-signing-key")
    >>> token = service.create_token(user_id, "user", {"neighborhood": "Pocitos"})
    >>> claims = service.verify_token(token)
    >>> print(claims.user_id)
    """

    DEFAULT_EXPIRE_DAYS = 7
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        token_expire_days: int = DEFAULT_EXPIRE_DAYS,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        token_expire_days
            Days until a session token expires (default 7)
        clock
            Returns the current timezone-aware UTC time. Tests inject a
            controllable clock to move past a token's expiry.
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(days=token_expire_days)
        self._clock = clock

    def create_token(
        self,
        user_id: str,
        role: str,
        extra_claims: Mapping[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed session token.

        Parameters
        ----------
        user_id
            The user's opaque identifier (stored as ``sub``)
        role
            The user's role
        extra_claims
            Additional non-reserved claims such as ``email`` or
            ``neighborhood``. ``None`` values are dropped.
        expires_delta
            Custom lifetime (optional, defaults to the configured days)

        Returns
        -------
        The encoded JWT token string
        """
        extra = {k: v for k, v in (extra_claims or {}).items() if v is not None}
        overlap = RESERVED_CLAIMS.intersection(extra)
        if overlap:
            msg = f"Extra claims cannot override reserved claims: {sorted(overlap)}"
            raise ValueError(msg)

        now = self._clock()
        expire = now + (expires_delta if expires_delta is not None else self._expire)

        payload: dict[str, Any] = {
            **extra,
            "sub": str(user_id),
            "role": getattr(role, "value", role),
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> SessionClaims:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        SessionClaims containing the decoded data

        Raises
        ------
        InvalidTokenError
            If the signature does not match or the payload is malformed
        ExpiredTokenError
            If the service clock is past the token's expiry
        """
        try:
            # Expiry is checked against the injectable clock below
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={
                    "require": ["sub", "role", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )

            claims = SessionClaims(
                user_id=str(payload["sub"]),
                role=str(payload["role"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                email=payload.get("email"),
                neighborhood=payload.get("neighborhood"),
            )

        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError, OverflowError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

        if claims.is_expired(self._clock()):
            raise ExpiredTokenError

        return claims
