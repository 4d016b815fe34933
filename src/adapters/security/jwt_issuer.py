"""Issue and decode registration JWTs."""

import time
from collections.abc import Callable
from typing import Any

import jwt

from src.domain.exceptions import ConfigurationFault

ROLE_CLAIM = "rol"
USER_ROLE = "usuario"
# RFC 7518 3.2: HS256 keys must be at least as long as the hash output
MIN_KEY_BYTES = 32


class JwtTokenIssuer:
    """
    Implements TokenIssuer protocol via PyJWT (HS256).

    The signing key is checked when a token is issued, so a missing key
    fails the registration that needed it rather than application startup.
    """

    algorithm = "HS256"

    def __init__(
        self,
        secret: str | None,
        expiration_seconds: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secret = secret
        self._expiration_seconds = expiration_seconds
        self._clock = clock

    def issue(self, subject: str) -> str:
        """Create a signed JWT for the subject (the account email).

        Parameters
        ----------
        subject:
            Email embedded in the ``sub`` claim.

        Returns
        -------
        str
            Compact JWS: three dot-separated base64url segments.

        Raises
        ------
        ConfigurationFault
            When the signing key is missing or too short for HS256.
        """
        key = self._signing_key()
        now = int(self._clock())
        payload: dict[str, Any] = {
            "sub": subject,
            ROLE_CLAIM: USER_ROLE,
            "iat": now,
            "exp": now + self._expiration_seconds,
        }
        try:
            return jwt.encode(payload, key, algorithm=self.algorithm)
        except jwt.PyJWTError as e:
            raise ConfigurationFault(f"Token signing failed: {e}") from e

    def decode(self, token: str) -> dict[str, Any]:
        """Verify signature and expiry, returning the claims.

        Raises
        ------
        jwt.PyJWTError
            Propagated when the token is invalid, expired, or signed with another key.
        """
        return jwt.decode(token, self._signing_key(), algorithms=[self.algorithm])

    def _signing_key(self) -> str:
        if not self._secret:
            raise ConfigurationFault("JWT signing key is not configured")
        if len(self._secret.encode("utf-8")) < MIN_KEY_BYTES:
            raise ConfigurationFault(f"JWT signing key must be at least {MIN_KEY_BYTES} bytes")
        return self._secret
