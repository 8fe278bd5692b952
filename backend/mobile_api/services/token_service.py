"""
Mobile API Backend — Session Token Issuer
==========================================

What:  Issues and verifies stateless, time-limited bearer tokens.
How:   PyJWT HS256 tokens signed with the process-wide JWT_SECRET.

Token claims:
    {
        "userId": "8c0e6c3e-...",   # account id (the claim the app reads)
        "sub":    "8c0e6c3e-...",   # same id, standard claim name
        "iat":    1736935200,       # issued at (unix seconds)
        "exp":    1736938800        # iat + TTL (default 3600)
    }

Verification:
    verify() never raises for bad input: malformed, tampered, wrongly
    signed or expired tokens all return None, which callers treat as
    "unauthenticated". Expiry is compared against an injectable clock so
    expiry can be exercised without sleeping.

There is no revocation list; a token is valid until it expires.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """
    Signs and verifies session tokens bound to an account id.

    The secret is fixed at construction (once, during startup) and never
    changes for the life of the process.
    """

    def __init__(
        self,
        secret: str,
        ttl_seconds: int = 3600,
        algorithm: str = "HS256",
        clock: Clock = utc_now,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.ttl = timedelta(seconds=ttl_seconds)
        self.algorithm = algorithm
        self._clock = clock

    def issue(self, account_id: uuid.UUID) -> str:
        """Mint a token for account_id that expires TTL after now."""
        issued_at = self._clock()
        subject = str(account_id)
        payload = {
            "userId": subject,
            "sub": subject,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Optional[uuid.UUID]:
        """
        Return the account id carried by token, or None if the token is
        malformed, tampered with, signed with another key, or expired.
        """
        if not token or not isinstance(token, str):
            return None

        try:
            # Signature and claim presence are checked by PyJWT; expiry is
            # checked below against our own clock.
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["exp", "userId"],
                },
            )
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected session token: %s", type(e).__name__)
            return None

        try:
            expires_at = int(payload["exp"])
            account_id = uuid.UUID(str(payload["userId"]))
        except (TypeError, ValueError):
            logger.debug("Rejected session token: malformed claims")
            return None

        if self._clock().timestamp() >= expires_at:
            logger.debug("Rejected session token: expired")
            return None

        return account_id
