"""
JWT service for identity-provider access tokens.

Tokens carry the viewer's role and tier as resolved by the identity
provider. This service only signs (for the provider and for tests) and
verifies them; credentials are never checked here.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TypedDict

import jwt

from webinar_core.auth.exceptions import InvalidTokenError
from webinar_core.config import settings


class TokenPayload(TypedDict):
    """Decoded JWT payload."""

    sub: str  # user_id
    role: str
    tier: str | None
    iat: int
    exp: int


class JwtService:
    """Service for JWT token generation and validation."""

    def __init__(self, secret: str | None = None, algorithm: str | None = None, access_ttl: int | None = None):
        """Initialize the JWT service.

        Args:
            secret: JWT signing secret. Defaults to settings.JWT_SECRET.
            algorithm: Signing algorithm. Defaults to settings.JWT_ALGORITHM.
            access_ttl: Access token lifetime in seconds. Defaults to settings.JWT_ACCESS_TTL.
        """
        self.secret = secret or settings.JWT_SECRET
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.access_ttl = access_ttl or settings.JWT_ACCESS_TTL

        if not self.secret:
            raise ValueError("JWT_SECRET must be configured")

    def create_access_token(
        self,
        user_id: str,
        role: str,
        tier: str | None = None,
        now: datetime | None = None,
    ) -> str:
        """Create a short-lived access token.

        Args:
            user_id: The user's identifier.
            role: Viewer role ("host" or "attendee").
            tier: Attendee tier ("standard" or "premium").
            now: Issue time. Defaults to the current UTC time.

        Returns:
            Encoded JWT string.
        """
        issued = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "role": role,
            "tier": tier,
            "iat": int(issued.timestamp()),
            "exp": int((issued + timedelta(seconds=self.access_ttl)).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify_access_token(self, token: str) -> TokenPayload:
        """Verify and decode an access token.

        Args:
            token: The JWT string.

        Returns:
            Decoded payload.

        Raises:
            InvalidTokenError: If the token is expired, badly signed or
                missing required claims.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            return TokenPayload(
                sub=payload["sub"],
                role=payload["role"],
                tier=payload.get("tier"),
                iat=payload["iat"],
                exp=payload["exp"],
            )
        except KeyError as e:
            raise InvalidTokenError(f"Token is missing claim {e}") from e
